"""Caller-side board parameters, clamped into the ranges the engine expects."""

from pydantic import BaseModel, model_validator

from kqueens.config import CONFIG


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class BoardParams(BaseModel):
    n: int = CONFIG.board.default_size
    k: int = CONFIG.board.default_queens
    limit: int = CONFIG.board.default_limit

    @model_validator(mode="after")
    def clamp_to_board(self) -> "BoardParams":
        bounds = CONFIG.board
        self.n = _clamp(self.n, bounds.min_size, bounds.max_size)
        # k depends on the already clamped n
        self.k = _clamp(self.k, 0, self.n * self.n)
        self.limit = _clamp(self.limit, 1, bounds.max_limit)
        return self

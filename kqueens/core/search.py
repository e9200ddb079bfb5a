"""Bounded backtracking search for k mutually non-attacking queens.

Cells are visited in row-major scan order (index = row * n + col) and every
queen is placed on a strictly later cell than the one before it, so each set
of k cells is tried at most once and results come out in combination order.

Preconditions (not checked): n >= 0, k >= 0, limit >= 1. A k larger than
n * n simply yields no solutions; callers clamp k beforehand.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from kqueens.config import CONFIG
from kqueens.core.board import Placement, Position, cell_of
from kqueens.core.utils import format_info


def is_safe(placements: Sequence[Tuple[int, int]], row: int, col: int) -> bool:
    """True if (row, col) shares no row, column or diagonal with any placed queen."""
    for pr, pc in placements:
        if pr == row or pc == col:
            return False
        if abs(pr - row) == abs(pc - col):
            return False
    return True


@dataclass
class SearchStats:
    n: int
    k: int
    limit: int
    nodes: int = 0
    solutions: int = 0
    elapsed: float = 0.0
    hit_limit: bool = False


class SearchEngine:
    def __init__(self, limit: Optional[int] = None):
        self.limit = limit if limit is not None else CONFIG.search.default_limit
        self.nodes = 0
        self.last_stats: Optional[SearchStats] = None

    def solve(self, n: int, k: int, limit: Optional[int] = None) -> List[Placement]:
        """Collect up to `limit` placements of k queens on an n x n board."""
        if limit is None:
            limit = self.limit
        self.nodes = 0
        solutions: List[Placement] = []
        placements: List[Position] = []

        start_time = time.perf_counter()
        self._backtrack(n, k, limit, 0, placements, solutions)
        elapsed = time.perf_counter() - start_time

        self.last_stats = SearchStats(
            n=n, k=k, limit=limit,
            nodes=self.nodes,
            solutions=len(solutions),
            elapsed=elapsed,
            hit_limit=len(solutions) >= limit,
        )
        logger.debug(format_info(self.last_stats))
        return solutions

    def _backtrack(self, n: int, k: int, limit: int, start_idx: int,
                   placements: List[Position], solutions: List[Placement]):
        self.nodes += 1
        if len(solutions) >= limit:
            return
        if len(placements) == k:
            solutions.append(tuple(placements))
            return

        for pos in range(start_idx, n * n):
            row, col = cell_of(pos, n)
            if is_safe(placements, row, col):
                placements.append(Position(row, col))
                self._backtrack(n, k, limit, pos + 1, placements, solutions)
                placements.pop()
                # hard stop: unwind every level once the cap is reached
                if len(solutions) >= limit:
                    return


def solve(n: int, k: int, limit: Optional[int] = None) -> List[Placement]:
    """Convenience wrapper around a throwaway SearchEngine."""
    return SearchEngine().solve(n, k, limit)

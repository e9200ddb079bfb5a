"""Board primitives: positions, placements and a mutable board wrapper."""

from typing import Iterable, List, NamedTuple, Optional, Tuple

from kqueens.config import CONFIG


class Position(NamedTuple):
    row: int
    col: int


# A placement is an ordered run of positions in scan order.
Placement = Tuple[Position, ...]


def cell_index(row: int, col: int, n: int) -> int:
    """Linear scan-order index of (row, col) on an n x n board."""
    return row * n + col


def cell_of(index: int, n: int) -> Position:
    """Inverse of cell_index."""
    row, col = divmod(index, n)
    return Position(row, col)


def attacks(a: Tuple[int, int], b: Tuple[int, int]) -> Optional[str]:
    """Return how two queens attack each other ("row", "column", "diagonal") or None."""
    if a[0] == b[0]:
        return "row"
    if a[1] == b[1]:
        return "column"
    if abs(a[0] - b[0]) == abs(a[1] - b[1]):
        return "diagonal"
    return None


def render_placement(placement: Iterable[Tuple[int, int]], n: int,
                     queen: Optional[str] = None, empty: Optional[str] = None) -> str:
    """Map a placement onto an n x n text grid, one line per row."""
    queen = queen or CONFIG.ui.queen_glyph
    empty = empty or CONFIG.ui.empty_glyph
    grid = [[empty] * n for _ in range(n)]
    for r, c in placement:
        grid[r][c] = queen
    return "\n".join(" ".join(row) for row in grid)


class QueensBoard:
    def __init__(self, n: int, placement: Optional[Iterable[Tuple[int, int]]] = None):
        """Empty n x n board, optionally pre-filled from a placement."""
        self.n = n
        self.queens: List[Position] = []
        if placement is not None:
            self.set_placement(placement)

    def reset(self):
        """Remove every queen."""
        self.queens.clear()

    def set_placement(self, placement: Iterable[Tuple[int, int]]):
        """Replace the board contents. Does not check for attacks."""
        self.queens = [Position(r, c) for r, c in placement]

    @property
    def placement(self) -> Placement:
        return tuple(self.queens)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.n and 0 <= col < self.n

    def is_safe(self, row: int, col: int) -> bool:
        """True if a queen at (row, col) would not be attacked."""
        return all(attacks(q, (row, col)) is None for q in self.queens)

    def place(self, row: int, col: int) -> bool:
        """Put a queen on (row, col). Returns True if it was accepted."""
        if not self.in_bounds(row, col) or not self.is_safe(row, col):
            return False
        self.queens.append(Position(row, col))
        return True

    def undo(self):
        """Take back the last queen."""
        if self.queens:
            self.queens.pop()

    def render(self) -> str:
        return render_placement(self.queens, self.n)

    def print_board(self):
        """Print ASCII representation."""
        print(self.render())

import threading
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from kqueens.analyzer import Analyzer
from kqueens.config import CONFIG
from kqueens.core.board import Placement, QueensBoard, render_placement
from kqueens.core.search import SearchEngine
from kqueens.params import BoardParams

STATUS_IDLE = "Idle"
STATUS_SEARCHING = "Searching..."
STATUS_NONE = "No solution found"
NO_SOLUTION_TEXT = "No solution to display"

MODE_ONE = "one"
MODE_ALL = "all"


class Session:
    """Holds board parameters, the last result set and a page cursor over it.

    Besides the search results the session keeps a hand-edited board, so a
    user can place queens one at a time and have the analyzer check them.
    """

    def __init__(self, n: Optional[int] = None, k: Optional[int] = None,
                 limit: Optional[int] = None):
        self.params = BoardParams(**_given(n=n, k=k, limit=limit))
        self.search = SearchEngine()
        self.analyzer = Analyzer()
        self.board = QueensBoard(self.params.n)
        self.solutions: List[Placement] = []
        self.current_index = 0
        self.status = STATUS_IDLE
        self._thread: Optional[threading.Thread] = None
        # serializes searches; the generation lets a deferred run see it was superseded
        self._lock = threading.Lock()
        self._generation = 0

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def set_params(self, n: Optional[int] = None, k: Optional[int] = None,
                   limit: Optional[int] = None) -> BoardParams:
        """Update any of n, k, limit; everything is re-clamped together.

        A deferred search that has not produced its result yet is dropped.
        """
        merged = self.params.model_dump()
        merged.update(_given(n=n, k=k, limit=limit))
        params = BoardParams(**merged)
        self._next_generation()
        if self.status == STATUS_SEARCHING:
            self.status = STATUS_IDLE
        if params.n != self.params.n:
            self.board = QueensBoard(params.n)
        self.params = params
        return self.params

    def find_one(self) -> List[Placement]:
        return self._run(MODE_ONE, self._next_generation())

    def find_all(self) -> List[Placement]:
        return self._run(MODE_ALL, self._next_generation())

    def _run(self, mode: str, generation: int) -> Optional[List[Placement]]:
        """Search and publish the result. Returns None if a newer request won."""
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Dropping superseded {mode} search")
                return None
            p = self.params
            limit = 1 if mode == MODE_ONE else p.limit
            self.status = STATUS_SEARCHING
            self.solutions = []
            self.current_index = 0

            sols = self.search.solve(p.n, p.k, limit)

            self.solutions = sols
            if not sols:
                self.status = STATUS_NONE
            elif mode == MODE_ONE:
                self.status = "Found 1 solution"
            else:
                self.status = f"Found {len(sols)} solution(s) (limit {limit})"
        logger.info(f"n={p.n} k={p.k}: {self.status}")
        return sols

    def start_search(self, mode: str = MODE_ALL,
                     callback: Optional[Callable[["Session"], None]] = None) -> Optional[threading.Thread]:
        """Run a search on a worker thread after a short delay.

        The status reads "Searching..." as soon as this returns, so a front end
        can show it before the result arrives. Ignored while a search is running.
        A later find_one/find_all/set_params supersedes it, and the callback is
        then not called.
        """
        if mode not in (MODE_ONE, MODE_ALL):
            raise ValueError(f"Unknown search mode: {mode}")
        if self._thread and self._thread.is_alive():
            return None
        generation = self._next_generation()
        self.status = STATUS_SEARCHING
        self.solutions = []
        self.current_index = 0

        def worker():
            if self._run(mode, generation) is not None and callback:
                callback(self)

        self._thread = threading.Timer(CONFIG.ui.search_delay_ms / 1000, worker)
        self._thread.daemon = True
        self._thread.start()
        return self._thread

    def wait(self, timeout: Optional[float] = None):
        if self._thread:
            self._thread.join(timeout)

    @property
    def current(self) -> Optional[Placement]:
        return self.solutions[self.current_index] if self.solutions else None

    def next(self) -> int:
        self.current_index = min(len(self.solutions) - 1, self.current_index + 1) if self.solutions else 0
        return self.current_index

    def prev(self) -> int:
        self.current_index = max(0, self.current_index - 1)
        return self.current_index

    def render_current(self) -> str:
        sol = self.current
        if sol is None:
            return NO_SOLUTION_TEXT
        return render_placement(sol, self.params.n)

    def page_label(self) -> str:
        return f"{self.current_index + 1} / {len(self.solutions)}"

    # ── Hand-edited board ──────────────────────────────────────────────────

    def place(self, row: int, col: int) -> bool:
        return self.board.place(row, col)

    def undo(self):
        self.board.undo()

    def clear_board(self):
        self.board.reset()

    def edit_current(self) -> bool:
        """Copy the current solution onto the hand-edited board."""
        sol = self.current
        if sol is None:
            return False
        self.board.set_placement(sol)
        return True

    def check_board(self) -> Dict[str, Any]:
        """Analyzer report for the hand-edited board against the target k."""
        return self.analyzer.check_placement(self.board.placement, self.params.n, self.params.k)


def _given(**values):
    return {k: v for k, v in values.items() if v is not None}

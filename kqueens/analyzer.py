# kqueens/analyzer.py
from typing import Any, Dict, Iterable, List, Optional, Tuple

from kqueens.core.board import Position, attacks, cell_index

# labels, checked in this order
LABEL_OUT_OF_BOARD = "Out of board"
LABEL_WRONG_SIZE = "Wrong size"
LABEL_ATTACKING = "Attacking"
LABEL_UNORDERED = "Unordered"
LABEL_DUPLICATE = "Duplicate"
LABEL_VALID = "Valid"


class Analyzer:
    """Audits placements produced by the search (or typed in by hand)."""

    def check_placement(self, placement: Iterable[Tuple[int, int]], n: int,
                        k: Optional[int] = None) -> Dict[str, Any]:
        """
        Check a single placement on an n x n board.
        - k: expected number of queens, or None to skip the size check.
        Returns a dict with the label and the individual findings.
        """
        queens = [Position(r, c) for r, c in placement]

        out_of_board = [q for q in queens if not (0 <= q.row < n and 0 <= q.col < n)]

        conflicts = []
        for i, a in enumerate(queens):
            for b in queens[i + 1:]:
                reason = attacks(a, b)
                if reason is not None:
                    conflicts.append((a, b, reason))

        indices = [cell_index(q.row, q.col, n) for q in queens]
        in_scan_order = all(x < y for x, y in zip(indices, indices[1:]))

        if out_of_board:
            label = LABEL_OUT_OF_BOARD
        elif k is not None and len(queens) != k:
            label = LABEL_WRONG_SIZE
        elif conflicts:
            label = LABEL_ATTACKING
        elif not in_scan_order:
            label = LABEL_UNORDERED
        else:
            label = LABEL_VALID

        return {
            "size": len(queens),
            "out_of_board": out_of_board,
            "conflicts": conflicts,
            "in_scan_order": in_scan_order,
            "label": label,
            "valid": label == LABEL_VALID,
        }

    def analyze_solutions(self, solutions: Iterable[Iterable[Tuple[int, int]]], n: int,
                          k: int) -> List[Dict[str, Any]]:
        """
        Check every placement of a solution set. A placement whose cells were
        already seen earlier in the set is labeled "Duplicate".
        """
        report = []
        seen = set()
        for idx, placement in enumerate(solutions):
            info = self.check_placement(placement, n, k)
            cells = frozenset((r, c) for r, c in placement)
            if info["valid"] and cells in seen:
                info["label"] = LABEL_DUPLICATE
                info["valid"] = False
            seen.add(cells)
            info["index"] = idx
            report.append(info)
        return report

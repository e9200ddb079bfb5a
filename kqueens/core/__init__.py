"""Core engine components: board primitives and the placement search."""

from .board import Position, Placement, QueensBoard, cell_index, cell_of, render_placement
from .search import SearchEngine, SearchStats, is_safe, solve

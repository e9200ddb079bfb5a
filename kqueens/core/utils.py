from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kqueens.core.search import SearchStats


def format_info(stats: "SearchStats") -> str:
    elapsed_ms = stats.elapsed * 1000
    nps = int(stats.nodes / stats.elapsed) if stats.elapsed > 0 else 0
    line = (f"info n {stats.n} k {stats.k} limit {stats.limit} solutions {stats.solutions} "
            f"nodes {stats.nodes} nps {nps} time {int(elapsed_ms)}")
    if stats.hit_limit:
        line += " cutoff"
    return line

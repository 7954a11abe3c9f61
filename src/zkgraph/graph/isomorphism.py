from __future__ import annotations

import os
from typing import Optional

from .digraph import Graph
from .permutations import Bijection, iter_bijections


BRUTEFORCE_MAX_N = int(os.environ.get("ZKGRAPH_BRUTEFORCE_MAX_N", "10"))


def _check_search_size(n: int) -> None:
    if n > BRUTEFORCE_MAX_N:
        raise ValueError(
            f"Brute-force isomorphism search is impractical for n={n} "
            f"(limit {BRUTEFORCE_MAX_N}, set ZKGRAPH_BRUTEFORCE_MAX_N to raise it)."
        )


def find_isomorphism(a: Graph, b: Graph) -> Optional[Bijection]:
    """First bijection sigma over S_n with a.permute(sigma) == b, or None.

    Rejects cheaply on differing vertex or edge counts; otherwise tries all
    n! relabelings in lexicographic order and stops at the first match.
    """
    if a.n != b.n or len(a.edges) != len(b.edges):
        return None
    _check_search_size(a.n)
    for sigma in iter_bijections(a.n):
        if a.permute(sigma) == b:
            return sigma
    return None


def are_isomorphic(a: Graph, b: Graph) -> bool:
    """True iff some relabeling of *a* has exactly the edge set of *b*."""
    return find_isomorphism(a, b) is not None

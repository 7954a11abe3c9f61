from __future__ import annotations

import random
from itertools import permutations
from typing import TYPE_CHECKING, Iterator, Sequence, Tuple

if TYPE_CHECKING:
    from .digraph import Graph


Bijection = Tuple[int, ...]


def identity(n: int) -> Bijection:
    """The identity relabeling on {0..n-1}."""
    return tuple(range(n))


def is_bijection(seq: Sequence[int], n: int) -> bool:
    """True iff *seq* has length n and hits every label in {0..n-1} once."""
    if len(seq) != n:
        return False
    seen = [False] * n
    for x in seq:
        if not isinstance(x, int) or x < 0 or x >= n or seen[x]:
            return False
        seen[x] = True
    return True


def random_bijection(n: int, rng: random.Random | None = None) -> Bijection:
    """Uniformly random permutation of {0..n-1}."""
    shuffle = list(range(n))
    (rng or random).shuffle(shuffle)
    return tuple(shuffle)


def invert(bijection: Sequence[int]) -> Bijection:
    """
    Inverse relabeling: inverted[bijection[i]] = i.

    Raises ValueError if *bijection* is not a permutation of {0..len-1}.
    """
    n = len(bijection)
    if not is_bijection(bijection, n):
        raise ValueError(f"Not a bijection on 0..{n - 1}: {tuple(bijection)!r}")
    inverted = [0] * n
    for i, label in enumerate(bijection):
        inverted[label] = i
    return tuple(inverted)


def compose(first: Sequence[int], then: Sequence[int]) -> Bijection:
    """
    Relabel by *first*, then by *then*.

    Satisfies apply_permutation(apply_permutation(g, first), then)
    == apply_permutation(g, compose(first, then)).
    """
    if len(first) != len(then):
        raise ValueError(
            f"Cannot compose bijections of lengths {len(first)} and {len(then)}."
        )
    return tuple(then[label] for label in first)


def iter_bijections(n: int) -> Iterator[Bijection]:
    """Lazily enumerate all n! permutations of {0..n-1}.

    Each call returns a fresh generator, so the enumeration can be restarted.
    """
    return permutations(range(n))


def apply_permutation(graph: Graph, bijection: Sequence[int]) -> Graph:
    """New graph with every edge (u, v) relabeled to (bijection[u], bijection[v])."""
    return graph.permute(bijection)


def random_permutation(graph: Graph, rng: random.Random | None = None) -> Graph:
    """Relabel *graph* by a uniformly random bijection."""
    return graph.permute(random_bijection(graph.n, rng))

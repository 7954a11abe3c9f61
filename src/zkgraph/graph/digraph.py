from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Sequence, Tuple

from .permutations import is_bijection


Edge = Tuple[int, int]


class GraphConstructionError(ValueError):
    """Raised for a non-integer vertex count or label, or a label outside 0..n-1."""


def _as_label(x, what: str) -> int:
    try:
        return operator.index(x)
    except TypeError:
        raise GraphConstructionError(f"{what} must be an integer, got {x!r}.") from None


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Directed graph on vertices {0..n-1}.

    edges: set of ordered (u, v) pairs; duplicates collapse.
    Two graphs compare equal iff their edge sets are equal.
    """

    n: int
    edges: FrozenSet[Edge] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        n = _as_label(self.n, "Vertex count")
        if n < 0:
            raise GraphConstructionError(f"Vertex count must be non-negative, got {n}.")
        object.__setattr__(self, "n", n)
        edges = frozenset(
            (_as_label(u, "Vertex label"), _as_label(v, "Vertex label")) for u, v in self.edges
        )
        for u, v in edges:
            if not (0 <= u < self.n and 0 <= v < self.n):
                bad = u if not 0 <= u < self.n else v
                raise GraphConstructionError(
                    f"Vertex labels must be in the range 0 to {self.n - 1}. "
                    f"Found vertex {bad} in edge {(u, v)}."
                )
        object.__setattr__(self, "edges", edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.edges == other.edges

    def __hash__(self) -> int:
        return hash(self.edges)

    @property
    def adjacency(self) -> Tuple[FrozenSet[int], ...]:
        """adjacency[u] = set of successors of u."""
        succ: list[set[int]] = [set() for _ in range(self.n)]
        for u, v in self.edges:
            succ[u].add(v)
        return tuple(frozenset(s) for s in succ)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def permute(self, bijection: Sequence[int]) -> Graph:
        """Relabel vertex i as bijection[i]; returns a new Graph."""
        if not is_bijection(bijection, self.n):
            raise ValueError(
                f"Expected a bijection on 0..{self.n - 1}, got {tuple(bijection)!r}."
            )
        return Graph(self.n, frozenset((bijection[u], bijection[v]) for u, v in self.edges))

    def __str__(self) -> str:
        lines = [f"Graph(n={self.n}, m={len(self.edges)})"]
        for u, succ in enumerate(self.adjacency):
            targets = ", ".join(str(v) for v in sorted(succ))
            lines.append(f"  {u} -> {targets}".rstrip())
        return "\n".join(lines)


@dataclass(frozen=True)
class GraphPair:
    """Proof instance (g0, g1), shared read-only by prover and verifier."""

    g0: Graph
    g1: Graph

    def select(self, bit: bool) -> Graph:
        return self.g1 if bit else self.g0


def build_graph(n: int, edges: Iterable[Edge] = ()) -> Graph:
    """Build a Graph, raising GraphConstructionError on out-of-range endpoints."""
    return Graph(n, tuple(edges))

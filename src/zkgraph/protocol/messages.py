from __future__ import annotations

from dataclasses import dataclass

from zkgraph.graph.digraph import Graph
from zkgraph.graph.permutations import Bijection


class Message:
    """Base class for values exchanged between prover and verifier."""


@dataclass(frozen=True)
class Empty(Message):
    """Structural placeholder, e.g. a verifier letting the prover move first."""

    def __str__(self) -> str:
        return "<empty>"


@dataclass(frozen=True)
class GraphMessage(Message):
    graph: Graph

    def __str__(self) -> str:
        return f"graph {sorted(self.graph.edges)}"


@dataclass(frozen=True)
class BijectionMessage(Message):
    bijection: Bijection

    def __str__(self) -> str:
        return f"bijection {list(self.bijection)}"


@dataclass(frozen=True)
class BitMessage(Message):
    bit: bool

    def __str__(self) -> str:
        return f"bit {int(self.bit)}"


@dataclass(frozen=True)
class Done(Message):
    """Termination marker; the engine never delivers it to the verifier."""

    def __str__(self) -> str:
        return "<done>"

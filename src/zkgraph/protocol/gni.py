"""
Graph Non-Isomorphism: the prover shows g0 and g1 are not isomorphic.

  V: H = pi(g_b) for a secret bit b
  P: guess of b
  V: Empty, accept iff guess == b
  P: Done
"""
from __future__ import annotations

import random
from typing import Tuple

from zkgraph.graph.digraph import GraphPair
from zkgraph.graph.isomorphism import are_isomorphic
from zkgraph.graph.permutations import random_permutation
from .base import Prover, ProtocolViolationError, Verifier, check_bias, draw_bit, expect
from .messages import BitMessage, Done, Empty, GraphMessage, Message


class GNIProver(Prover):
    """Unbounded prover: answers 1 iff the received graph is isomorphic to g1."""

    def __init__(self, instance: GraphPair):
        self.instance = instance
        self.sent_guess = False
        self.finished = False

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.finished:
            raise ProtocolViolationError("GNIProver invoked after the interaction finished.")
        if self.sent_guess:
            self.finished = True
            return Done(), True
        gb = expect(msg, GraphMessage, "GNIProver").graph
        self.sent_guess = True
        return BitMessage(are_isomorphic(gb, self.instance.g1)), False


class GNIMaliciousProver(Prover):
    """Ignores the graph and guesses b, answering 1 with probability p."""

    def __init__(self, p: float = 0.5, rng: random.Random | None = None):
        self.p = check_bias(p)
        self.rng = rng
        self.sent_guess = False
        self.finished = False

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.finished:
            raise ProtocolViolationError("GNIMaliciousProver invoked after the interaction finished.")
        if self.sent_guess:
            self.finished = True
            return Done(), True
        expect(msg, GraphMessage, "GNIMaliciousProver")
        self.sent_guess = True
        return BitMessage(draw_bit(self.rng, self.p)), False


class GNIVerifier(Verifier):
    def __init__(self, instance: GraphPair, rng: random.Random | None = None):
        self.instance = instance
        self.rng = rng
        self.b = False
        self.checked = False

    def init(self) -> Message:
        self.b = draw_bit(self.rng)
        return GraphMessage(random_permutation(self.instance.select(self.b), self.rng))

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.checked:
            raise ProtocolViolationError(f"GNIVerifier received {type(msg).__name__} after its final check.")
        guess = expect(msg, BitMessage, "GNIVerifier").bit
        self.checked = True
        return Empty(), guess == self.b

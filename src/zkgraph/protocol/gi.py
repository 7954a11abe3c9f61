"""
Graph Isomorphism: the prover shows g0 ~ g1 without revealing the isomorphism.

Exchange for GraphPair(g0, g1):

  V: Empty
  P: H = pi(g0)                 (commitment)
  V: b                          (challenge)
  P: sigma with sigma(H) == g_b
  V: Empty, accept iff sigma(H) == g_b
  P: Done
"""
from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple

from zkgraph.graph.digraph import Graph, GraphPair
from zkgraph.graph.isomorphism import find_isomorphism
from zkgraph.graph.permutations import (
    Bijection,
    compose,
    identity,
    invert,
    is_bijection,
    random_bijection,
)
from .base import Prover, ProtocolViolationError, Verifier, check_bias, draw_bit, expect
from .messages import BijectionMessage, BitMessage, Done, Empty, GraphMessage, Message


class GIProver(Prover):
    """
    Honest GI prover.

    Without a witness it is computationally unbounded: the answer to the
    challenge is found by brute-force search. With a witness phi
    (g0.permute(phi) == g1) it answers directly from its committed
    relabeling pi.
    """

    def __init__(
        self,
        instance: GraphPair,
        witness: Optional[Sequence[int]] = None,
        rng: random.Random | None = None,
    ):
        if witness is not None and instance.g0.permute(witness) != instance.g1:
            raise ValueError("GIProver witness does not map g0 onto g1.")
        self.instance = instance
        self.witness: Optional[Bijection] = tuple(witness) if witness is not None else None
        self.rng = rng
        self.r = 0
        self.pi: Optional[Bijection] = None
        self.committed: Optional[Graph] = None

    def _respond(self, b: bool) -> Bijection:
        assert self.pi is not None and self.committed is not None
        if self.witness is not None:
            back = invert(self.pi)
            return compose(back, self.witness) if b else back
        sigma = find_isomorphism(self.committed, self.instance.select(b))
        if sigma is None:
            # no isomorphism exists; the verifier will reject
            return identity(self.committed.n)
        return sigma

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.r == 0:
            expect(msg, Empty, "GIProver")
            self.pi = random_bijection(self.instance.g0.n, self.rng)
            self.committed = self.instance.g0.permute(self.pi)
            self.r = 1
            return GraphMessage(self.committed), False
        if self.r == 1:
            challenge = expect(msg, BitMessage, "GIProver")
            self.r = 2
            return BijectionMessage(self._respond(challenge.bit)), False
        if self.r == 2:
            self.r = 3
            return Done(), True
        raise ProtocolViolationError("GIProver invoked after the interaction finished.")


class GIMaliciousProver(Prover):
    """
    GI prover that knows no isomorphism.

    It guesses the challenge in advance (1 with probability p), commits to a
    relabeling of that graph, and always reveals the inverse of its own
    relabeling. It passes only when the guess matches the challenge.
    """

    def __init__(self, instance: GraphPair, p: float = 0.5, rng: random.Random | None = None):
        self.instance = instance
        self.p = check_bias(p)
        self.rng = rng
        self.r = 0
        self.guess: Optional[bool] = None
        self.isomorphism: Optional[Bijection] = None

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.r == 0:
            expect(msg, Empty, "GIMaliciousProver")
            self.guess = draw_bit(self.rng, self.p)
            g = self.instance.select(self.guess)
            self.isomorphism = random_bijection(g.n, self.rng)
            self.r = 1
            return GraphMessage(g.permute(self.isomorphism)), False
        if self.r == 1:
            expect(msg, BitMessage, "GIMaliciousProver")
            assert self.isomorphism is not None
            self.r = 2
            return BijectionMessage(invert(self.isomorphism)), False
        if self.r == 2:
            self.r = 3
            return Done(), True
        raise ProtocolViolationError("GIMaliciousProver invoked after the interaction finished.")


class GIVerifier(Verifier):
    def __init__(self, instance: GraphPair, rng: random.Random | None = None):
        self.instance = instance
        self.rng = rng
        self.r = 0
        self.b = False
        self.random_perm: Optional[Graph] = None

    def init(self) -> Message:
        return Empty()

    def handle(self, msg: Message) -> Tuple[Message, bool]:
        if self.r == 0:
            self.random_perm = expect(msg, GraphMessage, "GIVerifier").graph
            self.b = draw_bit(self.rng)
            self.r = 1
            return BitMessage(self.b), False
        if self.r == 1:
            sigma = expect(msg, BijectionMessage, "GIVerifier").bijection
            assert self.random_perm is not None
            self.r = 2
            target = self.instance.select(self.b)
            accept = (
                is_bijection(sigma, self.random_perm.n)
                and self.random_perm.permute(sigma) == target
            )
            return Empty(), accept
        raise ProtocolViolationError(f"GIVerifier received {type(msg).__name__} after its final check.")

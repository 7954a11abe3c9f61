"""Tests for the graph non-isomorphism protocol."""
import random

import pytest

from zkgraph.graph.digraph import GraphPair, build_graph
from zkgraph.graph.isomorphism import are_isomorphic
from zkgraph.protocol.base import ProtocolViolationError
from zkgraph.protocol.engine import run_interactive_proof
from zkgraph.protocol.gni import GNIMaliciousProver, GNIProver, GNIVerifier
from zkgraph.protocol.messages import BitMessage, Done, Empty, GraphMessage


G0 = build_graph(4, [(0, 1), (1, 2), (1, 3), (0, 3), (3, 0)])
GNI_INSTANCE = GraphPair(G0, build_graph(4, [(0, 2), (2, 3), (1, 3), (2, 1), (3, 0)]))
# isomorphic pair posing as a non-isomorphism claim
ISO_INSTANCE = GraphPair(G0, build_graph(4, [(2, 1), (1, 0), (1, 3), (2, 3), (3, 2)]))


# --- completeness ---

def test_honest_prover_always_accepted():
    for _ in range(100):
        assert run_interactive_proof(GNIProver(GNI_INSTANCE), GNIVerifier(GNI_INSTANCE))


def test_verifier_sends_relabeling_of_chosen_graph():
    verifier = GNIVerifier(GNI_INSTANCE)
    msg = verifier.init()
    assert isinstance(msg, GraphMessage)
    assert are_isomorphic(msg.graph, GNI_INSTANCE.select(verifier.b))


# --- soundness ---

def test_malicious_prover_about_half():
    accepted = sum(
        run_interactive_proof(GNIMaliciousProver(p=0.5), GNIVerifier(ISO_INSTANCE))
        for _ in range(1000)
    )
    assert accepted != 1000
    assert 400 < accepted < 600


def test_honest_strategy_fails_on_isomorphic_pair():
    # every relabeling looks like g1, so the prover always answers 1
    accepted = sum(
        run_interactive_proof(GNIProver(ISO_INSTANCE), GNIVerifier(ISO_INSTANCE))
        for _ in range(1000)
    )
    assert accepted != 1000
    assert 400 < accepted < 600


def test_malicious_prover_biased_rate():
    prover_rng, verifier_rng = random.Random(31), random.Random(32)
    passed = {False: 0, True: 0}
    seen = {False: 0, True: 0}
    for _ in range(1000):
        verifier = GNIVerifier(ISO_INSTANCE, rng=verifier_rng)
        accept = run_interactive_proof(GNIMaliciousProver(p=0.2, rng=prover_rng), verifier)
        seen[verifier.b] += 1
        passed[verifier.b] += accept
    assert 0.1 < passed[True] / seen[True] < 0.3
    assert 0.7 < passed[False] / seen[False] < 0.9


def test_malicious_prover_bias():
    prover = GNIMaliciousProver(p=1.0)
    reply, done = prover.handle(GraphMessage(G0))
    assert reply == BitMessage(True)
    assert not done
    assert prover.handle(Empty()) == (Done(), True)


def test_malicious_prover_bias_out_of_range():
    with pytest.raises(ValueError):
        GNIMaliciousProver(p=-0.1)


# --- protocol violations ---

def test_prover_rejects_non_graph():
    with pytest.raises(ProtocolViolationError):
        GNIProver(GNI_INSTANCE).handle(BitMessage(True))


def test_verifier_rejects_non_bit():
    verifier = GNIVerifier(GNI_INSTANCE)
    verifier.init()
    with pytest.raises(ProtocolViolationError):
        verifier.handle(GraphMessage(G0))


def test_verifier_single_check():
    verifier = GNIVerifier(GNI_INSTANCE)
    verifier.init()
    verifier.handle(BitMessage(verifier.b))
    with pytest.raises(ProtocolViolationError):
        verifier.handle(BitMessage(verifier.b))


def test_prover_after_done():
    prover = GNIProver(GNI_INSTANCE)
    prover.handle(GraphMessage(G0))
    prover.handle(Empty())
    with pytest.raises(ProtocolViolationError):
        prover.handle(Empty())

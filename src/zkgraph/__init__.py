"""
zkgraph: interactive zero-knowledge proofs for graph isomorphism (GI) and
graph non-isomorphism (GNI), built on brute-force permutation search.
"""

from .graph.digraph import Graph, GraphPair, GraphConstructionError, build_graph
from .graph.permutations import (
    identity,
    is_bijection,
    random_bijection,
    invert,
    compose,
    iter_bijections,
    apply_permutation,
    random_permutation,
)
from .graph.isomorphism import are_isomorphic, find_isomorphism

# Protocols
from .protocol.base import Prover, Verifier, ProtocolViolationError
from .protocol.engine import run_interactive_proof
from .protocol.gi import GIProver, GIMaliciousProver, GIVerifier
from .protocol.gni import GNIProver, GNIMaliciousProver, GNIVerifier

# Repetition
from .amplify.repeat import TrialSpec, AmplifiedResult, make_roles, run_trial, amplify

# NetworkX / matplotlib
from .io.convert import to_networkx, from_networkx
from .viz.draw import draw_graph_pair

__all__ = [
    # Graphs
    "Graph",
    "GraphPair",
    "GraphConstructionError",
    "build_graph",
    # Permutations
    "identity",
    "is_bijection",
    "random_bijection",
    "invert",
    "compose",
    "iter_bijections",
    "apply_permutation",
    "random_permutation",
    # Isomorphism
    "are_isomorphic",
    "find_isomorphism",
    # Protocols
    "Prover",
    "Verifier",
    "ProtocolViolationError",
    "run_interactive_proof",
    "GIProver",
    "GIMaliciousProver",
    "GIVerifier",
    "GNIProver",
    "GNIMaliciousProver",
    "GNIVerifier",
    # Repetition
    "TrialSpec",
    "AmplifiedResult",
    "make_roles",
    "run_trial",
    "amplify",
    # IO / viz
    "to_networkx",
    "from_networkx",
    "draw_graph_pair",
]

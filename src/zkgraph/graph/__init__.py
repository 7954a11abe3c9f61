from .digraph import (
    Edge,
    Graph,
    GraphPair,
    GraphConstructionError,
    build_graph,
)
from .permutations import (
    Bijection,
    identity,
    is_bijection,
    random_bijection,
    invert,
    compose,
    iter_bijections,
    apply_permutation,
    random_permutation,
)
from .isomorphism import are_isomorphic, find_isomorphism

__all__ = [
    "Edge",
    "Graph",
    "GraphPair",
    "GraphConstructionError",
    "build_graph",
    "Bijection",
    "identity",
    "is_bijection",
    "random_bijection",
    "invert",
    "compose",
    "iter_bijections",
    "apply_permutation",
    "random_permutation",
    "are_isomorphic",
    "find_isomorphism",
]

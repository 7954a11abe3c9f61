from __future__ import annotations

import networkx as nx

from zkgraph.graph.digraph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Convert to a NetworkX DiGraph on nodes 0..n-1 (isolated vertices kept).
    """
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.n))
    G.add_edges_from(sorted(graph.edges))
    return G


def from_networkx(G: nx.Graph) -> Graph:
    """
    Convert a NetworkX graph into a Graph on 0..n-1.

    Nodes are relabeled in sorted order. Undirected edges become a pair of
    opposite directed edges; parallel edges of multigraphs collapse.
    """
    H = nx.convert_node_labels_to_integers(G, ordering="sorted")
    edges = set()
    for u, v in H.edges():
        edges.add((u, v))
        if not H.is_directed():
            edges.add((v, u))
    return Graph(H.number_of_nodes(), frozenset(edges))

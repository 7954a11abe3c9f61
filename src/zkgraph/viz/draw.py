from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from zkgraph.graph.digraph import GraphPair
from zkgraph.io.convert import to_networkx


def draw_graph_pair(
    pair: GraphPair,
    *,
    seed: int = 7,
    node_size: int = 300,
    save_path: str | None = None,
):
    """
    Draw g0 and g1 of a proof instance side by side.

    If save_path is set, saves a PNG there and closes the figure;
    otherwise shows it. Returns the matplotlib Figure.
    """
    fig, axes = plt.subplots(1, 2, figsize=(10, 5))

    for ax, name, g in zip(axes, ("g0", "g1"), (pair.g0, pair.g1)):
        G = to_networkx(g)
        ax.set_title(f"{name}   |V|={g.n}  |E|={g.number_of_edges()}")
        ax.set_axis_off()
        pos = nx.spring_layout(G, seed=seed)
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            with_labels=True,
            node_size=node_size,
            arrows=True,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return fig

"""Tests for zkgraph.viz drawing."""
import matplotlib

matplotlib.use("Agg")

from zkgraph.graph.digraph import GraphPair, build_graph  # noqa: E402
from zkgraph.viz.draw import draw_graph_pair  # noqa: E402


def test_draw_graph_pair_saves_png(tmp_path):
    g0 = build_graph(4, [(0, 1), (1, 2), (1, 3), (0, 3), (3, 0)])
    pair = GraphPair(g0, g0.permute((2, 1, 0, 3)))
    out = tmp_path / "pair.png"
    fig = draw_graph_pair(pair, save_path=str(out))
    assert out.exists()
    assert out.stat().st_size > 0
    assert len(fig.axes) == 2
    assert fig.axes[0].get_title().startswith("g0")

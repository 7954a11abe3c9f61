from .draw import draw_graph_pair

__all__ = [
    "draw_graph_pair",
]

"""Graph primitives for the clique search."""

from .graph import Graph, generate_graph

__all__ = [
    'Graph',
    'generate_graph',
]

"""
Clique Search - genetic search for cliques in random graphs.
"""

__version__ = "0.1.0"

from .core import Graph, generate_graph
from .evolution import CliqueSearchEngine, SearchConfig, SearchResult, SearchState

__all__ = [
    'Graph',
    'generate_graph',
    'CliqueSearchEngine',
    'SearchConfig',
    'SearchResult',
    'SearchState',
]

"""
Undirected graph representation and random graph generation.

The graph is an ordered sequence of vertices 0..N-1, each owning a set of
neighbor indices. Adjacency is kept symmetric and free of self-loops.
"""

from dataclasses import dataclass, field
from typing import List, Set, Iterable, Sequence, Tuple
import random


@dataclass
class Graph:
    """
    Simple undirected graph stored as an adjacency list of sets.

    Treated as read-only once built; every search component receives it
    by reference.
    """
    adjacency: List[Set[int]] = field(default_factory=list)

    @classmethod
    def empty(cls, num_nodes: int) -> 'Graph':
        """Graph with num_nodes vertices and no edges."""
        return cls(adjacency=[set() for _ in range(num_nodes)])

    @classmethod
    def from_adjacency_list(cls, adjacency_list: Sequence[Iterable[int]]) -> 'Graph':
        """
        Build a graph from neighbor lists.

        Edges are symmetrized and self-loops dropped, so a one-sided listing
        such as [[1], []] yields the edge 0-1.
        """
        graph = cls.empty(len(adjacency_list))
        for u, neighbors in enumerate(adjacency_list):
            for v in neighbors:
                if not 0 <= v < graph.num_nodes:
                    raise ValueError(f"Neighbor {v} of vertex {u} out of range [0, {graph.num_nodes - 1}]")
                graph.add_edge(u, v)
        return graph

    def add_edge(self, u: int, v: int) -> None:
        if u == v:
            return
        self.adjacency[u].add(v)
        self.adjacency[v].add(u)

    @property
    def num_nodes(self) -> int:
        return len(self.adjacency)

    @property
    def num_edges(self) -> int:
        return sum(len(n) for n in self.adjacency) // 2

    def neighbors(self, v: int) -> Set[int]:
        return self.adjacency[v]

    def degree(self, v: int) -> int:
        return len(self.adjacency[v])

    def has_edge(self, u: int, v: int) -> bool:
        return v in self.adjacency[u]

    def edges(self) -> List[Tuple[int, int]]:
        return [(u, v) for u, nbrs in enumerate(self.adjacency) for v in sorted(nbrs) if u < v]

    def is_clique(self, vertices: Sequence[int]) -> bool:
        """True if every pair of distinct vertices is adjacent (empty and singletons included)."""
        for i, u in enumerate(vertices):
            nbrs = self.adjacency[u]
            for v in vertices[i + 1:]:
                if u != v and v not in nbrs:
                    return False
        return True

    def to_adjacency_list(self) -> List[List[int]]:
        return [sorted(nbrs) for nbrs in self.adjacency]


def generate_graph(
    num_nodes: int,
    min_degree: int,
    max_degree: int,
    rng: random.Random,
) -> Graph:
    """
    Generate a random undirected graph with approximately bounded degree.

    For each vertex a target degree is drawn uniformly from
    [min_degree, max_degree] (capped at num_nodes - 1) and random
    neighbors are added until the vertex reaches it. Edges inserted for
    later vertices also raise the degree of earlier ones, so realized
    degrees may exceed max_degree. That drift is left as is.

    Args:
        num_nodes: Number of vertices
        min_degree: Lower bound of the drawn target degree
        max_degree: Upper bound of the drawn target degree
        rng: Random stream used for every draw

    Returns:
        Generated Graph
    """
    if num_nodes < 0 or min_degree < 0:
        raise ValueError("num_nodes and min_degree must be non-negative")
    if min_degree > max_degree:
        raise ValueError(f"min_degree ({min_degree}) must not exceed max_degree ({max_degree})")

    graph = Graph.empty(num_nodes)

    for i in range(num_nodes):
        degree = min(rng.randint(min_degree, max_degree), num_nodes - 1)

        # Candidates shrink as edges accumulate; degree <= num_nodes - 1 guarantees termination
        while graph.degree(i) < degree:
            neighbor = rng.randrange(num_nodes)
            if neighbor != i and not graph.has_edge(i, neighbor):
                graph.add_edge(i, neighbor)

    return graph

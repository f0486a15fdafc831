"""Graph traversals, all-pairs shortest paths and minimum spanning trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INF = 99999
"""Distance that marks two vertices as not connected in :func:`floyd_warshall`."""


class DirectedGraph:
    """A directed graph on vertices ``0 .. vertex_count - 1`` kept as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self.vertex_count = vertex_count
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from *source* to *target*."""
        self._check(source)
        self._check(target)
        self._adjacent[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from *start*."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacent[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order


def dfs_order(
    vertex_count: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Depth-first order from *start* in an undirected graph.

    Vertices are numbered ``1 .. vertex_count``; ``0`` is accepted too.
    Neighbours are visited in the order their edges were given.
    """
    adjacent: list[list[int]] = [[] for _ in range(vertex_count + 1)]

    def check(vertex: int) -> None:
        if not 0 <= vertex <= vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    for first, second in edges:
        check(first)
        check(second)
        adjacent[first].append(second)
        adjacent[second].append(first)
    check(start)

    visited = [False] * (vertex_count + 1)
    visited[start] = True
    order = [start]
    stack = [iter(adjacent[start])]
    while stack:
        for child in stack[-1]:
            if not visited[child]:
                visited[child] = True
                order.append(child)
                stack.append(iter(adjacent[child]))
                break
        else:
            stack.pop()
    return order


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Shortest distances between every pair of vertices.

    ``matrix[i][j]`` is the weight of the edge from i to j, or :data:`INF`
    where there is none. A new matrix is returned.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j in range(size):
                if through[j] != INF and row[j] > via + through[j]:
                    row[j] = via + through[j]
    return dist


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    source: int
    target: int
    weight: int


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order Kruskal's algorithm takes them."""
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        if not 0 <= vertex < vertex_count:
            raise IndexError(f"vertex {vertex} out of range")
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    tree: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        root_source = find(edge.source)
        root_target = find(edge.target)
        if root_source != root_target:
            tree.append(edge)
            parent[root_source] = root_target
    return tree
"""Directed graph on numbered vertices with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """A directed graph whose vertices are the integers ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise IndexError(f"vertex {v} is out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        self._check_vertex(v)
        self._check_vertex(w)
        self._adjacent[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check_vertex(start)
        visited = [False] * self.vertices
        visited[start] = True
        pending = deque([start])
        order: list[int] = []
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacent[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.append(neighbour)
        return order

    def dfs(self) -> list[int]:
        """Return every vertex in depth-first order, starting new trees at the lowest unvisited vertex."""
        visited = [False] * self.vertices
        order: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            order.append(root)
            stack: list[Iterator[int]] = [iter(self._adjacent[root])]
            while stack:
                for neighbour in stack[-1]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        order.append(neighbour)
                        stack.append(iter(self._adjacent[neighbour]))
                        break
                else:
                    stack.pop()
        return order
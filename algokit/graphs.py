"""Cycle counting in undirected graphs and a disjoint-set forest."""

from __future__ import annotations

from collections.abc import Iterable


def count_cycles(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count back edges met by a depth-first search of an undirected graph.

    Vertices are numbered from 0 to ``n - 1``.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 0..{n - 1}")
        adjacency[a].append(b)
        adjacency[b].append(a)

    discovery = [0] * n
    timer = 1
    back_edges = 0
    for root in range(n):
        if discovery[root]:
            continue
        discovery[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child == parent:
                    continue
                if discovery[child]:
                    if discovery[child] < discovery[node]:
                        back_edges += 1
                    continue
                discovery[child] = timer
                timer += 1
                stack.append((child, node, iter(adjacency[child])))
                break
            else:
                stack.pop()
    return back_edges


class DisjointSet:
    """Union-find over ``0..n-1`` with union by size and path compression."""

    def __init__(self, n: int) -> None:
        # A negative entry marks a root and holds minus the size of its set.
        self._parent = [-1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] >= 0:
            root = self._parent[root]
        while x != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def same_set(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return -self._parent[self.find(x)]

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._parent[x] > self._parent[y]:
            x, y = y, x
        self._parent[x] += self._parent[y]
        self._parent[y] = x
        return True
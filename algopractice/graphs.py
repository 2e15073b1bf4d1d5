"""Basic graph algorithms on adjacency lists and adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]


def adjacency_list(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Adjacency lists of an undirected graph, neighbours in the order the edges come."""
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    neighbours: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a missing vertex")
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def count_graphs(n: int) -> int:
    """Number of distinct simple undirected graphs on ``n`` labelled vertices."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return 2 ** (n * (n - 1) // 2)


def bfs_order(adjacency: Adjacency) -> list[int]:
    """Vertices reachable from vertex 0 in breadth-first order."""
    if not adjacency:
        return []
    seen = {0}
    order: list[int] = []
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return order


def dfs_order(adjacency: Adjacency) -> list[int]:
    """Vertices reachable from vertex 0 in depth-first (preorder) order."""
    if not adjacency:
        return []
    seen = {0}
    order = [0]
    stack = [iter(adjacency[0])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(iter(adjacency[nxt]))
                break
        else:
            stack.pop()
    return order


def has_cycle_undirected(adjacency: Adjacency) -> bool:
    """Tell whether the undirected graph given by ``adjacency`` holds a cycle."""
    seen = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if seen[start]:
            continue
        seen[start] = True
        queue: deque[tuple[int, int]] = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adjacency[node]:
                if seen[nxt]:
                    if nxt != parent:
                        return True
                    continue
                seen[nxt] = True
                queue.append((nxt, node))
    return False


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in the graph given by a 0/1 adjacency matrix.

    An entry ``matrix[i][j] == 1`` links ``i`` to ``j``; groups are counted by
    exploring from each not yet reached vertex in index order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    links = [[j for j, flag in enumerate(row) if flag == 1 and j != i] for i, row in enumerate(matrix)]
    seen = [False] * size
    provinces = 0
    for start in range(size):
        if seen[start]:
            continue
        provinces += 1
        seen[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in links[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append(nxt)
    return provinces


def is_bipartite(graph: Adjacency) -> bool:
    """Tell whether the vertices of ``graph`` can be two-coloured with no edge
    joining vertices of the same colour."""
    colour: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in graph[node]:
                if colour[nxt] is None:
                    colour[nxt] = 1 - colour[node]
                    stack.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True
"""Topological ordering of directed graphs and the course-scheduling problems built on it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]


def _vertex_count(adjacency: Adjacency) -> int:
    """Number of vertices, after checking every edge points at one of them."""
    size = len(adjacency)
    for node, neighbours in enumerate(adjacency):
        for nxt in neighbours:
            if not 0 <= nxt < size:
                raise ValueError(f"vertex {node} has an edge to missing vertex {nxt}")
    return size


def topo_sort_dfs(adjacency: Adjacency) -> list[int]:
    """Topological order of a directed acyclic graph by depth-first search.

    Searches start from each unvisited vertex in index order; the order is the
    reverse of the order in which vertices finish.
    """
    size = _vertex_count(adjacency)
    seen = [False] * size
    finished: list[int] = []
    for start in range(size):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def topo_sort_kahn(adjacency: Adjacency) -> list[int]:
    """Topological order by repeatedly removing vertices with no incoming edges.

    Vertices on or behind a cycle never become free and are left out, so the
    result is shorter than the vertex count exactly when the graph has a cycle.
    """
    size = _vertex_count(adjacency)
    indegree = [0] * size
    for neighbours in adjacency:
        for nxt in neighbours:
            indegree[nxt] += 1
    queue = deque(node for node in range(size) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def has_cycle_directed(adjacency: Adjacency) -> bool:
    """Tell whether the directed graph given by ``adjacency`` holds a cycle."""
    return len(topo_sort_kahn(adjacency)) != len(adjacency)


def _course_graph(
    course_count: int, prerequisites: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Edges from each required course to the courses that need it."""
    if course_count < 0:
        raise ValueError("course_count must be non-negative")
    graph: list[list[int]] = [[] for _ in range(course_count)]
    for pair in prerequisites:
        course, required = pair
        if not (0 <= course < course_count and 0 <= required < course_count):
            raise ValueError(f"prerequisite ({course}, {required}) names a missing course")
        graph[required].append(course)
    return graph


def can_finish(course_count: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether every course can be taken, each pair ``(course, required)``
    meaning ``required`` must come first."""
    graph = _course_graph(course_count, prerequisites)
    return len(topo_sort_kahn(graph)) == course_count


def find_order(course_count: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take every course, or an empty list if none exists."""
    graph = _course_graph(course_count, prerequisites)
    order = topo_sort_kahn(graph)
    return order if len(order) == course_count else []
"""Graph puzzles on grids and weighted edge lists."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

_UNREACHABLE = 10**9
_BLOCKING_WEIGHT = 2 * 10**9


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of ``'1'`` cells."""
    rows = [list(row) for row in grid]
    if not rows:
        return 0
    height = len(rows)
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for nr, nc in ((cr - 1, cc), (cr + 1, cc), (cr, cc - 1), (cr, cc + 1)):
                    if (
                        0 <= nr < height
                        and 0 <= nc < len(rows[nr])
                        and rows[nr][nc] == "1"
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return count


def regions_by_slashes(grid: Sequence[str]) -> int:
    """Regions an n by n grid of ``'/'``, ``'\\'`` and blanks is cut into."""
    size = len(grid)
    side = size + 1
    parent = list(range(side * side))
    for i in range(side):
        for j in range(side):
            if i in (0, side - 1) or j in (0, side - 1):
                parent[i * side + j] = 0

    def find(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    regions = 1
    for i, row in enumerate(grid):
        for j, ch in enumerate(row):
            if ch == "/":
                a, b = i * side + j + 1, (i + 1) * side + j
            elif ch == "\\":
                a, b = i * side + j, (i + 1) * side + j + 1
            else:
                continue
            root_a, root_b = find(a), find(b)
            if root_a == root_b:
                regions += 1
            else:
                parent[root_b] = root_a
    return regions


def max_probability(
    n: int,
    edges: Sequence[Sequence[int]],
    succ_prob: Sequence[float],
    start_node: int,
    end_node: int,
) -> float:
    """Highest success probability of a path between two nodes of an undirected graph."""
    if len(edges) != len(succ_prob):
        raise ValueError("edges and succ_prob must have the same length")
    best = [0.0] * n
    best[start_node] = 1.0
    for _ in range(n - 1):
        updated = False
        for (u, v), prob in zip(edges, succ_prob):
            if best[u] * prob > best[v]:
                best[v] = best[u] * prob
                updated = True
            if best[v] * prob > best[u]:
                best[u] = best[v] * prob
                updated = True
        if not updated:
            break
    return best[end_node]


def _island_count(land: set[tuple[int, int]]) -> int:
    remaining = set(land)
    count = 0
    while remaining:
        count += 1
        stack = [remaining.pop()]
        while stack:
            r, c = stack.pop()
            for cell in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if cell in remaining:
                    remaining.remove(cell)
                    stack.append(cell)
    return count


def min_days_to_disconnect(grid: Sequence[Sequence[int]]) -> int:
    """Fewest land cells to turn into water so the grid is not one island."""
    land = {(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == 1}
    if _island_count(land) != 1:
        return 0
    if any(_island_count(land - {cell}) != 1 for cell in sorted(land)):
        return 1
    return 2


def _shortest(adjacency: list[list[tuple[int, int]]], source: int, destination: int) -> int:
    dist = [_UNREACHABLE] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if node == destination:
            break
        if d > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            if d + weight < dist[neighbour]:
                dist[neighbour] = d + weight
                heapq.heappush(heap, (dist[neighbour], neighbour))
    return dist[destination]


def modified_graph_edges(
    n: int,
    edges: Sequence[Sequence[int]],
    source: int,
    destination: int,
    target: int,
) -> list[list[int]]:
    """Fill in every ``-1`` weight so the shortest path equals ``target``.

    Returns the completed edge list, or an empty list when it cannot be done.
    """
    work = [list(edge) for edge in edges]
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in work:
        if weight != -1:
            adjacency[u].append((v, weight))
            adjacency[v].append((u, weight))

    shortest = _shortest(adjacency, source, destination)
    if shortest < target:
        return []
    matched = shortest == target
    for edge in work:
        if edge[2] != -1:
            continue
        edge[2] = _BLOCKING_WEIGHT if matched else 1
        u, v = edge[0], edge[1]
        adjacency[u].append((v, edge[2]))
        adjacency[v].append((u, edge[2]))
        if not matched:
            candidate = _shortest(adjacency, source, destination)
            if candidate <= target:
                matched = True
                edge[2] += target - candidate
    return work if matched else []
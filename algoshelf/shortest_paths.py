"""Shortest and longest paths: 0-1 BFS, Dijkstra, Bellman-Ford, Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar

INF = math.inf

S = TypeVar("S", bound=Hashable)
Neighbours = Callable[[S], Iterable[tuple[S, int]]]

# Arrow codes in grids: 1 right, 2 left, 3 down, 4 up.
_ARROWS = {1: (0, 1), 2: (0, -1), 3: (1, 0), 4: (-1, 0)}
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _zero_one_search(start: S, neighbours: Neighbours) -> dict[S, int]:
    """Distances from ``start`` when every step costs 0 or 1."""
    dist: dict[S, int] = {start: 0}
    done: set[S] = set()
    queue: deque[S] = deque([start])
    while queue:
        node = queue.popleft()
        if node in done:
            continue
        done.add(node)
        base = dist[node]
        for nxt, cost in neighbours(node):
            candidate = base + cost
            if candidate < dist.get(nxt, INF):
                dist[nxt] = candidate
                if cost == 0:
                    queue.appendleft(nxt)
                else:
                    queue.append(nxt)
    return dist


def _dijkstra_search(start: S, neighbours: Neighbours) -> dict[S, int]:
    """Distances from ``start`` over non-negative step costs."""
    dist: dict[S, int] = {start: 0}
    heap: list[tuple[int, int, S]] = [(0, 0, start)]
    counter = 1
    done: set[S] = set()
    while heap:
        d, _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for nxt, cost in neighbours(node):
            candidate = d + cost
            if candidate < dist.get(nxt, INF):
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, counter, nxt))
                counter += 1
    return dist


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise IndexError(f"node {node} out of range 1..{n}")


def _undirected(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        _check_node(n, a)
        _check_node(n, b)
        adj[a].append((b, w))
        adj[b].append((a, w))
    return adj


def zero_one_bfs(n: int, edges: Iterable[tuple[int, int, int]], source: int) -> list[Optional[int]]:
    """Distances from ``source`` to nodes ``1..n`` over undirected 0/1-weight edges.

    Unreachable nodes get ``None``.
    """
    edges = list(edges)
    if any(w not in (0, 1) for _, _, w in edges):
        raise ValueError("edge weights must be 0 or 1")
    _check_node(n, source)
    adj = _undirected(n, edges)
    dist = _zero_one_search(source, lambda v: adj[v])
    return [dist.get(v) for v in range(1, n + 1)]


def dijkstra(n: int, edges: Iterable[tuple[int, int, int]], source: int) -> list[Optional[int]]:
    """Distances from ``source`` to nodes ``1..n`` over undirected weighted edges.

    Unreachable nodes get ``None``.
    """
    edges = list(edges)
    if any(w < 0 for _, _, w in edges):
        raise ValueError("edge weights must not be negative")
    _check_node(n, source)
    adj = _undirected(n, edges)
    dist = _dijkstra_search(source, lambda v: adj[v])
    return [dist.get(v) for v in range(1, n + 1)]


def min_edge_reversals(n: int, edges: Iterable[tuple[int, int]]) -> Optional[int]:
    """Fewest directed edges to reverse so that node ``n`` is reachable from 1."""
    if n < 1:
        raise ValueError("graph needs at least one node")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        adj[a].append((b, 0))
        adj[b].append((a, 1))
    return _zero_one_search(1, lambda v: adj[v]).get(n)


def arrow_grid_cost(grid: Sequence[Sequence[int]]) -> int:
    """Fewest arrows to change to walk from the top-left to the bottom-right cell.

    Each cell holds an arrow (1 right, 2 left, 3 down, 4 up); moving the way
    the arrow points is free, any other move costs one.
    """
    rows = len(grid)
    if rows == 0 or not grid[0]:
        raise ValueError("grid is empty")
    cols = len(grid[0])

    def neighbours(cell: tuple[int, int]) -> Iterable[tuple[tuple[int, int], int]]:
        r, c = cell
        free = _ARROWS.get(grid[r][c])
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                yield (nr, nc), 0 if (dr, dc) == free else 1

    return _zero_one_search((0, 0), neighbours)[(rows - 1, cols - 1)]


def longest_path_score(n: int, edges: Iterable[tuple[int, int, int]]) -> Optional[int]:
    """Largest total score of a walk from 1 to ``n`` along directed scored edges.

    Returns ``None`` when ``n`` cannot be reached, or when a positive cycle is
    reachable from 1 so the score has no bound.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    edges = list(edges)
    for a, b, _ in edges:
        _check_node(n, a)
        _check_node(n, b)
    best: list[Optional[int]] = [None] * (n + 1)
    best[1] = 0
    for _ in range(n):
        for a, b, score in edges:
            base = best[a]
            if base is not None and (best[b] is None or base + score > best[b]):
                best[b] = base + score
    for a, b, score in edges:
        base, target = best[a], best[b]
        if base is not None and target is not None and base + score > target:
            return None
    return best[n]


def burn_time(n: int, edges: Iterable[tuple[int, int, int]], start: int) -> int:
    """Time, times ten, until fire lit at ``start`` has burnt every edge.

    Fire spreads along undirected edges at unit speed; an edge ``(u, v, c)``
    is gone after ``(d(u) + d(v) + c) / 2``, and the result is five times
    the sum ``d(u) + d(v) + c`` maximised over all edges.
    """
    edges = list(edges)
    if not edges:
        raise ValueError("graph has no edges")
    dist = dijkstra(n, edges, start)
    worst = 0
    for u, v, cost in edges:
        du, dv = dist[u - 1], dist[v - 1]
        if du is None or dv is None:
            raise ValueError(f"edge ({u}, {v}) cannot be reached from {start}")
        worst = max(worst, (du + dv + cost) * 5)
    return worst


def cheapest_fuel_trip(
    n: int,
    roads: Iterable[tuple[int, int, int]],
    prices: Sequence[int],
    source: int,
    target: int,
    capacity: int,
) -> Optional[int]:
    """Least fuel cost to drive from ``source`` to ``target`` with a tank of ``capacity``.

    The tank starts empty; in city ``i`` one unit of fuel costs ``prices[i - 1]``
    and a road of length ``d`` burns ``d`` units. ``None`` if the trip is impossible.
    """
    if len(prices) != n:
        raise ValueError("need one price per city")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    roads = list(roads)
    if any(d < 0 for _, _, d in roads):
        raise ValueError("road lengths must not be negative")
    _check_node(n, source)
    _check_node(n, target)
    adj = _undirected(n, roads)

    def neighbours(state: tuple[int, int]) -> Iterable[tuple[tuple[int, int], int]]:
        city, fuel = state
        if fuel < capacity:
            yield (city, fuel + 1), prices[city - 1]
        for nxt, length in adj[city]:
            if fuel >= length:
                yield (nxt, fuel - length), 0

    return _dijkstra_search((source, 0), neighbours).get((target, 0))


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; ``math.inf`` marks a missing edge."""
    dist = [list(row) for row in matrix]
    if any(len(row) != len(dist) for row in dist):
        raise ValueError("matrix must be square")
    for k in range(len(dist)):
        through = dist[k]
        for i, row in enumerate(dist):
            dik = row[k]
            if dik == INF:
                continue
            dist[i] = [min(a, dik + b) for a, b in zip(row, through)]
    return dist


def removal_distance_sums(matrix: Sequence[Sequence[float]], order: Sequence[int]) -> list[float]:
    """Sum of shortest distances between remaining nodes before each removal.

    ``order`` lists nodes ``1..n`` in the order they are removed; entry ``i``
    of the result holds the sum over all ordered pairs of nodes still present
    just before the ``i``-th removal.
    """
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    if sorted(order) != list(range(1, n + 1)):
        raise ValueError("order must be a permutation of 1..n")
    present: list[int] = []
    sums: list[float] = []
    for node in reversed(order):
        k = node - 1
        through = dist[k]
        for i, row in enumerate(dist):
            dik = row[k]
            if dik != INF:
                dist[i] = [min(a, dik + b) for a, b in zip(row, through)]
        present.append(k)
        sums.append(sum(dist[i][j] for i in present for j in present))
    sums.reverse()
    return sums


def shortest_path_queries(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[Optional[int]]:
    """Shortest distances for each ``(a, b)`` query over undirected edges.

    Parallel edges keep the shortest; unreachable pairs answer ``None``.
    """
    matrix: list[list[float]] = [[INF] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for a, b, w in edges:
        _check_node(n, a)
        _check_node(n, b)
        if w < matrix[a - 1][b - 1]:
            matrix[a - 1][b - 1] = w
            matrix[b - 1][a - 1] = w
    dist = floyd_warshall(matrix)
    answers: list[Optional[int]] = []
    for a, b in queries:
        _check_node(n, a)
        _check_node(n, b)
        d = dist[a - 1][b - 1]
        answers.append(None if d == INF else int(d))
    return answers


def min_walls_to_break(grid: Sequence[str]) -> int:
    """Fewest '#' walls to break to walk from 'S' to 'F' in a grid."""
    start = finish = None
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "S":
                start = (r, c)
            elif ch == "F":
                finish = (r, c)
    if start is None or finish is None:
        raise ValueError("grid needs both 'S' and 'F'")
    rows = len(grid)

    def neighbours(cell: tuple[int, int]) -> Iterable[tuple[tuple[int, int], int]]:
        r, c = cell
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < len(grid[nr]):
                yield (nr, nc), 1 if grid[nr][nc] == "#" else 0

    return _zero_one_search(start, neighbours)[finish]
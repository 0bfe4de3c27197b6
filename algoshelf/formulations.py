"""Problems solved by modelling them as graphs: jumps, board games, trees, spanning forests."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, Mapping, Optional, Sequence

from algoshelf.union_find import UnionFind

BOARD_END = 100
DIE_FACES = 6


def jump_costs(
    values: Sequence[int],
    jump_cost: int,
    step_cost: int,
    source: int,
) -> list[int]:
    """Cheapest cost from position ``source`` (1-based) to every position.

    From position ``i`` one may step to ``i - 1`` or ``i + 1`` for ``step_cost``,
    or jump to any position holding the same value for ``jump_cost``.
    """
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    if jump_cost < 0 or step_cost < 0:
        raise ValueError("costs must not be negative")
    if not 1 <= source <= n:
        raise IndexError(f"source {source} out of range 1..{n}")

    # One hub node per distinct value: entering is free, leaving costs a jump.
    hub_of: dict[int, int] = {}
    members: list[list[int]] = []
    for pos, value in enumerate(values):
        if value not in hub_of:
            hub_of[value] = n + len(members)
            members.append([])
        members[hub_of[value] - n].append(pos)

    def neighbours(node: int) -> Iterable[tuple[int, int]]:
        if node >= n:
            for pos in members[node - n]:
                yield pos, jump_cost
            return
        if node > 0:
            yield node - 1, step_cost
        if node < n - 1:
            yield node + 1, step_cost
        yield hub_of[values[node]], 0

    start = source - 1
    dist: dict[int, int] = {start: 0}
    heap = [(0, start)]
    done: set[int] = set()
    while heap:
        d, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for nxt, cost in neighbours(node):
            candidate = d + cost
            if candidate < dist.get(nxt, candidate + 1):
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return [dist[pos] for pos in range(n)]


def _board_moves(pairs: Iterable[tuple[int, int]], moves: dict[int, int]) -> None:
    for a, b in pairs:
        for square in (a, b):
            if not 1 <= square <= BOARD_END:
                raise ValueError(f"square {square} is off the board")
        moves[a] = b


def snakes_and_ladders(
    snakes: Iterable[tuple[int, int]],
    ladders: Iterable[tuple[int, int]],
) -> Optional[int]:
    """Fewest die throws to go from square 1 to square 100.

    Each pair ``(a, b)`` sends a token landing on ``a`` to ``b``; ladders are
    applied after snakes, so a ladder wins where both start on one square.
    ``None`` if square 100 cannot be reached.
    """
    moves: dict[int, int] = {}
    _board_moves(snakes, moves)
    _board_moves(ladders, moves)

    dist = {1: 0}
    queue = deque([1])
    while queue:
        square = queue.popleft()
        for face in range(1, DIE_FACES + 1):
            landing = square + face
            if landing > BOARD_END:
                break
            target = moves.get(landing, landing)
            if target not in dist:
                dist[target] = dist[square] + 1
                queue.append(target)
    return dist.get(BOARD_END)


def distinct_colours_in_subtrees(
    colours: Sequence[int],
    edges: Iterable[tuple[int, int]],
) -> list[int]:
    """Number of distinct colours in the subtree of each node of a tree rooted at 1.

    ``colours[i]`` is the colour of node ``i + 1``; ``edges`` join nodes ``1..n``.
    """
    n = len(colours)
    if n == 0:
        return []
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes needs n - 1 edges")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        for node in (a, b):
            if not 1 <= node <= n:
                raise IndexError(f"node {node} out of range 1..{n}")
        adj[a].append(b)
        adj[b].append(a)

    parent = [0] * (n + 1)
    order: list[int] = []
    visited = {1}
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in adj[node]:
            if nxt not in visited:
                visited.add(nxt)
                parent[nxt] = node
                stack.append(nxt)
    if len(order) != n:
        raise ValueError("edges do not form a connected tree")

    sets: list[set[int]] = [set() for _ in range(n + 1)]
    counts = [0] * n
    for node in reversed(order):
        own = sets[node]
        own.add(colours[node - 1])
        counts[node - 1] = len(own)
        if node == 1:
            break
        up = parent[node]
        small, large = sorted((own, sets[up]), key=len)
        large |= small
        sets[up] = large
        sets[node] = set()
    return counts


def components_after_removals(
    n: int,
    edges: Sequence[tuple[int, int]],
    operations: Iterable[Sequence[int]],
) -> list[int]:
    """Answer component-count queries while edges are removed one by one.

    ``edges`` are numbered from 1. An operation ``(1, x)`` removes edge ``x``;
    any other operation, such as ``(2,)``, asks for the current number of
    connected components among nodes ``1..n``.
    """
    ops = [tuple(op) for op in operations]
    removed: set[int] = set()
    for op in ops:
        if op and op[0] == 1:
            if len(op) < 2:
                raise ValueError("a removal needs an edge number")
            x = op[1]
            if not 1 <= x <= len(edges):
                raise IndexError(f"edge {x} out of range 1..{len(edges)}")
            if x in removed:
                raise ValueError(f"edge {x} removed twice")
            removed.add(x)

    uf = UnionFind(n)
    for number, (a, b) in enumerate(edges, start=1):
        if number not in removed:
            uf.union(a, b)

    answers: list[int] = []
    for op in reversed(ops):
        if op and op[0] == 1:
            a, b = edges[op[1] - 1]
            uf.union(a, b)
        else:
            answers.append(len(uf))
    answers.reverse()
    return answers


def minimum_spanning_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> Optional[int]:
    """Total weight of a minimum spanning tree on nodes ``1..n``.

    ``None`` when the graph is not connected.
    """
    uf = UnionFind(n)
    total = 0
    used = 0
    for a, b, cost in sorted(edges, key=lambda e: e[2]):
        if uf.union(a, b):
            total += cost
            used += 1
    return total if used == n - 1 else None
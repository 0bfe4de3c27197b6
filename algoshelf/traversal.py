"""Graph and grid traversals: BFS, DFS, components, cycles and topological orders."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, Iterator, Optional, Sequence

MOD = 1_000_000_007

# Right, left, down, up.
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_KNIGHT = ((2, 1), (-2, 1), (2, -1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))

Cell = tuple[int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise IndexError(f"node {node} out of range 1..{n}")


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _directed(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        adj[a].append(b)
    return adj


def _bfs(adj: Sequence[Sequence[int]], start: int, seen: set[int]) -> list[int]:
    seen.add(start)
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


def bfs_order(n: int, edges: Iterable[tuple[int, int]], start: int = 1) -> list[int]:
    """Nodes reachable from ``start`` in breadth-first visiting order."""
    adj = _undirected(n, edges)
    _check_node(n, start)
    return _bfs(adj, start, set())


def _components(n: int, edges: Iterable[tuple[int, int]]) -> Iterator[list[int]]:
    adj = _undirected(n, edges)
    seen: set[int] = set()
    for node in range(1, n + 1):
        if node not in seen:
            yield _bfs(adj, node, seen)


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components of an undirected graph on ``1..n``."""
    return sum(1 for _ in _components(n, edges))


def component_labels(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Component number (1-based, in order of lowest node) for each node ``1..n``."""
    labels = [0] * n
    for label, members in enumerate(_components(n, edges), start=1):
        for node in members:
            labels[node - 1] = label
    return labels


def _grid_neighbours(rows: int, cols: int, cell: Cell) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _flood(grid: Sequence[Sequence[object]], start: Cell, free: object, seen: set[Cell]) -> list[Cell]:
    rows = len(grid)
    seen.add(start)
    cells = [start]
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nr, nc in _grid_neighbours(rows, len(grid[cell[0]]), cell):
            if nc < len(grid[nr]) and (nr, nc) not in seen and grid[nr][nc] == free:
                seen.add((nr, nc))
                cells.append((nr, nc))
                queue.append((nr, nc))
    return cells


def component_size_grid(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Replace each free cell (0) by the size of its 4-connected free region.

    Regions of a single cell stay 0; blocked cells keep their value.
    """
    result = [list(row) for row in grid]
    seen: set[Cell] = set()
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 0 and (r, c) not in seen:
                cells = _flood(grid, (r, c), 0, seen)
                if len(cells) > 1:
                    for cr, cc in cells:
                        result[cr][cc] = len(cells)
    return result


def knight_distance(n: int, sx: int, sy: int, fx: int, fy: int) -> Optional[int]:
    """Fewest knight moves between two squares of an n×n board (1-based).

    ``None`` if the target cannot be reached.
    """
    for coord in (sx, sy, fx, fy):
        if not 1 <= coord <= n:
            raise IndexError(f"square coordinate {coord} out of range 1..{n}")
    dist = {(sx, sy): 0}
    queue = deque([(sx, sy)])
    while queue:
        x, y = queue.popleft()
        if (x, y) == (fx, fy):
            return dist[(x, y)]
        for dx, dy in _KNIGHT:
            nxt = (x + dx, y + dy)
            if 1 <= nxt[0] <= n and 1 <= nxt[1] <= n and nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                queue.append(nxt)
    return None


def count_rooms(grid: Sequence[str]) -> int:
    """Number of 4-connected regions of floor ('.') cells."""
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "." and (r, c) not in seen:
                rooms += 1
                _flood(grid, (r, c), ".", seen)
    return rooms


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True when the nodes can be split into two teams with no edge inside a team."""
    adj = _undirected(n, edges)
    colour: dict[int, int] = {}
    for start in range(1, n + 1):
        if start in colour:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if nxt not in colour:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def has_directed_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True when the directed graph on ``1..n`` contains a cycle."""
    adj = _directed(n, edges)
    on_stack: set[int] = set()
    finished: set[int] = set()
    for root in range(1, n + 1):
        if root in finished:
            continue
        on_stack.add(root)
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for nxt in children:
                if nxt in on_stack:
                    return True
                if nxt not in finished:
                    on_stack.add(nxt)
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                on_stack.discard(node)
                finished.add(node)
    return False


def girth(n: int, edges: Iterable[tuple[int, int]]) -> Optional[int]:
    """Length of the shortest cycle of an undirected graph, or ``None`` if acyclic."""
    adj = _undirected(n, edges)
    best: Optional[int] = None
    for start in range(1, n + 1):
        level = {start: 0}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if nxt not in level:
                    level[nxt] = level[node] + 1
                    queue.append(nxt)
                elif level[node] - level[nxt] < 1:
                    length = level[node] + level[nxt] + 1
                    if best is None or length < best:
                        best = length
    return best


def grid_components(grid: Sequence[Sequence[int]]) -> list[list[Cell]]:
    """Regions of a grid in depth-first visiting order.

    A region starts at any unvisited non-zero cell and spreads through
    neighbouring cells holding 1, trying right, left, down, up in turn.
    """
    rows = len(grid)
    seen: set[Cell] = set()
    regions: list[list[Cell]] = []

    def children(cell: Cell) -> Iterator[Cell]:
        for nr, nc in _grid_neighbours(rows, len(grid[cell[0]]), cell):
            if nc < len(grid[nr]) and grid[nr][nc] == 1:
                yield nr, nc

    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 0 or (r, c) in seen:
                continue
            seen.add((r, c))
            members = [(r, c)]
            stack = [children((r, c))]
            while stack:
                for nxt in stack[-1]:
                    if nxt not in seen:
                        seen.add(nxt)
                        members.append(nxt)
                        stack.append(children(nxt))
                        break
                else:
                    stack.pop()
            regions.append(members)
    return regions


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> Optional[list[int]]:
    """Lexicographically smallest topological order, or ``None`` if there is a cycle."""
    adj = _directed(n, edges)
    in_deg = [0] * (n + 1)
    for targets in adj:
        for b in targets:
            in_deg[b] += 1
    heap = [v for v in range(1, n + 1) if in_deg[v] == 0]
    heapq.heapify(heap)
    order: list[int] = []
    while heap:
        node = heapq.heappop(heap)
        order.append(node)
        for nxt in adj[node]:
            in_deg[nxt] -= 1
            if in_deg[nxt] == 0:
                heapq.heappush(heap, nxt)
    return order if len(order) == n else None


def count_dag_paths(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of paths from node 1 to node ``n``, modulo 1e9+7.

    Nodes lying on a cycle are never settled and contribute no paths.
    """
    edges = list(edges)
    adj = _directed(n, edges)
    preds: list[list[int]] = [[] for _ in range(n + 1)]
    in_deg = [0] * (n + 1)
    for a, b in edges:
        preds[b].append(a)
        in_deg[b] += 1
    ways = [0] * (n + 1)
    if n >= 1:
        ways[1] = 1
    queue = deque(v for v in range(1, n + 1) if in_deg[v] == 0)
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            in_deg[nxt] -= 1
            if in_deg[nxt] == 0:
                queue.append(nxt)
        for p in preds[node]:
            ways[node] = (ways[node] + ways[p]) % MOD
    return ways[n] if n >= 1 else 0


def topological_labels(n: int, edges: Iterable[tuple[int, int]]) -> Optional[list[int]]:
    """Labels ``1..n`` with every edge going from a smaller to a larger label.

    Among such labellings, node 1 gets the smallest possible label, then node 2,
    and so on. ``None`` if the graph has a cycle.
    """
    edges = list(edges)
    reverse = _directed(n, ((b, a) for a, b in edges))
    out_deg = [0] * (n + 1)
    for a, _ in edges:
        out_deg[a] += 1
    heap = [-v for v in range(1, n + 1) if out_deg[v] == 0]
    heapq.heapify(heap)
    labels = [0] * n
    next_label = n
    while heap:
        node = -heapq.heappop(heap)
        labels[node - 1] = next_label
        next_label -= 1
        for prev in reverse[node]:
            out_deg[prev] -= 1
            if out_deg[prev] == 0:
                heapq.heappush(heap, -prev)
    return labels if next_label == 0 else None
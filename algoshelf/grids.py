"""Grid puzzles: falling colour blocks, island shapes, spreading infections, escapes."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator, Optional, Sequence

Cell = tuple[int, int]

# Right, left, down, up.
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIGITS = frozenset("0123456789")


def _neighbours(grid: Sequence[Sequence[object]], cell: Cell) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]):
            yield nr, nc


def _multi_bfs(
    grid: Sequence[Sequence[object]],
    sources: Iterable[Cell],
    passable: Callable[[Cell], bool],
) -> dict[Cell, int]:
    """Distance from the nearest source to every reachable passable cell."""
    dist: dict[Cell, int] = {}
    queue: deque[Cell] = deque()
    for src in sources:
        if src not in dist:
            dist[src] = 0
            queue.append(src)
    while queue:
        cell = queue.popleft()
        for nxt in _neighbours(grid, cell):
            if nxt not in dist and passable(nxt):
                dist[nxt] = dist[cell] + 1
                queue.append(nxt)
    return dist


def _region(grid: Sequence[Sequence[object]], start: Cell, seen: set[Cell]) -> list[Cell]:
    """Cells 4-connected to ``start`` holding the same value."""
    value = grid[start[0]][start[1]]
    seen.add(start)
    cells = [start]
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nr, nc in _neighbours(grid, cell):
            if (nr, nc) not in seen and grid[nr][nc] == value:
                seen.add((nr, nc))
                cells.append((nr, nc))
                queue.append((nr, nc))
    return cells


def _apply_gravity(grid: list[list[int]]) -> None:
    height = len(grid)
    for c in range(len(grid[0]) if grid else 0):
        falling = [grid[r][c] for r in reversed(range(height)) if grid[r][c] != 0]
        falling += [0] * (height - len(falling))
        for r, value in zip(reversed(range(height)), falling):
            grid[r][c] = value


def collapse_grid(rows: Sequence[str], k: int) -> list[str]:
    """Repeatedly clear same-colour regions of at least ``k`` cells and let blocks fall.

    Each row is a string of digits, ``0`` meaning empty. After every round in
    which something was cleared, the remaining blocks drop to the bottom of
    their columns; the process stops once a round clears nothing.
    """
    width = len(rows[0]) if rows else 0
    for row in rows:
        if len(row) != width:
            raise ValueError("rows must all have the same length")
        if not set(row) <= _DIGITS:
            raise ValueError(f"row {row!r} must contain only digits")
    grid = [[int(ch) for ch in row] for row in rows]

    while True:
        cleared = False
        seen: set[Cell] = set()
        for r, line in enumerate(grid):
            for c, colour in enumerate(line):
                if colour == 0 or (r, c) in seen:
                    continue
                cells = _region(grid, (r, c), seen)
                if len(cells) >= k:
                    cleared = True
                    for cr, cc in cells:
                        grid[cr][cc] = 0
        if not cleared:
            break
        _apply_gravity(grid)

    return ["".join(map(str, line)) for line in grid]


def area_and_perimeter(grid: Sequence[str]) -> tuple[int, Optional[int]]:
    """Largest area of a '#' region and the smallest perimeter among regions that large.

    Perimeter counts the sides of region cells not shared with another '#'.
    Returns ``(0, None)`` when the grid holds no '#'.
    """
    seen: set[Cell] = set()
    best_area = 0
    best_perimeter: Optional[int] = None
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != "#" or (r, c) in seen:
                continue
            cells = _region(grid, (r, c), seen)
            perimeter = sum(
                4 - sum(1 for nr, nc in _neighbours(grid, cell) if grid[nr][nc] == "#")
                for cell in cells
            )
            area = len(cells)
            if area > best_area:
                best_area, best_perimeter = area, perimeter
            elif area == best_area and best_perimeter is not None and perimeter < best_perimeter:
                best_perimeter = perimeter
    return best_area, best_perimeter


def infection_time(grid: Sequence[Sequence[int]]) -> Optional[int]:
    """Steps until every healthy cell (1) is infected by the infected cells (2).

    Infection spreads each step to 4-neighbouring non-zero cells; 0 is empty.
    Returns ``None`` if some healthy cell can never be reached.
    """
    sources = [(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == 2]
    dist = _multi_bfs(grid, sources, lambda cell: grid[cell[0]][cell[1]] != 0)
    worst = 0
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 1 and (r, c) not in dist:
                return None
            worst = max(worst, dist.get((r, c), 0))
    return worst


def escape_distance(grid: Sequence[str]) -> Optional[int]:
    """Steps for 'A' to reach the border strictly before any monster 'M' can get there.

    Walls are '#'; everyone moves one step at a time to 4-neighbouring cells.
    Returns the shortest such escape, or ``None`` if there is none.
    """
    start: Optional[Cell] = None
    monsters: list[Cell] = []
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "A":
                start = (r, c)
            elif ch == "M":
                monsters.append((r, c))
    if start is None:
        raise ValueError("grid has no 'A'")

    def open_cell(cell: Cell) -> bool:
        return grid[cell[0]][cell[1]] != "#"

    monster_dist = _multi_bfs(grid, monsters, open_cell)
    person_dist = _multi_bfs(grid, [start], open_cell)

    best: Optional[int] = None
    last = len(grid) - 1
    for (r, c), steps in person_dist.items():
        on_border = r in (0, last) or c in (0, len(grid[r]) - 1)
        if not on_border:
            continue
        monster = monster_dist.get((r, c))
        if (monster is None or steps < monster) and (best is None or steps < best):
            best = steps
    return best
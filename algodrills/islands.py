"""Flood fills over grids of land (1) and water (0), plus the two-ocean water flow problem."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Grid = Sequence[Sequence[int]]

_DIRECTIONS = ((0, 1), (0, -1), (-1, 0), (1, 0))


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    if rows == 0:
        return 0, 0
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(x: int, y: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def _land_cells(grid: Grid, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for x in range(rows):
        for y in range(cols):
            if grid[x][y] == 1:
                yield x, y


def max_area_bfs(grid: Grid) -> int:
    """Area of the largest island, exploring each island breadth first."""
    rows, cols = _shape(grid)
    seen: set[tuple[int, int]] = set()
    best = 0
    for start in _land_cells(grid, rows, cols):
        if start in seen:
            continue
        seen.add(start)
        queue = deque([start])
        area = 0
        while queue:
            x, y = queue.popleft()
            area += 1
            for cell in _neighbours(x, y, rows, cols):
                if grid[cell[0]][cell[1]] == 1 and cell not in seen:
                    seen.add(cell)
                    queue.append(cell)
        best = max(best, area)
    return best


def max_area_dfs(grid: Grid) -> int:
    """Area of the largest island, exploring each island depth first."""
    rows, cols = _shape(grid)
    seen: set[tuple[int, int]] = set()
    best = 0
    for start in _land_cells(grid, rows, cols):
        if start in seen:
            continue
        seen.add(start)
        stack = [start]
        area = 0
        while stack:
            x, y = stack.pop()
            area += 1
            for cell in _neighbours(x, y, rows, cols):
                if grid[cell[0]][cell[1]] == 1 and cell not in seen:
                    seen.add(cell)
                    stack.append(cell)
        best = max(best, area)
    return best


def _flood(
    grid: Grid,
    rows: int,
    cols: int,
    starts: Iterable[tuple[int, int]],
    step_allowed,
) -> set[tuple[int, int]]:
    reached: set[tuple[int, int]] = set()
    stack = []
    for cell in starts:
        if cell not in reached:
            reached.add(cell)
            stack.append(cell)
    while stack:
        x, y = stack.pop()
        for nx, ny in _neighbours(x, y, rows, cols):
            if (nx, ny) not in reached and step_allowed(grid[x][y], grid[nx][ny]):
                reached.add((nx, ny))
                stack.append((nx, ny))
    return reached


def _border(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for x in range(rows):
        yield x, 0
        yield x, cols - 1
    for y in range(cols):
        yield 0, y
        yield rows - 1, y


def enclave_area(grid: Grid) -> int:
    """Number of land cells that cannot reach the grid's edge over land."""
    rows, cols = _shape(grid)
    if rows == 0 or cols == 0:
        return 0
    border_land = (cell for cell in _border(rows, cols) if grid[cell[0]][cell[1]] == 1)
    escaped = _flood(grid, rows, cols, border_land, lambda _here, there: there == 1)
    return sum(1 for cell in _land_cells(grid, rows, cols) if cell not in escaped)


def water_flow_cells(grid: Grid) -> list[tuple[int, int]]:
    """Cells from which water reaches both the top/left edge and the bottom/right edge.

    Water moves to a neighbouring cell whose height is not greater than the current one.
    Cells are returned in row-major order.
    """
    rows, cols = _shape(grid)
    if rows == 0 or cols == 0:
        return []
    first_edge = [(0, y) for y in range(cols)] + [(x, 0) for x in range(rows)]
    second_edge = [(rows - 1, y) for y in range(cols)] + [(x, cols - 1) for x in range(rows)]

    def uphill(here: int, there: int) -> bool:
        return there >= here

    first = _flood(grid, rows, cols, first_edge, uphill)
    second = _flood(grid, rows, cols, second_edge, uphill)
    return [
        (x, y)
        for x in range(rows)
        for y in range(cols)
        if (x, y) in first and (x, y) in second
    ]
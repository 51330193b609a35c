import pytest

from algodrills.islands import enclave_area, max_area_bfs, max_area_dfs, water_flow_cells

GRIDS = [
    [[1, 1, 0, 0, 0], [1, 1, 0, 0, 0], [0, 0, 1, 0, 0], [0, 0, 0, 1, 1]],
    [[1, 0, 1], [0, 1, 0], [1, 0, 1]],
    [[0, 0, 0], [0, 1, 0], [0, 0, 0]],
    [[1, 1, 1, 1], [1, 0, 0, 1], [1, 1, 1, 1]],
    [[1]],
    [[0]],
]


@pytest.mark.parametrize("grid", GRIDS)
def test_bfs_and_dfs_agree(grid):
    assert max_area_bfs(grid) == max_area_dfs(grid)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4)])
def test_all_land_is_one_island(rows, cols):
    grid = [[1] * cols for _ in range(rows)]
    assert max_area_bfs(grid) == rows * cols
    assert max_area_dfs(grid) == rows * cols


def test_all_water_has_no_island():
    grid = [[0] * 3 for _ in range(3)]
    assert max_area_bfs(grid) == 0
    assert max_area_dfs(grid) == 0
    assert enclave_area(grid) == 0


def test_area_never_exceeds_land_count():
    for grid in GRIDS:
        land = sum(map(sum, grid))
        assert max_area_bfs(grid) <= land


def test_does_not_mutate_input():
    grid = [[1, 1], [0, 1]]
    snapshot = [row[:] for row in grid]
    max_area_dfs(grid)
    enclave_area(grid)
    assert grid == snapshot


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        max_area_bfs([[1, 0], [1]])
    with pytest.raises(ValueError):
        enclave_area([[1, 0], [1]])


def test_empty_grid():
    assert max_area_bfs([]) == 0
    assert enclave_area([]) == 0
    assert water_flow_cells([]) == []


def test_land_touching_border_is_not_enclosed():
    grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    assert enclave_area(grid) == 0


def test_interior_island_fully_enclosed():
    grid = [[0, 0, 0, 0], [0, 1, 1, 0], [0, 1, 0, 0], [0, 0, 0, 0]]
    interior = sum(grid[x][y] for x in range(1, 3) for y in range(1, 3))
    assert enclave_area(grid) == interior


def test_enclave_bounded_by_land():
    for grid in GRIDS:
        assert 0 <= enclave_area(grid) <= sum(map(sum, grid))


def test_flat_grid_flows_everywhere():
    grid = [[5] * 3 for _ in range(2)]
    assert water_flow_cells(grid) == [(x, y) for x in range(2) for y in range(3)]


def test_single_cell_touches_both_edges():
    assert water_flow_cells([[7]]) == [(0, 0)]


def test_slope_down_to_top_left():
    rows, cols = 3, 4
    grid = [[x + y for y in range(cols)] for x in range(rows)]
    cells = water_flow_cells(grid)
    assert set(cells) == {
        (x, y) for x in range(rows) for y in range(cols) if x == rows - 1 or y == cols - 1
    }
    assert cells == sorted(cells)
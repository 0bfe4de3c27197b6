import pytest

from algoshelf.grids import area_and_perimeter, collapse_grid, escape_distance, infection_time

SAMPLE = [
    "1122330000",
    "1203301100",
    "2223311100",
    "3311224400",
    "3312224455",
]


def _region_sizes(rows):
    seen = set()
    sizes = []
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == "0" or (r, c) in seen:
                continue
            stack = [(r, c)]
            seen.add((r, c))
            size = 0
            while stack:
                cr, cc = stack.pop()
                size += 1
                for nr, nc in ((cr + 1, cc), (cr - 1, cc), (cr, cc + 1), (cr, cc - 1)):
                    if (
                        0 <= nr < len(rows)
                        and 0 <= nc < len(rows[nr])
                        and (nr, nc) not in seen
                        and rows[nr][nc] == ch
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            sizes.append(size)
    return sizes


def test_collapse_k_one_clears_everything():
    result = collapse_grid(SAMPLE, 1)
    assert result == ["0" * len(row) for row in SAMPLE]


def test_collapse_large_k_leaves_grid_alone():
    assert collapse_grid(SAMPLE, 100) == SAMPLE


def test_collapse_result_is_settled():
    result = collapse_grid(SAMPLE, 3)
    assert len(result) == len(SAMPLE)
    assert all(len(row) == len(SAMPLE[0]) for row in result)
    assert all(size < 3 for size in _region_sizes(result))
    for c in range(len(result[0])):
        column = [row[c] for row in result]
        first_block = next((i for i, ch in enumerate(column) if ch != "0"), len(column))
        assert all(ch != "0" for ch in column[first_block:])


def test_collapse_cascades_after_falling():
    rows = ["1000000000", "2000000000", "2000000000", "2110000000"]
    assert collapse_grid(rows, 3) == ["0000000000"] * 4


def test_collapse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        collapse_grid(["123", "12"], 2)


def test_collapse_rejects_non_digits():
    with pytest.raises(ValueError):
        collapse_grid(["12a"], 2)


def test_area_without_islands():
    assert area_and_perimeter(["...", "..."]) == (0, None)


def test_area_prefers_smaller_perimeter_on_tie():
    grid = ["##...", "##...", ".....", "####.", "....."]
    assert area_and_perimeter(grid) == (4, 8)


def test_area_of_whole_grid_counts_every_cell():
    grid = ["####", "####", "####"]
    area, perimeter = area_and_perimeter(grid)
    assert area == sum(row.count("#") for row in grid)
    assert perimeter == 2 * (len(grid) + len(grid[0]))


def test_area_perimeter_is_same_after_transposing():
    grid = ["#..#", "##.#", ".#.."]
    transposed = ["".join(col) for col in zip(*grid)]
    assert area_and_perimeter(grid) == area_and_perimeter(transposed)


@pytest.mark.parametrize("healthy", [1, 2, 5])
def test_infection_along_a_row(healthy):
    assert infection_time([[2] + [1] * healthy]) == healthy


def test_infection_blocked_by_empty_cell():
    assert infection_time([[2, 0, 1]]) is None


def test_infection_with_nothing_healthy():
    assert infection_time([[2, 0], [0, 2]]) == 0


def test_infection_symmetric_sources():
    grid = [[2, 1, 1, 1, 2]]
    assert infection_time(grid) == infection_time([list(reversed(grid[0]))])
    assert infection_time(grid) < infection_time([[2, 1, 1, 1, 1]])


def test_escape_from_border_is_immediate():
    assert escape_distance(["A..", "..."]) == 0


def test_escape_along_corridor():
    grid = ["#####", "#A...", "#####"]
    assert escape_distance(grid) == grid[1].count(".")


def test_escape_cut_off_by_monster():
    assert escape_distance(["#####", "#A.M.", "#####"]) is None


def test_escape_when_enclosed():
    assert escape_distance(["#####", "#.A.#", "#####"]) is None


def test_escape_without_person_is_an_error():
    with pytest.raises(ValueError):
        escape_distance(["...", ".M."])


def test_monster_never_helps_escape():
    base = ["#######", "#.....#", "#..A...", "#.....#", "#######"]
    with_monster = ["#######", "#M....#", "#..A...", "#.....#", "#######"]
    free = escape_distance(base)
    chased = escape_distance(with_monster)
    assert free is not None
    assert chased is None or chased >= free
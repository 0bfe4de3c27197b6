import itertools

import pytest

from algoshelf.traversal import (
    bfs_order,
    component_labels,
    component_size_grid,
    count_components,
    count_dag_paths,
    count_rooms,
    girth,
    grid_components,
    has_directed_cycle,
    is_bipartite,
    knight_distance,
    topological_labels,
    topological_order,
)

PATH_EDGES = [(1, 2), (2, 3), (3, 4)]


def test_bfs_order_path_follows_chain():
    assert bfs_order(4, PATH_EDGES, 1) == [1, 2, 3, 4]


def test_bfs_order_skips_unreachable_and_starts_at_start():
    order = bfs_order(5, [(1, 2), (1, 3), (2, 4)], 2)
    assert order[0] == 2
    assert sorted(order) == [1, 2, 3, 4]
    assert 5 not in order


def test_bfs_order_rejects_bad_node():
    with pytest.raises(IndexError):
        bfs_order(3, [(1, 4)], 1)


def test_count_components_no_edges_and_connected():
    assert count_components(5, []) == 5
    assert count_components(4, PATH_EDGES) == 1


def test_component_labels_match_component_count():
    edges = [(1, 2), (2, 3), (3, 5), (5, 2)]
    labels = component_labels(5, edges)
    assert labels[0] == 1
    assert len(set(labels)) == count_components(5, edges)
    for a, b in edges:
        assert labels[a - 1] == labels[b - 1]
    assert labels[3] != labels[0]


def test_component_size_grid_fills_region_with_size():
    grid = [[0, 0], [0, 0]]
    assert component_size_grid(grid) == [[4, 4], [4, 4]]


def test_component_size_grid_keeps_walls_and_singletons():
    grid = [[0, 1, 0], [0, 1, 1]]
    result = component_size_grid(grid)
    assert result[0][1] == 1 and result[1][1] == 1 and result[1][2] == 1
    assert result[0][2] == 0
    assert result[0][0] == result[1][0] == 2


def test_knight_distance_same_square_and_one_move():
    assert knight_distance(8, 3, 3, 3, 3) == 0
    assert knight_distance(8, 1, 1, 2, 3) == 1


def test_knight_distance_symmetric():
    for fx, fy in itertools.product(range(1, 6), repeat=2):
        assert knight_distance(5, 1, 1, fx, fy) == knight_distance(5, fx, fy, 1, 1)


def test_knight_distance_unreachable_on_tiny_board():
    assert knight_distance(2, 1, 1, 2, 2) is None


def test_knight_distance_out_of_board():
    with pytest.raises(IndexError):
        knight_distance(4, 0, 1, 2, 2)


def test_count_rooms():
    assert count_rooms(["#.#", "###", ".#."]) == 3
    assert count_rooms(["...", "..."]) == 1
    assert count_rooms(["###"]) == 0


def test_is_bipartite_even_and_odd_cycles():
    assert is_bipartite(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) is True
    assert is_bipartite(3, [(1, 2), (2, 3), (3, 1)]) is False
    assert is_bipartite(3, []) is True


def test_has_directed_cycle():
    assert has_directed_cycle(4, PATH_EDGES) is False
    assert has_directed_cycle(3, [(1, 2), (2, 3), (3, 1)]) is True
    assert has_directed_cycle(3, [(1, 2), (1, 3), (2, 3)]) is False


def test_girth():
    triangle = [(1, 2), (2, 3), (3, 1)]
    assert girth(3, triangle) == len(triangle)
    assert girth(4, PATH_EDGES) is None
    assert girth(4, [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3)]) == len(triangle)


def test_grid_components_cover_nonzero_cells():
    grid = [
        [1, 1, 0, 1, 1],
        [0, 1, 0, 0, 0],
        [1, 1, 1, 1, 0],
        [1, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
    ]
    regions = grid_components(grid)
    cells = [cell for region in regions for cell in region]
    expected = {(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v}
    assert set(cells) == expected
    assert len(cells) == len(expected)
    assert regions[0][0] == (0, 0)
    assert len(regions) == 2


def test_topological_order_respects_edges():
    edges = [(3, 1), (2, 1), (4, 3)]
    order = topological_order(4, edges)
    pos = {v: i for i, v in enumerate(order)}
    assert sorted(order) == [1, 2, 3, 4]
    for a, b in edges:
        assert pos[a] < pos[b]


def test_topological_order_smallest_first():
    assert topological_order(3, [(3, 1)]) == [2, 3, 1]


def test_topological_order_cycle():
    assert topological_order(2, [(1, 2), (2, 1)]) is None


def test_count_dag_paths():
    assert count_dag_paths(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) == 2
    assert count_dag_paths(4, PATH_EDGES) == 1
    assert count_dag_paths(3, [(2, 3)]) == 0


def test_topological_labels_invariant():
    edges = [(3, 1), (2, 1), (4, 3)]
    labels = topological_labels(4, edges)
    assert sorted(labels) == [1, 2, 3, 4]
    for a, b in edges:
        assert labels[a - 1] < labels[b - 1]


def test_topological_labels_no_edges_is_identity():
    assert topological_labels(3, []) == [1, 2, 3]


def test_topological_labels_cycle():
    assert topological_labels(2, [(1, 2), (2, 1)]) is None
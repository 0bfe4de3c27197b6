import math
import random

import pytest

from algoshelf.shortest_paths import (
    arrow_grid_cost,
    burn_time,
    cheapest_fuel_trip,
    dijkstra,
    floyd_warshall,
    longest_path_score,
    min_edge_reversals,
    min_walls_to_break,
    removal_distance_sums,
    shortest_path_queries,
    zero_one_bfs,
    INF,
)


def _random_graph(seed, n, m, max_w):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n), rng.randint(0, max_w)) for _ in range(m)]


def _matrix(n, edges):
    matrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for a, b, w in edges:
        matrix[a - 1][b - 1] = min(matrix[a - 1][b - 1], w)
        matrix[b - 1][a - 1] = min(matrix[b - 1][a - 1], w)
    return matrix


@pytest.mark.parametrize("seed", range(5))
def test_zero_one_bfs_agrees_with_dijkstra(seed):
    edges = _random_graph(seed, 8, 12, 1)
    assert zero_one_bfs(8, edges, 1) == dijkstra(8, edges, 1)


def test_zero_one_bfs_source_and_unreachable():
    result = zero_one_bfs(3, [(1, 2, 1)], 1)
    assert result[0] == 0
    assert result[1] == 1
    assert result[2] is None


def test_zero_one_bfs_rejects_other_weights():
    with pytest.raises(ValueError):
        zero_one_bfs(2, [(1, 2, 2)], 1)


def test_dijkstra_single_edge():
    assert dijkstra(2, [(1, 2, 7)], 1) == [0, 7]


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_matches_floyd_warshall(seed):
    n = 7
    edges = _random_graph(seed, n, 10, 9)
    dist = floyd_warshall(_matrix(n, edges))
    expected = [None if d == INF else d for d in dist[0]]
    assert dijkstra(n, edges, 1) == expected


def test_dijkstra_rejects_negative_weights():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)


def test_dijkstra_bad_source():
    with pytest.raises(IndexError):
        dijkstra(2, [(1, 2, 1)], 5)


def test_min_edge_reversals_forward_and_backward():
    assert min_edge_reversals(2, [(1, 2)]) == 0
    assert min_edge_reversals(2, [(2, 1)]) == 1
    assert min_edge_reversals(3, [(1, 2)]) is None


def test_min_edge_reversals_prefers_forward_path():
    forward_only = min_edge_reversals(4, [(1, 2), (2, 3), (3, 4)])
    reversed_all = min_edge_reversals(4, [(2, 1), (3, 2), (4, 3)])
    assert forward_only == 0
    assert reversed_all == 3


def test_arrow_grid_following_arrows_is_free():
    grid = [[1, 3], [1, 1]]
    assert arrow_grid_cost(grid) == 0


@pytest.mark.parametrize("seed", range(5))
def test_arrow_grid_cost_bounded_by_manhattan(seed):
    rng = random.Random(seed)
    rows, cols = 4, 5
    grid = [[rng.randint(1, 4) for _ in range(cols)] for _ in range(rows)]
    cost = arrow_grid_cost(grid)
    assert 0 <= cost <= (rows - 1) + (cols - 1)


def test_arrow_grid_empty_raises():
    with pytest.raises(ValueError):
        arrow_grid_cost([])


def test_longest_path_picks_larger_route():
    edges = [(1, 3, 4), (1, 2, 5), (2, 3, 6)]
    assert longest_path_score(3, edges) == 5 + 6


def test_longest_path_positive_cycle():
    edges = [(1, 2, 1), (2, 1, 1), (2, 3, 1)]
    assert longest_path_score(3, edges) is None


def test_longest_path_unreachable():
    assert longest_path_score(3, [(1, 2, 5)]) is None


@pytest.mark.parametrize("seed", range(5))
def test_burn_time_bounds(seed):
    n = 6
    rng = random.Random(seed)
    edges = [(i, i + 1, rng.randint(1, 9)) for i in range(1, n)]
    edges += _random_graph(seed + 100, n, 4, 9)
    result = burn_time(n, edges, 1)
    dist = dijkstra(n, edges, 1)
    assert result % 5 == 0
    assert result >= 10 * max(dist)


def test_burn_time_no_edges():
    with pytest.raises(ValueError):
        burn_time(2, [], 1)


def test_burn_time_unreachable_edge():
    with pytest.raises(ValueError):
        burn_time(4, [(1, 2, 1), (3, 4, 1)], 1)


def test_cheapest_fuel_same_city_is_free():
    assert cheapest_fuel_trip(2, [(1, 2, 3)], [4, 5], 1, 1, 5) == 0


def test_cheapest_fuel_scales_with_prices():
    roads = [(1, 2, 2), (2, 3, 3), (1, 3, 6)]
    base = cheapest_fuel_trip(3, roads, [5, 2, 7], 1, 3, 6)
    doubled = cheapest_fuel_trip(3, roads, [10, 4, 14], 1, 3, 6)
    assert base is not None
    assert doubled == 2 * base


def test_cheapest_fuel_refuels_in_cheaper_city():
    roads = [(1, 2, 1), (2, 3, 5)]
    cheap_middle = cheapest_fuel_trip(3, roads, [9, 1, 9], 1, 3, 10)
    flat = cheapest_fuel_trip(3, roads, [9, 9, 9], 1, 3, 10)
    assert cheap_middle < flat


def test_cheapest_fuel_tank_too_small():
    assert cheapest_fuel_trip(2, [(1, 2, 5)], [1, 1], 1, 2, 4) is None


def test_cheapest_fuel_price_count_checked():
    with pytest.raises(ValueError):
        cheapest_fuel_trip(2, [(1, 2, 1)], [1], 1, 2, 3)


@pytest.mark.parametrize("seed", range(5))
def test_floyd_warshall_triangle_inequality(seed):
    n = 6
    dist = floyd_warshall(_matrix(n, _random_graph(seed, n, 9, 9)))
    for i in range(n):
        assert dist[i][i] == 0
        for j in range(n):
            assert dist[i][j] == dist[j][i]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_keeps_input():
    matrix = [[0, 5, INF], [5, 0, 1], [INF, 1, 0]]
    result = floyd_warshall(matrix)
    assert matrix[0][2] == INF
    assert result[0][2] == 5 + 1


def test_floyd_warshall_not_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


@pytest.mark.parametrize("seed", range(4))
def test_removal_sums_first_is_full_sum(seed):
    rng = random.Random(seed)
    n = 5
    matrix = [[0 if i == j else rng.randint(1, 20) for j in range(n)] for i in range(n)]
    order = list(range(1, n + 1))
    rng.shuffle(order)
    sums = removal_distance_sums(matrix, order)
    assert len(sums) == n
    assert sums[0] == sum(sum(row) for row in floyd_warshall(matrix))
    assert sums[-1] == 0


def test_removal_sums_bad_order():
    with pytest.raises(ValueError):
        removal_distance_sums([[0, 1], [1, 0]], [1, 1])


def test_shortest_path_queries_keep_cheapest_edge():
    answers = shortest_path_queries(3, [(1, 2, 9), (1, 2, 4)], [(1, 2), (2, 1), (1, 1), (1, 3)])
    assert answers == [4, 4, 0, None]


@pytest.mark.parametrize("seed", range(4))
def test_shortest_path_queries_match_dijkstra(seed):
    n = 6
    edges = _random_graph(seed, n, 8, 9)
    queries = [(1, v) for v in range(1, n + 1)]
    assert shortest_path_queries(n, edges, queries) == dijkstra(n, edges, 1)


def test_walls_open_route_around():
    grid = ["S..#.F", ".##...", "......", "##..##", "######", "..##.."]
    assert min_walls_to_break(grid) == 0


def test_walls_must_break_one():
    grid = ["S..#.F", "###...", "......", "##..##", "######", "..##.."]
    assert min_walls_to_break(grid) == 1


def test_walls_count_bounded_by_wall_total():
    grid = ["S###", "####", "###F"]
    result = min_walls_to_break(grid)
    assert 1 <= result <= sum(row.count("#") for row in grid)


def test_walls_missing_markers():
    with pytest.raises(ValueError):
        min_walls_to_break(["S..", "..."])


def test_inf_is_math_inf():
    assert floyd_warshall([[0, math.inf], [math.inf, 0]])[0][1] == math.inf
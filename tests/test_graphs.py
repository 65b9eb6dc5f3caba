import pytest

from puzzlekit.graphs import (
    max_probability,
    min_days_to_disconnect,
    modified_graph_edges,
    num_islands,
    regions_by_slashes,
)


class TestNumIslands:
    def test_all_water(self):
        assert num_islands(["000", "000"]) == 0

    def test_all_land_is_one(self):
        assert num_islands(["111", "111", "111"]) == 1

    def test_diagonals_do_not_connect(self):
        grid = ["101", "010", "101"]
        assert num_islands(grid) == sum(row.count("1") for row in grid)

    def test_accepts_lists_of_chars(self):
        grid = [["1", "0", "1"], ["1", "0", "1"]]
        assert num_islands(grid) == num_islands(["101", "101"])

    def test_empty(self):
        assert num_islands([]) == 0


class TestRegionsBySlashes:
    @pytest.mark.parametrize("size", [1, 2, 4])
    def test_blank_grid_is_one_region(self, size):
        assert regions_by_slashes([" " * size] * size) == 1

    def test_two_slashes_cut_corner(self):
        assert regions_by_slashes([" /", "/ "]) == 2

    def test_diamond(self):
        assert regions_by_slashes(["/\\", "\\/"]) == 5


class TestMaxProbability:
    def test_start_equals_end(self):
        assert max_probability(3, [], [], 1, 1) == 1.0

    def test_disconnected(self):
        assert max_probability(3, [[0, 1]], [0.9], 0, 2) == 0.0

    def test_single_edge(self):
        assert max_probability(2, [[0, 1]], [0.5], 1, 0) == pytest.approx(0.5)

    def test_prefers_longer_but_likelier_path(self):
        result = max_probability(3, [[0, 1], [1, 2], [0, 2]], [0.5, 0.5, 0.2], 0, 2)
        assert result == pytest.approx(0.25)

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            max_probability(2, [[0, 1]], [], 0, 1)


class TestMinDaysToDisconnect:
    def test_no_land(self):
        assert min_days_to_disconnect([[0, 0], [0, 0]]) == 0

    def test_already_two_islands(self):
        assert min_days_to_disconnect([[1, 0, 1]]) == 0

    def test_single_cell(self):
        assert min_days_to_disconnect([[1]]) == 1

    def test_two_cells(self):
        assert min_days_to_disconnect([[1, 1]]) == 2

    def test_input_left_unchanged(self):
        grid = [[1, 1, 1], [0, 1, 0]]
        snapshot = [row[:] for row in grid]
        min_days_to_disconnect(grid)
        assert grid == snapshot


class TestModifiedGraphEdges:
    def test_single_unknown_edge_takes_target(self):
        assert modified_graph_edges(2, [[0, 1, -1]], 0, 1, 5) == [[0, 1, 5]]

    def test_fixed_path_too_short(self):
        assert modified_graph_edges(2, [[0, 1, 2], [0, 1, -1]], 0, 1, 5) == []

    def test_fixed_path_too_long(self):
        assert modified_graph_edges(2, [[0, 1, 9]], 0, 1, 5) == []

    def test_exact_fixed_path_blocks_unknown_edges(self):
        result = modified_graph_edges(2, [[0, 1, 3], [0, 1, -1]], 0, 1, 3)
        assert result == [[0, 1, 3], [0, 1, 2000000000]]

    def test_chain_of_unknowns_sums_to_target(self):
        edges = [[0, 1, -1], [1, 2, -1], [2, 3, -1]]
        result = modified_graph_edges(4, edges, 0, 3, 10)
        weights = [w for _, _, w in result]
        assert sum(weights) == 10
        assert all(w >= 1 for w in weights)

    def test_input_not_mutated(self):
        edges = [[0, 1, -1]]
        modified_graph_edges(2, edges, 0, 1, 7)
        assert edges == [[0, 1, -1]]
"""Tests for adjacency building."""

from pathmark.api.adjacency import NEIGHBOR_STEPS, build_adjacency, edges_from
from pathmark.api.grid import parse_grid
from pathmark.api.models import DIAGONAL_COST, STRAIGHT_COST, Cell


def neighbors(edges):
    return [(edge.node.position, edge.cost) for edge in edges]


class TestEdgesFrom:
    """Tests for a single cell's edges."""

    def test_center_cell_has_eight_edges_in_order(self):
        """Edges come out top, top-left, top-right, bottom, bottom-left, bottom-right, left, right."""
        grid = parse_grid("S..\n...\n..X")
        center = grid.cell_at(1, 1)

        assert neighbors(edges_from(grid, center)) == [
            ((0, 1), 2),
            ((0, 0), 3),
            ((0, 2), 3),
            ((2, 1), 2),
            ((2, 0), 3),
            ((2, 2), 3),
            ((1, 0), 2),
            ((1, 2), 2),
        ]

    def test_corner_cell(self):
        """Positions outside the map contribute nothing."""
        grid = parse_grid("S..\n...\n..X")

        assert neighbors(edges_from(grid, grid.start)) == [
            ((1, 0), 2),
            ((1, 1), 3),
            ((0, 1), 2),
        ]

    def test_walls_excluded(self):
        """No edge leads into a wall."""
        grid = parse_grid("S..\n.B.\n..X")
        edges = edges_from(grid, grid.start)

        assert Cell(1, 1) not in [edge.node for edge in edges]
        assert neighbors(edges) == [((1, 0), 2), ((0, 1), 2)]

    def test_short_row_neighbors_absent(self):
        """Columns past the end of a shorter row are treated as missing."""
        grid = parse_grid("S\n...X")
        below = grid.cell_at(1, 1)

        # (0, 1) and (0, 2) do not exist in the one-character top row
        assert neighbors(edges_from(grid, below)) == [
            ((0, 0), 3),
            ((1, 0), 2),
            ((1, 2), 2),
        ]

    def test_isolated_cell(self):
        """A cell boxed in by walls has no edges."""
        grid = parse_grid("S..BBB\n...B.B\n...BBB\n.....X")

        assert edges_from(grid, grid.cell_at(1, 4)) == []


class TestBuildAdjacency:
    """Tests for the full adjacency mapping."""

    def test_every_cell_has_an_entry(self):
        grid = parse_grid("S.B\nB.X")
        adjacency = build_adjacency(grid)

        assert set(adjacency) == set(grid.cells)

    def test_relation_is_symmetric(self):
        """Adjacency is geometric, so every edge has a matching reverse edge."""
        grid = parse_grid("S.B.\n.BB.\n...X")
        adjacency = build_adjacency(grid)

        for cell, edges in adjacency.items():
            for edge in edges:
                reverse = [e for e in adjacency[edge.node] if e.node == cell]
                assert len(reverse) == 1
                assert reverse[0].cost == edge.cost

    def test_costs(self):
        """Orthogonal steps cost 2 and diagonal steps cost 3."""
        grid = parse_grid("S.\n.X")
        adjacency = build_adjacency(grid)

        for cell, edges in adjacency.items():
            for edge in edges:
                expected = DIAGONAL_COST if cell.is_diagonal_to(edge.node) else STRAIGHT_COST
                assert edge.cost == expected

    def test_step_table(self):
        assert len(NEIGHBOR_STEPS) == 8
        assert sorted(cost for _, _, cost in NEIGHBOR_STEPS) == [2, 2, 2, 2, 3, 3, 3, 3]

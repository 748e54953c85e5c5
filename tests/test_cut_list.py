"""Tests for the per-wall cut list."""

from tilelayout.core.generator import compute_shower_layout
from tilelayout.core.layout import compute_wall_layout
from tilelayout.services.cut_list import build_cut_list, build_cut_lists, describe_cut


class TestCutList:
    def test_describe_unnumbered_tile(self):
        tile = compute_wall_layout(3, 3, 6, 6, 0, "straight").tiles[0]
        assert describe_cut(tile) == (
            'Tile #?: 3" × 3" '
            '(cut left: 1 1/2", right: 1 1/2", top: 1 1/2", bottom: 1 1/2")'
        )

    def test_only_cut_tiles_listed(self):
        layout = compute_wall_layout(12, 12, 3, 3, 0, "straight")
        assert build_cut_list(layout) == []

    def test_lists_follow_install_order(self, straight_params):
        result = compute_shower_layout(straight_params)
        lines = build_cut_list(result.back_wall)
        assert len(lines) == result.back_wall.cut_tiles
        # Bottom-left corner tile is installed first
        assert lines[0].startswith("Tile #1: 2 3/8\"")
        assert "left: 3/4\"" in lines[0]
        assert "bottom: 1\"" in lines[0]

    def test_lists_for_every_wall(self, standard_params):
        result = compute_shower_layout(standard_params)
        lists = build_cut_lists(result)
        assert set(lists) == {"back", "left", "right"}
        assert all(lists.values())

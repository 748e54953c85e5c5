"""Tests for installation numbering.

Tests cover:
- Bottom-up, left-to-right order within a wall
- One shared counter across back, left and right
- Corner pairs sharing a number
- Ledger board bottom course on its own L-track
"""

import pytest

from tilelayout.core.analyzer import identify_corner_pairs
from tilelayout.core.layout import compute_wall_layout
from tilelayout.core.numbering import (
    assign_install_numbers, install_order, plan_install_numbers,
)
from tilelayout.models import WallName, WrapDirection


@pytest.fixture
def walls():
    back = compute_wall_layout(36, 96, 3, 6, 0.125, "straight")
    left = compute_wall_layout(
        36, 96, 3, 6, 0.125, "straight", back.wrap_reference(WrapDirection.LEFT),
    )
    right = compute_wall_layout(
        36, 96, 3, 6, 0.125, "straight", back.wrap_reference(WrapDirection.RIGHT),
    )
    return back, left, right


@pytest.fixture
def pairs(walls):
    return identify_corner_pairs(*walls)


class TestInstallOrder:
    def test_bottom_row_first_then_left_to_right(self, walls):
        back = walls[0]
        ordered = install_order(back.tiles)
        assert ordered[0].y == max(t.y for t in back.tiles)
        assert ordered[0].x == 0
        assert ordered[-1].y == 0
        for prev, curr in zip(ordered, ordered[1:]):
            if abs(prev.y - curr.y) < 0.01:
                assert prev.x < curr.x
            else:
                assert prev.y > curr.y


class TestPlanInstallNumbers:
    def test_does_not_touch_tiles(self, walls, pairs):
        numbers = plan_install_numbers(*walls, pairs)
        assert len(numbers) == sum(w.total_tiles for w in walls)
        assert all(t.install_number is None for w in walls for t in w.tiles)

    def test_ordinary_numbers_are_contiguous(self, walls, pairs):
        numbers = plan_install_numbers(*walls, pairs)
        distinct = set(numbers.values())
        physical = sum(w.total_tiles for w in walls) - len(pairs)
        assert distinct == set(range(1, physical + 1))

    def test_first_tile_is_back_bottom_left(self, walls, pairs):
        back = walls[0]
        numbers = plan_install_numbers(*walls, pairs)
        first = install_order(back.tiles)[0]
        assert numbers[first.key] == 1

    def test_back_wall_numbered_before_side_walls(self, walls, pairs):
        back, left, right = walls
        numbers = plan_install_numbers(*walls, pairs)
        paired_sides = {p.side_tile.key for p in pairs}
        back_max = max(numbers[t.key] for t in back.tiles)
        left_nums = [numbers[t.key] for t in left.tiles if t.key not in paired_sides]
        right_nums = [numbers[t.key] for t in right.tiles if t.key not in paired_sides]
        assert back_max == back.total_tiles
        assert min(left_nums) == back_max + 1
        assert min(right_nums) > max(left_nums)

    def test_strictly_increasing_in_install_order(self, walls, pairs):
        numbers = plan_install_numbers(*walls, pairs)
        paired_sides = {p.side_tile.key for p in pairs}
        sequence = [
            numbers[t.key]
            for layout in walls
            for t in install_order(layout.tiles)
            if t.key not in paired_sides
        ]
        assert sequence == sorted(sequence)
        assert len(sequence) == len(set(sequence))

    def test_without_pairs_every_tile_gets_own_number(self, walls):
        numbers = plan_install_numbers(*walls, [])
        assert sorted(numbers.values()) == list(range(1, sum(w.total_tiles for w in walls) + 1))


class TestAssignInstallNumbers:
    def test_every_tile_numbered(self, walls, pairs):
        assign_install_numbers(*walls, pairs)
        assert all(isinstance(t.install_number, int) for w in walls for t in w.tiles)

    def test_corner_pairs_share_number(self, walls, pairs):
        assign_install_numbers(*walls, pairs)
        assert pairs
        for pair in pairs:
            assert pair.side_tile.install_number == pair.back_tile.install_number

    def test_corner_pair_wall_set_on_both_halves(self, walls, pairs):
        assign_install_numbers(*walls, pairs)
        for pair in pairs:
            assert pair.back_tile.corner_pair_wall == pair.side
            assert pair.side_tile.corner_pair_wall == WallName.BACK

    def test_unpaired_tiles_have_no_corner_wall(self, walls, pairs):
        assign_install_numbers(*walls, pairs)
        paired = {p.back_tile.key for p in pairs} | {p.side_tile.key for p in pairs}
        for layout in walls:
            for tile in layout.tiles:
                if tile.key not in paired:
                    assert tile.corner_pair_wall is None


class TestLedgerBoard:
    def test_bottom_course_gets_ledger_numbers(self, walls, pairs):
        assign_install_numbers(*walls, pairs, use_ledger_board=True)
        bottom_y = max(t.y for t in walls[0].tiles)
        for layout in walls:
            for tile in layout.tiles:
                if abs(tile.y - bottom_y) < 0.01:
                    assert str(tile.install_number).startswith("L")
                else:
                    assert isinstance(tile.install_number, int)

    def test_ledger_track_is_contiguous(self, walls, pairs):
        back, left, right = walls
        assign_install_numbers(*walls, pairs, use_ledger_board=True)
        ledger = {
            t.install_number for w in walls for t in w.tiles
            if isinstance(t.install_number, str)
        }
        # 12 back + 13 per side, minus one shared corner tile per side
        assert ledger == {f"L{i}" for i in range(1, 37)}

    def test_ledger_numbers_follow_back_wall_left_to_right(self, walls, pairs):
        back = walls[0]
        assign_install_numbers(*walls, pairs, use_ledger_board=True)
        bottom = install_order(back.tiles)[:12]
        assert [t.install_number for t in bottom] == [f"L{i}" for i in range(1, 13)]

    def test_upper_courses_start_at_one(self, walls, pairs):
        back = walls[0]
        assign_install_numbers(*walls, pairs, use_ledger_board=True)
        first_upper = install_order(back.tiles)[12]
        assert first_upper.install_number == 1

    def test_ledger_corner_pairs_share_number(self, walls, pairs):
        assign_install_numbers(*walls, pairs, use_ledger_board=True)
        for pair in pairs:
            assert pair.side_tile.install_number == pair.back_tile.install_number

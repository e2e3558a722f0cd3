"""Tests for leftover allocation and gap computation."""

import pytest

from flexterm.distribute import (
    align_offset,
    allocate_leftover,
    justify_gaps,
    largest_remainder,
)
from flexterm.policy import ContentAlign, ContentJustify
from flexterm.size import Fixed, MinMax, Stretch


class TestLargestRemainder:
    """Integer shares that always add up."""

    def test_even_split(self) -> None:
        assert largest_remainder(9, [1, 1, 1]) == [3, 3, 3]

    def test_ties_go_to_earlier_slots(self) -> None:
        assert largest_remainder(10, [1, 1, 1]) == [4, 3, 3]
        assert largest_remainder(5, [1, 1, 1]) == [2, 2, 1]

    def test_weighted(self) -> None:
        assert largest_remainder(7, [1, 2]) == [2, 5]

    def test_largest_fraction_wins(self) -> None:
        # Exact shares 1.2, 2.4, 3.4: floors 1, 2, 3 leave one cell for slot 1
        assert largest_remainder(7, [6, 12, 17]) == [1, 3, 3]

    @pytest.mark.parametrize("total", range(0, 23))
    def test_sum_is_exact(self, total) -> None:
        assert sum(largest_remainder(total, [3, 1, 4, 1, 5])) == total

    def test_nothing_to_split(self) -> None:
        assert largest_remainder(0, [1, 1]) == [0, 0]
        assert largest_remainder(5, []) == []
        assert largest_remainder(5, [0, 0]) == [0, 0]


class TestAllocateLeftover:
    """Leftover goes only to flexible components."""

    def test_fixed_components_get_nothing(self) -> None:
        assert allocate_leftover([Fixed(2), Fixed(1)], 4) == ([0, 0], 4)

    def test_equal_shares_for_stretch(self) -> None:
        assert allocate_leftover([Fixed(1), Stretch(0), Stretch(3)], 5) == ([0, 3, 2], 0)

    def test_capped_minmax_excess_is_redistributed(self) -> None:
        assert allocate_leftover([MinMax(0, 1), Stretch(0)], 5) == ([1, 4], 0)

    def test_all_capped_leaves_remainder(self) -> None:
        assert allocate_leftover([MinMax(1, 2), MinMax(0, 1)], 5) == ([1, 1], 3)

    def test_rigid_minmax_is_not_flexible(self) -> None:
        assert allocate_leftover([MinMax(3, 3), Stretch(1)], 2) == ([0, 2], 0)

    def test_multiple_passes(self) -> None:
        extras, remaining = allocate_leftover([MinMax(0, 1), MinMax(0, 3), Stretch(0)], 10)
        assert extras == [1, 2, 7]
        assert remaining == 0

    def test_minmax_with_more_room_gets_more(self) -> None:
        assert allocate_leftover([MinMax(0, 2), MinMax(0, 6)], 4) == ([1, 3], 0)

    def test_minmax_weighs_its_room_against_stretch(self) -> None:
        assert allocate_leftover([MinMax(0, 5), Stretch(0)], 6) == ([3, 3], 0)

    def test_zero_leftover(self) -> None:
        assert allocate_leftover([Stretch(0), Stretch(0)], 0) == ([0, 0], 0)


class TestJustifyGaps:
    """Gaps before, between and after children."""

    @pytest.mark.parametrize("justify, free, count, expected", [
        (ContentJustify.START, 5, 3, [0, 0, 0, 5]),
        (ContentJustify.STRETCH, 3, 2, [0, 0, 3]),
        (ContentJustify.END, 5, 3, [5, 0, 0, 0]),
        (ContentJustify.CENTER, 5, 3, [3, 0, 0, 2]),
        (ContentJustify.CENTER, 4, 1, [2, 2]),
        (ContentJustify.SPACE_BETWEEN, 5, 3, [0, 3, 2, 0]),
        (ContentJustify.SPACE_BETWEEN, 4, 1, [0, 4]),
        (ContentJustify.SPACE_AROUND, 6, 3, [1, 2, 2, 1]),
        (ContentJustify.SPACE_AROUND, 5, 2, [2, 2, 1]),
        (ContentJustify.SPACE_EVEN, 5, 3, [2, 1, 1, 1]),
        (ContentJustify.SPACE_EVEN, 3, 0, [3]),
    ])
    def test_gaps(self, justify, free, count, expected) -> None:
        assert justify_gaps(justify, free, count) == expected

    @pytest.mark.parametrize("justify", list(ContentJustify))
    def test_gaps_sum_to_free_space(self, justify) -> None:
        for count in range(0, 5):
            for free in range(0, 12):
                gaps = justify_gaps(justify, free, count)
                assert len(gaps) == count + 1
                assert sum(gaps) == free

    def test_no_free_space(self) -> None:
        assert justify_gaps(ContentJustify.SPACE_EVEN, 0, 2) == [0, 0, 0]


class TestAlignOffset:
    """Leading offset across the flow axis."""

    def test_start(self) -> None:
        assert align_offset(ContentAlign.START, 4) == 0

    def test_end(self) -> None:
        assert align_offset(ContentAlign.END, 4) == 4

    def test_center_leading_side_takes_odd_cell(self) -> None:
        assert align_offset(ContentAlign.CENTER, 4) == 2
        assert align_offset(ContentAlign.CENTER, 5) == 3

    def test_stretch_and_no_room(self) -> None:
        assert align_offset(ContentAlign.STRETCH, 3) == 0
        assert align_offset(ContentAlign.END, 0) == 0

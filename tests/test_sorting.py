"""Behaviour of the alternate and lawnmower algorithms."""

from __future__ import annotations

import logging

import pytest

from alternating_disks import DiskRow, SortResult, sort_alternate, sort_lawnmower
from alternating_disks.lawnmower import round_count

ALGORITHMS = [sort_alternate, sort_lawnmower]
LIGHT_COUNTS = range(1, 51)


@pytest.mark.parametrize("sort", ALGORITHMS)
@pytest.mark.parametrize("light_count", LIGHT_COUNTS)
def test_sorts_within_pass_bound(sort, light_count: int) -> None:
    result = sort(DiskRow(light_count))
    assert result.after.is_sorted_blocks()
    assert result.after.total_count() == 2 * light_count


@pytest.mark.parametrize("light_count", LIGHT_COUNTS)
def test_algorithms_agree_and_respect_swap_bounds(light_count: int) -> None:
    row = DiskRow(light_count)
    alternate = sort_alternate(row)
    lawnmower = sort_lawnmower(row)

    assert alternate.after.equals(lawnmower.after)
    assert alternate.swap_count <= light_count * light_count
    assert lawnmower.swap_count <= alternate.swap_count
    # each swap removes exactly one dark-before-light inversion
    assert alternate.swap_count == light_count * (light_count - 1) // 2


@pytest.mark.parametrize("sort", ALGORITHMS)
def test_three_light_disks(sort) -> None:
    row = DiskRow(3)
    assert row.render() == "L D L D L D"
    result = sort(row)
    assert result.after.render() == "L L L D D D"
    assert result.swap_count == 3


@pytest.mark.parametrize("sort", ALGORITHMS)
def test_single_pair_needs_no_swaps(sort) -> None:
    result = sort(DiskRow(1))
    assert result.swap_count == 0
    assert result.after.render() == "L D"


@pytest.mark.parametrize("sort", ALGORITHMS)
@pytest.mark.parametrize("light_count", [1, 2, 5, 12])
def test_sorting_sorted_row_is_a_no_op(sort, light_count: int) -> None:
    sorted_row = sort(DiskRow(light_count)).after
    again = sort(sorted_row)
    assert again.swap_count == 0
    assert again.after == sorted_row


@pytest.mark.parametrize("sort", ALGORITHMS)
def test_input_row_is_not_mutated(sort) -> None:
    row = DiskRow(6)
    before = row.copy()
    result = sort(row)
    assert row == before
    assert row.is_alternating()
    assert result.after is not row


@pytest.mark.parametrize("sort", ALGORITHMS)
def test_sorts_parsed_rows(sort) -> None:
    result = sort(DiskRow.parse("D L D L L D"))
    assert result.after.render() == "L L L D D D"
    assert result.swap_count == 5


def test_lawnmower_round_count() -> None:
    assert [round_count(n) for n in range(1, 7)] == [1, 2, 2, 3, 3, 4]


def test_sorts_log_summary(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="alternating_disks"):
        sort_alternate(DiskRow(3))
        sort_lawnmower(DiskRow(3))
    assert "alternate: 4 passes over 6 disks, 3 swaps" in caplog.text
    assert "lawnmower: 2 rounds over 6 disks, 3 swaps" in caplog.text


def test_sort_result_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        SortResult(after=DiskRow(1), swap_count=-1)


def test_sort_result_is_frozen() -> None:
    result = sort_alternate(DiskRow(2))
    with pytest.raises(AttributeError):
        result.swap_count = 7  # type: ignore[misc]

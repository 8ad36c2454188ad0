from __future__ import annotations

import math

import pytest

from custom_components.exercise_editor.pagination import clamp_page, page_slice, total_pages


@pytest.mark.parametrize("length", [0, 1, 19, 20, 21, 40, 101])
@pytest.mark.parametrize("size", [10, 20, 50, 100])
def test_total_pages_is_ceil(length: int, size: int) -> None:
    expected = math.ceil(length / size) if length else 0
    assert total_pages(length, size) == expected


def test_slices_never_leave_the_range() -> None:
    items = list(range(21))
    assert page_slice(items, 1, 20) == list(range(20))
    assert page_slice(items, 2, 20) == [20]
    assert page_slice(items, 3, 20) == []
    assert page_slice(items, 0, 20) == []
    joined = [x for p in range(1, total_pages(21, 10) + 1) for x in page_slice(items, p, 10)]
    assert joined == items


def test_clamp_page() -> None:
    assert clamp_page(2, 1) == 1
    assert clamp_page(5, 0) == 1
    assert clamp_page(0, 3) == 1
    assert clamp_page(3, 3) == 3


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_page_size_is_rejected_by_both_helpers(size: int) -> None:
    with pytest.raises(ValueError):
        total_pages(21, size)
    with pytest.raises(ValueError):
        total_pages(0, size)
    with pytest.raises(ValueError):
        page_slice(list(range(21)), 1, size)

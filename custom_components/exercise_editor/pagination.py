"""Pagination helpers.

The calculator never clamps on its own: callers clamp the requested page with
clamp_page() before slicing. A non-positive page size is rejected by both
total_pages() and page_slice().
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def _check_page_size(page_size: int) -> int:
    size = int(page_size)
    if size <= 0:
        raise ValueError(f"Page size must be positive, got {page_size!r}")
    return size


def total_pages(length: int, page_size: int) -> int:
    size = _check_page_size(page_size)
    if length <= 0:
        return 0
    return math.ceil(length / size)


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    size = _check_page_size(page_size)
    start = (int(page) - 1) * size
    if start < 0:
        return []
    return list(items[start : start + size])


def clamp_page(page: int, pages: int) -> int:
    """Clamp a page number into [1, pages]; an empty result set stays on page 1."""
    if pages <= 0:
        return 1
    return max(1, min(int(page), int(pages)))

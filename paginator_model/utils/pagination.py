"""Pagination helpers for page counts, index bounds and row slicing."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, TypeVar, Union

import pandas as pd

RowsT = TypeVar("RowsT", bound=Union[pd.DataFrame, Sequence])


def compute_total_pages(total_items: Optional[int], items_per_page: Optional[int]) -> int:
    """Compute the number of pages, or 0 when either sizing input is missing."""
    if not total_items or not items_per_page or total_items <= 0 or items_per_page <= 0:
        return 0
    total_pages = total_items // items_per_page
    if total_items % items_per_page > 0:
        total_pages += 1
    return total_pages


def is_page_in_range(page_number: int, total_pages: int) -> bool:
    """Check a page number against the 1..total_pages range."""
    return 1 <= page_number <= total_pages


def item_index_bounds(page_number: int, items_per_page: Optional[int], total_items: Optional[int]) -> Tuple[int, int]:
    """Return zero-based start and exclusive end item offsets for a page."""
    page_size = items_per_page or 0
    start = (page_number - 1) * page_size
    end = start + page_size
    if total_items is not None and end > total_items:
        end = total_items
    return start, end


def page_slice(rows: RowsT, start: int, end: int) -> RowsT:
    """Slice rows positionally, using iloc for dataframes."""
    if isinstance(rows, (pd.DataFrame, pd.Series)):
        return rows.iloc[start:end]
    return rows[start:end]

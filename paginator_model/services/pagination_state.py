"""Pagination state engine tracking item totals, page size and the current page.

A ``PaginationState`` derives the page count and the item index range of the
current page from ``total_items`` and ``items_per_page``. Page changes are
validated; an invalid page request is rejected by returning False, while an
invalid sizing input raises ``ValidationError``.

Change notifications are delivered synchronously to subscribers in
registration order, after every field has been updated. Handlers may call
back into the state from inside a notification; nothing guards against a
handler that keeps issuing changes forever.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from paginator_model.config import ITEMS_PER_PAGE_FIELD, SNAPSHOT_FIELDS, TOTAL_ITEMS_FIELD
from paginator_model.services.validation_service import (
    SIZING_VALIDATORS,
    require_sizing_value,
    validate_page_request,
)
from paginator_model.utils.events import EventChannel, Subscription
from paginator_model.utils.pagination import (
    RowsT,
    compute_total_pages,
    item_index_bounds,
    page_slice,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageChange:
    """Payload sent to page-change subscribers."""

    previous_page: int
    new_page: int


@dataclass(frozen=True)
class SizingChange:
    """Payload sent to sizing-change subscribers."""

    field: str
    previous_value: Optional[int]
    new_value: int
    total_pages: int


class PaginationState:
    """Holds paging inputs and the current page of a paged collection."""

    def __init__(self, total_items: object = None, items_per_page: object = None) -> None:
        self._total_items: Optional[int] = self._initial_sizing_value(TOTAL_ITEMS_FIELD, total_items)
        self._items_per_page: Optional[int] = self._initial_sizing_value(ITEMS_PER_PAGE_FIELD, items_per_page)
        self._page = 1
        self._last_page: Optional[int] = None
        self._total_pages = compute_total_pages(self._total_items, self._items_per_page)
        self._page_changes: EventChannel[PageChange] = EventChannel("page_change")
        self._sizing_changes: EventChannel[SizingChange] = EventChannel("sizing_change")

    @staticmethod
    def _initial_sizing_value(field: str, value: object) -> Optional[int]:
        if value is None:
            return None
        is_valid, error, normalized = SIZING_VALIDATORS[field](value)
        if not is_valid:
            logger.warning("Ignoring initial %s: %s Paging stays disabled.", field, error)
            return None
        return normalized

    def __repr__(self) -> str:
        return (
            f"PaginationState(total_items={self._total_items!r}, "
            f"items_per_page={self._items_per_page!r}, page={self._page!r}, "
            f"total_pages={self._total_pages!r})"
        )

    @property
    def total_items(self) -> Optional[int]:
        return self._total_items

    @property
    def items_per_page(self) -> Optional[int]:
        return self._items_per_page

    @property
    def page(self) -> int:
        return self._page

    @property
    def last_page(self) -> Optional[int]:
        """Page number held before the most recent accepted page change."""
        return self._last_page

    @property
    def total_pages(self) -> int:
        """Number of pages, 0 while either sizing input is unset or zero."""
        return self._total_pages

    @property
    def item_index_start(self) -> int:
        """Zero-based index of the first item on the current page."""
        return item_index_bounds(self._page, self._items_per_page, self._total_items)[0]

    @property
    def item_index_end(self) -> int:
        """Exclusive end index of the current page, clamped to total_items."""
        return item_index_bounds(self._page, self._items_per_page, self._total_items)[1]

    @property
    def is_paged(self) -> bool:
        return self._total_pages > 0

    def set_total_items(self, total_items: object) -> None:
        """Set the total item count; raises ValidationError if it is not a number >= 0."""
        self._apply_sizing(TOTAL_ITEMS_FIELD, total_items)

    def set_items_per_page(self, items_per_page: object) -> None:
        """Set the page size; raises ValidationError if it is not a number > 0."""
        self._apply_sizing(ITEMS_PER_PAGE_FIELD, items_per_page)

    def set_page(self, page: object) -> bool:
        """Move to another page. Returns False, leaving state untouched, when the page is invalid."""
        is_valid, reason, page_number = validate_page_request(page, self._total_pages, self._items_per_page)
        if not is_valid:
            logger.debug("Rejected page change to %r: %s", page, reason)
            return False
        if page_number == self._page:
            return True
        self._change_page(page_number)
        return True

    def snapshot(self) -> Dict[str, Optional[int]]:
        """Return every stored and derived attribute in one dict."""
        return {field: getattr(self, field) for field in SNAPSHOT_FIELDS}

    def slice(self, rows: RowsT) -> RowsT:
        """Return the rows that fall on the current page."""
        start, end = item_index_bounds(self._page, self._items_per_page, self._total_items)
        return page_slice(rows, start, end)

    def on_page_change(self, handler: Callable[[PageChange], None]) -> Subscription[PageChange]:
        """Subscribe to accepted page changes."""
        return self._page_changes.subscribe(handler)

    def on_sizing_change(self, handler: Callable[[SizingChange], None]) -> Subscription[SizingChange]:
        """Subscribe to accepted total_items / items_per_page changes."""
        return self._sizing_changes.subscribe(handler)

    def teardown(self) -> None:
        """Detach every outstanding subscription."""
        self._page_changes.detach_all()
        self._sizing_changes.detach_all()

    def _apply_sizing(self, field: str, value: object) -> None:
        new_value = require_sizing_value(field, value)
        attribute = f"_{field}"
        previous_value = getattr(self, attribute)
        setattr(self, attribute, new_value)

        self._total_pages = compute_total_pages(self._total_items, self._items_per_page)
        logger.debug(
            "%s changed from %r to %r, total pages now %d",
            field,
            previous_value,
            new_value,
            self._total_pages,
        )
        self._reset_page()
        self._sizing_changes.fire(SizingChange(field, previous_value, new_value, self._total_pages))

    def _reset_page(self) -> None:
        if self.is_paged:
            self.set_page(1)
        elif self._page != 1:
            self._change_page(1)

    def _change_page(self, page_number: int) -> None:
        previous_page = self._page
        self._last_page = previous_page
        self._page = page_number
        logger.debug("Page changed from %d to %d", previous_page, page_number)
        self._page_changes.fire(PageChange(previous_page, page_number))

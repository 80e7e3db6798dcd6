"""Navigation helpers turning paginator controls into page requests."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from paginator_model.config import (
    ALL_OPTION,
    ITEMS_PER_PAGE_FIELD,
    NAV_FIRST,
    NAV_LAST,
    NAV_NEXT,
    NAV_PREV,
    NAVIGATION_TARGETS,
)
from paginator_model.services.pagination_state import PaginationState
from paginator_model.services.validation_service import ValidationError
from paginator_model.utils.helpers import normalize_text, parse_whole_number
from paginator_model.utils.pagination import is_page_in_range

PageOption = Union[int, str]


def resolve_target(
    target: object,
    current_page: int,
    total_pages: int,
    circular: bool = False,
) -> Optional[int]:
    """Resolve a first/prev/next/last keyword or a page number to a page, or None."""
    if not total_pages:
        return None

    keyword = normalize_text(target).lower()
    if keyword == NAV_FIRST:
        return 1
    if keyword == NAV_LAST:
        return total_pages
    if keyword == NAV_PREV:
        if current_page > 1:
            return current_page - 1
        return total_pages if circular else None
    if keyword == NAV_NEXT:
        if current_page < total_pages:
            return current_page + 1
        return 1 if circular else None

    return parse_whole_number(target)


def navigate(state: PaginationState, target: object, circular: bool = False) -> bool:
    """Apply a navigation control to the state; False when nothing was applied."""
    page_number = resolve_target(target, state.page, state.total_pages, circular=circular)
    if page_number is None:
        return False
    return state.set_page(page_number)


def selector_states(current_page: int, total_pages: int, circular: bool = False) -> Dict[str, bool]:
    """Return which first/prev/next/last controls should be enabled."""
    if not total_pages:
        return {target: False for target in NAVIGATION_TARGETS}
    if circular:
        return {target: True for target in NAVIGATION_TARGETS}

    at_start = current_page <= 1
    at_end = current_page >= total_pages
    return {
        NAV_FIRST: not at_start,
        NAV_PREV: not at_start,
        NAV_NEXT: not at_end,
        NAV_LAST: not at_end,
    }


def parse_page_input(raw_value: object, total_pages: int) -> int:
    """Parse a free-text page field, falling back to page 1 on anything unusable."""
    page_number = parse_whole_number(raw_value)
    if page_number is None or not is_page_in_range(page_number, total_pages):
        return 1
    return page_number


def resolve_items_per_page_option(option: object, total_items: Optional[int]) -> Optional[int]:
    """Resolve a rows-per-page choice; the "All" option means every item."""
    if normalize_text(option).lower() == ALL_OPTION.lower():
        return total_items
    return parse_whole_number(option)


def apply_items_per_page_option(state: PaginationState, option: object) -> None:
    """Set the state's page size from a rows-per-page choice."""
    items_per_page = resolve_items_per_page_option(option, state.total_items)
    if items_per_page is None:
        raise ValidationError(
            ITEMS_PER_PAGE_FIELD,
            option,
            f"Rows-per-page option {option!r} does not resolve to a page size.",
        )
    state.set_items_per_page(items_per_page)


def selected_items_per_page_option(state: PaginationState, options: List[PageOption]) -> Optional[PageOption]:
    """Return the option matching the current page size, if any."""
    if state.items_per_page is None:
        return None

    shows_all = state.total_items is not None and state.items_per_page == state.total_items
    all_options = [option for option in options if normalize_text(option).lower() == ALL_OPTION.lower()]
    if shows_all and all_options:
        return all_options[0]

    for option in options:
        if option in all_options:
            continue
        if parse_whole_number(option) == state.items_per_page:
            return option
    return None

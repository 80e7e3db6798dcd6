"""Validation logic for sizing inputs and page requests."""

from __future__ import annotations

from typing import Optional, Tuple

from paginator_model.config import ITEMS_PER_PAGE_FIELD, TOTAL_ITEMS_FIELD
from paginator_model.utils.helpers import is_number, to_whole_number


class ValidationError(ValueError):
    """Raised when a sizing input is not a usable number."""

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


def validate_total_items(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate a total item count: a whole number >= 0."""
    whole_value = to_whole_number(value)
    if whole_value is None:
        return False, f"{TOTAL_ITEMS_FIELD} must be a whole number, got {value!r}.", None
    if whole_value < 0:
        return False, f"{TOTAL_ITEMS_FIELD} cannot be negative, got {value!r}.", None
    return True, "", whole_value


def validate_items_per_page(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate a page size: a whole number > 0."""
    whole_value = to_whole_number(value)
    if whole_value is None:
        return False, f"{ITEMS_PER_PAGE_FIELD} must be a whole number, got {value!r}.", None
    if whole_value <= 0:
        return False, f"{ITEMS_PER_PAGE_FIELD} must be greater than zero, got {value!r}.", None
    return True, "", whole_value


SIZING_VALIDATORS = {
    TOTAL_ITEMS_FIELD: validate_total_items,
    ITEMS_PER_PAGE_FIELD: validate_items_per_page,
}


def require_sizing_value(field: str, value: object) -> int:
    """Validate a sizing input and return it, raising ValidationError on failure."""
    is_valid, error, normalized = SIZING_VALIDATORS[field](value)
    if not is_valid:
        raise ValidationError(field, value, error)
    return normalized


def validate_page_request(
    value: object,
    total_pages: int,
    items_per_page: Optional[int],
) -> Tuple[bool, str, Optional[int]]:
    """Validate a requested page against the current paging state."""
    reasons = []

    page_number = to_whole_number(value)
    if page_number is None:
        reasons.append("page is not a whole number" if is_number(value) else "page is not numeric")
    elif page_number < 1:
        reasons.append("page is below 1")
    if not total_pages:
        reasons.append("paging is disabled (no total pages)")
    if not items_per_page:
        reasons.append("items per page is not set")

    if total_pages and page_number is not None and page_number > total_pages:
        reasons.append(f"page is above the last page ({total_pages})")

    if reasons:
        return False, "; ".join(reasons), None
    return True, "", page_number

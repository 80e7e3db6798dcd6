"""Pagination state engine with page navigation and page-link helpers."""

from paginator_model.services.pagination_state import PageChange, PaginationState, SizingChange
from paginator_model.services.validation_service import ValidationError
from paginator_model.utils.events import Subscription

__all__ = [
    "PageChange",
    "PaginationState",
    "SizingChange",
    "Subscription",
    "ValidationError",
]

__version__ = "1.0.1"

"""Paginator configuration constants."""

ALL_OPTION = "All"
PAGE_OPTIONS = [10, 20, ALL_OPTION]

MAX_PAGE_LINKS = 9999
LINK_LIST_OFFSET = 1
PAGE_LINK_FILLER = "..."
SELECT_PAGE_FORMAT = "Page {page}"

NAV_FIRST = "first"
NAV_PREV = "prev"
NAV_NEXT = "next"
NAV_LAST = "last"
NAVIGATION_TARGETS = [NAV_FIRST, NAV_PREV, NAV_NEXT, NAV_LAST]

TOTAL_ITEMS_FIELD = "total_items"
ITEMS_PER_PAGE_FIELD = "items_per_page"

SNAPSHOT_FIELDS = [
    "total_items",
    "items_per_page",
    "page",
    "last_page",
    "total_pages",
    "item_index_start",
    "item_index_end",
]

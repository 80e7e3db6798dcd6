"""Page-link list building for full and abbreviated paginators."""

from __future__ import annotations

from typing import Dict, List, Tuple

from paginator_model.config import (
    LINK_LIST_OFFSET,
    MAX_PAGE_LINKS,
    PAGE_LINK_FILLER,
    SELECT_PAGE_FORMAT,
)

PageLink = Dict[str, object]


def _page_link(page: int, current_page: int) -> PageLink:
    return {"page": page, "label": str(page), "active": page == current_page}


def _filler_link(filler: str) -> PageLink:
    return {"page": None, "label": filler, "active": False}


def link_window(current_page: int, total_pages: int, link_list_offset: int) -> Tuple[int, int]:
    """Return the first and last page shown around the current page."""
    left = max(1, current_page - link_list_offset)
    right = min(total_pages, current_page + link_list_offset)
    return left, right


def build_page_links(
    current_page: int,
    total_pages: int,
    max_page_links: int = MAX_PAGE_LINKS,
    link_list_offset: int = LINK_LIST_OFFSET,
    always_show_first: bool = False,
    always_show_last: bool = False,
    filler: str = PAGE_LINK_FILLER,
) -> List[PageLink]:
    """Build page links, abbreviating with fillers when there are too many pages.

    With 9 pages, page 5 current and an offset of 1 the abbreviated list reads
    ``... 4 5 6 ...``, or ``1 ... 4 5 6 ... 9`` when the first and last pages
    are pinned.
    """
    if total_pages <= 0:
        return []
    if total_pages <= max_page_links:
        return [_page_link(page, current_page) for page in range(1, total_pages + 1)]

    left, right = link_window(current_page, total_pages, max(link_list_offset, 0))
    links: List[PageLink] = []

    first_hidden = 1
    if always_show_first and left > 1:
        links.append(_page_link(1, current_page))
        first_hidden = 2
    if left > first_hidden:
        links.append(_filler_link(filler))

    links.extend(_page_link(page, current_page) for page in range(left, right + 1))

    last_hidden = total_pages
    if always_show_last and right < total_pages:
        last_hidden = total_pages - 1
    if right < last_hidden:
        links.append(_filler_link(filler))
    if last_hidden < total_pages:
        links.append(_page_link(total_pages, current_page))

    return links


def page_select_options(total_pages: int, label_format: str = SELECT_PAGE_FORMAT) -> List[Tuple[int, str]]:
    """Return (page, label) pairs for a page drop-down."""
    return [(page, label_format.format(page=page)) for page in range(1, total_pages + 1)]


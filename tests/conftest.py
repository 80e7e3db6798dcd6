import pytest

from paginator_model import PaginationState


@pytest.fixture()
def state():
    """500 items at 50 per page."""
    return PaginationState(total_items=500, items_per_page=50)


@pytest.fixture()
def recorder():
    """Collects notification payloads in the order they arrive."""
    events = []

    def record(event):
        events.append(event)

    record.events = events
    return record

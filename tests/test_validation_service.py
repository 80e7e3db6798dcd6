import pytest

from paginator_model.services import validation_service


def test_validate_total_items():
    """Totals must be whole numbers >= 0"""
    assert validation_service.validate_total_items(0) == (True, "", 0)
    assert validation_service.validate_total_items(12.0) == (True, "", 12)
    is_valid, error, value = validation_service.validate_total_items(-1)
    assert not is_valid
    assert "cannot be negative" in error
    assert value is None


def test_validate_items_per_page():
    """Page sizes must be whole numbers > 0"""
    assert validation_service.validate_items_per_page(25) == (True, "", 25)
    assert validation_service.validate_items_per_page(0)[0] is False
    assert validation_service.validate_items_per_page("25")[0] is False


def test_require_sizing_value_raises():
    """Failures carry the field and value"""
    with pytest.raises(validation_service.ValidationError) as excinfo:
        validation_service.require_sizing_value("items_per_page", -3)
    assert excinfo.value.field == "items_per_page"
    assert excinfo.value.value == -3


def test_validate_page_request_reports_every_reason():
    """Both bounds are checked and reported"""
    is_valid, reason, page = validation_service.validate_page_request(0, 0, None)
    assert not is_valid
    assert page is None
    assert "below 1" in reason
    assert "paging is disabled" in reason
    assert "items per page" in reason

    is_valid, reason, _ = validation_service.validate_page_request(12, 10, 50)
    assert not is_valid
    assert "above the last page (10)" in reason


def test_validate_page_request_accepts():
    """In-range pages come back normalized"""
    assert validation_service.validate_page_request(4.0, 10, 50) == (True, "", 4)

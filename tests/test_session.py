"""Unit tests for ReceiptSession."""

# pylint: disable=redefined-outer-name

from unittest.mock import Mock

import pytest

from receipt_scanner.processor import TextRecognitionProcessor
from receipt_scanner.session import ReceiptSession, VendorSelectionError


@pytest.fixture
def processor():
    return Mock(spec=TextRecognitionProcessor)


@pytest.fixture
def session(processor):
    return ReceiptSession(processor)


@pytest.mark.unit
def test_first_vendor_clears(session, processor):
    assert session.select_vendor("Corner Store") is True

    assert session.vendor == "Corner Store"
    processor.clear_accumulated_data.assert_called_once_with()


@pytest.mark.unit
def test_switching_vendor_clears(session, processor):
    session.select_vendor("Corner Store")
    session.select_vendor("Gas Station")

    assert session.vendor == "Gas Station"
    assert processor.clear_accumulated_data.call_count == 2


@pytest.mark.unit
def test_reselecting_vendor_keeps_history(session, processor):
    session.select_vendor("Corner Store")

    assert session.select_vendor(" Corner Store ") is False
    processor.clear_accumulated_data.assert_called_once_with()


@pytest.mark.unit
@pytest.mark.parametrize("name", ["", "   ", None])
def test_empty_vendor_rejected(session, processor, name):
    with pytest.raises(VendorSelectionError, match="vendor name"):
        session.select_vendor(name)

    assert session.vendor is None
    processor.clear_accumulated_data.assert_not_called()

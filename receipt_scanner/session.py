"""
Vendor selection workflow around a text recognition processor.
"""

import logging

from receipt_scanner.processor import TextRecognitionProcessor

logger = logging.getLogger(__name__)


class VendorSelectionError(ValueError):
    """Raised when a vendor cannot be selected."""


class ReceiptSession:
    """
    Tracks the active vendor and drops stale totals when it changes.

    Totals counted for one receipt must not leak into the next, so switching
    vendors clears the extractor's tally before the next frame is processed.
    Reselecting the current vendor keeps the history.
    """

    def __init__(self, processor: TextRecognitionProcessor):
        self.processor = processor
        self.vendor: str | None = None

    def select_vendor(self, name: str) -> bool:
        """
        Make ``name`` the active vendor.

        Args:
            name: Vendor name as entered or picked by the user

        Returns:
            True if the vendor changed and accumulated data was cleared

        Raises:
            VendorSelectionError: If the name is empty
        """
        name = (name or "").strip()
        if not name:
            raise VendorSelectionError("You must set a vendor name!")
        if name == self.vendor:
            return False

        previous = self.vendor
        self.vendor = name
        self.processor.clear_accumulated_data()
        logger.info("Vendor changed from %s to %s", previous, name)
        return True

"""stockdesk error hierarchy."""

from typing import Optional


class StockDeskError(Exception):
    """Base error."""
    pass


class StoreError(StockDeskError):
    """Hosted table read/write failed."""
    pass


class RequisitionError(StoreError):
    """Requisition could not be written.

    `written_ids` lists the requests already stored before the failure.
    """

    def __init__(self, message: str, written_ids: Optional[list[str]] = None):
        super().__init__(message)
        self.written_ids = list(written_ids or [])

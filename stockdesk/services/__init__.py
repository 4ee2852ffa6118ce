from stockdesk.services.alert_service import StockAlertService
from stockdesk.services.base_service import BaseService
from stockdesk.services.part_store import FetchResult, FetchState, PartsLoader, PartStore
from stockdesk.services.requisitions import RequisitionComposer, RequisitionDraft, handoff_query

__all__ = [
    "BaseService",
    "FetchResult",
    "FetchState",
    "PartStore",
    "PartsLoader",
    "RequisitionComposer",
    "RequisitionDraft",
    "StockAlertService",
    "handoff_query",
]

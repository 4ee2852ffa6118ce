from stockdesk.config import Settings
from stockdesk.models.inventory import Part, StockStatus
from stockdesk.stock.alerts import aggregate_alerts, summarize_alerts
from stockdesk.stock.classifier import classify
from stockdesk.stock.selection import BulkSelection

__all__ = [
    "BulkSelection",
    "Part",
    "Settings",
    "StockStatus",
    "aggregate_alerts",
    "classify",
    "summarize_alerts",
]

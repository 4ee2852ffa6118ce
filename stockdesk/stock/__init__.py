from stockdesk.stock.alerts import (
    AlertSummary,
    InventoryMetrics,
    aggregate_alerts,
    alert_preview,
    inventory_metrics,
    summarize_alerts,
)
from stockdesk.stock.classifier import StatusBadge, classify, status_badge
from stockdesk.stock.filters import filter_parts
from stockdesk.stock.selection import BulkSelection, SelectionState

__all__ = [
    "AlertSummary",
    "BulkSelection",
    "InventoryMetrics",
    "SelectionState",
    "StatusBadge",
    "aggregate_alerts",
    "alert_preview",
    "classify",
    "filter_parts",
    "inventory_metrics",
    "status_badge",
    "summarize_alerts",
]

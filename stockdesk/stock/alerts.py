"""Replenishment alert aggregation over a fetched parts snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from stockdesk.models.inventory import Part
from stockdesk.stock.classifier import is_alerting


@dataclass(frozen=True)
class AlertSummary:
    alerts: list[Part] = field(default_factory=list)
    critical_count: int = 0
    low_stock_count: int = 0


@dataclass(frozen=True)
class InventoryMetrics:
    total_parts: int
    critical_count: int
    low_stock_count: int
    stock_value: float

    def to_dict(self) -> dict:
        return {
            "total_parts": self.total_parts,
            "critical_count": self.critical_count,
            "low_stock_count": self.low_stock_count,
            "stock_value": round(self.stock_value, 2),
        }


def _alert_sort_key(part: Part) -> tuple[bool, int]:
    # Stockouts first, then ascending quantity.
    return (part.quantity != 0, part.quantity)


def aggregate_alerts(parts: Iterable[Part]) -> list[Part]:
    """Returns the parts at or below threshold, critical first.

    The sort is stable, so parts with equal keys keep their input order.
    """
    alerts = [p for p in parts if is_alerting(p.quantity, p.min_quantity)]
    return sorted(alerts, key=_alert_sort_key)


def summarize_alerts(alerts: list[Part]) -> AlertSummary:
    """Counts are re-derived from the aggregated list."""
    return AlertSummary(
        alerts=list(alerts),
        critical_count=len([p for p in alerts if p.quantity == 0]),
        low_stock_count=len([p for p in alerts if p.quantity > 0]),
    )


def alert_preview(parts: Iterable[Part], limit: int = 5) -> list[Part]:
    """First `limit` below-threshold parts in catalog order (dashboard widget)."""
    preview = [p for p in parts if is_alerting(p.quantity, p.min_quantity)]
    return preview[:limit]


def inventory_metrics(parts: Iterable[Part]) -> InventoryMetrics:
    parts = list(parts)
    return InventoryMetrics(
        total_parts=len(parts),
        critical_count=len([p for p in parts if p.quantity == 0]),
        low_stock_count=len([p for p in parts if 0 < p.quantity <= (p.min_quantity or 0)]),
        stock_value=sum(p.cost * p.quantity for p in parts),
    )

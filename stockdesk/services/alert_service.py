"""Stock alert page service: fetch, aggregate and summarise."""

from __future__ import annotations

import logging
from typing import Optional

from stockdesk.models.inventory import Part
from stockdesk.services.part_store import FAILURE_NOTICE, PartsLoader, PartStore
from stockdesk.stock.alerts import (
    aggregate_alerts,
    alert_preview,
    inventory_metrics,
    summarize_alerts,
)
from stockdesk.stock.classifier import status_badge

logger = logging.getLogger(__name__)


def serialize_part(part: Part) -> dict:
    data = part.to_dict()
    data["badge"] = status_badge(part).to_dict()
    return data


class StockAlertService:
    """Builds the alert report from a fresh parts snapshot."""

    def __init__(self, store: PartStore):
        self.store = store
        self.loader = PartsLoader(store)
        self._parts: list[Part] = []

    @property
    def parts_by_id(self) -> dict[str, Part]:
        return {p.id: p for p in self._parts}

    def refresh(self) -> bool:
        result = self.loader.load()
        # A failed fetch counts as an empty snapshot.
        self._parts = result.parts if result.ok else []
        return result.ok

    def process(self) -> dict:
        ok = self.refresh()
        summary = summarize_alerts(aggregate_alerts(self._parts))

        logger.info(
            "Stock alerts: %d critical, %d low stock",
            summary.critical_count,
            summary.low_stock_count,
        )
        return {
            "alerts": [serialize_part(p) for p in summary.alerts],
            "critical_count": summary.critical_count,
            "low_stock_count": summary.low_stock_count,
            "failed": not ok,
            "notice": None if ok else FAILURE_NOTICE,
        }

    def dashboard(self, preview_limit: Optional[int] = None) -> dict:
        ok = self.refresh()
        limit = preview_limit if preview_limit is not None else self.store.settings.alert_preview_limit
        return {
            "metrics": inventory_metrics(self._parts).to_dict(),
            "alert_preview": [serialize_part(p) for p in alert_preview(self._parts, limit)],
            "failed": not ok,
            "notice": None if ok else FAILURE_NOTICE,
        }

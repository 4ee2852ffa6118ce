"""Stock status classification.

A part is classified from (quantity, min_quantity) alone:
- quantity == 0                 -> CRITICAL
- 0 < quantity <= min_quantity  -> LOW_STOCK
- otherwise                     -> IN_STOCK

Negative inputs are a caller contract violation and are not checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stockdesk.models.inventory import Part, StockStatus

SORT_WEIGHTS: dict[StockStatus, int] = {
    StockStatus.CRITICAL: 0,
    StockStatus.LOW_STOCK: 1,
    StockStatus.IN_STOCK: 2,
}

STATUS_LABELS: dict[StockStatus, str] = {
    StockStatus.CRITICAL: "Critical",
    StockStatus.LOW_STOCK: "Low stock",
    StockStatus.IN_STOCK: "In stock",
}


@dataclass(frozen=True)
class StatusBadge:
    status: StockStatus
    label: str
    sort_weight: int

    def to_dict(self) -> dict:
        return {"status": self.status.value, "label": self.label, "sortWeight": self.sort_weight}


def classify(quantity: int, min_quantity: Optional[int]) -> StockStatus:
    """Classifies a quantity against its replenishment threshold."""
    threshold = min_quantity or 0
    if quantity == 0:
        return StockStatus.CRITICAL
    if quantity <= threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def is_alerting(quantity: int, min_quantity: Optional[int]) -> bool:
    return classify(quantity, min_quantity) is not StockStatus.IN_STOCK


def status_badge(part: Part) -> StatusBadge:
    status = classify(part.quantity, part.min_quantity)
    return StatusBadge(status=status, label=STATUS_LABELS[status], sort_weight=SORT_WEIGHTS[status])

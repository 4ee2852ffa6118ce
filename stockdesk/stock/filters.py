"""Inventory list filtering by search term, category and stock status."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from stockdesk.models.inventory import Category, Part, StockStatus
from stockdesk.stock.classifier import classify


def _matches_search(part: Part, term: str) -> bool:
    if not term:
        return True
    term = term.lower()
    return term in part.name.lower() or term in part.sku.lower()


def filter_parts(
    parts: Iterable[Part],
    search: str = "",
    category: Optional[Union[Category, str]] = None,
    status: Optional[Union[StockStatus, str]] = None,
) -> list[Part]:
    """Filters parts; empty or None criteria match everything."""
    if isinstance(category, Category):
        category = category.value
    if status:
        status = StockStatus(status)

    result = []
    for part in parts:
        if not _matches_search(part, search):
            continue
        if category and part.category != category:
            continue
        if status and classify(part.quantity, part.min_quantity) is not status:
            continue
        result.append(part)
    return result

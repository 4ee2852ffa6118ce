"""Stock classifier unit tests."""

import pytest

from stockdesk.models.inventory import Part, StockStatus
from stockdesk.stock.classifier import classify, is_alerting, status_badge


class TestClassify:
    @pytest.mark.parametrize("min_quantity", [0, 1, 5, 100])
    def test_zero_quantity_is_critical(self, min_quantity):
        assert classify(0, min_quantity) is StockStatus.CRITICAL

    @pytest.mark.parametrize("quantity,min_quantity", [(1, 1), (1, 5), (3, 5), (5, 5)])
    def test_positive_at_or_below_threshold_is_low(self, quantity, min_quantity):
        assert classify(quantity, min_quantity) is StockStatus.LOW_STOCK

    @pytest.mark.parametrize("quantity,min_quantity", [(1, 0), (6, 5), (100, 50)])
    def test_above_threshold_is_in_stock(self, quantity, min_quantity):
        assert classify(quantity, min_quantity) is StockStatus.IN_STOCK

    def test_missing_threshold_coalesces_to_zero(self):
        assert classify(0, None) is StockStatus.CRITICAL
        assert classify(3, None) is StockStatus.IN_STOCK

    def test_zero_threshold_alerts_only_on_stockout(self):
        assert is_alerting(0, 0) is True
        assert is_alerting(1, 0) is False


class TestStatusBadge:
    def test_badge_weights_follow_severity(self):
        critical = status_badge(Part("a", 0, 5))
        low = status_badge(Part("b", 2, 5))
        ok = status_badge(Part("c", 9, 5))
        assert critical.sort_weight < low.sort_weight < ok.sort_weight

    def test_badge_render_contract(self):
        badge = status_badge(Part("a", 2, 5))
        assert badge.to_dict() == {"status": "low_stock", "label": "Low stock", "sortWeight": 1}


class TestDerivedStatus:
    def test_part_status_is_computed(self):
        assert Part("a", 0, 2).status is StockStatus.CRITICAL
        assert Part("a", 2, 2).status is StockStatus.LOW_STOCK

    def test_status_not_stored_in_row_fields(self):
        part = Part.from_item({"id": "1", "quantity": 4, "min_quantity": 2, "status": "critical"})
        assert part.status is StockStatus.IN_STOCK

    def test_from_item_coalesces_missing_threshold(self):
        assert Part.from_item({"id": "1", "quantity": 0}).min_quantity == 0
        assert Part.from_item({"id": "1", "quantity": 3, "min_quantity": None}).min_quantity == 0

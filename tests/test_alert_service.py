"""Stock alert service tests."""

from botocore.exceptions import ClientError

from stockdesk.services.alert_service import StockAlertService
from stockdesk.services.part_store import FAILURE_NOTICE, PartStore


def _create_service(dynamodb, settings) -> StockAlertService:
    return StockAlertService(PartStore(settings=settings, dynamodb_resource=dynamodb))


ROWS = [
    {"id": "1", "name": "SKF 6204 Bearing", "quantity": 12, "min_quantity": 5, "cost": 45.0},
    {"id": "2", "name": "V-Belt B-45", "quantity": 2, "min_quantity": 4, "cost": 85.5},
    {"id": "3", "name": "Inductive Sensor M12", "quantity": 0, "min_quantity": 2, "cost": 120.0},
    {"id": "5", "name": "Hydraulic Oil ISO 68", "quantity": 40, "min_quantity": 50, "cost": 18.5},
]


class TestProcess:
    def test_report(self, dynamodb, tables, settings):
        service = _create_service(dynamodb, settings)
        tables["Parts"].scan.return_value = {"Items": ROWS}

        report = service.process()

        assert report["failed"] is False
        assert report["notice"] is None
        assert [a["id"] for a in report["alerts"]] == ["3", "2", "5"]
        assert report["critical_count"] == 1
        assert report["low_stock_count"] == 2
        assert report["alerts"][0]["badge"]["status"] == "critical"

    def test_fetch_failure_yields_zero_alerts(self, dynamodb, tables, settings):
        service = _create_service(dynamodb, settings)
        tables["Parts"].scan.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "Scan"
        )

        report = service.process()

        assert report["failed"] is True
        assert report["notice"] == FAILURE_NOTICE
        assert report["alerts"] == []
        assert report["critical_count"] == 0
        assert report["low_stock_count"] == 0


class TestDashboard:
    def test_metrics_and_preview(self, dynamodb, tables, settings):
        service = _create_service(dynamodb, settings)
        tables["Parts"].scan.return_value = {"Items": ROWS}

        dashboard = service.dashboard(preview_limit=2)

        assert dashboard["metrics"]["total_parts"] == 4
        assert dashboard["metrics"]["critical_count"] == 1
        assert dashboard["metrics"]["low_stock_count"] == 2
        assert [p["id"] for p in dashboard["alert_preview"]] == ["2", "3"]

    def test_parts_by_id_after_refresh(self, dynamodb, tables, settings):
        service = _create_service(dynamodb, settings)
        tables["Parts"].scan.return_value = {"Items": ROWS}
        assert service.refresh() is True
        assert set(service.parts_by_id) == {"1", "2", "3", "5"}

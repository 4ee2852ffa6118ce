"""
Stock Alerts MCP Server

Provides tools for stock alerts, part status, inventory search and the
requisition hand-off over the hosted Parts table.
"""

import json
import logging
from typing import Dict, List, Optional

import env_loader  # noqa: F401
from mcp.server import Server
from mcp.types import Tool, TextContent

from stockdesk.config import Settings
from stockdesk.exceptions import RequisitionError
from stockdesk.services.alert_service import StockAlertService, serialize_part
from stockdesk.services.part_store import PartStore
from stockdesk.services.requisitions import RequisitionComposer
from stockdesk.stock.classifier import status_badge
from stockdesk.stock.filters import filter_parts
from stockdesk.stock.selection import BulkSelection

logger = logging.getLogger("stock_alerts_server")

app = Server("stock-alerts")

_services: Dict[str, object] = {}


def configure(store: PartStore, composer: RequisitionComposer) -> None:
    """Installs the services used by the tools (called lazily on first use)."""
    _services["store"] = store
    _services["alerts"] = StockAlertService(store)
    _services["composer"] = composer


def _get(name: str):
    if not _services:
        settings = Settings.from_env()
        configure(PartStore(settings=settings), RequisitionComposer(settings=settings))
    return _services[name]


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False, default=str))]


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="list_stock_alerts", description="List parts at or below their minimum quantity, stockouts first",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_part_status", description="Get a part with its stock status badge",
             inputSchema={"type": "object", "properties": {"part_id": {"type": "string"}}, "required": ["part_id"]}),
        Tool(name="search_inventory", description="Search parts by name/SKU, category and stock status",
             inputSchema={"type": "object", "properties": {
                 "search": {"type": "string"},
                 "category": {"type": "string"},
                 "status": {"type": "string", "enum": ["critical", "low_stock", "in_stock"]},
             }}),
        Tool(name="inventory_metrics", description="Dashboard counts, stock value and alert preview",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="create_requisition", description="Create purchase requests for the selected parts",
             inputSchema={"type": "object", "properties": {
                 "part_ids": {"type": "array", "items": {"type": "string"}},
                 "user_id": {"type": "string"},
             }, "required": ["part_ids"]}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    handlers = {
        "list_stock_alerts": lambda a: list_stock_alerts(),
        "get_part_status": lambda a: get_part_status(a["part_id"]),
        "search_inventory": lambda a: search_inventory(a.get("search", ""), a.get("category"), a.get("status")),
        "inventory_metrics": lambda a: get_inventory_metrics(),
        "create_requisition": lambda a: create_requisition(a["part_ids"], a.get("user_id")),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    return _result(handler(arguments))


# --- Implementation ---

def list_stock_alerts() -> Dict:
    report = _get("alerts").process()
    if report["failed"]:
        return {"success": False, "error": report["notice"], "count": 0, "data": []}
    return {
        "success": True,
        "count": len(report["alerts"]),
        "critical_count": report["critical_count"],
        "low_stock_count": report["low_stock_count"],
        "data": report["alerts"],
    }


def get_part_status(part_id: str) -> Dict:
    part = _get("store").get_part(part_id)
    if part is None:
        return {"success": False, "error": "Part not found"}
    return {"success": True, "data": part.to_dict(), "badge": status_badge(part).to_dict()}


def search_inventory(search: str = "", category: Optional[str] = None, status: Optional[str] = None) -> Dict:
    result = _get("store").fetch_parts()
    if not result.ok:
        return {"success": False, "error": result.error}
    try:
        parts = filter_parts(result.parts, search=search, category=category, status=status)
    except ValueError as e:
        return {"success": False, "error": str(e)}
    return {"success": True, "count": len(parts), "data": [serialize_part(p) for p in parts]}


def get_inventory_metrics() -> Dict:
    dashboard = _get("alerts").dashboard()
    if dashboard["failed"]:
        return {"success": False, "error": dashboard["notice"]}
    return {"success": True, **dashboard}


def create_requisition(part_ids: List[str], user_id: Optional[str] = None) -> Dict:
    composer = _get("composer")
    alerts = _get("alerts")

    selection = BulkSelection()
    for part_id in part_ids:
        if part_id not in selection:
            selection.toggle(part_id)
    draft = selection.commit(composer)
    if draft is None:
        return {"success": False, "error": "No parts selected"}

    if not alerts.refresh():
        return {"success": False, "error": "Could not load parts", "query": draft.query}
    requests = composer.build_requests(draft, alerts.parts_by_id, user_id=user_id)
    skipped = [part_id for part_id in draft.part_ids if part_id not in alerts.parts_by_id]
    if not requests:
        return {"success": False, "error": "No known parts in selection", "query": draft.query, "skipped": skipped}
    try:
        request_ids = composer.submit(requests)
    except RequisitionError as e:
        logger.error("create_requisition failed: %s", e)
        return {
            "success": False,
            "error": str(e),
            "query": draft.query,
            "request_ids": e.written_ids,
        }
    return {"success": True, "query": draft.query, "request_ids": request_ids, "skipped": skipped}


if __name__ == "__main__":
    import asyncio
    from mcp.server.stdio import stdio_server

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())

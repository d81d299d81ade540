"""
Stock Dashboard MCP Server

Provides read-only tools for dashboard statistics, recent movements, chart data
and insights computed from the configured stock repository.
"""

import json
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
import env_loader

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import List

from mcp.server import Server
from mcp.types import Tool, TextContent

from src.analytics.statistics import critical_stock_items
from src.config import Settings, build_repository, configure_logging
from src.models.inventory import StockItem
from src.use_cases import (
    GetChartDataUseCase,
    GetInsightsUseCase,
    GetRecentMovementsUseCase,
    GetStockStatisticsUseCase,
    GetSupplierStatisticsUseCase,
)

app = Server("stock-dashboard")

settings = Settings.from_env()
configure_logging(settings)
logging.getLogger("mcp").setLevel(logging.WARNING)
logger = logging.getLogger("dashboard_server")

repository = build_repository(settings)
if settings.repository_backend == "memory":
    # Bellek içi depo boş başlar; örnek veriyle doldur
    from data_layer.generators.generators import generate_dataset, seed_repository
    seed_repository(repository, generate_dataset())


def _to_json(obj):
    """Dataclass, Enum ve listeleri JSON serializable yapar."""
    if isinstance(obj, StockItem):
        data = _to_json(asdict(obj))
        data["total_value"] = obj.total_value
        data["stock_status"] = obj.stock_status.value
        data["stock_percentage"] = obj.stock_percentage
        return data
    if is_dataclass(obj) and not isinstance(obj, type):
        return _to_json(asdict(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_json(i) for i in obj]
    return obj


def _result(data):
    return [TextContent(type="text", text=json.dumps(_to_json(data), indent=2, ensure_ascii=False))]


@app.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(name="get_stock_statistics", description="Get item counts per stock status and total stock value",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_recent_movements", description="Get the most recent stock entries and exits, newest first",
             inputSchema={"type": "object", "properties": {
                 "limit": {"type": "integer", "default": settings.recent_movements_limit}
             }}),
        Tool(name="get_chart_data", description="Get stock evolution, category/supplier distribution, movement trends and profitability series",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_insights", description="Get textual insights derived from the chart data",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_critical_stock", description="List items that are low on stock or out of stock",
             inputSchema={"type": "object", "properties": {
                 "limit": {"type": "integer", "default": settings.critical_items_limit}
             }}),
        Tool(name="get_supplier_statistics", description="Get supplier counts per status and average rating",
             inputSchema={"type": "object", "properties": {}}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    handlers = {
        "get_stock_statistics": lambda a: GetStockStatisticsUseCase(repository).execute(),
        "get_recent_movements": lambda a: GetRecentMovementsUseCase(repository).execute(
            a.get("limit", settings.recent_movements_limit)
        ),
        "get_chart_data": lambda a: GetChartDataUseCase(repository).execute(),
        "get_insights": lambda a: GetInsightsUseCase(repository).execute(),
        "get_critical_stock": lambda a: critical_stock_items(
            repository.list_stock_items(), a.get("limit", settings.critical_items_limit)
        ),
        "get_supplier_statistics": lambda a: GetSupplierStatisticsUseCase(repository).execute(),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    try:
        return _result({"success": True, "data": handler(arguments or {})})
    except Exception as e:
        logger.error("Tool hatası [%s]: %s", name, e)
        return _result({"success": False, "error": str(e)})


if __name__ == "__main__":
    import asyncio
    from mcp.server.stdio import stdio_server

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())

from src.analytics.chart_data import derive_chart_data
from src.analytics.insights import generate_insights
from src.analytics.movements import recent_movements
from src.analytics.observer import ChartDataSubject
from src.analytics.statistics import (
    compute_statistics,
    compute_supplier_statistics,
    count_suppliers_by_country,
    critical_stock_items,
)

__all__ = [
    "ChartDataSubject",
    "compute_statistics",
    "compute_supplier_statistics",
    "count_suppliers_by_country",
    "critical_stock_items",
    "derive_chart_data",
    "generate_insights",
    "recent_movements",
]

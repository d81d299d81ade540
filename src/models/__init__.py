from src.models.charts import (
    CategoryData,
    ChartData,
    Insight,
    InsightType,
    MovementTrendPoint,
    ProfitabilityPoint,
    StockEvolutionPoint,
    SupplierData,
)
from src.models.dashboard import DashboardError, DashboardLoading, DashboardState, DashboardSuccess
from src.models.inventory import (
    EntryStatus,
    ExitStatus,
    ExitUrgency,
    MovementType,
    RecentMovement,
    StockEntry,
    StockExit,
    StockItem,
    StockItemStatus,
    StockStatistics,
    StockStatus,
    Supplier,
    SupplierReliability,
    SupplierStatistics,
    SupplierStatus,
)

__all__ = [
    "CategoryData",
    "ChartData",
    "DashboardError",
    "DashboardLoading",
    "DashboardState",
    "DashboardSuccess",
    "EntryStatus",
    "ExitStatus",
    "ExitUrgency",
    "Insight",
    "InsightType",
    "MovementTrendPoint",
    "MovementType",
    "ProfitabilityPoint",
    "RecentMovement",
    "StockEntry",
    "StockEvolutionPoint",
    "StockExit",
    "StockItem",
    "StockItemStatus",
    "StockStatistics",
    "StockStatus",
    "Supplier",
    "SupplierData",
    "SupplierReliability",
    "SupplierStatistics",
    "SupplierStatus",
]

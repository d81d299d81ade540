"""Dashboard yükleme durumu: Loading / Success / Error."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from src.models.inventory import RecentMovement, StockItem, StockStatistics


@dataclass(frozen=True)
class DashboardLoading:
    pass


@dataclass(frozen=True)
class DashboardSuccess:
    statistics: StockStatistics
    recent_movements: list[RecentMovement] = field(default_factory=list)
    critical_items: list[StockItem] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardError:
    message: str


DashboardState = Union[DashboardLoading, DashboardSuccess, DashboardError]

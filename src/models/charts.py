"""Grafik ve içgörü veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InsightType(str, Enum):
    POSITIVE = "positive"
    WARNING = "warning"
    NEGATIVE = "negative"
    INFO = "info"


@dataclass(frozen=True)
class StockEvolutionPoint:
    label: str
    total_value: float
    total_items: int


@dataclass(frozen=True)
class CategoryData:
    category: str
    value: float
    item_count: int
    color: str


@dataclass(frozen=True)
class SupplierData:
    supplier_name: str
    value: float
    item_count: int
    color: str


@dataclass(frozen=True)
class MovementTrendPoint:
    label: str
    entries: float
    exits: float
    net_movement: float


@dataclass(frozen=True)
class ProfitabilityPoint:
    category: str
    revenue: float
    cost: float
    profit: float


@dataclass(frozen=True)
class ChartData:
    stock_evolution: list[StockEvolutionPoint] = field(default_factory=list)
    category_distribution: list[CategoryData] = field(default_factory=list)
    supplier_distribution: list[SupplierData] = field(default_factory=list)
    movement_trends: list[MovementTrendPoint] = field(default_factory=list)
    profitability: list[ProfitabilityPoint] = field(default_factory=list)


@dataclass(frozen=True)
class Insight:
    title: str
    description: str
    type: InsightType
    # Açıklamadaki sayının yuvarlanmamış hali
    value: Optional[float] = None

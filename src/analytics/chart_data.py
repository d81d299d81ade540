"""Grafik verisi türetme.

Stok kalemleri, girişler, çıkışlar ve tedarikçilerden beş grafik serisi üretir:
- Stok değeri gelişimi (7 gün)
- Kategori bazlı değer dağılımı
- Tedarikçi bazlı değer dağılımı (ilk 5)
- Giriş/çıkış hareket trendi (4 hafta)
- Kategori bazlı kârlılık (gelir / maliyet)

Gelişim ve trend serileri geçmiş veri saklanmadığı için sabit bir büyüme
eğrisiyle üretilir; gerçek tarihsel veri geldiğinde değiştirilmelidir.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from src.models.charts import (
    CategoryData,
    ChartData,
    MovementTrendPoint,
    ProfitabilityPoint,
    StockEvolutionPoint,
    SupplierData,
)
from src.models.inventory import StockEntry, StockExit, StockItem, Supplier

EVOLUTION_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
TREND_LABELS = ("Week 1", "Week 2", "Week 3", "Week 4")

CATEGORY_PALETTE = ("#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6", "#EC4899")
SUPPLIER_PALETTE = ("#06B6D4", "#84CC16", "#F97316", "#E11D48", "#7C3AED")

MAX_SUPPLIER_GROUPS = 5
TREND_SAMPLE_SIZE = 10


def palette_color(palette: Sequence[str], index: int) -> str:
    return palette[index % len(palette)]


def _group_by(items: Iterable[StockItem], key) -> dict[str, list[StockItem]]:
    # dict ekleme sırasını korur: gruplar ilk görülme sırasındadır
    groups: dict[str, list[StockItem]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def stock_evolution(items: Sequence[StockItem]) -> list[StockEvolutionPoint]:
    total_value = sum(item.total_value for item in items)
    total_items = len(items)

    return [
        StockEvolutionPoint(
            label=label,
            total_value=total_value * (0.85 + i * 0.02),
            total_items=math.floor(total_items * (0.9 + i * 0.015)),
        )
        for i, label in enumerate(EVOLUTION_LABELS)
    ]


def category_distribution(items: Iterable[StockItem]) -> list[CategoryData]:
    groups = _group_by(items, lambda item: item.category)
    return [
        CategoryData(
            category=category,
            value=sum(item.total_value for item in group),
            item_count=len(group),
            color=palette_color(CATEGORY_PALETTE, i),
        )
        for i, (category, group) in enumerate(groups.items())
    ]


def supplier_distribution(items: Iterable[StockItem]) -> list[SupplierData]:
    """Tedarikçi adına göre gruplar; değere göre değil ilk görülme sırasına göre ilk 5 grup."""
    groups = _group_by(items, lambda item: item.supplier.name)
    selected = list(groups.items())[:MAX_SUPPLIER_GROUPS]
    return [
        SupplierData(
            supplier_name=name,
            value=sum(item.total_value for item in group),
            item_count=len(group),
            color=palette_color(SUPPLIER_PALETTE, i),
        )
        for i, (name, group) in enumerate(selected)
    ]


def movement_trends(
    entries: Sequence[StockEntry], exits: Sequence[StockExit]
) -> list[MovementTrendPoint]:
    entries_base = sum(e.total_value for e in entries[:TREND_SAMPLE_SIZE])
    exits_base = sum(x.total_value for x in exits[:TREND_SAMPLE_SIZE])

    points = []
    for i, label in enumerate(TREND_LABELS):
        entries_value = entries_base * (0.7 + i * 0.1)
        exits_value = exits_base * (0.6 + i * 0.15)
        points.append(
            MovementTrendPoint(
                label=label,
                entries=entries_value,
                exits=exits_value,
                net_movement=entries_value - exits_value,
            )
        )
    return points


def profitability(
    items: Iterable[StockItem],
    entries: Sequence[StockEntry],
    exits: Sequence[StockExit],
) -> list[ProfitabilityPoint]:
    """Kategori başına gelir (çıkışlar) ve maliyet (girişler) toplamı."""
    points = []
    for category, group in _group_by(items, lambda item: item.category).items():
        item_ids = {item.id for item in group}
        revenue = sum(x.total_value for x in exits if x.stock_item_id in item_ids)
        cost = sum(e.total_value for e in entries if e.stock_item_id in item_ids)
        points.append(
            ProfitabilityPoint(
                category=category,
                revenue=revenue,
                cost=cost,
                profit=revenue - cost,
            )
        )
    return points


def derive_chart_data(
    items: Iterable[StockItem],
    entries: Iterable[StockEntry],
    exits: Iterable[StockExit],
    suppliers: Iterable[Supplier],
) -> ChartData:
    """Dört kaynak koleksiyondan tüm grafik serilerini üretir.

    `suppliers` şu an hiçbir seriye doğrudan girmez (tedarikçi adı kalemin
    üzerinden okunur), ancak değişikliklerinin yeniden hesaplamayı tetiklemesi
    için imzada yer alır.
    """
    items = list(items)
    entries = list(entries)
    exits = list(exits)

    return ChartData(
        stock_evolution=stock_evolution(items),
        category_distribution=category_distribution(items),
        supplier_distribution=supplier_distribution(items),
        movement_trends=movement_trends(entries, exits),
        profitability=profitability(items, entries, exits),
    )

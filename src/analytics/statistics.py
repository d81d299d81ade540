"""Stok istatistikleri - dashboard özet sayıları.

Her çağrıda yeniden hesaplanır; sonuçlar önbelleğe alınmaz.
"""

from __future__ import annotations

from typing import Iterable

from src.models.inventory import (
    StockItem,
    StockStatistics,
    StockStatus,
    Supplier,
    SupplierStatistics,
    SupplierStatus,
)

CRITICAL_STATUSES = (StockStatus.LOW_STOCK, StockStatus.OUT_OF_STOCK)


def compute_statistics(items: Iterable[StockItem]) -> StockStatistics:
    """Stok kalemlerinden durum bazlı sayıları ve toplam stok değerini hesaplar."""
    counts = {status: 0 for status in StockStatus}
    total_items = 0
    total_value = 0.0

    for item in items:
        counts[item.stock_status] += 1
        total_items += 1
        total_value += item.total_value

    return StockStatistics(
        total_items=total_items,
        items_in_stock=counts[StockStatus.IN_STOCK],
        items_low_stock=counts[StockStatus.LOW_STOCK],
        items_out_of_stock=counts[StockStatus.OUT_OF_STOCK],
        items_overstocked=counts[StockStatus.OVERSTOCKED],
        total_stock_value=total_value,
    )


def critical_stock_items(items: Iterable[StockItem], limit: int = 5) -> list[StockItem]:
    """Düşük stokta veya tükenmiş ilk `limit` kalemi girdi sırasıyla döndürür."""
    if limit <= 0:
        return []
    critical: list[StockItem] = []
    for item in items:
        if item.stock_status in CRITICAL_STATUSES:
            critical.append(item)
            if len(critical) == limit:
                break
    return critical


def compute_supplier_statistics(suppliers: Iterable[Supplier]) -> SupplierStatistics:
    suppliers = list(suppliers)
    if not suppliers:
        return SupplierStatistics()

    return SupplierStatistics(
        total_suppliers=len(suppliers),
        active_suppliers=sum(1 for s in suppliers if s.status == SupplierStatus.ACTIVE),
        pending_suppliers=sum(1 for s in suppliers if s.status == SupplierStatus.PENDING),
        blocked_suppliers=sum(1 for s in suppliers if s.status == SupplierStatus.BLOCKED),
        average_rating=sum(s.rating for s in suppliers) / len(suppliers),
    )


def count_suppliers_by_country(suppliers: Iterable[Supplier], unknown: str = "Unknown") -> dict[str, int]:
    """Ülke bazında tedarikçi sayısı; ülkesi olmayanlar `unknown` altında toplanır."""
    result: dict[str, int] = {}
    for supplier in suppliers:
        country = supplier.country or unknown
        result[country] = result.get(country, 0) + 1
    return result

"""Dashboard istatistik unit testleri."""

from src.analytics.statistics import (
    compute_statistics,
    compute_supplier_statistics,
    count_suppliers_by_country,
    critical_stock_items,
)
from src.models.inventory import StockItem, StockStatistics, Supplier, SupplierStatus


def _item(
    item_id: int, current_stock: int, unit_price: float = 2.0, min_stock: int = 10, max_stock: int = 100
) -> StockItem:
    return StockItem(
        id=item_id,
        name=f"Item {item_id}",
        category="Tools",
        current_stock=current_stock,
        min_stock=min_stock,
        max_stock=max_stock,
        unit_price=unit_price,
        supplier=Supplier(id=1, name="Acme"),
    )


class TestComputeStatistics:
    def test_empty_returns_zeros(self):
        assert compute_statistics([]) == StockStatistics()

    def test_one_item_per_status(self):
        stats = compute_statistics([_item(1, 0), _item(2, 5), _item(3, 50)])
        assert stats.total_items == 3
        assert stats.items_out_of_stock == 1
        assert stats.items_low_stock == 1
        assert stats.items_in_stock == 1
        assert stats.items_overstocked == 0
        assert stats.total_stock_value == 110.0

    def test_out_in_and_overstocked(self):
        items = [
            _item(1, 0, min_stock=1, max_stock=20),
            _item(2, 5, min_stock=1, max_stock=20),
            _item(3, 50, min_stock=10, max_stock=40),
        ]
        stats = compute_statistics(items)
        assert stats.total_items == 3
        assert stats.items_out_of_stock == 1
        assert stats.items_in_stock == 1
        assert stats.items_overstocked == 1
        assert stats.items_low_stock == 0

    def test_status_counts_sum_to_total(self):
        items = [_item(i, stock) for i, stock in enumerate([0, 3, 10, 11, 99, 100, 101, 500])]
        stats = compute_statistics(items)
        assert (
            stats.items_in_stock + stats.items_low_stock
            + stats.items_out_of_stock + stats.items_overstocked
        ) == stats.total_items == 8

    def test_accepts_generator(self):
        stats = compute_statistics(_item(i, 50) for i in range(4))
        assert stats.total_items == 4


class TestCriticalStockItems:
    def test_returns_low_and_out_in_input_order(self):
        items = [_item(1, 50), _item(2, 0), _item(3, 5), _item(4, 200)]
        assert [i.id for i in critical_stock_items(items)] == [2, 3]

    def test_respects_limit(self):
        items = [_item(i, 0) for i in range(10)]
        assert len(critical_stock_items(items, limit=5)) == 5

    def test_zero_limit_returns_empty(self):
        assert critical_stock_items([_item(1, 0)], limit=0) == []


class TestSupplierStatistics:
    def test_empty_returns_zeros(self):
        stats = compute_supplier_statistics([])
        assert stats.total_suppliers == 0
        assert stats.average_rating == 0.0

    def test_counts_and_average(self):
        suppliers = [
            Supplier(id=1, name="A", rating=4.0, status=SupplierStatus.ACTIVE),
            Supplier(id=2, name="B", rating=2.0, status=SupplierStatus.PENDING),
            Supplier(id=3, name="C", rating=3.0, status=SupplierStatus.BLOCKED),
            Supplier(id=4, name="D", rating=5.0, status=SupplierStatus.ACTIVE),
        ]
        stats = compute_supplier_statistics(suppliers)
        assert stats.total_suppliers == 4
        assert stats.active_suppliers == 2
        assert stats.pending_suppliers == 1
        assert stats.blocked_suppliers == 1
        assert stats.average_rating == 3.5

    def test_count_by_country_groups_unknown(self):
        suppliers = [
            Supplier(id=1, name="A", country="France"),
            Supplier(id=2, name="B", country="France"),
            Supplier(id=3, name="C"),
        ]
        assert count_suppliers_by_country(suppliers) == {"France": 2, "Unknown": 1}

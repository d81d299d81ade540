"""Grafik verisi türetme unit testleri."""

import math

import pytest

from src.analytics.chart_data import (
    CATEGORY_PALETTE,
    SUPPLIER_PALETTE,
    category_distribution,
    derive_chart_data,
    movement_trends,
    profitability,
    stock_evolution,
    supplier_distribution,
)
from src.models.inventory import StockEntry, StockExit, StockItem, Supplier


def _item(item_id: int, category: str, value: float, supplier: str = "Acme") -> StockItem:
    return StockItem(
        id=item_id,
        name=f"Item {item_id}",
        category=category,
        current_stock=1,
        min_stock=0,
        max_stock=10,
        unit_price=value,
        supplier=Supplier(id=1, name=supplier),
    )


def _entry(item_id: int, quantity: int, unit_price: float) -> StockEntry:
    return StockEntry(stock_item_id=item_id, quantity=quantity, unit_price=unit_price, date="2025-01-01T10:00:00")


def _exit(item_id: int, quantity: int, unit_price: float) -> StockExit:
    return StockExit(
        stock_item_id=item_id, quantity=quantity, unit_price=unit_price, date="2025-01-01T10:00:00", customer="Shop"
    )


class TestStockEvolution:
    def test_seven_points_follow_growth_curve(self):
        items = [_item(i, "A", 10.0) for i in range(10)]
        points = stock_evolution(items)
        assert [p.label for p in points] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        for i, point in enumerate(points):
            assert point.total_value == pytest.approx(100.0 * (0.85 + i * 0.02))
            assert point.total_items == math.floor(10 * (0.9 + i * 0.015))

    def test_empty_items_gives_zero_points(self):
        points = stock_evolution([])
        assert len(points) == 7
        assert all(p.total_value == 0 and p.total_items == 0 for p in points)


class TestCategoryDistribution:
    def test_groups_in_first_seen_order_with_palette(self):
        items = [_item(1, "A", 100.0), _item(2, "B", 25.0), _item(3, "A", 50.0)]
        data = category_distribution(items)
        assert [(c.category, c.value, c.item_count) for c in data] == [("A", 150.0, 2), ("B", 25.0, 1)]
        assert [c.color for c in data] == ["#3B82F6", "#10B981"]

    def test_palette_cycles(self):
        items = [_item(i, f"C{i}", 1.0) for i in range(len(CATEGORY_PALETTE) + 1)]
        data = category_distribution(items)
        assert data[-1].color == CATEGORY_PALETTE[0]

    def test_values_partition_total(self):
        items = [_item(i, "ABC"[i % 3], float(i + 1)) for i in range(9)]
        data = category_distribution(items)
        assert sum(c.value for c in data) == pytest.approx(sum(i.total_value for i in items))


class TestSupplierDistribution:
    def test_at_most_five_groups(self):
        items = [_item(i, "A", 10.0, supplier=f"S{i}") for i in range(7)]
        data = supplier_distribution(items)
        assert [s.supplier_name for s in data] == ["S0", "S1", "S2", "S3", "S4"]
        assert [s.color for s in data] == list(SUPPLIER_PALETTE)

    def test_groups_by_supplier_name(self):
        items = [_item(1, "A", 10.0, "X"), _item(2, "B", 5.0, "Y"), _item(3, "C", 1.0, "X")]
        data = supplier_distribution(items)
        assert [(s.supplier_name, s.value, s.item_count) for s in data] == [("X", 11.0, 2), ("Y", 5.0, 1)]


class TestMovementTrends:
    def test_four_weeks_scaled_from_first_ten(self):
        entries = [_entry(1, 1, 10.0) for _ in range(12)]
        exits = [_exit(1, 1, 5.0) for _ in range(3)]
        points = movement_trends(entries, exits)
        assert [p.label for p in points] == ["Week 1", "Week 2", "Week 3", "Week 4"]
        for i, point in enumerate(points):
            assert point.entries == pytest.approx(100.0 * (0.7 + i * 0.1))
            assert point.exits == pytest.approx(15.0 * (0.6 + i * 0.15))
            assert point.net_movement == pytest.approx(point.entries - point.exits)

    def test_no_movements(self):
        points = movement_trends([], [])
        assert all(p.entries == 0 and p.exits == 0 and p.net_movement == 0 for p in points)


class TestProfitability:
    def test_revenue_minus_cost_per_category(self):
        items = [_item(1, "A", 10.0), _item(2, "B", 10.0)]
        entries = [_entry(1, 10, 6.0), _entry(2, 5, 4.0)]
        exits = [_exit(1, 4, 10.0), _exit(1, 1, 10.0)]
        points = profitability(items, entries, exits)
        assert [(p.category, p.revenue, p.cost, p.profit) for p in points] == [
            ("A", 50.0, 60.0, -10.0),
            ("B", 0.0, 20.0, -20.0),
        ]


class TestDeriveChartData:
    def test_empty_sources(self):
        chart = derive_chart_data([], [], [], [])
        assert chart.category_distribution == []
        assert chart.supplier_distribution == []
        assert chart.profitability == []
        assert len(chart.stock_evolution) == 7
        assert len(chart.movement_trends) == 4

    def test_accepts_iterators(self):
        chart = derive_chart_data(iter([_item(1, "A", 3.0)]), iter([]), iter([]), iter([]))
        assert chart.category_distribution[0].value == 3.0
        assert chart.profitability[0].category == "A"

"""Use-case unit testleri: doğrulama, stok kontrolü ve dashboard yükleme."""

import threading
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from src.models.dashboard import DashboardError, DashboardSuccess
from src.models.inventory import EntryStatus, ExitUrgency, StockEntry, Supplier, SupplierStatus
from src.repository import InMemoryStockRepository
from src.use_cases import (
    AddStockEntryUseCase,
    AddStockExitUseCase,
    CreateStockItemUseCase,
    CreateSupplierUseCase,
    GetChartDataUseCase,
    GetInsightsUseCase,
    GetRecentMovementsUseCase,
    GetStockStatisticsUseCase,
    GetSupplierStatisticsUseCase,
    GetSuppliersByCountryUseCase,
    LoadDashboardUseCase,
    UpdateStockItemUseCase,
    UpdateSupplierUseCase,
)

NOW = "2025-03-01T12:00:00"


def _clock() -> str:
    return NOW


def _repository_with_stock(quantity: int = 20):
    """Bir tedarikçi, bir kalem ve `quantity` adet girişi olan depo."""
    repo = InMemoryStockRepository()
    supplier_id = repo.insert_supplier(Supplier(id=0, name="Acme", rating=4.0, country="France"))
    item_id = repo.insert_stock_item("Widget", "Tools", None, 5, 50, 2.0, supplier_id)
    if quantity:
        repo.insert_stock_entry(StockEntry(
            stock_item_id=item_id, quantity=quantity, unit_price=1.0,
            date="2025-01-01T10:00:00", supplier_id=supplier_id, status=EntryStatus.RECEIVED,
        ))
    return repo, supplier_id, item_id


class TestCreateStockItem:
    def test_creates_item(self):
        repo, supplier_id, _ = _repository_with_stock(0)
        item_id = CreateStockItemUseCase(repo).execute("  Gadget ", "Tools", 1, 10, 3.0, supplier_id)
        assert repo.get_stock_item(item_id).name == "Gadget"

    @pytest.mark.parametrize("kwargs, message", [
        ({"name": " "}, "Product name cannot be blank"),
        ({"category": ""}, "Category cannot be blank"),
        ({"min_stock": -1}, "Minimum stock cannot be negative"),
        ({"max_stock": 1}, "Maximum stock must be greater than minimum stock"),
        ({"unit_price": -0.5}, "Unit price cannot be negative"),
    ])
    def test_invalid_fields_leave_store_untouched(self, kwargs, message):
        repo, supplier_id, _ = _repository_with_stock(0)
        args = {"name": "Gadget", "category": "Tools", "min_stock": 1, "max_stock": 10,
                "unit_price": 3.0, "supplier_id": supplier_id}
        args.update(kwargs)
        with pytest.raises(ValueError, match=message):
            CreateStockItemUseCase(repo).execute(**args)
        assert len(repo.list_stock_items()) == 1

    def test_unknown_supplier(self):
        repo = InMemoryStockRepository()
        with pytest.raises(ValueError, match="Supplier not found"):
            CreateStockItemUseCase(repo).execute("Gadget", "Tools", 1, 10, 3.0, 99)

    def test_update_to_unknown_supplier_is_rejected(self):
        repo, _, item_id = _repository_with_stock(0)
        item = repo.get_stock_item(item_id)
        with pytest.raises(ValueError, match="Supplier not found: 99"):
            UpdateStockItemUseCase(repo).execute(replace(item, supplier=Supplier(id=99, name="Ghost")))
        assert repo.get_stock_item(item_id).supplier.name == "Acme"
        assert len(repo.list_stock_items()) == 1

    def test_update_item_fields(self):
        repo, _, item_id = _repository_with_stock(0)
        item = repo.get_stock_item(item_id)
        UpdateStockItemUseCase(repo).execute(replace(item, name="Widget Pro", unit_price=4.0))
        assert repo.get_stock_item(item_id).name == "Widget Pro"


class TestStockMovements:
    def test_add_entry_is_pending_and_timestamped(self):
        repo, supplier_id, item_id = _repository_with_stock(0)
        AddStockEntryUseCase(repo, clock=_clock).execute(item_id, 5, 1.2, supplier_id, batch_number="B-1")
        entry = repo.list_stock_entries()[0]
        assert entry.status == EntryStatus.PENDING
        assert entry.date == NOW
        assert entry.batch_number == "B-1"
        assert repo.get_stock_item(item_id).current_stock == 5

    def test_entry_requires_positive_quantity(self):
        repo, supplier_id, item_id = _repository_with_stock(0)
        with pytest.raises(ValueError, match="Quantity must be positive"):
            AddStockEntryUseCase(repo).execute(item_id, 0, 1.0, supplier_id)
        assert repo.list_stock_entries() == []

    def test_entry_for_unknown_product(self):
        repo = InMemoryStockRepository()
        with pytest.raises(ValueError, match="Product not found"):
            AddStockEntryUseCase(repo).execute(1, 1, 1.0, 1)

    def test_entry_for_unknown_supplier(self):
        repo, _, item_id = _repository_with_stock(0)
        with pytest.raises(ValueError, match="Supplier not found: 42"):
            AddStockEntryUseCase(repo).execute(item_id, 3, 1.0, 42)
        assert repo.list_stock_entries() == []

    def test_add_exit_reduces_stock(self):
        repo, _, item_id = _repository_with_stock(20)
        AddStockExitUseCase(repo, clock=_clock).execute(item_id, 8, 3.0, "Shop", urgency=ExitUrgency.HIGH)
        assert repo.get_stock_item(item_id).current_stock == 12
        assert repo.list_stock_exits()[0].urgency == ExitUrgency.HIGH

    def test_insufficient_stock(self):
        repo, _, item_id = _repository_with_stock(5)
        with pytest.raises(ValueError, match="Insufficient stock. Available: 5"):
            AddStockExitUseCase(repo).execute(item_id, 6, 3.0, "Shop")
        assert repo.list_stock_exits() == []

    def test_exit_requires_customer(self):
        repo, _, item_id = _repository_with_stock(5)
        with pytest.raises(ValueError, match="Customer cannot be blank"):
            AddStockExitUseCase(repo).execute(item_id, 1, 3.0, "  ")


class TestSuppliers:
    def test_create_supplier_with_details(self):
        repo = InMemoryStockRepository()
        supplier_id = CreateSupplierUseCase(repo, clock=_clock).execute(
            "Nordic", rating=4.2, email="sales@nordic.example", country="Sweden"
        )
        supplier = repo.get_supplier(supplier_id)
        assert supplier.email == "sales@nordic.example"
        assert supplier.created_at == NOW

    def test_rating_out_of_range(self):
        repo = InMemoryStockRepository()
        with pytest.raises(ValueError, match="Rating must be between 0 and 5"):
            CreateSupplierUseCase(repo).execute("Nordic", rating=5.5)
        assert repo.list_suppliers() == []

    def test_update_sets_updated_at(self):
        repo, supplier_id, _ = _repository_with_stock(0)
        supplier = repo.get_supplier(supplier_id)
        UpdateSupplierUseCase(repo, clock=_clock).execute(
            Supplier(id=supplier.id, name="Acme", status=SupplierStatus.BLOCKED)
        )
        assert repo.get_supplier(supplier_id).updated_at == NOW

    def test_statistics_and_countries(self):
        repo, _, _ = _repository_with_stock(0)
        repo.insert_supplier(Supplier(id=0, name="Beta", rating=2.0, status=SupplierStatus.PENDING))
        stats = GetSupplierStatisticsUseCase(repo).execute()
        assert stats.total_suppliers == 2
        assert stats.pending_suppliers == 1
        assert stats.average_rating == 3.0
        assert GetSuppliersByCountryUseCase(repo).execute() == {"France": 1, "Unknown": 1}


class TestDashboardQueries:
    def test_statistics(self):
        repo, _, _ = _repository_with_stock(20)
        stats = GetStockStatisticsUseCase(repo).execute()
        assert stats.total_items == 1
        assert stats.items_in_stock == 1
        assert stats.total_stock_value == 40.0

    def test_recent_movements(self):
        repo, _, item_id = _repository_with_stock(20)
        AddStockExitUseCase(repo, clock=_clock).execute(item_id, 2, 3.0, "Shop")
        movements = GetRecentMovementsUseCase(repo).execute(limit=5)
        assert [m.description for m in movements] == [
            "Exit: 2 x Widget for Shop",
            "Entry: 20 x Widget from Acme",
        ]

    def test_insights(self):
        repo, _, _ = _repository_with_stock(20)
        titles = [i.title for i in GetInsightsUseCase(repo).execute()]
        assert "Dominant category" in titles


class TestChartDataWatch:
    def test_watch_emits_once_primed(self):
        repo, _, _ = _repository_with_stock(20)
        received = []
        GetChartDataUseCase(repo).watch(received.append)
        assert len(received) >= 1
        assert received[-1].category_distribution[0].value == 40.0

    def test_write_pushes_new_chart_data(self):
        repo, _, item_id = _repository_with_stock(20)
        use_case = GetChartDataUseCase(repo)
        received = []
        use_case.watch(received.append)
        before = len(received)

        AddStockExitUseCase(repo).execute(item_id, 5, 3.0, "Shop")

        assert len(received) > before
        assert received[-1].category_distribution[0].value == 30.0
        assert received[-1].profitability[0].revenue == 15.0

    def test_close_stops_updates(self):
        repo, _, item_id = _repository_with_stock(20)
        use_case = GetChartDataUseCase(repo)
        received = []
        use_case.watch(received.append)
        use_case.close()
        count = len(received)
        AddStockExitUseCase(repo).execute(item_id, 1, 3.0, "Shop")
        assert len(received) == count

    def test_concurrent_writes_publish_latest_snapshot(self):
        """Eşzamanlı iki çıkışta eski snapshot en son yayınlanmamalı."""
        repo, _, item_id = _repository_with_stock(20)
        original_list_exits = repo.list_stock_exits
        snapshotted = threading.Event()
        release = threading.Event()
        armed = []

        def slow_list_exits():
            exits = original_list_exits()
            if armed and not snapshotted.is_set():
                # İlk okuma snapshot alındıktan sonra bekletilir
                snapshotted.set()
                release.wait(timeout=2)
            return exits

        repo.list_stock_exits = slow_list_exits
        use_case = GetChartDataUseCase(repo)
        use_case.watch(lambda chart: None)
        armed.append(True)

        first = threading.Thread(target=AddStockExitUseCase(repo).execute, args=(item_id, 5, 3.0, "Shop"))
        second = threading.Thread(target=AddStockExitUseCase(repo).execute, args=(item_id, 5, 3.0, "Shop"))
        first.start()
        assert snapshotted.wait(timeout=2)
        second.start()
        second.join(timeout=0.3)
        release.set()
        first.join(timeout=2)
        second.join(timeout=2)

        assert len(original_list_exits()) == 2
        assert use_case.subject.latest.profitability[0].revenue == 30.0

    def test_execute_matches_watch(self):
        repo, _, _ = _repository_with_stock(20)
        use_case = GetChartDataUseCase(repo)
        received = []
        use_case.watch(received.append)
        assert use_case.execute() == received[-1]


class TestLoadDashboard:
    def test_success(self):
        repo, _, item_id = _repository_with_stock(3)
        state = LoadDashboardUseCase(repo).execute()
        assert isinstance(state, DashboardSuccess)
        assert state.statistics.items_low_stock == 1
        assert [i.id for i in state.critical_items] == [item_id]
        assert len(state.recent_movements) == 1

    def test_respects_limits(self):
        repo, supplier_id, item_id = _repository_with_stock(30)
        for _ in range(4):
            AddStockExitUseCase(repo).execute(item_id, 1, 3.0, "Shop")
        state = LoadDashboardUseCase(repo, recent_movements_limit=2, critical_items_limit=0).execute()
        assert len(state.recent_movements) == 2
        assert state.critical_items == []

    def test_repository_failure_becomes_error_state(self):
        repo = MagicMock()
        repo.list_stock_items.side_effect = RuntimeError("connection lost")
        state = LoadDashboardUseCase(repo).execute()
        assert isinstance(state, DashboardError)
        assert state.message == "Error while loading data: connection lost"

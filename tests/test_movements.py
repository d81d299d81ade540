"""Son hareketler unit testleri."""

from src.analytics.movements import recent_movements
from src.models.inventory import MovementType, StockEntry, StockExit


def _entry(entry_id: int, date: str, quantity: int = 10) -> StockEntry:
    return StockEntry(
        id=entry_id,
        stock_item_id=1,
        quantity=quantity,
        unit_price=2.0,
        date=date,
        product_name="Widget",
        supplier="Acme",
    )


def _exit(exit_id: int, date: str, quantity: int = 3) -> StockExit:
    return StockExit(
        id=exit_id,
        stock_item_id=1,
        quantity=quantity,
        unit_price=5.0,
        date=date,
        customer="Shop",
        product_name="Widget",
    )


class TestRecentMovements:
    def test_newest_first(self):
        entries = [_entry(1, "2025-01-01T10:00:00"), _entry(2, "2025-01-03T10:00:00")]
        exits = [_exit(1, "2025-01-02T10:00:00")]
        movements = recent_movements(entries, exits, limit=10)
        assert [m.date[:10] for m in movements] == ["2025-01-03", "2025-01-02", "2025-01-01"]
        assert [m.type for m in movements] == [MovementType.ENTRY, MovementType.EXIT, MovementType.ENTRY]

    def test_limit_truncates(self):
        entries = [_entry(i, f"2025-01-{i:02d}T10:00:00") for i in range(1, 10)]
        movements = recent_movements(entries, [], limit=3)
        assert len(movements) == 3
        assert movements[0].id == 9

    def test_zero_limit_returns_empty(self):
        assert recent_movements([_entry(1, "2025-01-01T10:00:00")], [], limit=0) == []

    def test_descriptions(self):
        movements = recent_movements(
            [_entry(1, "2025-01-02T10:00:00")], [_exit(1, "2025-01-01T10:00:00")], limit=2
        )
        assert movements[0].description == "Entry: 10 x Widget from Acme"
        assert movements[1].description == "Exit: 3 x Widget for Shop"

    def test_equal_dates_keep_entries_first(self):
        same = "2025-01-01T10:00:00"
        movements = recent_movements([_entry(1, same)], [_exit(1, same)], limit=2)
        assert [m.type for m in movements] == [MovementType.ENTRY, MovementType.EXIT]

    def test_result_never_exceeds_input(self):
        assert len(recent_movements([_entry(1, "2025-01-01T10:00:00")], [], limit=20)) == 1

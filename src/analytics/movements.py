"""Son hareketler - giriş ve çıkışları tek bir zaman akışında birleştirir."""

from __future__ import annotations

from typing import Iterable

from src.models.inventory import MovementType, RecentMovement, StockEntry, StockExit


def entry_to_movement(entry: StockEntry) -> RecentMovement:
    return RecentMovement(
        id=entry.id,
        product_name=entry.product_name,
        quantity=entry.quantity,
        date=entry.date,
        type=MovementType.ENTRY,
        description=f"Entry: {entry.quantity} x {entry.product_name} from {entry.supplier}",
    )


def exit_to_movement(stock_exit: StockExit) -> RecentMovement:
    return RecentMovement(
        id=stock_exit.id,
        product_name=stock_exit.product_name,
        quantity=stock_exit.quantity,
        date=stock_exit.date,
        type=MovementType.EXIT,
        description=f"Exit: {stock_exit.quantity} x {stock_exit.product_name} for {stock_exit.customer}",
    )


def recent_movements(
    entries: Iterable[StockEntry],
    exits: Iterable[StockExit],
    limit: int,
) -> list[RecentMovement]:
    """Giriş ve çıkışları en yeniden eskiye sıralayıp ilk `limit` kaydı döndürür.

    Tarihler ISO 8601 string olarak karşılaştırılır. Aynı tarihli kayıtlar
    girdi sırasını korur (önce girişler, sonra çıkışlar).
    """
    if limit <= 0:
        return []

    movements = [entry_to_movement(e) for e in entries]
    movements.extend(exit_to_movement(x) for x in exits)
    # sorted() kararlıdır, reverse=True eşit anahtarların sırasını bozmaz
    movements = sorted(movements, key=lambda m: m.date, reverse=True)
    return movements[:limit]

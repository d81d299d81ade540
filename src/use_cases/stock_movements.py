"""Stok giriş ve çıkış use-case'leri."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from src.models.inventory import (
    EntryStatus,
    ExitStatus,
    ExitUrgency,
    StockEntry,
    StockExit,
)
from src.repository.base import StockRepository
from src.use_cases._validation import (
    now_iso,
    require_non_negative_price,
    require_not_blank,
    require_positive_quantity,
)

logger = logging.getLogger(__name__)


# --- Girişler ---

class GetAllStockEntriesUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> list[StockEntry]:
        return self._repository.list_stock_entries()


class GetStockEntriesByItemIdUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, item_id: int) -> list[StockEntry]:
        return self._repository.list_stock_entries_by_item(item_id)


class AddStockEntryUseCase:
    def __init__(self, repository: StockRepository, clock: Callable[[], str] = now_iso) -> None:
        self._repository = repository
        self._clock = clock

    def execute(
        self,
        stock_item_id: int,
        quantity: int,
        unit_price: float,
        supplier_id: int,
        batch_number: Optional[str] = None,
        expiry_date: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Bekleyen durumda yeni bir stok girişi kaydeder.

        Toplam değer her zaman miktar x birim fiyattır; dışarıdan verilmez.
        """
        require_positive_quantity(quantity)
        require_non_negative_price(unit_price)
        if self._repository.get_stock_item(stock_item_id) is None:
            raise ValueError("Product not found")
        if self._repository.get_supplier(supplier_id) is None:
            raise ValueError(f"Supplier not found: {supplier_id}")

        now = self._clock()
        entry = StockEntry(
            stock_item_id=stock_item_id,
            quantity=quantity,
            unit_price=unit_price,
            date=now,
            supplier_id=supplier_id,
            status=EntryStatus.PENDING,
            batch_number=batch_number,
            expiry_date=expiry_date,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        entry_id = self._repository.insert_stock_entry(entry)
        logger.info("Stok girişi eklendi: kalem=%s miktar=%s (id=%s)", stock_item_id, quantity, entry_id)
        return entry_id


class UpdateStockEntryUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, entry: StockEntry) -> None:
        require_positive_quantity(entry.quantity)
        require_non_negative_price(entry.unit_price)
        self._repository.update_stock_entry(entry)


class DeleteStockEntryUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, entry_id: int) -> None:
        self._repository.delete_stock_entry(entry_id)


# --- Çıkışlar ---

class GetAllStockExitsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> list[StockExit]:
        return self._repository.list_stock_exits()


class GetStockExitsByItemIdUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, item_id: int) -> list[StockExit]:
        return self._repository.list_stock_exits_by_item(item_id)


class AddStockExitUseCase:
    def __init__(self, repository: StockRepository, clock: Callable[[], str] = now_iso) -> None:
        self._repository = repository
        self._clock = clock

    def execute(
        self,
        stock_item_id: int,
        quantity: int,
        unit_price: float,
        customer: str,
        urgency: ExitUrgency = ExitUrgency.LOW,
        order_number: Optional[str] = None,
        delivery_address: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Yeni bir stok çıkışı kaydeder.

        Raises:
            ValueError: girdiler geçersizse, ürün yoksa veya stok yetersizse.
        """
        require_positive_quantity(quantity)
        require_non_negative_price(unit_price)
        require_not_blank(customer, "Customer cannot be blank")

        item = self._repository.get_stock_item(stock_item_id)
        if item is None:
            raise ValueError("Product not found")
        if item.current_stock < quantity:
            raise ValueError(f"Insufficient stock. Available: {item.current_stock}")

        now = self._clock()
        stock_exit = StockExit(
            stock_item_id=stock_item_id,
            quantity=quantity,
            unit_price=unit_price,
            date=now,
            customer=customer,
            status=ExitStatus.PENDING,
            urgency=urgency,
            order_number=order_number,
            delivery_address=delivery_address,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        exit_id = self._repository.insert_stock_exit(stock_exit)
        logger.info("Stok çıkışı eklendi: kalem=%s miktar=%s (id=%s)", stock_item_id, quantity, exit_id)
        return exit_id


class UpdateStockExitUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, stock_exit: StockExit) -> None:
        require_positive_quantity(stock_exit.quantity)
        require_non_negative_price(stock_exit.unit_price)
        require_not_blank(stock_exit.customer, "Customer cannot be blank")
        self._repository.update_stock_exit(stock_exit)


class DeleteStockExitUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, exit_id: int) -> None:
        self._repository.delete_stock_exit(exit_id)

"""Bellek içi kayıt deposu - testler, demo ve tek süreçli kullanım için."""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import replace
from typing import Optional

from src.models.inventory import StockEntry, StockExit, StockItem, StockItemStatus, Supplier
from src.repository.base import (
    ENTRIES,
    EXITS,
    ITEMS,
    SUPPLIERS,
    RecordNotFoundError,
    StockRepository,
    compute_current_stock,
)

logger = logging.getLogger(__name__)


class InMemoryStockRepository(StockRepository):
    """Thread-safe, sıralı tamsayı id üreten bellek içi depo.

    Kalemlerin mevcut stoğu saklanmaz, okuma sırasında giriş/çıkışlardan
    hesaplanır. Tedarikçisi silinmiş kalemler listelenmez.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()
        self._suppliers: dict[int, Supplier] = {}
        self._items: dict[int, StockItem] = {}
        self._entries: dict[int, StockEntry] = {}
        self._exits: dict[int, StockExit] = {}
        self._ids = {name: itertools.count(1) for name in (ITEMS, ENTRIES, EXITS, SUPPLIERS)}

    # --- Stok kalemleri ---

    def _hydrate_item(self, item: StockItem) -> Optional[StockItem]:
        supplier = self._suppliers.get(item.supplier.id)
        if supplier is None:
            return None
        return replace(
            item,
            supplier=supplier,
            current_stock=compute_current_stock(
                item.id, self._entries.values(), self._exits.values()
            ),
        )

    def list_stock_items(self) -> list[StockItem]:
        with self._lock:
            hydrated = (self._hydrate_item(item) for item in self._items.values())
            return [item for item in hydrated if item is not None]

    def get_stock_item(self, item_id: int) -> Optional[StockItem]:
        with self._lock:
            item = self._items.get(item_id)
            return self._hydrate_item(item) if item else None

    def insert_stock_item(
        self,
        name: str,
        category: str,
        description: Optional[str],
        min_stock: int,
        max_stock: int,
        unit_price: float,
        supplier_id: int,
    ) -> int:
        with self._lock:
            supplier = self._suppliers.get(supplier_id)
            if supplier is None:
                raise RecordNotFoundError(SUPPLIERS, supplier_id)
            item_id = next(self._ids[ITEMS])
            self._items[item_id] = StockItem(
                id=item_id,
                name=name,
                category=category,
                description=description,
                current_stock=0,
                min_stock=min_stock,
                max_stock=max_stock,
                unit_price=unit_price,
                supplier=supplier,
                status=StockItemStatus.ACTIVE,
            )
        logger.debug("Stok kalemi eklendi: %s (id=%s)", name, item_id)
        self._notify(ITEMS)
        return item_id

    def update_stock_item(self, item: StockItem) -> None:
        with self._lock:
            if item.id not in self._items:
                raise RecordNotFoundError(ITEMS, item.id)
            self._items[item.id] = item
        self._notify(ITEMS)

    def delete_stock_item(self, item_id: int) -> None:
        with self._lock:
            if self._items.pop(item_id, None) is None:
                raise RecordNotFoundError(ITEMS, item_id)
            # Kaleme bağlı hareketler de silinir
            for store in (self._entries, self._exits):
                for record_id in [k for k, v in store.items() if v.stock_item_id == item_id]:
                    del store[record_id]
        self._notify(ITEMS, ENTRIES, EXITS)

    # --- Girişler ---

    def _hydrate_entry(self, entry: StockEntry) -> StockEntry:
        item = self._items.get(entry.stock_item_id)
        supplier = self._suppliers.get(entry.supplier_id) if entry.supplier_id is not None else None
        return replace(
            entry,
            product_name=item.name if item else entry.product_name,
            category=item.category if item else entry.category,
            supplier=supplier.name if supplier else entry.supplier,
        )

    def list_stock_entries(self) -> list[StockEntry]:
        with self._lock:
            return [self._hydrate_entry(e) for e in self._entries.values()]

    def insert_stock_entry(self, entry: StockEntry) -> int:
        with self._lock:
            if entry.stock_item_id not in self._items:
                raise RecordNotFoundError(ITEMS, entry.stock_item_id)
            entry_id = next(self._ids[ENTRIES])
            self._entries[entry_id] = replace(entry, id=entry_id)
        self._notify(ENTRIES, ITEMS)
        return entry_id

    def update_stock_entry(self, entry: StockEntry) -> None:
        with self._lock:
            if entry.id not in self._entries:
                raise RecordNotFoundError(ENTRIES, entry.id)
            self._entries[entry.id] = entry
        self._notify(ENTRIES, ITEMS)

    def delete_stock_entry(self, entry_id: int) -> None:
        with self._lock:
            if self._entries.pop(entry_id, None) is None:
                raise RecordNotFoundError(ENTRIES, entry_id)
        self._notify(ENTRIES, ITEMS)

    # --- Çıkışlar ---

    def _hydrate_exit(self, stock_exit: StockExit) -> StockExit:
        item = self._items.get(stock_exit.stock_item_id)
        if item is None:
            return stock_exit
        return replace(stock_exit, product_name=item.name, category=item.category)

    def list_stock_exits(self) -> list[StockExit]:
        with self._lock:
            return [self._hydrate_exit(x) for x in self._exits.values()]

    def insert_stock_exit(self, stock_exit: StockExit) -> int:
        with self._lock:
            if stock_exit.stock_item_id not in self._items:
                raise RecordNotFoundError(ITEMS, stock_exit.stock_item_id)
            exit_id = next(self._ids[EXITS])
            self._exits[exit_id] = replace(stock_exit, id=exit_id)
        self._notify(EXITS, ITEMS)
        return exit_id

    def update_stock_exit(self, stock_exit: StockExit) -> None:
        with self._lock:
            if stock_exit.id not in self._exits:
                raise RecordNotFoundError(EXITS, stock_exit.id)
            self._exits[stock_exit.id] = stock_exit
        self._notify(EXITS, ITEMS)

    def delete_stock_exit(self, exit_id: int) -> None:
        with self._lock:
            if self._exits.pop(exit_id, None) is None:
                raise RecordNotFoundError(EXITS, exit_id)
        self._notify(EXITS, ITEMS)

    # --- Tedarikçiler ---

    def list_suppliers(self) -> list[Supplier]:
        with self._lock:
            return list(self._suppliers.values())

    def get_supplier(self, supplier_id: int) -> Optional[Supplier]:
        with self._lock:
            return self._suppliers.get(supplier_id)

    def insert_supplier(self, supplier: Supplier) -> int:
        with self._lock:
            supplier_id = next(self._ids[SUPPLIERS])
            self._suppliers[supplier_id] = replace(supplier, id=supplier_id)
        self._notify(SUPPLIERS)
        return supplier_id

    def update_supplier(self, supplier: Supplier) -> None:
        with self._lock:
            if supplier.id not in self._suppliers:
                raise RecordNotFoundError(SUPPLIERS, supplier.id)
            self._suppliers[supplier.id] = supplier
        # Kalemler tedarikçi adını taşıdığı için onlar da değişmiş sayılır
        self._notify(SUPPLIERS, ITEMS, ENTRIES)

    def delete_supplier(self, supplier_id: int) -> None:
        with self._lock:
            if self._suppliers.pop(supplier_id, None) is None:
                raise RecordNotFoundError(SUPPLIERS, supplier_id)
        self._notify(SUPPLIERS, ITEMS, ENTRIES)

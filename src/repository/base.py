"""Kayıt deposu arayüzü (port).

Altyapı adapter'ları (InMemoryStockRepository, DynamoDBStockRepository) bu
arayüzü uygular. Her yazma işleminden sonra dinleyicilere değişen koleksiyonun
adı bildirilir: "items", "entries", "exits" veya "suppliers".
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from src.models.inventory import (
    EntryStatus,
    ExitStatus,
    StockEntry,
    StockExit,
    StockItem,
    Supplier,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]

ITEMS = "items"
ENTRIES = "entries"
EXITS = "exits"
SUPPLIERS = "suppliers"


class RecordNotFoundError(LookupError):
    """Güncellenmek veya silinmek istenen kayıt bulunamadı."""

    def __init__(self, collection: str, record_id: Optional[int]):
        super().__init__(f"{collection} kaydı bulunamadı: id={record_id}")
        self.collection = collection
        self.record_id = record_id


def compute_current_stock(
    item_id: int, entries: Iterable[StockEntry], exits: Iterable[StockExit]
) -> int:
    """İptal edilmemiş girişlerin toplamından iptal edilmemiş çıkışları düşer."""
    received = sum(
        e.quantity for e in entries
        if e.stock_item_id == item_id and e.status != EntryStatus.CANCELLED
    )
    shipped = sum(
        x.quantity for x in exits
        if x.stock_item_id == item_id and x.status != ExitStatus.CANCELLED
    )
    return received - shipped


class StockRepository(ABC):
    """Stok kalemleri, girişler, çıkışlar ve tedarikçiler için kayıt deposu."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []
        self._listeners_lock = threading.Lock()

    # --- Değişiklik bildirimi ---

    def add_listener(self, listener: ChangeListener) -> None:
        with self._listeners_lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        with self._listeners_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, *collections: str) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for collection in collections:
            for listener in listeners:
                try:
                    listener(collection)
                except Exception:
                    logger.exception("Değişiklik dinleyicisi hata verdi: %s", collection)

    # --- Stok kalemleri ---

    @abstractmethod
    def list_stock_items(self) -> list[StockItem]: ...

    @abstractmethod
    def get_stock_item(self, item_id: int) -> Optional[StockItem]: ...

    @abstractmethod
    def insert_stock_item(
        self,
        name: str,
        category: str,
        description: Optional[str],
        min_stock: int,
        max_stock: int,
        unit_price: float,
        supplier_id: int,
    ) -> int: ...

    @abstractmethod
    def update_stock_item(self, item: StockItem) -> None: ...

    @abstractmethod
    def delete_stock_item(self, item_id: int) -> None: ...

    # --- Girişler ---

    @abstractmethod
    def list_stock_entries(self) -> list[StockEntry]: ...

    def list_stock_entries_by_item(self, item_id: int) -> list[StockEntry]:
        return [e for e in self.list_stock_entries() if e.stock_item_id == item_id]

    @abstractmethod
    def insert_stock_entry(self, entry: StockEntry) -> int: ...

    @abstractmethod
    def update_stock_entry(self, entry: StockEntry) -> None: ...

    @abstractmethod
    def delete_stock_entry(self, entry_id: int) -> None: ...

    # --- Çıkışlar ---

    @abstractmethod
    def list_stock_exits(self) -> list[StockExit]: ...

    def list_stock_exits_by_item(self, item_id: int) -> list[StockExit]:
        return [x for x in self.list_stock_exits() if x.stock_item_id == item_id]

    @abstractmethod
    def insert_stock_exit(self, stock_exit: StockExit) -> int: ...

    @abstractmethod
    def update_stock_exit(self, stock_exit: StockExit) -> None: ...

    @abstractmethod
    def delete_stock_exit(self, exit_id: int) -> None: ...

    # --- Tedarikçiler ---

    @abstractmethod
    def list_suppliers(self) -> list[Supplier]: ...

    @abstractmethod
    def get_supplier(self, supplier_id: int) -> Optional[Supplier]: ...

    @abstractmethod
    def insert_supplier(self, supplier: Supplier) -> int: ...

    @abstractmethod
    def update_supplier(self, supplier: Supplier) -> None: ...

    @abstractmethod
    def delete_supplier(self, supplier_id: int) -> None: ...

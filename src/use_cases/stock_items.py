"""Stok kalemi use-case'leri."""

from __future__ import annotations

import logging
from typing import Optional

from src.models.inventory import StockItem
from src.repository.base import StockRepository
from src.use_cases._validation import (
    require_non_negative_price,
    require_not_blank,
    validate_stock_levels,
)

logger = logging.getLogger(__name__)


def _validate_item_fields(name: str, category: str, min_stock: int, max_stock: int, unit_price: float) -> None:
    require_not_blank(name, "Product name cannot be blank")
    require_not_blank(category, "Category cannot be blank")
    validate_stock_levels(min_stock, max_stock)
    require_non_negative_price(unit_price)


class GetAllStockItemsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> list[StockItem]:
        return self._repository.list_stock_items()


class GetStockItemByIdUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, item_id: int) -> Optional[StockItem]:
        return self._repository.get_stock_item(item_id)


class CreateStockItemUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(
        self,
        name: str,
        category: str,
        min_stock: int,
        max_stock: int,
        unit_price: float,
        supplier_id: int,
        description: Optional[str] = None,
    ) -> int:
        """Yeni stok kalemi oluşturur ve id'sini döndürür.

        Raises:
            ValueError: alanlar geçersizse veya tedarikçi bulunamazsa.
        """
        _validate_item_fields(name, category, min_stock, max_stock, unit_price)
        if self._repository.get_supplier(supplier_id) is None:
            raise ValueError(f"Supplier not found: {supplier_id}")

        item_id = self._repository.insert_stock_item(
            name.strip(), category.strip(), description, min_stock, max_stock, unit_price, supplier_id
        )
        logger.info("Stok kalemi oluşturuldu: %s (id=%s)", name, item_id)
        return item_id


class UpdateStockItemUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, item: StockItem) -> None:
        _validate_item_fields(item.name, item.category, item.min_stock, item.max_stock, item.unit_price)
        if self._repository.get_supplier(item.supplier.id) is None:
            raise ValueError(f"Supplier not found: {item.supplier.id}")
        self._repository.update_stock_item(item)


class DeleteStockItemUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, item_id: int) -> None:
        self._repository.delete_stock_item(item_id)
        logger.info("Stok kalemi silindi: id=%s", item_id)

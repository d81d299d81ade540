"""Tedarikçi use-case'leri."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from src.analytics.statistics import compute_supplier_statistics, count_suppliers_by_country
from src.models.inventory import (
    Supplier,
    SupplierReliability,
    SupplierStatistics,
    SupplierStatus,
)
from src.repository.base import StockRepository
from src.use_cases._validation import now_iso, require_not_blank, validate_rating

logger = logging.getLogger(__name__)


class GetAllSuppliersUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Supplier]:
        return self._repository.list_suppliers()


class GetSupplierByIdUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, supplier_id: int) -> Optional[Supplier]:
        return self._repository.get_supplier(supplier_id)


class CreateSupplierUseCase:
    def __init__(self, repository: StockRepository, clock: Callable[[], str] = now_iso) -> None:
        self._repository = repository
        self._clock = clock

    def execute(
        self,
        name: str,
        rating: float = 0.0,
        status: SupplierStatus = SupplierStatus.ACTIVE,
        reliability: SupplierReliability = SupplierReliability.GOOD,
        **details: Optional[str],
    ) -> int:
        """Tedarikçi oluşturur; `details` isteğe bağlı iletişim/konum alanlarıdır."""
        require_not_blank(name, "Supplier name cannot be blank")
        validate_rating(rating)

        now = self._clock()
        supplier = Supplier(
            id=0,  # depo tarafından atanır
            name=name.strip(),
            rating=rating,
            status=status,
            reliability=reliability,
            created_at=now,
            updated_at=now,
            **details,
        )
        supplier_id = self._repository.insert_supplier(supplier)
        logger.info("Tedarikçi oluşturuldu: %s (id=%s)", name, supplier_id)
        return supplier_id


class UpdateSupplierUseCase:
    def __init__(self, repository: StockRepository, clock: Callable[[], str] = now_iso) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self, supplier: Supplier) -> None:
        require_not_blank(supplier.name, "Supplier name cannot be blank")
        validate_rating(supplier.rating)
        self._repository.update_supplier(replace(supplier, updated_at=self._clock()))


class DeleteSupplierUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, supplier_id: int) -> None:
        self._repository.delete_supplier(supplier_id)


class GetSupplierStatisticsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> SupplierStatistics:
        return compute_supplier_statistics(self._repository.list_suppliers())


class GetSuppliersByCountryUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> dict[str, int]:
        return count_suppliers_by_country(self._repository.list_suppliers())

"""Stok, giriş/çıkış ve tedarikçi veri modelleri."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StockStatus(str, Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    OVERSTOCKED = "overstocked"


class StockItemStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class EntryStatus(str, Enum):
    PENDING = "pending"
    VALIDATED = "validated"
    RECEIVED = "received"
    CANCELLED = "cancelled"


class ExitStatus(str, Enum):
    PENDING = "pending"
    PREPARED = "prepared"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ExitUrgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SupplierStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    BLOCKED = "blocked"


class SupplierReliability(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


class MovementType(str, Enum):
    ENTRY = "entry"
    EXIT = "exit"


@dataclass(frozen=True)
class Supplier:
    id: int
    name: str
    rating: float = 0.0
    status: SupplierStatus = SupplierStatus.ACTIVE
    reliability: SupplierReliability = SupplierReliability.GOOD
    category: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    last_order_date: Optional[str] = None
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class StockItem:
    id: int
    name: str
    category: str
    current_stock: int
    min_stock: int
    max_stock: int
    unit_price: float
    supplier: Supplier
    status: StockItemStatus = StockItemStatus.ACTIVE
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def total_value(self) -> float:
        return self.current_stock * self.unit_price

    @property
    def stock_percentage(self) -> float:
        """Mevcut stoğun maksimum stoğa oranı, [0, 1] aralığına sıkıştırılmış."""
        if self.max_stock <= 0:
            return 0.0
        return min(max(self.current_stock / self.max_stock, 0.0), 1.0)

    @property
    def stock_status(self) -> StockStatus:
        """Stok durumunu hesaplar.

        Sıra önemlidir: önce sıfır kontrolü, sonra düşük stok, sonra fazla stok.
        """
        if self.current_stock == 0:
            return StockStatus.OUT_OF_STOCK
        if self.current_stock <= self.min_stock:
            return StockStatus.LOW_STOCK
        if self.current_stock > self.max_stock:
            return StockStatus.OVERSTOCKED
        return StockStatus.IN_STOCK


@dataclass(frozen=True)
class StockEntry:
    stock_item_id: int
    quantity: int
    unit_price: float
    date: str
    id: Optional[int] = None
    product_name: str = ""
    category: str = ""
    supplier_id: Optional[int] = None
    supplier: str = ""
    status: EntryStatus = EntryStatus.PENDING
    batch_number: Optional[str] = None
    expiry_date: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def total_value(self) -> float:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class StockExit:
    stock_item_id: int
    quantity: int
    unit_price: float
    date: str
    customer: str
    id: Optional[int] = None
    product_name: str = ""
    category: str = ""
    status: ExitStatus = ExitStatus.PENDING
    urgency: ExitUrgency = ExitUrgency.LOW
    order_number: Optional[str] = None
    delivery_address: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def total_value(self) -> float:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class RecentMovement:
    id: Optional[int]
    product_name: str
    quantity: int
    date: str
    type: MovementType
    description: str


@dataclass(frozen=True)
class StockStatistics:
    total_items: int = 0
    items_in_stock: int = 0
    items_low_stock: int = 0
    items_out_of_stock: int = 0
    items_overstocked: int = 0
    total_stock_value: float = 0.0


@dataclass(frozen=True)
class SupplierStatistics:
    total_suppliers: int = 0
    active_suppliers: int = 0
    pending_suppliers: int = 0
    blocked_suppliers: int = 0
    average_rating: float = 0.0

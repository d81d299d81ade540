"""Use-case'ler için ortak doğrulama kuralları."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def require_not_blank(value: Optional[str], message: str) -> None:
    if not value or not value.strip():
        raise ValueError(message)


def require_positive_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise ValueError("Quantity must be positive")


def require_non_negative_price(unit_price: float) -> None:
    if unit_price < 0:
        raise ValueError("Unit price cannot be negative")


def validate_stock_levels(min_stock: int, max_stock: int) -> None:
    if min_stock < 0:
        raise ValueError("Minimum stock cannot be negative")
    if max_stock <= min_stock:
        raise ValueError("Maximum stock must be greater than minimum stock")


def validate_rating(rating: float) -> None:
    if rating < 0 or rating > 5:
        raise ValueError("Rating must be between 0 and 5")

"""Uygulama ayarları - ortam değişkenlerinden okunur.

.env dosyası giriş noktalarında `env_loader` ile yüklenir; bu modül yalnızca
os.environ okur.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.repository.base import StockRepository

logger = logging.getLogger(__name__)

BACKENDS = ("memory", "dynamodb")
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} tamsayı olmalı: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    aws_region: str = "us-east-1"
    repository_backend: str = "memory"
    table_prefix: str = ""
    recent_movements_limit: int = 10
    critical_items_limit: int = 5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        backend = env.get("STOCK_REPOSITORY_BACKEND", "memory").lower()
        if backend not in BACKENDS:
            raise ValueError(f"Geçersiz STOCK_REPOSITORY_BACKEND: {backend!r} (beklenen: {BACKENDS})")
        return cls(
            aws_region=env.get("AWS_DEFAULT_REGION", "us-east-1"),
            repository_backend=backend,
            table_prefix=env.get("STOCK_TABLE_PREFIX", ""),
            recent_movements_limit=_int_env(env, "RECENT_MOVEMENTS_LIMIT", 10),
            critical_items_limit=_int_env(env, "CRITICAL_ITEMS_LIMIT", 5),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def build_repository(settings: Settings, **kwargs) -> StockRepository:
    """Ayarlara göre kayıt deposu oluşturur (kwargs adapter'a iletilir)."""
    if settings.repository_backend == "dynamodb":
        from src.repository.dynamodb import DynamoDBStockRepository

        logger.info("DynamoDB deposu kullanılıyor (region: %s)", settings.aws_region)
        return DynamoDBStockRepository(
            region_name=settings.aws_region,
            table_prefix=settings.table_prefix,
            **kwargs,
        )

    from src.repository.memory import InMemoryStockRepository

    logger.info("Bellek içi depo kullanılıyor")
    return InMemoryStockRepository()

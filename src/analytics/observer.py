"""Grafik verisi için push tabanlı yeniden hesaplama.

Dört kaynaktan (kalemler, girişler, çıkışlar, tedarikçiler) herhangi biri yeni
bir snapshot yayınladığında grafik verisi yeniden türetilir ve tüm abonelere
iletilir. Dört kaynak da en az bir kez yayınlanmadan hiçbir şey gönderilmez.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Sequence

from src.analytics.chart_data import derive_chart_data
from src.models.charts import ChartData
from src.models.inventory import StockEntry, StockExit, StockItem, Supplier

logger = logging.getLogger(__name__)

ChartDataCallback = Callable[[ChartData], None]

SOURCES = ("items", "entries", "exits", "suppliers")


class ChartDataSubject:
    """Kaynak snapshot'larını izleyip ChartData yayınlayan subject."""

    def __init__(self) -> None:
        self._snapshots: dict[str, list] = {}
        self._subscribers: list[ChartDataCallback] = []
        self._latest: Optional[ChartData] = None
        self._lock = threading.Lock()

    @property
    def latest(self) -> Optional[ChartData]:
        return self._latest

    def subscribe(self, callback: ChartDataCallback) -> Callable[[], None]:
        """Abone ekler ve aboneliği iptal eden bir fonksiyon döndürür.

        Daha önce hesaplanmış bir değer varsa yeni aboneye hemen iletilir.
        """
        with self._lock:
            self._subscribers.append(callback)
            latest = self._latest

        if latest is not None:
            self._deliver(callback, latest)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def publish_items(self, items: Sequence[StockItem]) -> Optional[ChartData]:
        return self.publish("items", items)

    def publish_entries(self, entries: Sequence[StockEntry]) -> Optional[ChartData]:
        return self.publish("entries", entries)

    def publish_exits(self, exits: Sequence[StockExit]) -> Optional[ChartData]:
        return self.publish("exits", exits)

    def publish_suppliers(self, suppliers: Sequence[Supplier]) -> Optional[ChartData]:
        return self.publish("suppliers", suppliers)

    def publish(self, source: str, snapshot: Sequence) -> Optional[ChartData]:
        """Bir kaynağın yeni snapshot'ını kaydeder ve gerekirse yeniden hesaplar."""
        if source not in SOURCES:
            raise ValueError(f"Bilinmeyen kaynak: {source}")

        with self._lock:
            self._snapshots[source] = list(snapshot)
            if len(self._snapshots) < len(SOURCES):
                logger.debug("Kaynak bekleniyor, hesaplama ertelendi: %s", source)
                return None
            chart_data = derive_chart_data(
                self._snapshots["items"],
                self._snapshots["entries"],
                self._snapshots["exits"],
                self._snapshots["suppliers"],
            )
            self._latest = chart_data
            subscribers = list(self._subscribers)

        for callback in subscribers:
            self._deliver(callback, chart_data)
        return chart_data

    def _deliver(self, callback: ChartDataCallback, chart_data: ChartData) -> None:
        try:
            callback(chart_data)
        except Exception:
            logger.exception("Grafik verisi abonesi hata verdi: %r", callback)

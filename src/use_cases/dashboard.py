"""Dashboard use-case'leri: istatistikler, son hareketler, grafikler, içgörüler."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from src.analytics.chart_data import derive_chart_data
from src.analytics.insights import generate_insights
from src.analytics.movements import recent_movements
from src.analytics.observer import ChartDataCallback, ChartDataSubject
from src.analytics.statistics import compute_statistics, critical_stock_items
from src.models.charts import ChartData, Insight
from src.models.dashboard import DashboardError, DashboardState, DashboardSuccess
from src.models.inventory import RecentMovement, StockStatistics
from src.repository.base import ENTRIES, EXITS, ITEMS, SUPPLIERS, StockRepository

logger = logging.getLogger(__name__)


class GetStockStatisticsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self) -> StockStatistics:
        return compute_statistics(self._repository.list_stock_items())


class GetRecentMovementsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._repository = repository

    def execute(self, limit: int = 20) -> list[RecentMovement]:
        return recent_movements(
            self._repository.list_stock_entries(),
            self._repository.list_stock_exits(),
            limit,
        )


class GetChartDataUseCase:
    """Grafik verisini tek seferlik veya değişiklikleri izleyerek sağlar.

    `watch()` ilk çağrıldığında depo dinleyicisi kaydedilir ve dört kaynak da
    subject'e yayınlanır; sonrasında her yazma işlemi yalnızca değişen
    koleksiyonu yeniden okuyup yayınlar.
    """

    def __init__(self, repository: StockRepository, subject: Optional[ChartDataSubject] = None) -> None:
        self._repository = repository
        self._subject = subject or ChartDataSubject()
        self._fetchers = {
            ITEMS: repository.list_stock_items,
            ENTRIES: repository.list_stock_entries,
            EXITS: repository.list_stock_exits,
            SUPPLIERS: repository.list_suppliers,
        }
        self._watching = False
        self._lock = threading.Lock()
        # Okuma + yayın tek adımdır: son yayın en güncel snapshot. Abone içinden yazma olabilir, RLock.
        self._refresh_lock = threading.RLock()

    @property
    def subject(self) -> ChartDataSubject:
        return self._subject

    def execute(self) -> ChartData:
        return derive_chart_data(
            self._repository.list_stock_items(),
            self._repository.list_stock_entries(),
            self._repository.list_stock_exits(),
            self._repository.list_suppliers(),
        )

    def watch(self, callback: ChartDataCallback) -> Callable[[], None]:
        """Aboneyi kaydeder; grafik verisi her değişiklikte callback'e iletilir."""
        unsubscribe = self._subject.subscribe(callback)
        with self._lock:
            start = not self._watching
            self._watching = True
        if start:
            self._repository.add_listener(self._on_change)
            for source in self._fetchers:
                self._on_change(source)
        return unsubscribe

    def close(self) -> None:
        with self._lock:
            if not self._watching:
                return
            self._watching = False
        self._repository.remove_listener(self._on_change)

    def _on_change(self, collection: str) -> None:
        fetch = self._fetchers.get(collection)
        if fetch is None:
            logger.debug("Grafikle ilgisiz koleksiyon değişti: %s", collection)
            return
        with self._refresh_lock:
            self._subject.publish(collection, fetch())


class GetInsightsUseCase:
    def __init__(self, repository: StockRepository) -> None:
        self._chart_data = GetChartDataUseCase(repository)

    def execute(self) -> list[Insight]:
        return generate_insights(self._chart_data.execute())


class LoadDashboardUseCase:
    """Ana ekran verisini yükler ve Success ya da Error durumu döndürür."""

    def __init__(
        self,
        repository: StockRepository,
        recent_movements_limit: int = 10,
        critical_items_limit: int = 5,
    ) -> None:
        self._repository = repository
        self._recent_movements = GetRecentMovementsUseCase(repository)
        self._recent_movements_limit = recent_movements_limit
        self._critical_items_limit = critical_items_limit

    def execute(self) -> DashboardState:
        try:
            items = self._repository.list_stock_items()
            statistics = compute_statistics(items)
            movements = self._recent_movements.execute(self._recent_movements_limit)
            critical = critical_stock_items(items, self._critical_items_limit)
        except Exception as e:
            logger.error("Dashboard yükleme hatası: %s", e, exc_info=True)
            return DashboardError(message=f"Error while loading data: {e}")

        return DashboardSuccess(
            statistics=statistics,
            recent_movements=movements,
            critical_items=critical,
        )

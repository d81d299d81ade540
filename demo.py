"""
Stok Dashboard Demo Script'i.

Bellek içi depoyu örnek veriyle doldurur ve dashboard özetini, son hareketleri,
grafik serilerini ve içgörüleri yazdırır. Ardından yeni bir çıkış ekleyerek
grafik verisinin otomatik yeniden hesaplandığını gösterir.

Kullanım:
    python demo.py
    STOCK_REPOSITORY_BACKEND=dynamodb python demo.py   # DynamoDB tablolarından oku
"""

import logging

import env_loader

from data_layer.generators.generators import generate_dataset, seed_repository
from src.analytics.insights import generate_insights
from src.config import Settings, build_repository, configure_logging
from src.models.charts import ChartData
from src.models.dashboard import DashboardSuccess
from src.models.inventory import ExitUrgency, StockStatus
from src.use_cases import AddStockExitUseCase, GetChartDataUseCase, LoadDashboardUseCase

logger = logging.getLogger("demo")

INSIGHT_ICONS = {"positive": "📈", "warning": "⚠️ ", "negative": "📉", "info": "ℹ️ "}


def print_dashboard(state):
    print("\n--- Dashboard ---")
    if not isinstance(state, DashboardSuccess):
        print(f"❌ {state}")
        return
    s = state.statistics
    print(f"✅ Toplam ürün: {s.total_items}  |  Stok değeri: {s.total_stock_value:,.2f}€")
    print(f"   Stokta: {s.items_in_stock}  Düşük: {s.items_low_stock}  "
          f"Tükendi: {s.items_out_of_stock}  Fazla: {s.items_overstocked}")

    print("\n   Son hareketler:")
    for m in state.recent_movements:
        print(f"   {m.date[:16]}  {m.description}")

    print("\n   Kritik stok:")
    for item in state.critical_items:
        icon = "🔴" if item.stock_status == StockStatus.OUT_OF_STOCK else "🟠"
        print(f"   {icon} {item.name}: {item.current_stock}/{item.min_stock}")


def print_chart_data(chart: ChartData):
    print("\n--- Grafikler ---")
    print("   Stok gelişimi: " + ", ".join(f"{p.label}={p.total_value:,.0f}" for p in chart.stock_evolution))
    print("   Kategoriler:")
    for c in chart.category_distribution:
        print(f"     {c.color} {c.category:<12} {c.value:>10,.2f}€  ({c.item_count} ürün)")
    print("   Tedarikçiler (ilk 5):")
    for s in chart.supplier_distribution:
        print(f"     {s.color} {s.supplier_name:<20} {s.value:>10,.2f}€")
    print("   Kârlılık:")
    for p in chart.profitability:
        print(f"     {p.category:<12} gelir={p.revenue:>10,.2f}  maliyet={p.cost:>10,.2f}  kâr={p.profit:>10,.2f}")

    print("\n--- İçgörüler ---")
    for insight in generate_insights(chart):
        print(f"   {INSIGHT_ICONS[insight.type.value]} {insight.title}: {insight.description}")


def main():
    settings = Settings.from_env()
    configure_logging(settings)

    repository = build_repository(settings)
    if settings.repository_backend == "memory":
        seed_repository(repository, generate_dataset())

    print_dashboard(LoadDashboardUseCase(
        repository,
        recent_movements_limit=settings.recent_movements_limit,
        critical_items_limit=settings.critical_items_limit,
    ).execute())

    charts = GetChartDataUseCase(repository)
    updates = []
    charts.watch(updates.append)
    print_chart_data(updates[-1])

    # Stoktaki ilk ürün için bir çıkış ekle; abone otomatik olarak yeni veriyi alır
    item = next((i for i in repository.list_stock_items() if i.current_stock > 0), None)
    if item is not None:
        print(f"\n--- Yeni çıkış: 1 x {item.name} ---")
        AddStockExitUseCase(repository).execute(
            stock_item_id=item.id,
            quantity=1,
            unit_price=item.unit_price,
            customer="Demo Customer",
            urgency=ExitUrgency.HIGH,
        )
        print(f"✅ Grafik verisi {len(updates)} kez yayınlandı")
        print_chart_data(updates[-1])
    charts.close()


if __name__ == "__main__":
    main()

"""Grafik verisinden okunabilir içgörüler üretir."""

from __future__ import annotations

from typing import Optional

from src.models.charts import ChartData, Insight, InsightType


def stock_evolution_insight(chart_data: ChartData) -> Optional[Insight]:
    points = chart_data.stock_evolution
    if len(points) < 2:
        return None

    latest, previous = points[-1], points[-2]
    if previous.total_value == 0:
        return None

    growth = (latest.total_value - previous.total_value) / previous.total_value * 100
    if growth > 0:
        return Insight(
            title="Stock evolution",
            description=f"Growth of {growth:.1f}% in stock value",
            type=InsightType.POSITIVE,
            value=growth,
        )
    return Insight(
        title="Stock evolution",
        description=f"Decrease of {abs(growth):.1f}% in stock value",
        type=InsightType.WARNING,
        value=growth,
    )


def dominant_category_insight(chart_data: ChartData) -> Optional[Insight]:
    categories = chart_data.category_distribution
    if not categories:
        return None

    total = sum(c.value for c in categories)
    if total == 0:
        return None

    # max() eşitlikte ilk görüleni seçer
    top = max(categories, key=lambda c: c.value)
    percentage = top.value / total * 100
    return Insight(
        title="Dominant category",
        description=f"{top.category} represents {percentage:.1f}% of total value",
        type=InsightType.INFO,
        value=percentage,
    )


def movement_balance_insight(chart_data: ChartData) -> Optional[Insight]:
    if not chart_data.movement_trends:
        return None

    net = chart_data.movement_trends[-1].net_movement
    if net > 0:
        return Insight(
            title="Movement balance",
            description=f"Surplus of {net:.0f}€ in entries",
            type=InsightType.POSITIVE,
            value=net,
        )
    return Insight(
        title="Movement balance",
        description=f"Deficit of {abs(net):.0f}€ in exits",
        type=InsightType.WARNING,
        value=net,
    )


INSIGHT_RULES = (
    stock_evolution_insight,
    dominant_category_insight,
    movement_balance_insight,
)


def generate_insights(chart_data: ChartData) -> list[Insight]:
    """Kuralları sabit sırayla uygular; verisi olmayan kural atlanır."""
    insights = []
    for rule in INSIGHT_RULES:
        insight = rule(chart_data)
        if insight is not None:
            insights.append(insight)
    return insights

"""Configuration deriver for the dashboard archetype."""

from __future__ import annotations

import re

from mvp_scaffold.models import (
    AnalysisContext,
    DashboardConfig,
    DashboardFilter,
    DashboardMetric,
    DataSource,
)

REDDIT_BASE_URL = "https://www.reddit.com/r/"
REDDIT_REFRESH_MINUTES = 15
MANUAL_REFRESH_MINUTES = 60

_SUBREDDIT_PREFIX = re.compile(r"^/?r/", re.IGNORECASE)
_SUBREDDIT_CHARS = re.compile(r"[^A-Za-z0-9_]")

CANONICAL_METRICS: tuple[DashboardMetric, ...] = (
    DashboardMetric(name="total", label="Всего записей", type="number"),
    DashboardMetric(name="trend", label="Динамика", type="chart"),
    DashboardMetric(name="topItems", label="Топ элементы", type="list"),
    DashboardMetric(name="status", label="Статус обновления", type="status"),
)

CANONICAL_FILTERS: tuple[DashboardFilter, ...] = (
    DashboardFilter(name="period", label="Период", type="select",
                    options=["Сегодня", "Неделя", "Месяц", "Год"]),
    DashboardFilter(name="search", label="Поиск", type="search"),
    DashboardFilter(name="category", label="Категория", type="select",
                    options=["Все", "Категория 1", "Категория 2"]),
)


def derive_dashboard_config(context: AnalysisContext) -> DashboardConfig:
    """Build a ``DashboardConfig`` from *context*.

    A polling Reddit source is added only when the context lists community
    sources; the manual source is always present.
    """
    data_sources: list[DataSource] = []

    communities = [name for name in map(subreddit_name, context.communities) if name]
    if communities:
        data_sources.append(
            DataSource(
                name="Reddit",
                type="api",
                url=REDDIT_BASE_URL + "+".join(communities),
                refresh_interval=REDDIT_REFRESH_MINUTES,
            )
        )

    data_sources.append(
        DataSource(name="Manual Data", type="manual", refresh_interval=MANUAL_REFRESH_MINUTES)
    )

    return DashboardConfig(
        dashboard_name=context.company_name or f"{context.trend.title} Dashboard",
        dashboard_description=(
            context.tagline or f"Дашборд для мониторинга {context.main_pain}"
        ),
        data_sources=data_sources,
        metrics=list(CANONICAL_METRICS),
        filters=list(CANONICAL_FILTERS),
    )


def subreddit_name(community: str) -> str:
    """Normalise ``"r/SaaS"`` or ``"/r/SaaS/"`` to ``"SaaS"``."""
    name = _SUBREDDIT_PREFIX.sub("", community.strip())
    return _SUBREDDIT_CHARS.sub("", name)

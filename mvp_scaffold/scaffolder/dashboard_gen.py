"""File-tree generation for the dashboard archetype.

The page polls at the shortest refresh interval among its data sources and
ships with demo data until a real endpoint is wired in.
"""

from __future__ import annotations

from typing import Any, Optional

from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import (
    AnalysisContext,
    ArchetypeId,
    DashboardConfig,
    DashboardFilter,
    DataSource,
)
from mvp_scaffold.planner.registry import get_definition

from .boilerplate import (
    DEFAULT_README_AUDIENCE,
    BoilerplateGenerator,
    ColorScheme,
    ReadmeSection,
    ReadmeSpec,
    ShellSpec,
    derive_project_name,
    package_slug,
    setup_instructions,
)

DEFAULT_REFRESH_MINUTES = 60
DEFAULT_SEARCH_LABEL = "Поиск"


def refresh_interval_minutes(sources: list[DataSource]) -> int:
    """Shortest positive refresh interval among *sources*, in minutes."""
    intervals = [s.refresh_interval for s in sources if s.refresh_interval]
    return min(intervals) if intervals else DEFAULT_REFRESH_MINUTES


def source_to_js(source: DataSource) -> dict[str, Any]:
    """Shape a data source for the page's ``DataSourceConfig`` interface."""
    data: dict[str, Any] = {"name": source.name, "type": source.type}
    if source.url is not None:
        data["url"] = source.url
    if source.refresh_interval is not None:
        data["refreshInterval"] = source.refresh_interval
    return data


def _filter(filters: list[DashboardFilter], name: str) -> Optional[DashboardFilter]:
    return next((f for f in filters if f.name == name), None)


class DashboardGenerator:
    """Renders the dashboard project tree."""

    archetype = ArchetypeId.DASHBOARD
    template_dir = "dashboard"

    PALETTE: dict[str, str] = {
        "50": "#eff6ff",
        "100": "#dbeafe",
        "500": "#3b82f6",
        "600": "#2563eb",
        "700": "#1d4ed8",
    }
    EXTRA_DEPENDENCIES: tuple[str, ...] = ("recharts", "swr")

    SOLUTION = "интерактивный дашборд для мониторинга и визуализации данных в реальном времени."
    CAPABILITIES: tuple[tuple[str, str], ...] = (
        ("Realtime данные", "автоматическое обновление по расписанию источников"),
        ("Интерактивные графики", "Area и Pie charts"),
        ("Фильтрация и поиск", "быстрый доступ к нужным данным"),
        ("Экспорт в CSV", "выгрузка для дальнейшего анализа"),
        ("Адаптивный дизайн", "работает на любых устройствах"),
    )
    TECH_STACK: tuple[tuple[str, str], ...] = (
        ("Framework", "Next.js 14"),
        ("Styling", "Tailwind CSS"),
        ("Charts", "Recharts"),
        ("Data Fetching", "SWR"),
        ("Icons", "Lucide React"),
    )
    DATA_SECTION = ReadmeSection(
        title="📊 Подключение данных",
        body=(
            "Дашборд использует демо-данные по умолчанию. "
            "Для подключения реальных данных:\n"
            "\n"
            "1. Создайте API endpoint в `src/app/api/data/route.ts`\n"
            "2. Обновите fetcher в `src/app/page.tsx`\n"
            "3. Настройте интервал обновления (`REFRESH_INTERVAL` в `.env.local`)"
        ),
    )

    def __init__(self, boilerplate: BoilerplateGenerator) -> None:
        self.boilerplate = boilerplate
        self.renderer = boilerplate.renderer

    def generate_files(
        self, config: DashboardConfig, context: AnalysisContext
    ) -> dict[str, str]:
        """Return the complete file map for *config*, in assembly order."""
        project_name = derive_project_name(context, self.archetype)
        refresh_minutes = refresh_interval_minutes(config.data_sources)
        polling = next((s for s in config.data_sources if s.type == "api" and s.url), None)

        files = self.boilerplate.generate(
            ShellSpec(
                template_dir=self.template_dir,
                package_name=package_slug(project_name),
                title=config.dashboard_name,
                description=config.dashboard_description,
                extra_dependencies=list(self.EXTRA_DEPENDENCIES),
                palette=self.PALETTE,
                scheme=ColorScheme(dark_background="15 23 42"),
                env_context={
                    "refresh_interval": refresh_minutes,
                    "reddit_url": polling.url if polling else None,
                },
            )
        )

        period = _filter(config.filters, "period")
        category = _filter(config.filters, "category")
        search = _filter(config.filters, "search")

        files["src/app/page.tsx"] = self.renderer.render(
            f"{self.template_dir}/page.tsx.j2",
            {
                "safe": {
                    "dashboard_name": escape_for_literal(config.dashboard_name),
                    "dashboard_description": escape_for_literal(config.dashboard_description),
                    "search_label": escape_for_literal(
                        search.label if search else DEFAULT_SEARCH_LABEL
                    ),
                },
                "metrics": [m.model_dump() for m in config.metrics],
                "data_sources": [source_to_js(s) for s in config.data_sources],
                "period_options": list(period.options) if period else [],
                "category_options": list(category.options) if category else [],
                "refresh_interval_ms": refresh_minutes * 60_000,
            },
        )
        files["README.md"] = self.boilerplate.render_readme(
            ReadmeSpec(
                project_name=project_name,
                description=config.dashboard_description,
                problem=context.main_pain,
                solution=self.SOLUTION,
                audience=context.audience(DEFAULT_README_AUDIENCE),
                capabilities=list(self.CAPABILITIES),
                setup_steps=setup_instructions(project_name),
                extra_sections=[self.DATA_SECTION],
                tech_stack=list(self.TECH_STACK),
                features=list(get_definition(self.archetype).features),
            )
        )
        return files

"""Shared pytest fixtures for the MVP scaffolder test suite.

Provides reusable fixtures for:
- Raw (JSON-shaped) analysis contexts, from title-only to fully populated
- The four reference scenarios (review analysis, pricing calculator,
  unvalidated idea, hostile title)
- Settings, a template renderer and a shared boilerplate generator
- Helpers for checking generated TypeScript literals
"""

from __future__ import annotations

import copy
import re
from typing import Any

import pytest

from mvp_scaffold.config import Settings
from mvp_scaffold.models import AnalysisContext, load_context
from mvp_scaffold.scaffolder.boilerplate import BoilerplateGenerator
from mvp_scaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Raw contexts
# ---------------------------------------------------------------------------

HOSTILE_TITLE = "My `Tool` ${x}"


@pytest.fixture
def minimal_context_data() -> dict[str, Any]:
    """Only the required ``trend.title``."""
    return {"trend": {"title": "Новый продукт"}}


@pytest.fixture
def full_context_data() -> dict[str, Any]:
    """A fully populated analysis context."""
    return {
        "trend": {
            "id": "trend-42",
            "title": "Отзывы о SaaS",
            "category": "B2B",
            "why_trending": "Команды тонут в обратной связи",
        },
        "analysis": {
            "main_pain": "отзывы клиентов разбросаны по Reddit и их сложно анализировать",
            "key_pain_points": [
                "Нет единого места для отзывов",
                "Ручной разбор занимает часы",
                "Сложно заметить тренды",
            ],
            "target_audience": {
                "primary": "Продакт-менеджеры SaaS",
                "segments": [
                    {
                        "name": "Стартапы",
                        "size": "10k",
                        "willingness_to_pay": "medium",
                        "where_to_find": "r/SaaS",
                    }
                ],
            },
            "opportunities": ["Автоматический дайджест отзывов"],
            "risks": ["Ограничения API Reddit"],
        },
        "sources": {
            "reddit": {"communities": ["r/SaaS", "/r/startups/"]},
            "google_trends": {"related_queries": [{"query": "review analysis"}]},
        },
        "competition": {
            "competitors": [
                {"name": "Feedbackly", "website": "https://example.com", "description": "x"}
            ],
            "strategic_positioning": "Быстрее и дешевле",
        },
        "pitch": {"company_name": "Review Radar", "tagline": "Все отзывы в одном окне"},
    }


@pytest.fixture
def scenario_a_data() -> dict[str, Any]:
    """Review analysis: classifies as ai-tool with URL input and table output."""
    return {
        "trend": {"title": "Анализ отзывов"},
        "analysis": {
            "main_pain": "отзывы клиентов разбросаны по Reddit и их сложно анализировать",
        },
    }


@pytest.fixture
def scenario_b_data() -> dict[str, Any]:
    """Subscription pricing: classifies as calculator with the cost schema."""
    return {
        "trend": {"title": "Командные тарифы"},
        "analysis": {"main_pain": "сложно рассчитать стоимость подписки для команды"},
    }


@pytest.fixture
def scenario_c_data() -> dict[str, Any]:
    """Unvalidated idea: no archetype reaches the threshold."""
    return {
        "trend": {"title": "Новый продукт"},
        "analysis": {"main_pain": "не уверены, нужен ли рынку этот продукт"},
    }


@pytest.fixture
def scenario_d_data() -> dict[str, Any]:
    """A title full of characters that are special inside JS literals."""
    return {"trend": {"title": HOSTILE_TITLE}}


@pytest.fixture
def dashboard_context_data() -> dict[str, Any]:
    return {
        "trend": {"title": "Reddit Monitor"},
        "analysis": {
            "main_pain": "нужен мониторинг упоминаний и статистика по сабреддитам",
        },
        "sources": {"reddit": {"communities": ["r/SaaS", "r/startups"]}},
    }


@pytest.fixture
def full_context(full_context_data) -> AnalysisContext:
    return load_context(full_context_data)


@pytest.fixture
def minimal_context(minimal_context_data) -> AnalysisContext:
    return load_context(minimal_context_data)


@pytest.fixture
def make_context():
    """Factory: build an ``AnalysisContext`` from keyword overrides.

    ``make_context(main_pain="...", pains=[...], title="...")``
    """

    def _make(
        title: str = "Новый продукт",
        main_pain: str | None = None,
        pains: list[str] | None = None,
        **sections: Any,
    ) -> AnalysisContext:
        data: dict[str, Any] = {"trend": {"title": title}}
        if main_pain is not None or pains is not None:
            data["analysis"] = {
                "main_pain": main_pain or "",
                "key_pain_points": list(pains or []),
            }
        data.update(copy.deepcopy(sections))
        return load_context(data)

    return _make


# ---------------------------------------------------------------------------
# Scaffolder plumbing
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def boilerplate(renderer, settings) -> BoilerplateGenerator:
    return BoilerplateGenerator(renderer, settings)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def unescaped_backticks(source: str) -> int:
    """Count backticks not preceded by an odd number of backslashes."""
    count = 0
    for match in re.finditer("`", source):
        backslashes = 0
        i = match.start() - 1
        while i >= 0 and source[i] == "\\":
            backslashes += 1
            i -= 1
        if backslashes % 2 == 0:
            count += 1
    return count


@pytest.fixture
def backtick_counter():
    """Expose :func:`unescaped_backticks` to test modules."""
    return unescaped_backticks

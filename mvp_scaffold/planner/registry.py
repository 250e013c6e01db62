"""Static archetype registry.

The declaration order of ``ARCHETYPES`` is significant: the classifier
breaks score ties in favour of the archetype declared first.
"""

from __future__ import annotations

from typing import Optional

from mvp_scaffold.models import ArchetypeDefinition, ArchetypeId, Complexity


class UnknownArchetypeError(ValueError):
    """Raised when a string does not name one of the registered archetypes."""


ARCHETYPES: tuple[ArchetypeDefinition, ...] = (
    ArchetypeDefinition(
        id=ArchetypeId.AI_TOOL,
        name="AI Tool",
        name_ru="AI Инструмент",
        description="Interactive AI-powered tool with text/URL input and intelligent analysis",
        description_ru="Интерактивный AI-инструмент с вводом текста/URL и интеллектуальным анализом",
        icon="🤖",
        keywords=(
            "анализ", "analysis", "текст", "text", "отзывы", "reviews", "feedback",
            "генерация", "generation", "summary", "саммари", "обработка", "processing",
            "sentiment", "тональность", "extraction", "извлечение", "ai", "ml",
            "nlp", "классификация", "classification", "рекомендации", "recommendations",
        ),
        features=(
            "AI-обработка входных данных",
            "Парсинг URL (Reddit, Product Hunt, etc.)",
            "Структурированный вывод результатов",
            "История запросов",
            "Экспорт результатов",
        ),
        tech_stack=("Next.js", "OpenAI API", "Tailwind CSS", "Cheerio"),
        complexity=Complexity.MEDIUM,
        generation_time="2-3 минуты",
    ),
    ArchetypeDefinition(
        id=ArchetypeId.CALCULATOR,
        name="Calculator",
        name_ru="Калькулятор",
        description="Interactive calculator with form inputs and instant calculations",
        description_ru="Интерактивный калькулятор с формой ввода и мгновенными расчётами",
        icon="🧮",
        keywords=(
            "расчёт", "calculation", "калькулятор", "calculator", "сравнение", "comparison",
            "стоимость", "cost", "цена", "price", "бюджет", "budget", "roi", "окупаемость",
            "оценка", "estimate", "прогноз", "forecast", "конверсия", "conversion",
            "рассчит",
        ),
        features=(
            "Форма с валидацией",
            "Мгновенные расчёты",
            "Визуализация результатов",
            "Сохранение сценариев",
            "Сравнение вариантов",
        ),
        tech_stack=("Next.js", "React Hook Form", "Tailwind CSS", "Chart.js"),
        complexity=Complexity.LOW,
        generation_time="1-2 минуты",
    ),
    ArchetypeDefinition(
        id=ArchetypeId.DASHBOARD,
        name="Dashboard",
        name_ru="Дашборд",
        description="Data aggregation dashboard with visualization and filtering",
        description_ru="Дашборд агрегации данных с визуализацией и фильтрацией",
        icon="📊",
        keywords=(
            "мониторинг", "monitoring", "трекинг", "tracking", "агрегация", "aggregation",
            "дашборд", "dashboard", "визуализация", "visualization", "метрики", "metrics",
            "статистика", "statistics", "отчёт", "report", "аналитика", "analytics",
        ),
        features=(
            "Агрегация данных из источников",
            "Интерактивные графики",
            "Фильтры и поиск",
            "Автообновление данных",
            "Экспорт отчётов",
        ),
        tech_stack=("Next.js", "Recharts", "Tailwind CSS", "SWR"),
        complexity=Complexity.MEDIUM,
        generation_time="2-3 минуты",
    ),
    ArchetypeDefinition(
        id=ArchetypeId.LANDING_WAITLIST,
        name="Landing + Waitlist",
        name_ru="Лендинг + Waitlist",
        description="Landing page with email collection for idea validation",
        description_ru="Лендинг со сбором email для валидации идеи",
        icon="🚀",
        keywords=(
            "валидация", "validation", "waitlist", "лист ожидания", "early access",
            "ранний доступ", "запуск", "launch", "подписка", "subscription",
        ),
        features=(
            "Привлекательный лендинг",
            "Форма сбора email",
            "Социальные доказательства",
            "Интеграция с email-сервисами",
            "Аналитика конверсий",
        ),
        tech_stack=("Next.js", "Tailwind CSS", "Supabase", "Resend"),
        complexity=Complexity.LOW,
        generation_time="1-2 минуты",
    ),
)

_BY_ID: dict[ArchetypeId, ArchetypeDefinition] = {d.id: d for d in ARCHETYPES}


def lookup(archetype_id: ArchetypeId | str) -> Optional[ArchetypeDefinition]:
    """Return the definition for *archetype_id*, or ``None`` if unknown."""
    try:
        key = ArchetypeId(archetype_id)
    except ValueError:
        return None
    return _BY_ID.get(key)


def resolve_archetype_id(value: ArchetypeId | str) -> ArchetypeId:
    """Coerce *value* to an ``ArchetypeId``.

    Raises:
        UnknownArchetypeError: If *value* is not a registered id.
    """
    try:
        return ArchetypeId(value)
    except ValueError:
        valid = ", ".join(d.id.value for d in ARCHETYPES)
        raise UnknownArchetypeError(
            f"Unknown archetype {value!r}; expected one of: {valid}"
        ) from None


def get_definition(archetype_id: ArchetypeId | str) -> ArchetypeDefinition:
    """Like :func:`lookup` but raises ``UnknownArchetypeError`` when missing."""
    return _BY_ID[resolve_archetype_id(archetype_id)]


def archetype_ids() -> list[ArchetypeId]:
    """All archetype ids in registry order."""
    return [d.id for d in ARCHETYPES]

"""Configuration deriver for the AI-tool archetype.

Data priority: product specification > pain analysis > defaults.  The
returned config holds raw text; escaping happens in the generator right
before the text is spliced into source.
"""

from __future__ import annotations

from typing import Optional

from mvp_scaffold.models import AIToolConfig, AnalysisContext, ProductSpecification

INPUT_TYPE_MAP: dict[str, str] = {
    "text": "text",
    "url": "url",
    "form": "form",
    "file": "text",
    "selection": "form",
    "voice": "text",
    "image": "text",
}

OUTPUT_FORMAT_MAP: dict[str, str] = {
    "text": "text",
    "report": "text",
    "score": "json",
    "list": "list",
    "visualization": "json",
    "recommendation": "list",
    "action": "list",
}

# Substrings in the main pain that point at review/feedback analysis.
FEEDBACK_MARKERS: tuple[str, ...] = ("отзыв", "review", "feedback", "комментар")

DEFAULT_AUDIENCE = "пользователи"
TEXT_PLACEHOLDER = "Введите текст для анализа..."
URL_PLACEHOLDER = "Вставьте ссылку на Reddit пост, Product Hunt, или другой источник..."

_FORMAT_INSTRUCTIONS: dict[str, str] = {
    "list": "Используй bullet points для структурирования",
    "report": "Сформируй детальный отчёт с заголовками",
    "score": "Выдай числовую оценку с обоснованием",
    "recommendation": "Дай конкретные рекомендации к действию",
}


def derive_ai_tool_config(context: AnalysisContext) -> AIToolConfig:
    """Build an ``AIToolConfig`` from *context*. Never raises on missing data."""
    main_pain = context.main_pain
    audience = context.audience(DEFAULT_AUDIENCE)
    spec = context.product_spec

    if spec is not None:
        input_type = INPUT_TYPE_MAP.get(spec.user_input.input_type, "text")
        output_format = OUTPUT_FORMAT_MAP.get(spec.user_output.output_format, "list")
        placeholder = _placeholder_from_spec(spec)
    else:
        input_type, output_format = _shape_from_pain(main_pain)
        placeholder = URL_PLACEHOLDER if input_type == "url" else TEXT_PLACEHOLDER

    hint = spec.magic_location.ai_prompt_hint.strip() if spec else ""
    if spec is not None and hint:
        system_prompt = _spec_system_prompt(context, spec, hint, main_pain, audience)
    else:
        system_prompt = _fallback_system_prompt(context, main_pain, audience)

    tool_name = context.company_name or f"{context.trend.title} Analyzer"
    if spec is not None and spec.user_output.value_proposition:
        description = spec.user_output.value_proposition
    else:
        description = context.tagline or f"Умный анализатор для {main_pain}"

    return AIToolConfig(
        tool_name=tool_name,
        tool_description=description,
        input_type=input_type,
        input_placeholder=placeholder,
        system_prompt=system_prompt,
        output_format=output_format,
        example_input=_example_input(spec, input_type),
        example_output=(
            spec.user_output.example if spec and spec.user_output.example
            else "Структурированные результаты анализа появятся здесь"
        ),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _shape_from_pain(main_pain: str) -> tuple[str, str]:
    """Keyword fallback for ``(input_type, output_format)``."""
    pain = main_pain.lower()
    if any(marker in pain for marker in FEEDBACK_MARKERS):
        return "url", "table"
    return "text", "list"


def _placeholder_from_spec(spec: ProductSpecification) -> str:
    fields = spec.user_input.required_fields
    if fields:
        first = fields[0]
        return first.example or first.description or spec.user_input.primary_input or TEXT_PLACEHOLDER
    return spec.user_input.primary_input or TEXT_PLACEHOLDER


def _example_input(spec: Optional[ProductSpecification], input_type: str) -> str:
    if spec is not None and spec.user_input.required_fields:
        example = spec.user_input.required_fields[0].example
        if example:
            return example
    if input_type == "url":
        return "https://www.reddit.com/r/startups/comments/..."
    return "Пример текста для анализа..."


def _numbered(items: list[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def _fallback_system_prompt(context: AnalysisContext, main_pain: str, audience: str) -> str:
    lines = [
        f'Ты - эксперт по анализу в области "{context.trend.title}".',
        "",
        f"Твоя задача: {main_pain}",
        "",
        f"Целевая аудитория: {audience}",
    ]
    if context.pain_points:
        lines += ["", "При анализе обращай внимание на:", _numbered(context.pain_points)]
    lines += [
        "",
        "Формат ответа:",
        "- Всегда структурируй ответ",
        "- Используй bullet points для ключевых находок",
        "- Выдели главные инсайты",
        "- Добавь рекомендации по действиям",
        "",
        "Отвечай на русском языке, если не указано иное.",
    ]
    return "\n".join(lines)


def _spec_system_prompt(
    context: AnalysisContext,
    spec: ProductSpecification,
    hint: str,
    main_pain: str,
    audience: str,
) -> str:
    lines = [
        f'Ты - эксперт по анализу в области "{context.trend.title}".',
        "",
        hint,
        "",
        "Контекст задачи:",
        f"- Главная боль пользователя: {main_pain}",
        f"- Целевая аудитория: {audience}",
    ]
    if spec.user_output.primary_output:
        lines.append(f"- Что пользователь ожидает получить: {spec.user_output.primary_output}")
    if spec.user_output.example:
        lines.append(f"- Пример выходных данных: {spec.user_output.example}")
    if context.pain_points:
        lines += ["", "Дополнительные аспекты для анализа:", _numbered(context.pain_points)]

    lines += ["", "Формат ответа:"]
    instruction = _FORMAT_INSTRUCTIONS.get(spec.user_output.output_format)
    if instruction:
        lines.append(f"- {instruction}")
    lines += [
        "- Выдели главные инсайты",
        "- Отвечай на русском языке, если не указано иное.",
    ]
    return "\n".join(lines)

"""Configuration deriver for the landing + waitlist archetype."""

from __future__ import annotations

from mvp_scaffold.models import AnalysisContext, FeatureCard, LandingConfig

MAX_BENEFITS = 3
CTA_TEXT = "Получить ранний доступ"

GENERIC_BENEFITS: tuple[str, ...] = (
    "Экономьте время на рутинных задачах",
    "Получайте результаты быстрее",
    "Масштабируйте без лишних затрат",
)


def derive_landing_config(context: AnalysisContext) -> LandingConfig:
    """Build a ``LandingConfig`` from *context*.

    Benefits come from the first three pain points, padded with generic
    copy.  There are always exactly six feature cards.
    """
    main_pain = context.main_pain
    pains = context.pain_points
    opportunities = context.opportunities

    benefits = [f"Решаем проблему: {pain}" for pain in pains[:MAX_BENEFITS]]
    for generic in GENERIC_BENEFITS:
        if len(benefits) >= MAX_BENEFITS:
            break
        benefits.append(generic)

    features = [
        FeatureCard(
            icon="⚡",
            title="Быстрый старт",
            description="Начните использовать за считанные минуты без сложной настройки",
        ),
        FeatureCard(
            icon="🎯",
            title="Точные результаты",
            description=_pain_or(pains, 0, "Получайте именно то, что вам нужно"),
        ),
        FeatureCard(
            icon="💡",
            title="Умные решения",
            description=_pain_or(pains, 1, "AI-powered подход к вашим задачам"),
        ),
        FeatureCard(
            icon="📈",
            title="Рост бизнеса",
            description=opportunities[0] if opportunities else "Масштабируйтесь без ограничений",
        ),
        FeatureCard(
            icon="🔒",
            title="Безопасность",
            description="Ваши данные защищены по высшим стандартам",
        ),
        FeatureCard(
            icon="🤝",
            title="Поддержка 24/7",
            description="Всегда на связи, чтобы помочь вам",
        ),
    ]

    return LandingConfig(
        product_name=context.company_name or context.trend.title,
        tagline=context.tagline or f"Решение для {main_pain}",
        problem_statement=main_pain,
        solution_benefits=benefits,
        cta_text=CTA_TEXT,
        features=features,
    )


def _pain_or(pains: list[str], index: int, default: str) -> str:
    if len(pains) > index and pains[index]:
        return f"Решаем: {pains[index]}"
    return default

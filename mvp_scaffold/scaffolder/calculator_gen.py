"""File-tree generation for the calculator archetype."""

from __future__ import annotations

from typing import Any

from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import AnalysisContext, ArchetypeId, CalculatorConfig, CalculatorField
from mvp_scaffold.planner.registry import get_definition

from .boilerplate import (
    DEFAULT_README_AUDIENCE,
    BoilerplateGenerator,
    ColorScheme,
    ReadmeSpec,
    ShellSpec,
    derive_project_name,
    package_slug,
    setup_instructions,
)


def field_to_js(field: CalculatorField) -> dict[str, Any]:
    """Shape a calculator field for the page's ``FieldConfig`` interface.

    Keys are camelCase; unset optional keys and empty option lists are left
    out.
    """
    data: dict[str, Any] = {"name": field.name, "label": field.label, "type": field.type}
    if field.placeholder is not None:
        data["placeholder"] = field.placeholder
    if field.options:
        data["options"] = list(field.options)
    if field.min is not None:
        data["min"] = field.min
    if field.max is not None:
        data["max"] = field.max
    if field.default_value is not None:
        data["defaultValue"] = field.default_value
    return data


class CalculatorGenerator:
    """Renders the calculator project tree. No env vars are required."""

    archetype = ArchetypeId.CALCULATOR
    template_dir = "calculator"

    PALETTE: dict[str, str] = {
        "50": "#ecfdf5",
        "100": "#d1fae5",
        "500": "#10b981",
        "600": "#059669",
        "700": "#047857",
    }
    EXTRA_DEPENDENCIES: tuple[str, ...] = ("recharts",)

    SOLUTION = (
        "интерактивный калькулятор, который помогает быстро рассчитать ключевые "
        "метрики и принять обоснованные решения."
    )
    CAPABILITIES: tuple[tuple[str, str], ...] = (
        ("Мгновенные расчёты", "результаты обновляются в реальном времени"),
        ("Визуализация", "графики и диаграммы для наглядности"),
        ("Сохранение сценариев", "сравнивайте разные варианты"),
        ("Экспорт результатов", "выгрузка в текстовый файл"),
        ("Адаптивный дизайн", "работает на любых устройствах"),
    )
    TECH_STACK: tuple[tuple[str, str], ...] = (
        ("Framework", "Next.js 14"),
        ("Styling", "Tailwind CSS"),
        ("Charts", "Recharts"),
        ("Icons", "Lucide React"),
    )

    def __init__(self, boilerplate: BoilerplateGenerator) -> None:
        self.boilerplate = boilerplate
        self.renderer = boilerplate.renderer

    def generate_files(
        self, config: CalculatorConfig, context: AnalysisContext
    ) -> dict[str, str]:
        """Return the complete file map for *config*, in assembly order."""
        project_name = derive_project_name(context, self.archetype)

        files = self.boilerplate.generate(
            ShellSpec(
                template_dir=self.template_dir,
                package_name=package_slug(project_name),
                title=config.calculator_name,
                description=config.calculator_description,
                extra_dependencies=list(self.EXTRA_DEPENDENCIES),
                palette=self.PALETTE,
                scheme=ColorScheme(dark_background="17 17 27"),
            )
        )

        files["src/app/page.tsx"] = self.renderer.render(
            f"{self.template_dir}/page.tsx.j2",
            {
                "safe": {
                    "calculator_name": escape_for_literal(config.calculator_name),
                    "calculator_description": escape_for_literal(config.calculator_description),
                    "formula": escape_for_literal(config.formula),
                },
                "kind": config.kind.value,
                "fields": [field_to_js(f) for f in config.fields],
                "result_fields": [r.model_dump() for r in config.result_fields],
            },
        )
        files["README.md"] = self.boilerplate.render_readme(
            ReadmeSpec(
                project_name=project_name,
                description=config.calculator_description,
                problem=context.main_pain,
                solution=self.SOLUTION,
                audience=context.audience(DEFAULT_README_AUDIENCE),
                capabilities=list(self.CAPABILITIES),
                setup_steps=setup_instructions(project_name),
                tech_stack=list(self.TECH_STACK),
                features=list(get_definition(self.archetype).features),
            )
        )
        return files

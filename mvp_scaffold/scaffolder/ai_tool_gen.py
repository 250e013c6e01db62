"""File-tree generation for the AI-tool archetype.

Produces the shared boilerplate plus a client page with text/URL input,
history and export, and ``src/app/api/analyze/route.ts``: a server handler
that extracts content from Reddit, Product Hunt or generic pages and sends it
to the OpenAI chat completion API.
"""

from __future__ import annotations

from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import AIToolConfig, AnalysisContext, ArchetypeId
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


class AIToolGenerator:
    """Renders the AI-tool project tree."""

    archetype = ArchetypeId.AI_TOOL
    template_dir = "ai_tool"

    PALETTE: dict[str, str] = {
        "50": "#eef2ff",
        "100": "#e0e7ff",
        "500": "#6366f1",
        "600": "#4f46e5",
        "700": "#4338ca",
    }
    EXTRA_DEPENDENCIES: tuple[str, ...] = ("openai", "react-markdown", "cheerio")

    SOLUTION = (
        "это AI-инструмент, который автоматизирует анализ и помогает получить "
        "ценные инсайты за минуты вместо часов."
    )
    CAPABILITIES: tuple[tuple[str, str], ...] = (
        ("Ввод текста или URL", "анализируйте тексты напрямую или извлекайте контент из ссылок"),
        ("Парсинг источников", "автоматическое извлечение данных с Reddit, Product Hunt и других платформ"),
        ("AI-анализ", "интеллектуальная обработка с помощью GPT-4"),
        ("Структурированный вывод", "результаты в удобном формате"),
        ("История запросов", "сохранение предыдущих анализов"),
        ("Экспорт", "выгрузка результатов в Markdown"),
    )
    TECH_STACK: tuple[tuple[str, str], ...] = (
        ("Framework", "Next.js 14"),
        ("AI", "OpenAI GPT-4"),
        ("Styling", "Tailwind CSS"),
        ("Parsing", "Cheerio"),
    )

    def __init__(self, boilerplate: BoilerplateGenerator) -> None:
        self.boilerplate = boilerplate
        self.renderer = boilerplate.renderer
        self.settings = boilerplate.settings

    def generate_files(self, config: AIToolConfig, context: AnalysisContext) -> dict[str, str]:
        """Return the complete file map for *config*, in assembly order."""
        project_name = derive_project_name(context, self.archetype)

        files = self.boilerplate.generate(
            ShellSpec(
                template_dir=self.template_dir,
                package_name=package_slug(project_name),
                title=config.tool_name,
                description=config.tool_description,
                extra_dependencies=list(self.EXTRA_DEPENDENCIES),
                palette=self.PALETTE,
                scheme=ColorScheme(dark_background="17 17 27"),
                env_context={"openai_model": self.settings.openai_model},
            )
        )

        safe = {
            "tool_name": escape_for_literal(config.tool_name),
            "tool_description": escape_for_literal(config.tool_description),
            "input_placeholder": escape_for_literal(config.input_placeholder),
            "example_input": escape_for_literal(config.example_input),
            "example_output": escape_for_literal(config.example_output),
            "system_prompt": escape_for_literal(config.system_prompt),
        }
        # The page offers text and URL tabs only; form input starts on text.
        initial_input_type = "url" if config.input_type == "url" else "text"

        files["src/app/page.tsx"] = self.renderer.render(
            f"{self.template_dir}/page.tsx.j2",
            {
                "safe": safe,
                "initial_input_type": initial_input_type,
                "output_format": config.output_format,
            },
        )
        files["src/app/api/analyze/route.ts"] = self.renderer.render(
            f"{self.template_dir}/route.ts.j2",
            {
                "safe": safe,
                "output_format": config.output_format,
                "openai_model": self.settings.openai_model,
            },
        )
        files["README.md"] = self.boilerplate.render_readme(
            ReadmeSpec(
                project_name=project_name,
                description=config.tool_description,
                problem=context.main_pain,
                solution=self.SOLUTION,
                audience=context.audience(DEFAULT_README_AUDIENCE),
                capabilities=list(self.CAPABILITIES),
                setup_steps=setup_instructions(project_name),
                env_vars=[
                    "OPENAI_API_KEY=sk-ваш-ключ",
                    f"OPENAI_MODEL={self.settings.openai_model}",
                ],
                tech_stack=list(self.TECH_STACK),
                features=list(get_definition(self.archetype).features),
            )
        )
        return files

"""File-tree generation for the landing + waitlist archetype."""

from __future__ import annotations

from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import AnalysisContext, ArchetypeId, LandingConfig
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


def split_headline(product_name: str) -> tuple[str, str]:
    """Split *product_name* into the gradient accent (first word) and the rest."""
    accent, _, rest = product_name.strip().partition(" ")
    return accent, rest.strip()


class LandingGenerator:
    """Renders the landing page project tree (dark theme, no dark-mode switch)."""

    archetype = ArchetypeId.LANDING_WAITLIST
    template_dir = "landing"

    PALETTE: dict[str, str] = {
        "50": "#faf5ff",
        "100": "#f3e8ff",
        "500": "#a855f7",
        "600": "#9333ea",
        "700": "#7e22ce",
    }
    EXTRA_DEPENDENCIES: tuple[str, ...] = ("framer-motion",)

    SOLUTION = "современный лендинг с waitlist для валидации идеи и сбора ранних пользователей."
    CAPABILITIES: tuple[tuple[str, str], ...] = (
        ("Современный дизайн", "градиенты, анимации, glassmorphism"),
        ("Email сбор", "waitlist с локальным хранением"),
        ("Адаптивность", "идеально на любых устройствах"),
        ("SEO оптимизация", "метатеги и Open Graph"),
        ("Социальные доказательства", "счётчик подписчиков"),
    )
    TECH_STACK: tuple[tuple[str, str], ...] = (
        ("Framework", "Next.js 14"),
        ("Styling", "Tailwind CSS"),
        ("Animations", "Framer Motion"),
        ("Icons", "Lucide React"),
    )
    INTEGRATIONS_SECTION = ReadmeSection(
        title="📧 Интеграция с сервисами",
        body=(
            "### Supabase (хранение email)\n"
            "\n"
            "1. Создайте проект на [supabase.com](https://supabase.com)\n"
            "2. Создайте таблицу `subscribers`\n"
            "3. Добавьте переменные в `.env.local`\n"
            "\n"
            "### Resend (отправка email)\n"
            "\n"
            "1. Зарегистрируйтесь на [resend.com](https://resend.com)\n"
            "2. Получите API ключ\n"
            "3. Добавьте в `.env.local`"
        ),
    )

    def __init__(self, boilerplate: BoilerplateGenerator) -> None:
        self.boilerplate = boilerplate
        self.renderer = boilerplate.renderer

    def generate_files(self, config: LandingConfig, context: AnalysisContext) -> dict[str, str]:
        """Return the complete file map for *config*, in assembly order."""
        project_name = derive_project_name(context, self.archetype)

        files = self.boilerplate.generate(
            ShellSpec(
                template_dir=self.template_dir,
                package_name=package_slug(project_name),
                title=config.product_name,
                description=config.tagline,
                extra_dependencies=list(self.EXTRA_DEPENDENCIES),
                palette=self.PALETTE,
                scheme=ColorScheme(
                    foreground="255 255 255", background="0 0 0", dark_background=None
                ),
                float_animation=True,
                meta_title=f"{config.product_name} - {config.tagline}",
                meta_description=config.problem_statement,
                open_graph=True,
            )
        )

        accent, rest = split_headline(config.product_name)
        files["src/app/page.tsx"] = self.renderer.render(
            f"{self.template_dir}/page.tsx.j2",
            {
                "safe": {
                    "product_name": escape_for_literal(config.product_name),
                    "headline_accent": escape_for_literal(accent),
                    "headline_rest": escape_for_literal(rest),
                    "tagline": escape_for_literal(config.tagline),
                    "problem_statement": escape_for_literal(config.problem_statement),
                    "cta_text": escape_for_literal(config.cta_text),
                },
                "benefits": list(config.solution_benefits),
                "features": [f.model_dump() for f in config.features],
            },
        )
        files["README.md"] = self.boilerplate.render_readme(
            ReadmeSpec(
                project_name=project_name,
                description=config.tagline,
                problem=context.main_pain,
                solution=self.SOLUTION,
                audience=context.audience(DEFAULT_README_AUDIENCE),
                capabilities=list(self.CAPABILITIES),
                setup_steps=setup_instructions(project_name),
                extra_sections=[self.INTEGRATIONS_SECTION],
                tech_stack=list(self.TECH_STACK),
                features=list(get_definition(self.archetype).features),
            )
        )
        return files

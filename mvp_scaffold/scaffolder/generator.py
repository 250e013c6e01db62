"""MVP project generator -- the orchestration entry point.

Takes an analysis context (an ``AnalysisContext`` or its JSON-shaped dict),
selects an archetype (classifier result or an explicit override), derives
the archetype configuration and renders the complete Next.js project as an
in-memory file map.

Generation is synchronous and pure: nothing is written to disk here.  Use
:func:`mvp_scaffold.utils.write_project` to persist a result.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Optional

from mvp_scaffold.config import Settings
from mvp_scaffold.models import (
    AnalysisContext,
    ArchetypeId,
    GeneratedProject,
    Recommendation,
    load_context,
)
from mvp_scaffold.planner import (
    archetype_ids,
    classify,
    derive_ai_tool_config,
    derive_calculator_config,
    derive_dashboard_config,
    derive_landing_config,
    get_definition,
    resolve_archetype_id,
)

from .ai_tool_gen import AIToolGenerator
from .boilerplate import BoilerplateGenerator, derive_project_name, setup_instructions
from .calculator_gen import CalculatorGenerator
from .dashboard_gen import DashboardGenerator
from .landing_gen import LandingGenerator
from .templates import TemplateRenderer

RECOMMENDATION_REASONS: dict[ArchetypeId, str] = {
    ArchetypeId.AI_TOOL: (
        "Боль связана с анализом, обработкой текста или отзывов - "
        "идеально для AI-инструмента"
    ),
    ArchetypeId.CALCULATOR: (
        "Боль связана с расчётами, сравнением или финансами - калькулятор решит это"
    ),
    ArchetypeId.DASHBOARD: (
        "Боль связана с мониторингом, трекингом или агрегацией данных - нужен дашборд"
    ),
    ArchetypeId.LANDING_WAITLIST: (
        "Идея новая или ниша не ясна - лендинг поможет валидировать спрос"
    ),
}


# ---------------------------------------------------------------------------
# MVPGenerator
# ---------------------------------------------------------------------------


class MVPGenerator:
    """Generates a complete MVP project for an analysis context.

    One instance holds the template environment and can be reused across
    any number of contexts; ``generate`` keeps no per-call state on the
    instance.

    Usage::

        generator = MVPGenerator()
        project = generator.generate(context)
        project.files["src/app/page.tsx"]
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self.boilerplate = BoilerplateGenerator(self.renderer, self.settings)

        # Archetype -> (config deriver, file-tree generator)
        self._strategies: dict[ArchetypeId, tuple[Callable[[AnalysisContext], Any], Any]] = {
            ArchetypeId.AI_TOOL: (derive_ai_tool_config, AIToolGenerator(self.boilerplate)),
            ArchetypeId.CALCULATOR: (
                derive_calculator_config,
                CalculatorGenerator(self.boilerplate),
            ),
            ArchetypeId.DASHBOARD: (derive_dashboard_config, DashboardGenerator(self.boilerplate)),
            ArchetypeId.LANDING_WAITLIST: (
                derive_landing_config,
                LandingGenerator(self.boilerplate),
            ),
        }

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        context: AnalysisContext | dict[str, Any],
        archetype: ArchetypeId | str | None = None,
    ) -> GeneratedProject:
        """Generate the project for *context*.

        Args:
            context: The analysis context, or raw JSON-shaped data for it.
            archetype: Optional override.  When given, it is used verbatim
                and no classification is performed.

        Returns:
            The generated project.  ``confidence`` is ``None`` when an
            override was used.

        Raises:
            InvalidContextError: If *context* has no usable ``trend.title``.
            UnknownArchetypeError: If *archetype* is not a registered id.
        """
        ctx = load_context(context)

        if archetype is not None:
            archetype_id = resolve_archetype_id(archetype)
            confidence: Optional[int] = None
        else:
            classification = classify(ctx)
            archetype_id = classification.archetype
            confidence = classification.confidence

        definition = get_definition(archetype_id)
        derive, file_generator = self._strategies[archetype_id]
        files = file_generator.generate_files(derive(ctx), ctx)
        project_name = derive_project_name(ctx, archetype_id)

        return GeneratedProject(
            archetype=archetype_id,
            project_name=project_name,
            files=files,
            readme=files.get("README.md", ""),
            env_example=files.get(".env.example", ""),
            features=list(definition.features),
            setup_instructions=setup_instructions(project_name),
            generation_time=definition.generation_time,
            tech_stack=list(definition.tech_stack),
            confidence=confidence,
        )

    def recommend(self, context: AnalysisContext | dict[str, Any]) -> Recommendation:
        """Classify *context* and explain the choice. Generates nothing."""
        return recommend(context)


# ---------------------------------------------------------------------------
# Module-level convenience
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def default_generator() -> MVPGenerator:
    """Process-wide generator with default settings."""
    return MVPGenerator()


def generate_mvp(
    context: AnalysisContext | dict[str, Any],
    archetype: ArchetypeId | str | None = None,
    settings: Optional[Settings] = None,
) -> GeneratedProject:
    """Generate an MVP for *context*.

    Without *settings* a shared default :class:`MVPGenerator` is used, so
    compiled templates are reused across calls.
    """
    generator = MVPGenerator(settings) if settings is not None else default_generator()
    return generator.generate(context, archetype)


def recommend(context: AnalysisContext | dict[str, Any]) -> Recommendation:
    """Recommend an archetype for *context* without generating anything.

    Alternatives are the three other archetypes in registry order.
    """
    classification = classify(load_context(context))
    selected = classification.archetype
    return Recommendation(
        archetype=selected,
        confidence=classification.confidence,
        reason=RECOMMENDATION_REASONS[selected],
        alternatives=[a for a in archetype_ids() if a != selected],
        scores=classification.scores,
    )

"""MVP scaffolder -- renders complete Next.js projects from an analysis context.

Every archetype shares one boilerplate set (package manifest, configs,
global stylesheet, root layout, README) and adds its own page files.  The
result is an in-memory ``GeneratedProject``; nothing touches the disk.

Quick usage::

    from mvp_scaffold.scaffolder import MVPGenerator

    generator = MVPGenerator()
    project = generator.generate({"trend": {"title": "Review Analyzer"}})
    print(project.archetype, sorted(project.files))
"""

from .ai_tool_gen import AIToolGenerator
from .boilerplate import (
    BoilerplateGenerator,
    ReadmeSpec,
    ShellSpec,
    derive_project_name,
    package_slug,
    setup_instructions,
)
from .calculator_gen import CalculatorGenerator
from .dashboard_gen import DashboardGenerator
from .generator import MVPGenerator, default_generator, generate_mvp, recommend
from .landing_gen import LandingGenerator
from .templates import TemplateRenderer

__all__ = [
    # Orchestration
    "MVPGenerator",
    "default_generator",
    "generate_mvp",
    "recommend",
    # Archetype generators
    "AIToolGenerator",
    "CalculatorGenerator",
    "DashboardGenerator",
    "LandingGenerator",
    # Shared pieces
    "BoilerplateGenerator",
    "ReadmeSpec",
    "ShellSpec",
    "TemplateRenderer",
    "derive_project_name",
    "package_slug",
    "setup_instructions",
]

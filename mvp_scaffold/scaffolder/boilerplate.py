"""Shared Next.js boilerplate emitted by every archetype generator.

Renders the base file set (package manifest, TypeScript, Next.js, Tailwind
and PostCSS configs, ignore file, env example, global stylesheet, root
layout) and the README from the ``base/`` templates.  Archetype generators
describe what differs through a ``ShellSpec``.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field

from mvp_scaffold.config import Settings
from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import AnalysisContext, ArchetypeId
from mvp_scaffold.utils import sanitize_name

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

_PROJECT_NAME_STRIP = re.compile(r"[^A-Za-z0-9\- ]")

DEFAULT_PACKAGE_NAME = "mvp-app"

# README "Для кого" section when the context names no audience
DEFAULT_README_AUDIENCE = "современные компании"


def derive_project_name(context: AnalysisContext, archetype: ArchetypeId) -> str:
    """Project name from the company name, else the trend title.

    Every character outside ``[A-Za-z0-9- ]`` is removed.  When nothing is
    left (e.g. a title written entirely in Cyrillic) the name falls back to
    ``"<archetype>-mvp"``.
    """
    source = context.company_name or context.trend.title
    name = re.sub(r"\s+", " ", _PROJECT_NAME_STRIP.sub("", source)).strip()
    return name or f"{archetype.value}-mvp"


def package_slug(project_name: str) -> str:
    """npm package / directory name for *project_name*."""
    return sanitize_name(project_name).replace("_", "-") or DEFAULT_PACKAGE_NAME


def setup_instructions(project_name: str) -> list[str]:
    """Archetype-independent shell steps to run a generated project locally."""
    return [
        "git clone <repo-url>",
        f"cd {package_slug(project_name)}",
        "npm install",
        "cp .env.example .env.local",
        "npm run dev",
    ]


# ---------------------------------------------------------------------------
# Shell specification
# ---------------------------------------------------------------------------


class ColorScheme(BaseModel):
    """RGB triplets written into the ``:root`` CSS variables."""

    foreground: str = Field(default="0 0 0")
    background: str = Field(default="255 255 255")
    dark_background: Optional[str] = Field(
        default="17 17 27", description="Background under prefers-color-scheme: dark"
    )


class ShellSpec(BaseModel):
    """Everything an archetype customises in the shared boilerplate.

    Text fields hold raw, unescaped values.
    """

    template_dir: str = Field(..., description="Archetype template directory, e.g. 'ai_tool'")
    package_name: str
    title: str
    description: str
    extra_dependencies: list[str] = Field(
        default_factory=list, description="npm packages beyond the shared runtime set"
    )
    palette: dict[str, str] = Field(..., description="Tailwind 'primary' shade -> hex colour")
    scheme: ColorScheme = Field(default_factory=ColorScheme)
    float_animation: bool = False
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    open_graph: bool = False
    env_context: dict[str, Any] = Field(default_factory=dict)


class ReadmeSection(BaseModel):
    title: str
    body: str


class ReadmeSpec(BaseModel):
    """Inputs of the shared README template. Markdown is not escaped."""

    project_name: str
    description: str
    problem: str
    solution: str
    audience: str
    capabilities: list[tuple[str, str]]
    setup_steps: list[str]
    env_vars: list[str] = Field(default_factory=list)
    extra_sections: list[ReadmeSection] = Field(default_factory=list)
    tech_stack: list[tuple[str, str]]
    features: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# BoilerplateGenerator
# ---------------------------------------------------------------------------


class BoilerplateGenerator:
    """Renders the base file set shared by all archetypes."""

    # Template -> output path, in assembly order.  "{template_dir}" marks the
    # one archetype-specific template, rendered with the env context.
    _BASE_FILES: tuple[tuple[str, str], ...] = (
        ("base/package.json.j2", "package.json"),
        ("base/tsconfig.json.j2", "tsconfig.json"),
        ("base/next.config.js.j2", "next.config.js"),
        ("base/tailwind.config.ts.j2", "tailwind.config.ts"),
        ("base/postcss.config.js.j2", "postcss.config.js"),
        ("base/gitignore.j2", ".gitignore"),
        ("{template_dir}/env.example.j2", ".env.example"),
        ("base/globals.css.j2", "src/app/globals.css"),
        ("base/layout.tsx.j2", "src/app/layout.tsx"),
    )

    def __init__(self, renderer: TemplateRenderer, settings: Settings) -> None:
        self.renderer = renderer
        self.settings = settings

    def generate(self, spec: ShellSpec) -> dict[str, str]:
        """Render the base files for *spec*, in assembly order."""
        context = self._build_context(spec)
        files: dict[str, str] = {}
        for template, output in self._BASE_FILES:
            if "{template_dir}" in template:
                path = template.format(template_dir=spec.template_dir)
                files[output] = self.renderer.render(path, spec.env_context)
            else:
                files[output] = self.renderer.render(template, context)
        return files

    def render_readme(self, spec: ReadmeSpec) -> str:
        """Render ``README.md`` from the shared template."""
        return self.renderer.render("base/README.md.j2", spec.model_dump())

    # -- Internal ----------------------------------------------------------

    def _build_context(self, spec: ShellSpec) -> dict[str, Any]:
        stack = self.settings.stack
        dependencies = dict(stack.base_dependencies)
        dependencies.update(stack.pick(spec.extra_dependencies))

        meta_title = spec.meta_title if spec.meta_title is not None else spec.title
        meta_description = (
            spec.meta_description if spec.meta_description is not None else spec.description
        )
        open_graph = None
        if spec.open_graph:
            open_graph = {
                "title": escape_for_literal(spec.title),
                "description": escape_for_literal(spec.description),
            }

        css_partial = f"{spec.template_dir}/styles.css.j2"
        if css_partial not in self.renderer.list_templates(spec.template_dir):
            css_partial = None

        return {
            "package_name": spec.package_name,
            "description": spec.description,
            "dependencies": dependencies,
            "dev_dependencies": stack.dev_dependencies,
            "node_engine": self.settings.node_engine,
            "palette": spec.palette,
            "float_animation": spec.float_animation,
            "scheme": spec.scheme.model_dump(),
            "css_partial": css_partial,
            "html_lang": self.settings.html_lang,
            "meta": {
                "title": escape_for_literal(meta_title),
                "description": escape_for_literal(meta_description),
                "open_graph": open_graph,
            },
        }

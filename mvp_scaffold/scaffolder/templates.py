"""Jinja2 template rendering for generated MVP projects.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``mvp_scaffold/scaffolder/templates/`` directory and renders them into
strings.  Generated projects are returned as in-memory file maps, so unlike
a disk-oriented renderer nothing here touches the filesystem.

The generated sources are TSX, where ``{{ ... }}`` is ordinary JSX syntax,
so the environment uses square-bracket delimiters instead of the Jinja
defaults::

    [[ expression ]]    [% statement %]    [# comment #]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from mvp_scaffold.escaping import escape_for_json, escape_for_literal, js_literal


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are plain text; no HTML autoescaping is applied.  Free text
    must be escaped for its target literal before it reaches a template,
    either by the caller or through the ``literal`` / ``json_str`` / ``js``
    filters.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            block_start_string="[%",
            block_end_string="%]",
            variable_start_string="[[",
            variable_end_string="]]",
            comment_start_string="[#",
            comment_end_string="#]",
        )
        # Register custom filters
        self.env.filters["literal"] = escape_for_literal
        self.env.filters["json_str"] = escape_for_json
        self.env.filters["js"] = js_literal

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"base/layout.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and always use
        forward slashes.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )

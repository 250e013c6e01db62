"""MVP scaffolder configuration.

Typed settings for generation and for the CLI.  All settings are Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# Field name -> npm package name
_NPM_NAMES: dict[str, str] = {
    "next": "next",
    "react": "react",
    "react_dom": "react-dom",
    "openai": "openai",
    "lucide_react": "lucide-react",
    "react_markdown": "react-markdown",
    "cheerio": "cheerio",
    "recharts": "recharts",
    "swr": "swr",
    "framer_motion": "framer-motion",
    "types_node": "@types/node",
    "types_react": "@types/react",
    "types_react_dom": "@types/react-dom",
    "typescript": "typescript",
    "tailwindcss": "tailwindcss",
    "postcss": "postcss",
    "autoprefixer": "autoprefixer",
    "eslint": "eslint",
    "eslint_config_next": "eslint-config-next",
}


class StackVersions(BaseModel):
    """Pinned npm versions written into every generated ``package.json``."""

    next: str = Field(default="14.2.15")
    react: str = Field(default="18.2.0")
    react_dom: str = Field(default="18.2.0")
    openai: str = Field(default="4.24.7")
    lucide_react: str = Field(default="0.294.0")
    react_markdown: str = Field(default="9.0.1")
    cheerio: str = Field(default="1.0.0-rc.12")
    recharts: str = Field(default="2.10.3")
    swr: str = Field(default="2.2.4")
    framer_motion: str = Field(default="10.16.16")
    types_node: str = Field(default="20.10.6")
    types_react: str = Field(default="18.2.47")
    types_react_dom: str = Field(default="18.2.18")
    typescript: str = Field(default="5.3.3")
    tailwindcss: str = Field(default="3.4.0")
    postcss: str = Field(default="8.4.33")
    autoprefixer: str = Field(default="10.4.16")
    eslint: str = Field(default="8.56.0")
    eslint_config_next: str = Field(default="14.2.15")

    def as_npm(self) -> dict[str, str]:
        """Return a ``{npm_package: version}`` mapping."""
        return {npm: getattr(self, field) for field, npm in _NPM_NAMES.items()}

    def pick(self, packages: list[str] | tuple[str, ...]) -> dict[str, str]:
        """Return ``{npm_package: version}`` for *packages*, in the given order.

        Raises:
            KeyError: If a package is not pinned.
        """
        pinned = self.as_npm()
        return {name: pinned[name] for name in packages}

    # Runtime packages shared by every generated project
    @property
    def base_dependencies(self) -> dict[str, str]:
        return self.pick(("next", "react", "react-dom", "lucide-react"))

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return self.pick((
            "@types/node",
            "@types/react",
            "@types/react-dom",
            "typescript",
            "tailwindcss",
            "postcss",
            "autoprefixer",
            "eslint",
            "eslint-config-next",
        ))


class Settings(BaseModel):
    """Global scaffolder settings.

    Instances are typically created once by the CLI entry point (or by a
    library caller) and passed to ``MVPGenerator``.
    """

    output_dir: Path = Field(default=Path("./output"))
    overwrite: bool = Field(default=False, description="Allow writing into a non-empty project dir")
    html_lang: str = Field(
        default="ru",
        pattern=r"^[A-Za-z]{2,3}(-[A-Za-z0-9]+)*$",
        description="lang attribute of the root <html>",
    )
    openai_model: str = Field(default="gpt-4o-mini", description="Default model for AI tools")
    node_engine: str = Field(default=">=18.17.0")
    stack: StackVersions = Field(default_factory=StackVersions)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file and return the path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            MVP_OUTPUT_DIR, MVP_HTML_LANG, MVP_OPENAI_MODEL, MVP_OVERWRITE,
            MVP_NEXT_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MVP_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["MVP_OUTPUT_DIR"])
        if os.environ.get("MVP_HTML_LANG"):
            kwargs["html_lang"] = os.environ["MVP_HTML_LANG"]
        if os.environ.get("MVP_OPENAI_MODEL"):
            kwargs["openai_model"] = os.environ["MVP_OPENAI_MODEL"]
        if os.environ.get("MVP_OVERWRITE"):
            kwargs["overwrite"] = os.environ["MVP_OVERWRITE"].strip().lower() in ("1", "true", "yes")

        stack_kwargs: dict[str, Any] = {}
        if os.environ.get("MVP_NEXT_VERSION"):
            # eslint-config-next is released in lockstep with next
            stack_kwargs["next"] = os.environ["MVP_NEXT_VERSION"]
            stack_kwargs["eslint_config_next"] = os.environ["MVP_NEXT_VERSION"]

        return cls(stack=StackVersions(**stack_kwargs), **kwargs)

"""Tests for the shared Next.js boilerplate.

Covers:
- Project naming, package slug and setup steps
- Base file set and assembly order
- package.json validity and dependency pins
- Layout metadata escaping and html lang
- Palette, colour scheme and stylesheet partial
- README rendering
"""

from __future__ import annotations

import json

import pytest

from mvp_scaffold.config import Settings, StackVersions
from mvp_scaffold.escaping import escape_for_literal
from mvp_scaffold.models import ArchetypeId, load_context
from mvp_scaffold.scaffolder.boilerplate import (
    BoilerplateGenerator,
    ColorScheme,
    ReadmeSection,
    ReadmeSpec,
    ShellSpec,
    derive_project_name,
    package_slug,
    setup_instructions,
)

pytestmark = pytest.mark.unit

BASE_FILES = [
    "package.json",
    "tsconfig.json",
    "next.config.js",
    "tailwind.config.ts",
    "postcss.config.js",
    ".gitignore",
    ".env.example",
    "src/app/globals.css",
    "src/app/layout.tsx",
]


def _spec(**overrides) -> ShellSpec:
    data = {
        "template_dir": "calculator",
        "package_name": "demo-app",
        "title": "Demo App",
        "description": "A demo",
        "extra_dependencies": ["recharts"],
        "palette": {"50": "#ecfdf5", "500": "#10b981"},
    }
    data.update(overrides)
    return ShellSpec(**data)


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestNaming:
    def test_company_name_wins(self, full_context):
        assert derive_project_name(full_context, ArchetypeId.AI_TOOL) == "Review Radar"

    def test_strips_disallowed_characters(self):
        ctx = load_context({"trend": {"title": "My `Tool` ${x}"}})
        assert derive_project_name(ctx, ArchetypeId.LANDING_WAITLIST) == "My Tool x"

    def test_keeps_hyphens(self):
        ctx = load_context({"trend": {"title": "Smart-Notes 2.0!"}})
        assert derive_project_name(ctx, ArchetypeId.AI_TOOL) == "Smart-Notes 20"

    def test_non_latin_falls_back(self, minimal_context):
        assert derive_project_name(minimal_context, ArchetypeId.DASHBOARD) == "dashboard-mvp"

    @pytest.mark.parametrize(
        "name,slug",
        [("Review Radar", "review-radar"), ("My Tool x", "my-tool-x"), ("a_b", "a-b"), ("", "mvp-app")],
    )
    def test_package_slug(self, name, slug):
        assert package_slug(name) == slug

    def test_setup_instructions(self):
        assert setup_instructions("Review Radar") == [
            "git clone <repo-url>",
            "cd review-radar",
            "npm install",
            "cp .env.example .env.local",
            "npm run dev",
        ]


# ---------------------------------------------------------------------------
# Base files
# ---------------------------------------------------------------------------


class TestBaseFiles:
    def test_file_set_and_order(self, boilerplate):
        assert list(boilerplate.generate(_spec())) == BASE_FILES

    def test_package_json_valid(self, boilerplate):
        manifest = json.loads(boilerplate.generate(_spec())["package.json"])
        assert manifest["name"] == "demo-app"
        assert manifest["description"] == "A demo"
        assert manifest["private"] is True
        assert manifest["scripts"]["dev"] == "next dev"
        assert list(manifest["dependencies"]) == [
            "next", "react", "react-dom", "lucide-react", "recharts",
        ]
        assert manifest["devDependencies"]["typescript"] == "5.3.3"
        assert manifest["engines"]["node"] == ">=18.17.0"

    def test_package_json_hostile_description(self, boilerplate):
        description = 'He said "hi" \\ `x` ${y}\nline two'
        manifest = json.loads(boilerplate.generate(_spec(description=description))["package.json"])
        assert manifest["description"] == description

    def test_stack_versions_from_settings(self, renderer):
        settings = Settings(stack=StackVersions(next="14.2.99", recharts="2.12.0"))
        files = BoilerplateGenerator(renderer, settings).generate(_spec())
        manifest = json.loads(files["package.json"])
        assert manifest["dependencies"]["next"] == "14.2.99"
        assert manifest["dependencies"]["recharts"] == "2.12.0"

    def test_unknown_dependency_raises(self, boilerplate):
        with pytest.raises(KeyError):
            boilerplate.generate(_spec(extra_dependencies=["left-pad"]))

    def test_tsconfig_is_json(self, boilerplate):
        tsconfig = json.loads(boilerplate.generate(_spec())["tsconfig.json"])
        assert tsconfig["compilerOptions"]["paths"] == {"@/*": ["./src/*"]}

    def test_palette(self, boilerplate):
        tailwind = boilerplate.generate(_spec())["tailwind.config.ts"]
        assert "50: '#ecfdf5'," in tailwind
        assert "500: '#10b981'," in tailwind
        assert "float" not in tailwind

    def test_float_animation(self, boilerplate):
        tailwind = boilerplate.generate(_spec(float_animation=True))["tailwind.config.ts"]
        assert "'float': 'float 6s ease-in-out infinite'" in tailwind

    def test_globals_dark_scheme(self, boilerplate):
        css = boilerplate.generate(_spec(scheme=ColorScheme(dark_background="15 23 42")))[
            "src/app/globals.css"
        ]
        assert "@tailwind base;" in css
        assert "prefers-color-scheme: dark" in css
        assert "--background: 15 23 42;" in css

    def test_globals_without_dark_scheme(self, boilerplate):
        scheme = ColorScheme(foreground="255 255 255", background="0 0 0", dark_background=None)
        css = boilerplate.generate(_spec(scheme=scheme))["src/app/globals.css"]
        assert "prefers-color-scheme" not in css
        assert "--foreground: 255 255 255;" in css

    def test_archetype_stylesheet_included(self, boilerplate, renderer):
        css = boilerplate.generate(_spec())["src/app/globals.css"]
        partial = renderer.render("calculator/styles.css.j2", {})
        assert partial.strip() in css

    def test_env_example_uses_archetype_template(self, boilerplate):
        env = boilerplate.generate(_spec())[".env.example"]
        assert "Калькулятор работает полностью на клиенте" in env


class TestLayout:
    def test_escaped_metadata(self, boilerplate, backtick_counter):
        title = "My `Tool` ${x}"
        layout = boilerplate.generate(_spec(title=title, description="it's"))["src/app/layout.tsx"]
        assert f"title: '{escape_for_literal(title)}'," in layout
        assert "description: 'it\\'s'," in layout
        assert backtick_counter(layout) == 0

    def test_html_lang(self, renderer):
        files = BoilerplateGenerator(renderer, Settings(html_lang="en")).generate(_spec())
        assert '<html lang="en">' in files["src/app/layout.tsx"]

    def test_meta_overrides_and_open_graph(self, boilerplate):
        layout = boilerplate.generate(
            _spec(meta_title="Demo - Fast", meta_description="Problem", open_graph=True)
        )["src/app/layout.tsx"]
        assert "title: 'Demo - Fast'," in layout
        assert "description: 'Problem'," in layout
        assert "openGraph: {" in layout
        assert "title: 'Demo App'," in layout

    def test_no_open_graph_by_default(self, boilerplate):
        assert "openGraph" not in boilerplate.generate(_spec())["src/app/layout.tsx"]


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------


class TestReadme:
    def _readme_spec(self, **overrides) -> ReadmeSpec:
        data = {
            "project_name": "Demo",
            "description": "Demo description",
            "problem": "Main pain",
            "solution": "solves it.",
            "audience": "Founders",
            "capabilities": [("Fast", "very"), ("Cheap", "too")],
            "setup_steps": setup_instructions("Demo"),
            "tech_stack": [("Framework", "Next.js 14")],
            "features": ["Feature A"],
        }
        data.update(overrides)
        return ReadmeSpec(**data)

    def test_sections(self, boilerplate):
        readme = boilerplate.render_readme(self._readme_spec())
        assert readme.startswith("# Demo\n\nDemo description\n")
        assert "## 🎯 Проблема\n\nMain pain" in readme
        assert "Demo - solves it." in readme
        assert "- **Fast** - very" in readme
        assert "## 🎯 Для кого\n\nFounders" in readme
        assert "```bash\ngit clone <repo-url>\ncd demo\n" in readme
        assert "- **Framework:** Next.js 14" in readme
        assert "- Feature A" in readme

    def test_without_env_vars(self, boilerplate):
        readme = boilerplate.render_readme(self._readme_spec())
        assert "## 🔑 Настройка" not in readme
        assert "3. Deploy!" in readme

    def test_with_env_vars(self, boilerplate):
        readme = boilerplate.render_readme(self._readme_spec(env_vars=["API_KEY=x"]))
        assert "## 🔑 Настройка" in readme
        assert "API_KEY=x" in readme
        assert "3. Добавьте Environment Variables\n4. Deploy!" in readme

    def test_extra_sections(self, boilerplate):
        section = ReadmeSection(title="📊 Данные", body="Body text")
        readme = boilerplate.render_readme(self._readme_spec(extra_sections=[section]))
        assert "## 📊 Данные\n\nBody text" in readme
        assert readme.index("## 📊 Данные") < readme.index("## 🌐 Деплой на Vercel")

"""Tests for the dashboard file-tree generator."""

from __future__ import annotations

import json

import pytest

from mvp_scaffold.models import DashboardConfig, DataSource, load_context
from mvp_scaffold.planner.dashboard import CANONICAL_METRICS, derive_dashboard_config
from mvp_scaffold.scaffolder.dashboard_gen import (
    DEFAULT_REFRESH_MINUTES,
    DashboardGenerator,
    refresh_interval_minutes,
    source_to_js,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def generator(boilerplate) -> DashboardGenerator:
    return DashboardGenerator(boilerplate)


@pytest.fixture
def dashboard_context(dashboard_context_data):
    return load_context(dashboard_context_data)


class TestHelpers:
    def test_shortest_interval(self):
        sources = [
            DataSource(name="a", type="manual", refresh_interval=60),
            DataSource(name="b", type="api", refresh_interval=15),
            DataSource(name="c", type="rss"),
        ]
        assert refresh_interval_minutes(sources) == 15

    def test_default_interval(self):
        assert refresh_interval_minutes([]) == DEFAULT_REFRESH_MINUTES
        zero = [DataSource(name="a", type="manual", refresh_interval=0)]
        assert refresh_interval_minutes(zero) == DEFAULT_REFRESH_MINUTES

    def test_source_to_js(self):
        source = DataSource(name="Reddit", type="api", url="https://x", refresh_interval=15)
        assert source_to_js(source) == {
            "name": "Reddit",
            "type": "api",
            "url": "https://x",
            "refreshInterval": 15,
        }
        assert source_to_js(DataSource(name="M", type="manual")) == {"name": "M", "type": "manual"}


class TestFileTree:
    def test_dependencies(self, generator, dashboard_context):
        files = generator.generate_files(derive_dashboard_config(dashboard_context), dashboard_context)
        deps = json.loads(files["package.json"])["dependencies"]
        assert {"recharts", "swr"} <= set(deps)

    def test_env_with_reddit_source(self, generator, dashboard_context):
        env = generator.generate_files(
            derive_dashboard_config(dashboard_context), dashboard_context
        )[".env.example"]
        assert "REFRESH_INTERVAL=15" in env
        assert "REDDIT_SOURCE_URL=https://www.reddit.com/r/SaaS+startups" in env

    def test_env_without_communities(self, generator, minimal_context):
        env = generator.generate_files(
            derive_dashboard_config(minimal_context), minimal_context
        )[".env.example"]
        assert "REFRESH_INTERVAL=60" in env
        assert "REDDIT_SOURCE_URL" not in env

    def test_dark_background(self, generator, minimal_context):
        css = generator.generate_files(
            derive_dashboard_config(minimal_context), minimal_context
        )["src/app/globals.css"]
        assert "--background: 15 23 42;" in css


class TestPage:
    def test_constants(self, generator, dashboard_context):
        page = generator.generate_files(
            derive_dashboard_config(dashboard_context), dashboard_context
        )["src/app/page.tsx"]
        assert "const DASHBOARD_NAME = 'Reddit Monitor Dashboard';" in page
        assert "const REFRESH_INTERVAL_MS = 900000;" in page
        assert "const SEARCH_PLACEHOLDER = 'Поиск...';" in page
        assert "'Неделя'," in page
        assert "'Категория 1'," in page
        assert "refreshInterval: 15," in page
        for metric in CANONICAL_METRICS:
            assert f"name: '{metric.name}'," in page

    def test_without_filters(self, generator, minimal_context):
        config = DashboardConfig(
            dashboard_name="D",
            dashboard_description="desc",
            data_sources=[],
            metrics=[],
        )
        page = generator.generate_files(config, minimal_context)["src/app/page.tsx"]
        assert "const PERIOD_OPTIONS: string[] = [];" in page
        assert "const CATEGORY_OPTIONS: string[] = [];" in page
        assert "const REFRESH_INTERVAL_MS = 3600000;" in page


class TestReadme:
    def test_data_section(self, generator, minimal_context):
        readme = generator.generate_files(
            derive_dashboard_config(minimal_context), minimal_context
        )["README.md"]
        assert "## 📊 Подключение данных" in readme
        assert "`src/app/api/data/route.ts`" in readme

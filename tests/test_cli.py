"""Tests for the ``mvp-scaffold`` command line (mvp_scaffold.cli)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from mvp_scaffold.cli import build_parser, main

pytestmark = pytest.mark.unit

_ENV_VARS = (
    "MVP_OUTPUT_DIR",
    "MVP_OVERWRITE",
    "MVP_HTML_LANG",
    "MVP_OPENAI_MODEL",
    "MVP_NEXT_VERSION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def context_file(tmp_path: Path, scenario_a_data) -> Path:
    path = tmp_path / "context.json"
    path.write_text(json.dumps(scenario_a_data, ensure_ascii=False), encoding="utf-8")
    return path


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_archetype_choice(self, context_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(context_file), "--archetype", "mobile-app"])
        assert exc_info.value.code == 2

    def test_generate_defaults(self):
        args = build_parser().parse_args(["generate", "ctx.json"])
        assert args.output is None
        assert args.archetype is None
        assert args.dry_run is False
        assert args.force is False


class TestArchetypes:
    def test_lists_all(self, capsys):
        main(["archetypes"])
        out = capsys.readouterr().out
        for archetype in ("ai-tool", "calculator", "dashboard", "landing"):
            assert archetype in out


class TestRecommend:
    def test_recommend(self, context_file, capsys):
        main(["recommend", str(context_file)])
        assert "ai-tool" in capsys.readouterr().out

    def test_recommend_yaml(self, tmp_path: Path, scenario_b_data, capsys):
        path = tmp_path / "context.yaml"
        path.write_text(yaml.safe_dump(scenario_b_data, allow_unicode=True), encoding="utf-8")
        main(["recommend", str(path)])
        assert "calculator" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["recommend", str(tmp_path / "nope.json")])
        assert exc_info.value.code == 1

    def test_invalid_context(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"trend": {"title": ""}}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["recommend", str(path)])
        assert exc_info.value.code == 1


class TestGenerate:
    def test_writes_project(self, context_file, tmp_path: Path):
        out = tmp_path / "out"
        main(["generate", str(context_file), "-o", str(out)])

        root = out / "ai-tool-mvp"
        assert (root / "package.json").is_file()
        assert (root / "src" / "app" / "api" / "analyze" / "route.ts").is_file()
        assert json.loads((root / "package.json").read_text(encoding="utf-8"))["name"] == "ai-tool-mvp"

    def test_archetype_override(self, context_file, tmp_path: Path):
        main(["generate", str(context_file), "-o", str(tmp_path), "--archetype", "dashboard"])
        root = tmp_path / "dashboard-mvp"
        assert (root / "src" / "app" / "page.tsx").is_file()
        assert not (root / "src" / "app" / "api").exists()

    def test_dry_run_writes_nothing(self, context_file, tmp_path: Path, capsys):
        out = tmp_path / "out"
        main(["generate", str(context_file), "-o", str(out), "--dry-run"])
        assert not out.exists()
        assert "package.json" in capsys.readouterr().out

    def test_refuses_non_empty_directory(self, context_file, tmp_path: Path):
        root = tmp_path / "ai-tool-mvp"
        root.mkdir()
        (root / "keep.txt").write_text("mine", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(context_file), "-o", str(tmp_path)])
        assert exc_info.value.code == 1
        assert not (root / "package.json").exists()

    def test_force_overwrites(self, context_file, tmp_path: Path):
        root = tmp_path / "ai-tool-mvp"
        root.mkdir()
        (root / "package.json").write_text("{}", encoding="utf-8")

        main(["generate", str(context_file), "-o", str(tmp_path), "--force"])
        assert json.loads((root / "package.json").read_text(encoding="utf-8"))["name"] == "ai-tool-mvp"

    def test_output_dir_from_env(self, context_file, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("MVP_OUTPUT_DIR", str(tmp_path / "env-out"))
        main(["generate", str(context_file)])
        assert (tmp_path / "env-out" / "ai-tool-mvp" / "README.md").is_file()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", str(tmp_path / "missing.yaml"), "-o", str(tmp_path)])
        assert exc_info.value.code == 1


class TestMarkupInUserText:
    def test_recommend_prints_title_literally(self, tmp_path: Path, capsys):
        path = tmp_path / "context.json"
        path.write_text(json.dumps({"trend": {"title": "Idea [/bold] x"}}), encoding="utf-8")
        main(["recommend", str(path)])
        assert "[/bold]" in capsys.readouterr().out


"""Tests for the analyze and audit commands."""

import json

import pytest
from typer.testing import CliRunner

from healthcast import __version__
from healthcast.cli import app
from healthcast.logging_config import setup_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No stray config files or env overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    monkeypatch.delenv("HEALTHCAST_WORKERS", raising=False)


@pytest.fixture
def detach_log_file():
    yield
    setup_logging()


class TestMain:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "analyze" in result.output
        assert "audit" in result.output


class TestAnalyzeCommand:
    def test_json(self, project_dir):
        result = runner.invoke(app, ["analyze", str(project_dir), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["score"] == 80
        assert data["trend"] == "good"
        assert [i["type"] for i in data["issues"]] == ["maintenance"]
        assert [o["type"] for o in data["optimizations"]] == ["bundle"]
        assert data["recommendations"] == ["Invest in maintainability"]

    def test_quiet(self, project_dir):
        result = runner.invoke(app, ["analyze", str(project_dir), "-f", "quiet"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "80 good issues=1"

    def test_rich(self, project_dir):
        result = runner.invoke(app, ["analyze", str(project_dir)])
        assert result.exit_code == 0
        assert "Codebase Health" in result.output

    def test_workers_give_same_result(self, project_dir):
        seq = runner.invoke(app, ["analyze", str(project_dir), "-f", "json"])
        par = runner.invoke(app, ["analyze", str(project_dir), "-f", "json", "--workers", "3"])
        assert json.loads(seq.stdout) == json.loads(par.stdout)

    def test_output_file(self, project_dir, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(app, ["analyze", str(project_dir), "-f", "quiet", "-o", str(out)])
        assert result.exit_code == 0
        assert json.loads(out.read_text())["score"] == 80

    def test_fail_below(self, project_dir):
        failing = runner.invoke(app, ["analyze", str(project_dir), "-f", "quiet", "--fail-below", "90"])
        passing = runner.invoke(app, ["analyze", str(project_dir), "-f", "quiet", "--fail-below", "80"])
        assert failing.exit_code == 1
        assert passing.exit_code == 0

    def test_config_file(self, project_dir, tmp_path):
        config = tmp_path / "only-js.toml"
        config.write_text('include_extensions = [".js"]\n')
        result = runner.invoke(app, ["analyze", str(project_dir), "-f", "json", "-c", str(config)])
        assert result.exit_code == 0
        # one plain helper: no patterns, low test coverage
        assert json.loads(result.stdout)["score"] == 80

    def test_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_verbose_and_quiet_conflict(self, project_dir):
        result = runner.invoke(app, ["analyze", str(project_dir), "-v", "-q"])
        assert result.exit_code == 1

    def test_bad_format(self, project_dir):
        result = runner.invoke(app, ["analyze", str(project_dir), "-f", "xml"])
        assert result.exit_code == 1

    def test_log_file(self, project_dir, tmp_path, detach_log_file):
        log = tmp_path / "healthcast.log"
        result = runner.invoke(app, ["analyze", str(project_dir), "-f", "quiet", "-v", "--log-file", str(log)])
        assert result.exit_code == 0
        text = log.read_text()
        assert "healthcast.api" in text
        assert "Starting analysis" in text


class TestAuditCommand:
    def test_json(self, project_dir):
        result = runner.invoke(app, ["audit", str(project_dir), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["trivial_files"] == [{"path": "src/utils/index.ts", "reason": "too short (10 chars)"}]
        assert data["empty_dirs"] == ["src/empty"]
        assert data["substantive_count"] == 3

    def test_fail_on_stubs(self, project_dir):
        result = runner.invoke(app, ["audit", str(project_dir), "-f", "quiet", "--fail-on-stubs"])
        assert result.exit_code == 1
        assert "trivial=1" in result.stdout

    def test_clean_tree_passes(self, tmp_path, component_source):
        root = tmp_path / "clean"
        root.mkdir()
        (root / "App.tsx").write_text(component_source)
        result = runner.invoke(app, ["audit", str(root), "--fail-on-stubs"])
        assert result.exit_code == 0
        assert "No stubs found" in result.output

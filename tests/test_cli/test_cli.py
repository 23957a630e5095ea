"""Tests for CLI commands."""

import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from alignby.cli import _resolve_level, cli
from alignby.config import hierarchy


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml")
    for key in hierarchy._ENV_MAP:
        monkeypatch.delenv(key, raising=False)
    return CliRunner()


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "alignby" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestRunCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["run", "--help"])
        assert result.exit_code == 0
        assert "--check" in result.output
        assert "--squeeze" in result.output
        assert "--workers" in result.output

    def test_aligns_directory(self, runner, project_dir, aligned_source):
        result = runner.invoke(cli, ["run", str(project_dir)])
        assert result.exit_code == 0
        assert "0 failed, 2 unchanged, 1 aligned." in result.output
        assert (project_dir / "src" / "marked.rs").read_text() == aligned_source

    def test_aligns_single_file(self, runner, project_dir, aligned_source):
        path = project_dir / "src" / "marked.rs"
        result = runner.invoke(cli, ["run", str(path)])
        assert result.exit_code == 0
        assert path.read_text() == aligned_source

    def test_check_reports_without_writing(self, runner, project_dir, marked_source):
        path = project_dir / "src" / "marked.rs"
        result = runner.invoke(cli, ["run", "--check", str(project_dir)])
        assert result.exit_code == 1
        assert "Would align" in result.output
        assert path.read_text() == marked_source

    def test_check_passes_when_aligned(self, runner, project_dir):
        runner.invoke(cli, ["run", str(project_dir)])
        result = runner.invoke(cli, ["run", "--check", str(project_dir)])
        assert result.exit_code == 0

    def test_squeeze_flag(self, runner, tmp_path):
        path = tmp_path / "s.txt"
        path.write_text('align_by "="\nx      = 1\nyy = 2\n')
        result = runner.invoke(cli, ["run", "--squeeze", str(path)])
        assert result.exit_code == 0
        assert path.read_text() == 'align_by "="\nx  = 1\nyy = 2\n'

    def test_invalid_workers(self, runner, project_dir):
        result = runner.invoke(cli, ["run", "--workers", "0", str(project_dir)])
        assert result.exit_code == 1

    def test_nonexistent_path(self, runner):
        result = runner.invoke(cli, ["run", "nonexistent_dir_xyz"])
        assert result.exit_code != 0

    def test_config_warnings_use_rich_logging(self, runner, project_dir, tmp_path, monkeypatch):
        workdir = tmp_path / "cwd"
        workdir.mkdir()
        (workdir / "alignby.yaml").write_text("max_workers: [unclosed\n")
        monkeypatch.chdir(workdir)
        result = runner.invoke(cli, ["run", str(project_dir)])
        assert result.exit_code == 0
        assert "Failed to load config" in result.output
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


class TestResolveLevel:
    def test_verbosity_wins(self):
        assert _resolve_level(1, "ERROR") == logging.INFO
        assert _resolve_level(2, "ERROR") == logging.DEBUG

    def test_configured_level(self):
        assert _resolve_level(0, "error") == logging.ERROR

    def test_unknown_level_falls_back(self):
        assert _resolve_level(0, "LOUD") == logging.WARNING


class TestScanCommand:
    def test_lists_groups(self, runner, project_dir):
        result = runner.invoke(cli, ["scan", str(project_dir / "src" / "marked.rs")])
        assert result.exit_code == 0
        assert "Alignment Groups" in result.output
        assert "= ;" in result.output

    def test_no_groups(self, runner, project_dir):
        result = runner.invoke(cli, ["scan", str(project_dir / "src" / "plain.rs")])
        assert result.exit_code == 0
        assert "No alignment groups found" in result.output

    def test_rejects_directory(self, runner, project_dir):
        result = runner.invoke(cli, ["scan", str(project_dir)])
        assert result.exit_code != 0

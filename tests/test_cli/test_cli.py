"""Tests for CLI commands."""

import pytest
from click.testing import CliRunner

from refdocs.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "refdocs" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestDocsCommand:
    def test_lists_documents(self, runner):
        result = runner.invoke(cli, ["docs"])
        assert result.exit_code == 0
        assert "Available Documents" in result.output
        assert "python" in result.output
        assert "vue3" in result.output

    def test_extra_catalog(self, runner, sample_catalog_yaml):
        result = runner.invoke(cli, ["docs", "--catalog", str(sample_catalog_yaml)])
        assert result.exit_code == 0
        assert "rust" in result.output


class TestShowCommand:
    def test_show_from_resources_dir(self, runner, resources_dir):
        result = runner.invoke(cli, ["show", "python", "--resources-dir", str(resources_dir)])
        assert result.exit_code == 0
        assert "# Python (local copy)" in result.output

    def test_show_builtin(self, runner):
        result = runner.invoke(cli, ["show", "vue3"])
        assert result.exit_code == 0
        assert "# Vue 3 Best Practices" in result.output

    def test_show_fallback_when_file_missing(self, runner, resources_dir):
        result = runner.invoke(cli, ["show", "csharp", "--resources-dir", str(resources_dir)])
        assert result.exit_code == 0
        assert "Embrace async/await and cancellation." in result.output

    def test_show_verbose_summary(self, runner, resources_dir):
        result = runner.invoke(cli, ["show", "csharp", "--resources-dir", str(resources_dir), "-v"])
        assert result.exit_code == 0
        assert "Cache Summary" in result.output

    def test_show_verbose_summary_from_source(self, runner, resources_dir):
        result = runner.invoke(cli, ["show", "python", "--resources-dir", str(resources_dir), "-v"])
        assert result.exit_code == 0
        assert "Source version" in result.output
        assert "fallback" not in result.output
        assert "fallback" in result.output

    def test_show_unknown_document(self, runner):
        result = runner.invoke(cli, ["show", "cobol"])
        assert result.exit_code == 1
        assert "not found in catalog" in result.output

    def test_show_requires_name(self, runner):
        result = runner.invoke(cli, ["show"])
        assert result.exit_code != 0


class TestServeCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--resources-dir" in result.output
        assert "--ttl" in result.output

    def test_rejects_missing_resources_dir(self, runner, tmp_path):
        result = runner.invoke(cli, ["serve", "--resources-dir", str(tmp_path / "nope")])
        assert result.exit_code != 0

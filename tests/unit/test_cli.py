"""
Tests for resume_intel.cli — typer commands.
"""

import json

import pytest
from typer.testing import CliRunner

from resume_intel import __version__
from resume_intel.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def resume_file(tmp_path, sample_resume_text):
    path = tmp_path / "resume.txt"
    path.write_text(sample_resume_text, encoding="utf-8")
    return path


class TestVersion:
    def test_prints_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestExtract:
    def test_json_output(self, runner, resume_file):
        result = runner.invoke(app, ["extract", str(resume_file), "--json", "--today", "2024-06-15"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["experience"]["total_months"] == 76
        assert data["job_titles"] == ["Senior Software Engineer", "Software Developer"]

    def test_stdin(self, runner, sample_resume_text):
        result = runner.invoke(
            app, ["extract", "-", "--json", "--today", "2024-06-15"], input=sample_resume_text
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["contact"]["emails"] == ["jane.doe@example.com"]

    def test_table_output(self, runner, resume_file):
        result = runner.invoke(app, ["extract", str(resume_file), "--today", "2024-06-15"])
        assert result.exit_code == 0
        assert "Contact Information" in result.output
        assert "jane.doe@example.com" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["extract", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1

    def test_bad_today(self, runner, resume_file):
        result = runner.invoke(app, ["extract", str(resume_file), "--today", "June 2024"])
        assert result.exit_code == 1


class TestInfo:
    def test_shows_settings(self, runner):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Cache Size" in result.output

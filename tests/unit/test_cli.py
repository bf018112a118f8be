"""
Tests for atsfit.cli — Typer commands over text files.
"""

import pytest
from typer.testing import CliRunner

from atsfit import __version__
from atsfit.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI callback from replacing the process-wide log sinks."""
    calls = []
    monkeypatch.setattr("atsfit.utils.logger.setup_logging", lambda level=None: calls.append(level))
    return calls


@pytest.fixture
def write_file(tmp_path):
    """Factory that writes text to a file under tmp_path and returns its path."""

    def _factory(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _factory


@pytest.fixture
def resume_file(write_file, sample_resume_text):
    return write_file("resume.txt", sample_resume_text)


@pytest.fixture
def jd_file(write_file, sample_jd_text):
    return write_file("jd.txt", sample_jd_text)


# ── Info commands ────────────────────────────────────────────────────────────


class TestInfoCommands:
    def test_version(self, quiet_logging):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "atsfit" in result.output
        assert __version__ in result.output
        assert quiet_logging == [None]

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Environment" in result.output
        assert "testing" in result.output


# ── parse ────────────────────────────────────────────────────────────────────


class TestParseCommand:
    def test_table_output(self, resume_file):
        result = runner.invoke(app, ["parse", resume_file])
        assert result.exit_code == 0
        assert "SARAH CHEN" in result.output
        assert "Acme Corp" in result.output
        assert "sarah.chen@email.com" in result.output

    def test_json_output(self, resume_file):
        result = runner.invoke(app, ["parse", resume_file, "--json"])
        assert result.exit_code == 0
        assert '"name": "SARAH CHEN"' in result.output
        assert '"experience"' in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_non_resume_warns(self, write_file):
        path = write_file("recipe.txt", "Preheat the oven and bake the bread for twenty minutes until golden.")
        result = runner.invoke(app, ["parse", path])
        assert result.exit_code == 0
        assert "Warning" in result.output


# ── analyze ──────────────────────────────────────────────────────────────────


class TestAnalyzeCommand:
    def test_report(self, resume_file, jd_file):
        result = runner.invoke(app, ["analyze", resume_file, jd_file])
        assert result.exit_code == 0
        assert "ATS score:" in result.output
        assert "Job family: engineering" in result.output
        assert "Radar score:" in result.output
        assert "Breakdown" in result.output

    def test_json(self, resume_file, jd_file):
        result = runner.invoke(app, ["analyze", resume_file, jd_file, "--json"])
        assert result.exit_code == 0
        assert '"jobFamily"' in result.output
        assert '"missingKeywords"' in result.output
        assert '"radar"' in result.output
        assert '"relevance"' in result.output

    def test_invalid_job_description(self, resume_file, write_file):
        path = write_file("jd.txt", "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 5)
        result = runner.invoke(app, ["analyze", resume_file, path])
        assert result.exit_code == 1
        assert "placeholder" in result.output

    def test_missing_job_description(self, resume_file, tmp_path):
        result = runner.invoke(app, ["analyze", resume_file, str(tmp_path / "missing.txt")])
        assert result.exit_code == 1


# ── quick-scan and validate-jd ───────────────────────────────────────────────


class TestQuickScanCommand:
    def test_role_matches(self, resume_file):
        result = runner.invoke(app, ["quick-scan", resume_file, "--limit", "3"])
        assert result.exit_code == 0
        assert "Target role: Senior Software Engineer" in result.output
        assert "Role Matches" in result.output

    def test_empty_category(self, resume_file):
        result = runner.invoke(app, ["quick-scan", resume_file, "--category", "astronomy"])
        assert result.exit_code == 0
        assert "No matching roles found" in result.output


class TestValidateJDCommand:
    def test_valid(self, jd_file):
        result = runner.invoke(app, ["validate-jd", jd_file])
        assert result.exit_code == 0
        assert "looks usable" in result.output

    def test_invalid(self, write_file):
        result = runner.invoke(app, ["validate-jd", write_file("jd.txt", "Hiring soon.")])
        assert result.exit_code == 1
        assert "too short" in result.output

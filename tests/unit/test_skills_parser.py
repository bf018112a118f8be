"""
Tests for atsfit.ml.nlp.parsers.skills_parser — skills tokenization.
"""

import pytest

from atsfit.ml.nlp.parsers.skills_parser import SkillsParser


@pytest.fixture
def parser():
    return SkillsParser()


class TestParseLine:
    def test_comma_separated(self, parser):
        assert parser.parse_line("Python, Go, Kubernetes") == ["Python", "Go", "Kubernetes"]

    def test_category_prefix(self, parser):
        assert parser.parse_line("Languages: Python | SQL; Rust") == ["Python", "SQL", "Rust"]

    def test_bullet_marker(self, parser):
        assert parser.parse_line("• Figma, Sketch") == ["Figma", "Sketch"]

    def test_parentheses_kept_together(self, parser):
        assert parser.parse_line("AWS (EC2, S3), Docker") == ["AWS (EC2, S3)", "Docker"]

    def test_accomplishment_line_ignored(self, parser):
        assert parser.parse_line("Shipped self-serve onboarding flow used by 12K customers") == []

    def test_filler_and_long_items_dropped(self, parser):
        items = parser.parse_line("Python, and, 2019, a very long description of many different things")
        assert items == ["Python"]


class TestParse:
    def test_section_lines(self, parser):
        skills = parser.parse(["Python, Go", "Docker, Kubernetes"])
        assert skills == ["Python", "Go", "Docker", "Kubernetes"]

    def test_case_insensitive_dedupe_keeps_first_spelling(self, parser):
        assert parser.parse(["PostgreSQL, python", "Python, postgresql"]) == ["PostgreSQL", "python"]

    def test_inline_skills_line(self, parser):
        text = "Jane Doe\nTechnical Skills: Excel, Tableau, SQL\nEXPERIENCE"
        assert parser.parse([], text) == ["Excel", "Tableau", "SQL"]

    def test_known_skills_fallback(self, parser):
        text = "Built services in Python and Django on AWS."
        skills = parser.parse([], text)
        assert skills == ["Python", "Django", "AWS"]

    def test_java_not_found_in_javascript(self, parser):
        assert "Java" not in parser.parse([], "Wrote JavaScript widgets")

    def test_nothing(self, parser):
        assert parser.parse([], "") == []

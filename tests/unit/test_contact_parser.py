"""
Tests for atsfit.ml.nlp.parsers.contact_parser — header contact extraction.
"""

import pytest

from atsfit.ml.nlp.parsers.contact_parser import (
    ContactParser,
    find_phone,
    is_phone_line,
    match_location,
)


@pytest.fixture
def parser():
    return ContactParser()


# ── find_phone ───────────────────────────────────────────────────────────────


class TestFindPhone:
    @pytest.mark.parametrize("text,number,locale", [
        ("Call +1 (415) 555-0100 today", "+1 (415) 555-0100", "US/CA"),
        ("(415) 555-0100", "(415) 555-0100", "US/CA"),
        ("Mobile: +44 20 7946 0958", "+44 20 7946 0958", "UK"),
        ("+61 412 345 678", "+61 412 345 678", "AU"),
    ])
    def test_locales(self, text, number, locale):
        assert find_phone(text) == (number, locale)

    def test_years_are_not_phones(self):
        assert find_phone("2019 - 2021") is None

    def test_no_phone(self):
        assert find_phone("jane@example.com") is None


class TestPhoneAndLocationLines:
    def test_labelled_phone_line(self):
        assert is_phone_line("Phone: (415) 555-0100")

    def test_phone_inside_sentence(self):
        assert not is_phone_line("Reach me at (415) 555-0100 after six")

    @pytest.mark.parametrize("segment", [
        "San Francisco, CA",
        "Austin, TX 78701",
        "London, UK",
        "Sydney, NSW, Australia",
        "Austin, Texas",
    ])
    def test_locations(self, segment):
        assert match_location(segment) == segment

    @pytest.mark.parametrize("segment", ["Python, Go", "Acme Corp", "", "Remote"])
    def test_not_locations(self, segment):
        assert match_location(segment) is None


# ── ContactParser.parse ──────────────────────────────────────────────────────


class TestContactParser:
    def test_full_header(self, parser):
        lines = [
            "Jane Doe",
            "Data Analyst | Growth Team",
            "jane.doe@example.com | (415) 555-0100 | Austin, TX",
        ]
        info = parser.parse(lines)
        assert info.name == "Jane Doe"
        assert info.headline == "Data Analyst | Growth Team"
        assert info.email == "jane.doe@example.com"
        assert info.phone == "(415) 555-0100"
        assert info.phone_locale == "US/CA"
        assert info.location == "Austin, TX"
        assert info.confidence == 1.0

    def test_headline_drops_contact_segments(self, parser):
        lines = ["Jane Doe", "Product Designer | jane@example.com | London, UK"]
        assert parser.parse(lines).headline == "Product Designer"

    def test_title_first_line_is_not_a_name(self, parser):
        info = parser.parse(["Senior Software Engineer", "jane@example.com"])
        assert info.name is None
        assert info.headline == "Senior Software Engineer"

    def test_contact_lines_before_name_are_skipped(self, parser):
        info = parser.parse(["jane.doe@example.com", "(415) 555-0123", "Jane Doe", "Senior Engineer"])
        assert info.name == "Jane Doe"
        assert info.headline == "Senior Engineer"
        assert info.email == "jane.doe@example.com"

    def test_link_line_before_name_is_skipped(self, parser):
        assert parser.parse(["github.com/janedoe", "Jane Doe"]).name == "Jane Doe"

    def test_section_header_before_name_stops_search(self, parser):
        assert parser.parse(["SUMMARY", "Jane Doe"]).name is None

    def test_resume_word_is_not_a_name(self, parser):
        assert parser.parse(["Resume", "Jane Doe"]).name is None

    def test_contact_section_lines_are_scanned(self, parser):
        lines = ["Jane Doe", "EXPERIENCE"]
        info = parser.parse(lines, ["jane@example.com", "(415) 555-0100"])
        assert info.email == "jane@example.com"
        assert info.phone == "(415) 555-0100"

    def test_email_found_outside_header(self, parser):
        lines = ["Jane Doe"] + ["filler line"] * 10 + ["jane@example.com"]
        assert parser.parse(lines).email == "jane@example.com"

    def test_empty(self, parser):
        info = parser.parse([])
        assert info.name is None
        assert info.confidence == 0.0

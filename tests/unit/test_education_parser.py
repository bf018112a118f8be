"""
Tests for atsfit.ml.nlp.parsers.education_parser.
"""

import pytest

from atsfit.ml.nlp.parsers.education_parser import EducationParser


@pytest.fixture
def parser():
    return EducationParser()


class TestParseLine:
    def test_degree_school_year(self, parser):
        entry = parser.parse_line("B.S. Computer Science — UC Berkeley, 2017")
        assert entry.degree == "B.S. Computer Science"
        assert entry.school == "UC Berkeley"
        assert entry.end == "2017"
        assert entry.start is None

    def test_school_with_range(self, parser):
        entry = parser.parse_line("University of Toronto | 2012 - 2016")
        assert entry.school == "University of Toronto"
        assert (entry.start, entry.end) == ("2012", "2016")

    def test_degree_from_school(self, parser):
        entry = parser.parse_line("MBA from Harvard Business School")
        assert entry.degree == "MBA"
        assert entry.school == "Harvard Business School"

    def test_school_without_keyword_after_degree(self, parser):
        entry = parser.parse_line("B.A. Economics, Stanford")
        assert entry.degree == "B.A. Economics"
        assert entry.school == "Stanford"

    def test_location_segment_ignored(self, parser):
        entry = parser.parse_line("University of Leeds, Leeds, UK")
        assert entry.school == "University of Leeds"

    def test_unrelated_line(self, parser):
        assert parser.parse_line("Dean's list") is None


class TestParse:
    def test_school_then_degree_lines_merge(self, parser):
        entries = parser.parse(["Georgia Institute of Technology", "Master of Science in Analytics", "2019"])
        assert len(entries) == 1
        assert entries[0].school == "Georgia Institute of Technology"
        assert entries[0].degree == "Master of Science in Analytics"
        assert entries[0].end == "2019"

    def test_two_entries(self, parser):
        entries = parser.parse([
            "• Ph.D. Physics, MIT, 2015",
            "• B.Sc. Physics, University of Leeds, 2010",
        ])
        assert [e.school for e in entries] == ["MIT", "University of Leeds"]
        assert [e.end for e in entries] == ["2015", "2010"]

    def test_empty(self, parser):
        assert parser.parse([]) == []

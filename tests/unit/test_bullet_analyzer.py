"""
Tests for atsfit.core.domain.bullet_analyzer — bullet rhetoric signals.
"""

import pytest

from atsfit.core.domain.bullet_analyzer import analyze_all_bullets, analyze_bullet
from atsfit.core.domain.types import BulletSignals
from atsfit.utils.constants import MetricType


class TestActionVerbs:
    def test_strong_verb(self):
        signals = analyze_bullet("Led a migration of the billing platform")
        assert signals.has_action_verb is True
        assert signals.action_verb == "led"

    def test_unlisted_past_tense_verb(self):
        signals = analyze_bullet("Refactored the reporting service")
        assert signals.has_action_verb is True
        assert signals.action_verb == "refactored"

    @pytest.mark.parametrize("bullet", [
        "Responsible for the payments API",
        "Helped with database optimization",
        "Worked on internal tools",
        "Handled escalations from enterprise clients",
        "Used Excel to track spend",
    ])
    def test_weak_openers_are_vague(self, bullet):
        signals = analyze_bullet(bullet)
        assert signals.is_vague is True
        assert signals.has_action_verb is False
        assert signals.action_verb is None

    @pytest.mark.parametrize("bullet", [
        "• Led development of the billing API",
        "- Led development of the billing API",
    ])
    def test_marker_is_ignored(self, bullet):
        signals = analyze_bullet(bullet)
        assert signals.has_action_verb is True
        assert signals.action_verb == "led"
        assert signals.word_count == 6

    def test_noun_opener(self):
        signals = analyze_bullet("Payments API for merchants")
        assert signals.has_action_verb is False
        assert signals.is_vague is False


class TestMetrics:
    @pytest.mark.parametrize("bullet,kind,value", [
        ("Reduced churn by 12.5% in two quarters", MetricType.PERCENTAGE, "12.5%"),
        ("Closed $1.2M in new business", MetricType.CURRENCY, "$1.2M"),
        ("Saved 40,000 dollars annually", MetricType.CURRENCY, "40,000 dollars"),
        ("Onboarded 300 customers to the new plan", MetricType.COUNT, "300 customers"),
        ("Made page loads 3x faster", MetricType.PERCENTAGE, "3x"),
    ])
    def test_metric_kinds(self, bullet, kind, value):
        signals = analyze_bullet(bullet)
        assert signals.has_metric is True
        assert signals.metric_type == kind
        assert signals.metric_value == value

    def test_percentage_wins_over_count(self):
        assert analyze_bullet("Grew 40 accounts by 25%").metric_type == MetricType.PERCENTAGE

    def test_year_is_not_a_metric(self):
        signals = analyze_bullet("Joined the platform team in 2019")
        assert signals.has_metric is False
        assert signals.metric_type == MetricType.NONE
        assert signals.metric_value is None


class TestOtherSignals:
    def test_dangling_ending(self):
        assert analyze_bullet("Rebuilt the onboarding flow, resulting in").has_dangling_ending is True

    def test_complete_result_phrase_is_not_dangling(self):
        assert analyze_bullet("Rebuilt onboarding, resulting in 20% more signups").has_dangling_ending is False

    def test_scope_nouns(self):
        signals = analyze_bullet("Launched a marketing campaign across three markets")
        assert signals.has_scope_noun is True
        assert signals.scope_nouns == ("campaign", "market")

    def test_length_flags(self):
        assert analyze_bullet("Led team").is_too_short is True
        assert analyze_bullet("Led " + "very " * 40 + "long work").is_too_long is True

    def test_word_count(self):
        assert analyze_bullet("  Built   three internal tools ").word_count == 4


class TestEdgeCases:
    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        assert analyze_bullet(text) == BulletSignals()

    def test_analyze_all_is_index_aligned(self):
        bullets = ["Led the team", "", "Worked on stuff"]
        signals = analyze_all_bullets(bullets)
        assert len(signals) == 3
        assert signals[0].has_action_verb
        assert signals[1] == BulletSignals()
        assert signals[2].is_vague

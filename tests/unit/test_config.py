"""
Tests for atsfit.utils.config — settings defaults, env overrides, validation.
"""

import pytest
from pydantic import ValidationError

from atsfit.utils.config import (
    AppSettings,
    ClassifierSettings,
    ParserSettings,
    ScoringSettings,
    get_settings,
)


class TestDefaults:
    def test_parser_ceilings(self):
        settings = ParserSettings()
        assert settings.resume_max_chars == 50_000
        assert settings.jd_max_chars == 30_000
        assert settings.resume_context_chars < settings.resume_max_chars

    def test_scoring_weights_sum_to_one(self):
        assert ScoringSettings().total_weight == pytest.approx(1.0)

    def test_relevance_floor(self):
        assert ScoringSettings().relevance_floor == 10

    def test_classifier_threshold(self):
        assert ClassifierSettings().min_confidence == 0.4

    def test_testing_environment(self):
        assert get_settings().environment == "testing"

    def test_singleton(self):
        assert get_settings() is get_settings()


class TestEnvironmentOverrides:
    def test_nested_prefix(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("SCORING_MAX_PREVIEWS", "5")
        monkeypatch.setenv("PARSER_JD_MAX_CHARS", "1000")
        settings = fresh_settings()
        assert settings.scoring.max_previews == 5
        assert settings.parser.jd_max_chars == 1000
        assert get_settings() is settings

    def test_log_level(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert fresh_settings().logging.level == "DEBUG"

    def test_app_prefix(self, monkeypatch):
        monkeypatch.setenv("ATSFIT_DEBUG", "true")
        assert AppSettings().debug is True


class TestValidation:
    def test_non_positive_ceiling(self):
        with pytest.raises(ValidationError):
            ParserSettings(jd_max_chars=0)

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_confidence_range(self, value):
        with pytest.raises(ValidationError):
            ClassifierSettings(min_confidence=value)

    def test_saturation_positive(self):
        with pytest.raises(ValidationError):
            ClassifierSettings(saturation=0)

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_unknown_environment(self):
        with pytest.raises(ValidationError):
            AppSettings(environment="staging")

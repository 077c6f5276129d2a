from __future__ import annotations

import pytest

from compound_interest.config import ConfigurationError, Settings, load_settings
from compound_interest.core.constants import DEFAULT_CORS_ORIGINS


def test_defaults_without_environment():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.cors_origins == list(DEFAULT_CORS_ORIGINS)
    assert settings.doubling_cap_years == 100
    assert (settings.min_solved_rate, settings.max_solved_rate) == (0.01, 100.0)


def test_environment_overrides():
    settings = load_settings(
        {
            "COMPOUND_LOG_LEVEL": "debug",
            "COMPOUND_CORS_ORIGINS": "http://a.test, http://b.test,",
            "COMPOUND_DOUBLING_CAP_YEARS": "50",
            "COMPOUND_UNKNOWN": "ignored",
            "PATH": "/usr/bin",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.doubling_cap_years == 50


@pytest.mark.parametrize(
    "environ",
    [
        {"COMPOUND_DOUBLING_CAP_YEARS": "0"},
        {"COMPOUND_DOUBLING_CAP_YEARS": "many"},
        {"COMPOUND_MIN_SOLVED_RATE": "5", "COMPOUND_MAX_SOLVED_RATE": "1"},
    ],
)
def test_invalid_environment_raises(environ):
    with pytest.raises(ConfigurationError):
        load_settings(environ)

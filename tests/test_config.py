"""
Testing settings from env vars.
"""

import pytest

from cows_bulls.config import load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.random_source == "local"
    assert settings.random_timeout == 3.0
    assert settings.log_level == "WARNING"


def test_values_are_normalised():
    settings = load_settings({
        "COWS_BULLS_RANDOM_SOURCE": " Random.ORG ",
        "COWS_BULLS_RANDOM_TIMEOUT": "0.5",
        "COWS_BULLS_LOG_LEVEL": "debug",
    })
    assert settings.random_source == "random.org"
    assert settings.random_timeout == 0.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env",
    [
        {"COWS_BULLS_RANDOM_SOURCE": "dice"},
        {"COWS_BULLS_RANDOM_TIMEOUT": "soon"},
        {"COWS_BULLS_RANDOM_TIMEOUT": "0"},
        {"COWS_BULLS_LOG_LEVEL": "LOUD"},
    ],
)
def test_bad_values_fail_early(env):
    with pytest.raises(RuntimeError):
        load_settings(env)

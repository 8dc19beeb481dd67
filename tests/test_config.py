import pytest

from comment_reflow.config import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_LINE_LENGTH,
    Config,
    load_config,
)
from comment_reflow.exceptions import ConfigError

ENV_VARS = ("COMMENT_REFLOW_MAX_LINE_LENGTH", "COMMENT_REFLOW_MAX_ITERATIONS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()
    assert config.max_line_length == DEFAULT_MAX_LINE_LENGTH
    assert config.max_iterations == DEFAULT_MAX_ITERATIONS
    assert not config.verbose


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("COMMENT_REFLOW_MAX_LINE_LENGTH", "100")
    monkeypatch.setenv("COMMENT_REFLOW_MAX_ITERATIONS", " 50 ")
    config = load_config()
    assert config.max_line_length == 100
    assert config.max_iterations == 50


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("COMMENT_REFLOW_MAX_LINE_LENGTH", "100")
    config = load_config(max_line_length=72, verbose=True)
    assert config.max_line_length == 72
    assert config.verbose


def test_blank_environment_value_uses_default(monkeypatch):
    monkeypatch.setenv("COMMENT_REFLOW_MAX_LINE_LENGTH", "")
    assert load_config().max_line_length == DEFAULT_MAX_LINE_LENGTH


def test_non_integer_environment_value(monkeypatch):
    monkeypatch.setenv("COMMENT_REFLOW_MAX_LINE_LENGTH", "wide")
    with pytest.raises(ConfigError, match="COMMENT_REFLOW_MAX_LINE_LENGTH"):
        load_config()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_line_length": 0},
        {"max_line_length": -1},
        {"max_line_length": True},
        {"max_line_length": 80.0},
        {"max_iterations": 0},
    ],
)
def test_invalid_values_fail_validation(kwargs):
    with pytest.raises(ConfigError):
        Config(**kwargs).validate()


def test_load_config_validates_arguments():
    with pytest.raises(ConfigError):
        load_config(max_line_length=0)

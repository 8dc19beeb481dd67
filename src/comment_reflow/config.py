"""Configuration loading and validation."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_MAX_LINE_LENGTH = 80
DEFAULT_MAX_ITERATIONS = 1000


@dataclass
class Config:
    """Application configuration."""

    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    verbose: bool = False

    def validate(self) -> None:
        """Validate the width threshold and the iteration guard."""
        if not _is_positive_int(self.max_line_length):
            raise ConfigError(
                f"Maximum line length must be a positive integer, got {self.max_line_length!r}."
            )
        if not _is_positive_int(self.max_iterations):
            raise ConfigError(
                f"Maximum iterations must be a positive integer, got {self.max_iterations!r}."
            )


def _is_positive_int(value) -> bool:
    # bool is an int subclass, but True is not a width
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from e


def load_config(
    max_line_length: Optional[int] = None,
    max_iterations: Optional[int] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    config = Config(
        max_line_length=(
            max_line_length
            if max_line_length is not None
            else _env_int("COMMENT_REFLOW_MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH)
        ),
        max_iterations=(
            max_iterations
            if max_iterations is not None
            else _env_int("COMMENT_REFLOW_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS)
        ),
        verbose=verbose,
    )

    config.validate()
    return config

"""Fixed-point reflow of whole texts, and reading and writing source files."""

from dataclasses import dataclass, field
from pathlib import Path

import click

from .config import Config
from .exceptions import ContractError, ConvergenceError
from .models import Correction
from .scanner import analyze_text


@dataclass
class ReflowResult:
    """Outcome of reflowing one text until no unit needs a change."""

    text: str
    iterations: int = 0
    corrections: list[Correction] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.corrections)


def apply_corrections(text: str, corrections: list[Correction]) -> str:
    """Apply non-overlapping corrections, last one first so offsets stay valid."""
    limit = len(text)
    for correction in sorted(corrections, key=lambda c: c.start, reverse=True):
        if not correction.start <= correction.end <= limit:
            raise ContractError(
                f"Correction for line {correction.line} overlaps another correction"
            )
        text = text[: correction.start] + correction.replacement + text[correction.end :]
        limit = correction.start
    return text


def reflow_text(text: str, config: Config) -> ReflowResult:
    """Analyze, apply and re-analyze until a pass finds nothing to correct.

    Raises ConvergenceError when config.max_iterations passes are not enough,
    which means a split and a merge keep undoing each other.
    """
    result = ReflowResult(text=text)
    for _ in range(config.max_iterations):
        corrections = analyze_text(result.text, config)
        if not corrections:
            return result
        result.text = apply_corrections(result.text, corrections)
        result.corrections.extend(corrections)
        result.iterations += 1

    raise ConvergenceError(
        f"Comments still need reflow after {config.max_iterations} passes."
    )


def read_source(path: Path) -> str:
    """Read a source file as UTF-8, keeping its line breaks untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_source(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def check_file(path: Path, config: Config) -> list[Correction]:
    """Return the corrections one analysis pass finds in a file."""
    corrections = analyze_text(read_source(path), config)
    if config.verbose:
        click.echo(f"  {path}: {len(corrections)} comment(s) need reflow")
    return corrections


def fix_file(path: Path, config: Config) -> ReflowResult:
    """Reflow a file in place. The file is only written when something changed."""
    result = reflow_text(read_source(path), config)
    if result.changed:
        write_source(path, result.text)
    if config.verbose:
        click.echo(
            f"  {path}: {len(result.corrections)} correction(s) "
            f"in {result.iterations} pass(es)"
        )
    return result

"""Group scanning: builds reflow units from comments and reviews each one.

A unit is either one block comment or a run of line comments on consecutive
lines. Each unit yields at most one correction per pass. The correction
replaces the whole unit, so corrections never overlap and the host can
apply them, re-analyze, and repeat until nothing changes.
"""

from typing import Iterable, Optional

from .config import Config
from .engines import merge_lines, split_line
from .exceptions import ContractError
from .lexer import scan_comments
from .models import CommentKind, CommentSpan, Correction, Edit, ParsedLine, Unit
from .parser import parse_line
from .preformat import PreformatFlag
from .source import SourceText


def group_comments(spans: Iterable[CommentSpan]) -> list[Unit]:
    """Group comment spans into reflow units, in source order."""
    units = []
    run: list[CommentSpan] = []

    for span in spans:
        if span.kind is CommentKind.BLOCK and not span.shares_line:
            if run:
                units.append(_line_unit(run))
                run = []
            units.append(_block_unit(span))
        elif span.kind is CommentKind.LINE and not span.shares_line:
            if run and run[-1].end_line + 1 != span.start_line:
                units.append(_line_unit(run))
                run = []
            run.append(span)
        elif run:
            # shebangs and comments that share a line with code end the run
            units.append(_line_unit(run))
            run = []

    if run:
        units.append(_line_unit(run))
    return units


def _check_span(span: CommentSpan) -> None:
    if len(span.lines) != span.end_line - span.start_line + 1:
        raise ContractError(
            f"Comment at line {span.start_line} reports {len(span.lines)} line(s) "
            f"for lines {span.start_line}..{span.end_line}"
        )
    if span.lines[0][: span.start_column].strip():
        raise ContractError(f"Comment at line {span.start_line} shares its line with code")


def _block_unit(span: CommentSpan) -> Unit:
    _check_span(span)
    texts = list(span.lines)
    texts[-1] = texts[-1][: span.end_column]
    return Unit(
        kind=CommentKind.BLOCK,
        start_line=span.start_line,
        end_line=span.end_line,
        end_column=span.end_column,
        texts=texts,
    )


def _line_unit(run: list[CommentSpan]) -> Unit:
    for span in run:
        _check_span(span)
        if span.start_line != span.end_line:
            raise ContractError(f"Line comment at line {span.start_line} spans several lines")
    return Unit(
        kind=CommentKind.LINE,
        start_line=run[0].start_line,
        end_line=run[-1].end_line,
        end_column=run[-1].end_column,
        texts=[span.lines[0][: span.end_column] for span in run],
    )


def parse_unit(unit: Unit) -> list[ParsedLine]:
    return [
        parse_line(text, unit.kind, unit.role_of(position), index=unit.start_line + position)
        for position, text in enumerate(unit.texts)
    ]


def review_unit(unit: Unit, threshold: int) -> Optional[tuple[int, int, Edit]]:
    """Find the first split or merge a unit needs.

    Returns the slice of unit lines to replace and the edit that replaces it,
    or None when the unit is already reflowed.
    """
    flag = PreformatFlag()
    previous: Optional[ParsedLine] = None
    previous_verbatim = False

    for position, line in enumerate(parse_unit(unit)):
        verbatim = flag.advance(line)

        if not verbatim:
            # an overflowing line is split before it is considered for merging
            edit = split_line(line, threshold)
            if edit:
                return position, position + 1, edit

            if previous is not None and not previous_verbatim:
                edit = merge_lines(previous, line, threshold)
                if edit:
                    return position - 1, position + 1, edit

        previous = line
        previous_verbatim = verbatim

    return None


def describe(edit: Edit, threshold: int) -> str:
    """Human-readable description of an edit, for diagnostics."""
    if edit.action == "split":
        return (
            f"Comment line {edit.line} is {edit.measured} characters long, "
            f"over the maximum of {threshold}; it needs a split."
        )
    return f"Comment line {edit.line} fits after line {edit.line - 1}; it needs a merge."


def analyze_unit(unit: Unit, source: SourceText, threshold: int) -> Optional[Correction]:
    """Return the correction for one unit, or None when it needs none."""
    if not source.line(unit.start_line).startswith(unit.texts[0]):
        raise ContractError(f"Comment at line {unit.start_line} does not match the source text")

    found = review_unit(unit, threshold)
    if found is None:
        return None

    start, stop, edit = found
    return Correction(
        start=source.offset(unit.start_line, 0),
        end=source.offset(unit.end_line, unit.end_column),
        replacement=_rebuild(unit, source, start, stop, edit.lines),
        action=edit.action,
        line=edit.line,
        message=describe(edit, threshold),
    )


def _rebuild(unit: Unit, source: SourceText, start: int, stop: int, lines: list[str]) -> str:
    """Join the unit's lines with lines[start:stop] replaced.

    Line breaks the edit did not touch stay as they were. New ones follow the
    unit's first break, or the file's when the unit is a single line.
    """
    breaks = [source.line_break_after(n) for n in range(unit.start_line, unit.end_line)]
    new_break = breaks[0] if breaks else source.line_break

    separators = breaks[:start]
    for k in range(len(lines) - 1):
        separators.append(breaks[start + k] if start + k < stop - 1 else new_break)
    separators += breaks[stop - 1:]

    texts = unit.texts[:start] + lines + unit.texts[stop:]
    return texts[0] + "".join(sep + text for sep, text in zip(separators, texts[1:]))


def analyze(source: SourceText, spans: Iterable[CommentSpan], config: Config) -> list[Correction]:
    """Run one analysis pass and return at most one correction per unit."""
    config.validate()

    corrections = []
    for unit in group_comments(spans):
        correction = analyze_unit(unit, source, config.max_line_length)
        if correction:
            corrections.append(correction)
    return corrections


def analyze_text(text: str, config: Config) -> list[Correction]:
    """Discover the comments in text and run one analysis pass over them."""
    config.validate()
    source = SourceText(text)
    return analyze(source, scan_comments(source), config)

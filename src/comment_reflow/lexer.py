"""Comment discovery for C-family and JavaScript-like source text.

This is the host-side step that feeds the scanner. It only knows enough
syntax to tell comments from code: string and template literals are skipped
and every other non-blank character counts as a code token. Regular
expression literals are not recognized.
"""

from dataclasses import dataclass

from .exceptions import ScanError
from .models import CommentKind, CommentSpan
from .source import SourceText
from .utils import LINE_BREAK

_QUOTES = "'\"`"


@dataclass
class _Found:
    kind: CommentKind
    start: int
    end: int
    shares_line: bool = False


def scan_comments(source: SourceText) -> list[CommentSpan]:
    """Return every comment in the source, in order, as CommentSpans."""
    text = source.text
    found: list[_Found] = []
    last_token_line = 0
    awaiting = None  # a block comment waiting to see what follows it
    position = 0

    if text.startswith("#!"):
        end = _line_end(text, 0)
        found.append(_Found(CommentKind.SHEBANG, 0, end))
        last_token_line = 1
        position = end

    while position < len(text):
        char = text[position]
        if char.isspace():
            position += 1
            continue

        line, _ = source.location(position)
        if awaiting is not None:
            if source.location(awaiting.end)[0] == line:
                awaiting.shares_line = True
            awaiting = None

        if text.startswith("//", position):
            end = _line_end(text, position)
            found.append(_Found(CommentKind.LINE, position, end, last_token_line == line))
            last_token_line = line
            position = end
        elif text.startswith("/*", position):
            close = text.find("*/", position + 2)
            if close == -1:
                raise ScanError(f"Unterminated block comment starting on line {line}")
            end = close + 2
            awaiting = _Found(CommentKind.BLOCK, position, end, last_token_line == line)
            found.append(awaiting)
            last_token_line = source.location(end)[0]
            position = end
        elif char in _QUOTES:
            position = _skip_string(text, position)
            last_token_line = source.location(position)[0]
        else:
            last_token_line = line
            position += 1

    return [_to_span(source, item) for item in found]


def _to_span(source: SourceText, item: _Found) -> CommentSpan:
    start_line, start_column = source.location(item.start)
    end_line, end_column = source.location(item.end)
    return CommentSpan(
        kind=item.kind,
        start_line=start_line,
        start_column=start_column,
        end_line=end_line,
        end_column=end_column,
        lines=tuple(source.lines[start_line - 1:end_line]),
        shares_line=item.shares_line,
    )


def _line_end(text: str, position: int) -> int:
    """Offset of the line terminator at or after position, or the end of text."""
    match = LINE_BREAK.search(text, position)
    return match.start() if match else len(text)


def _skip_string(text: str, position: int) -> int:
    """Offset just past the string literal that starts at position."""
    quote = text[position]
    i = position + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        if quote != "`" and char in "\r\n":
            # unterminated literal, stop at the end of its line
            return i
        i += 1
    return len(text)

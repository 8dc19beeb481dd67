"""Split engine: breaks a comment line that exceeds the threshold in two."""

from typing import Optional

from ..classifier import is_doc_style, is_see_tag, is_table_row
from ..models import Edit, ParsedLine
from ..utils import is_space, tokenize
from .base import continuation_marker, hanging_indent, measured_length


def split_line(line: ParsedLine, threshold: int) -> Optional[Edit]:
    """Return the two lines that replace an overflowing line, or None.

    The first returned line fits within the threshold. The second carries the
    moved text and may still overflow; a later pass splits it again.
    """
    if line.directive:
        return None

    measured = measured_length(line)
    if measured <= threshold:
        return None

    # Nothing to gain when the threshold falls inside the comment syntax.
    if line.end_of("prefix") >= threshold:
        return None

    # URLs in @see tags and markdown table rows are kept whole.
    if is_see_tag(line) or is_table_row(line):
        return None

    if line.close and line.end_of("content") <= threshold:
        lines = _split_before_close(line)
    else:
        lines = _split_content(line, threshold)

    if lines is None:
        return None
    return Edit(action="split", line=line.index, lines=lines, measured=measured)


def _split_before_close(line: ParsedLine) -> Optional[list[str]]:
    """Move only the closing marker when the content itself fits."""
    if not line.content:
        return None
    marker = line.lead_whitespace
    if line.open and is_doc_style(line):
        marker += " "
    return [line.text[: line.end_of("content")], marker + line.close]


def _split_content(line: ParsedLine, threshold: int) -> Optional[list[str]]:
    tokens = tokenize(line.content)
    indent = hanging_indent(line)
    first = _first_word(tokens, indent)
    cut = _find_break(tokens, line.end_of("content"), threshold, first)

    if cut is None:
        # One word is wider than the room left; break it at the threshold.
        if threshold <= line.end_of("prefix") + indent:
            return None
        head = line.text[:threshold]
        moved = line.text[threshold: line.end_of("content")]
    else:
        offset = sum(len(token) for token in tokens[:cut])
        head = line.text[: line.end_of("prefix") + offset]
        moved = line.content[offset:]

    tail = continuation_marker(line) + " " * indent + moved + line.suffix + line.close
    return [head, tail]


def _first_word(tokens: list[str], indent: int) -> int:
    """Index of the first word after the markup or note tag."""
    offset = 0
    for i, token in enumerate(tokens):
        if offset >= indent and not is_space(token):
            return i
        offset += len(token)
    return len(tokens) - 1


def _find_break(tokens: list[str], end: int, threshold: int, first: int) -> Optional[int]:
    """Index of the first token to move to the next line, or None.

    Tokens are dropped from the end until the kept text ends at or before the
    threshold. The first word is never moved, so the kept line keeps content.
    """
    remaining = end
    for i in range(len(tokens) - 1, first, -1):
        remaining -= len(tokens[i])
        if remaining > threshold:
            continue

        # whitespace stays behind as trailing whitespace of the kept line
        cut = i + 1 if is_space(tokens[i]) else i

        # a hyphen never starts the new line on its own
        if tokens[cut] == "-" and cut - 1 > first and not is_space(tokens[cut - 1]):
            cut -= 1
        return cut
    return None

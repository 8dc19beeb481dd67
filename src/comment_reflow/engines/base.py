"""Helpers shared by the split and merge engines."""

from ..classifier import is_doc_style, is_table_row, note_tag_width
from ..models import CommentKind, ParsedLine


def measured_length(line: ParsedLine) -> int:
    """Width of a line as counted against the threshold.

    Trailing whitespace never counts, except when it sits between the
    content and the closing marker of a block comment.
    """
    if line.close:
        return line.end_of("close")
    return line.end_of("content")


def hanging_indent(line: ParsedLine) -> int:
    """Width of the markup or note tag that continuation text lines up under."""
    if line.markup and not is_table_row(line):
        return len(line.markup) + len(line.markup_space)
    return note_tag_width(line)


def continuation_marker(line: ParsedLine) -> str:
    """Text that starts a new line carved out of the given line."""
    if line.kind is CommentKind.LINE:
        return line.lead_whitespace + line.open + line.prefix
    if line.open and is_doc_style(line):
        # the new asterisk goes under the second one of the opening /**
        spacing = line.prefix.lstrip("*") or " "
        return line.lead_whitespace + " *" + spacing
    return line.lead_whitespace + line.prefix

"""Merge engine: pulls words from a line up into a short line above it."""

from typing import Optional

from ..classifier import is_doc_style, is_heading, is_table_row, starts_structure
from ..models import CommentKind, Edit, ParsedLine
from ..utils import is_space, tokenize


def merge_lines(previous: ParsedLine, current: ParsedLine, threshold: int) -> Optional[Edit]:
    """Return the lines that replace previous and current after a merge, or None.

    Whole leading tokens of current move to the end of previous as long as
    previous stays within the threshold. When only part of current moves, the
    rest stays on its own line.
    """
    if current.index - previous.index != 1:
        return None

    # An empty line is a paragraph break.
    if not previous.content or not current.content:
        return None

    if previous.end_of("close") >= threshold:
        return None

    if previous.directive or current.directive:
        return None

    if current.note_tag:
        return None

    # Structured markup never gets absorbed into prose, and headings and
    # table rows never absorb the prose after them.
    if starts_structure(current) or is_heading(previous) or is_table_row(previous):
        return None

    if not is_aligned(previous, current):
        return None

    tokens = tokenize(current.content)
    hyphenated = _continues_hyphenated_word(previous, tokens)

    room = threshold - previous.end_of("content")
    if not hyphenated:
        room -= 1

    fitting = []
    for token in tokens:
        if len(token) > room:
            break
        fitting.append(token)
        room -= len(token)

    # Leave a word and its trailing hyphen together on the lower line.
    if len(fitting) < len(tokens) and tokens[len(fitting)] == "-":
        if fitting and not is_space(fitting[-1]):
            fitting.pop()

    # The joining space replaces whitespace at the edge of the moved text.
    if fitting and is_space(fitting[-1]):
        fitting.pop()

    if not fitting:
        return None

    moved = "".join(fitting)
    joined = previous.text[: previous.end_of("content")] + ("" if hyphenated else " ") + moved
    rest = current.content[len(moved):].lstrip()

    if rest:
        remainder = (
            current.lead_whitespace
            + current.open
            + current.prefix
            + rest
            + current.suffix
            + current.close
        )
        lines = [joined, remainder]
    elif len(joined) + len(current.suffix) + len(current.close) <= threshold:
        lines = [joined + current.suffix + current.close]
    else:
        # the closing marker keeps a line of its own
        lines = [joined, current.lead_whitespace + current.prefix.rstrip() + current.close]

    return Edit(action="merge", line=current.index, lines=lines)


def is_aligned(previous: ParsedLine, current: ParsedLine) -> bool:
    """Whether current lines up under previous closely enough to be merged."""
    if previous.kind is CommentKind.BLOCK and not is_doc_style(previous):
        # without asterisks, indentation is part of the content
        return True

    # a short list item or tag may absorb a misaligned continuation
    if previous.markup:
        return True

    if previous.kind is CommentKind.BLOCK and previous.open:
        # asterisks line up under the second asterisk of /**
        return len(current.lead_whitespace) - len(previous.lead_whitespace) == 1

    if len(current.lead_whitespace) != len(previous.lead_whitespace):
        return False

    # A different content indent is deliberate, e.g. an indented code sample,
    # except under a note tag.
    if previous.note_tag:
        return True
    return len(current.prefix) == len(previous.prefix)


def _continues_hyphenated_word(previous: ParsedLine, tokens: list[str]) -> bool:
    content = previous.content
    if tokens and tokens[0] == "-":
        # a hyphen left at the start of a line rejoins the word above it
        return bool(content) and not is_space(content[-1]) and content[-1] != "-"
    if len(content) < 2 or not content.endswith("-"):
        return False
    if is_space(content[-2]) or content[-2] == "-":
        return False
    return bool(tokens) and tokens[0] != "-" and not is_space(tokens[0])

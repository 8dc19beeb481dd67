"""Content classification: directives, markup and note tags.

Classification only annotates a parsed line. It never changes the regions,
so a classified line still reconstructs its original text.
"""

import re

from .models import CommentKind, ParsedLine

_JSDOC_TAG = re.compile(r"(@[a-zA-Z]+)(\s*)")
_MARKDOWN = re.compile(r"([*-]|\d+\.|#{1,6})(\s+)")
_TABLE_ROW = re.compile(r"\|.+\|")
_TRIPLE_SLASH = re.compile(r"/\s*<(reference|amd)")
_NOTE_TAG = re.compile(r"(?:TODO|FIXME|NOTE|BUG|WARNING|WARN|HACK)(?:\([^)]*\))?:")

# Recognized only on the line that opens a comment.
_OPENING_DIRECTIVES = (
    ("global ", "global"),
    ("globals ", "globals"),
    ("jslint ", "jslint"),
    ("property ", "property"),
    ("eslint ", "eslint"),
)

# Recognized on any line. Longer names come before their own prefixes.
_DIRECTIVES = (
    ("jshint ", "jshint"),
    ("istanbul ", "istanbul"),
    ("jscs ", "jscs"),
    ("eslint-env", "eslint-env"),
    ("eslint-disable-next-line", "eslint-disable-next-line"),
    ("eslint-disable-line", "eslint-disable-line"),
    ("eslint-disable", "eslint-disable"),
    ("eslint-enable", "eslint-enable"),
    ("exported", "exported"),
    ("@ts-check", "@ts-check"),
    ("@ts-nocheck", "@ts-nocheck"),
    ("@ts-ignore", "@ts-ignore"),
    ("@ts-expect-error", "@ts-expect-error"),
)

FENCE = "```"
EXAMPLE_TAG = "@example"


def classify(line: ParsedLine) -> ParsedLine:
    """Populate markup, directive and note tag of a parsed line in place."""
    line.markup, line.markup_space = find_markup(line)
    line.directive = find_directive(line)
    line.note_tag = find_note_tag(line.content)
    return line


def is_doc_style(line: ParsedLine) -> bool:
    """Whether the line carries a leading asterisk continuation marker."""
    return line.kind is CommentKind.BLOCK and line.prefix.startswith("*")


def find_markup(line: ParsedLine) -> tuple[str, str]:
    """Return the leading markup token and the whitespace after it, if any."""
    if not is_doc_style(line) or not line.content:
        return "", ""

    # JSDoc tags win over list bullets and do not need trailing whitespace
    match = _JSDOC_TAG.match(line.content)
    if match:
        return match.group(1), match.group(2)

    match = _MARKDOWN.match(line.content)
    if match:
        return match.group(1), match.group(2)

    if _TABLE_ROW.fullmatch(line.content):
        return line.content, ""

    return "", ""


def find_directive(line: ParsedLine) -> str:
    """Return the name of the tool directive the line carries, or an empty string."""
    content = line.content
    if not content:
        return ""

    if line.role.opens:
        if not is_doc_style(line) and content.startswith("tslint:"):
            return "tslint"
        for token, name in _OPENING_DIRECTIVES:
            if content.startswith(token):
                return name

    for token, name in _DIRECTIVES:
        if content.startswith(token):
            return name

    if line.kind is CommentKind.LINE and _TRIPLE_SLASH.match(content):
        return content[1:].lstrip()

    return ""


def find_note_tag(content: str) -> str:
    """Return the leading TODO/FIXME style tag including its colon, if any."""
    match = _NOTE_TAG.match(content)
    return match.group(0) if match else ""


def note_tag_width(line: ParsedLine) -> int:
    """Width of the note tag plus the whitespace that follows it."""
    if not line.note_tag:
        return 0
    rest = line.content[len(line.note_tag):]
    return len(line.note_tag) + len(rest) - len(rest.lstrip())


def is_jsdoc_tag(line: ParsedLine) -> bool:
    return line.markup.startswith("@")


def is_see_tag(line: ParsedLine) -> bool:
    return is_doc_style(line) and line.markup == "@see"


def is_list_item(line: ParsedLine) -> bool:
    return line.markup in ("*", "-") or line.markup[:1].isdigit()


def is_heading(line: ParsedLine) -> bool:
    return line.markup.startswith("#")


def is_table_row(line: ParsedLine) -> bool:
    return line.markup.startswith("|")


def starts_structure(line: ParsedLine) -> bool:
    """Whether the line opens a list item, heading, tag or table row."""
    return (
        is_jsdoc_tag(line)
        or is_list_item(line)
        or is_heading(line)
        or is_table_row(line)
    )

"""Utility functions for comment-reflow."""

import re

_TOKEN = re.compile(r"[^\s-]+|\s+|-")
LINE_BREAK = re.compile(r"\r\n|[\r\n\u2028\u2029]")


def tokenize(text: str) -> list[str]:
    """Split text into word, whitespace and single hyphen tokens, in order."""
    return _TOKEN.findall(text)


def is_space(token: str) -> bool:
    return not token.strip()


def sniff_line_break(text: str) -> str:
    """Return the first line terminator used in text, defaulting to LF."""
    match = LINE_BREAK.search(text)
    return match.group(0) if match else "\n"


def split_lines(text: str) -> tuple[list[str], list[int]]:
    """Split text into lines without terminators, plus each line's start offset."""
    lines = []
    starts = [0]
    position = 0
    for match in LINE_BREAK.finditer(text):
        lines.append(text[position:match.start()])
        position = match.end()
        starts.append(position)
    lines.append(text[position:])
    return lines, starts

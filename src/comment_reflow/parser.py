"""Line structure parsing.

Turns one physical comment line into a ParsedLine whose regions concatenate
back to the original text:

    lead_whitespace + open + prefix + content + suffix + close
"""

import re

from .classifier import classify
from .exceptions import ContractError
from .models import CommentKind, LineRole, ParsedLine

LINE_OPEN = "//"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"

_OPENING_PREFIX = re.compile(r"\**\s*")
_CONTINUATION_PREFIX = re.compile(r"\*(?=\s|$)\s*")


def parse_line(text: str, kind: CommentKind, role: LineRole, index: int = 1) -> ParsedLine:
    """Parse a raw comment line given its comment kind and role.

    Args:
        text: The physical line, without its terminator. The last line of a
            block comment must end right after the closing marker.
        kind: Line or block comment.
        role: Position of the line within its comment.
        index: Absolute 1-based line number, carried through for reporting.

    Raises ContractError when the text lacks a marker its role requires.
    """
    body = text.lstrip()
    lead = text[: len(text) - len(body)]

    if kind is CommentKind.LINE:
        if role is not LineRole.ONLY:
            raise ContractError(f"Line {index}: a line comment spans a single line")
        if not body.startswith(LINE_OPEN):
            raise ContractError(f"Line {index}: expected {LINE_OPEN!r} in {text!r}")
        open_, close = LINE_OPEN, ""
        rest = body[len(open_):]
        prefix = rest[: len(rest) - len(rest.lstrip())]
    elif kind is CommentKind.BLOCK:
        open_ = BLOCK_OPEN if role.opens else ""
        close = BLOCK_CLOSE if role.closes else ""
        if len(body) < len(open_) + len(close):
            raise ContractError(f"Line {index}: block comment markers overlap in {text!r}")
        if not body.startswith(open_):
            raise ContractError(f"Line {index}: expected {BLOCK_OPEN!r} in {text!r}")
        if not body.endswith(close):
            raise ContractError(f"Line {index}: expected {BLOCK_CLOSE!r} at end of {text!r}")
        rest = body[len(open_): len(body) - len(close)]
        pattern = _OPENING_PREFIX if open_ else _CONTINUATION_PREFIX
        match = pattern.match(rest)
        prefix = match.group(0) if match else ""
    else:
        raise ContractError(f"Line {index}: cannot parse a {kind.value} span")

    rest = rest[len(prefix):]
    content = rest.rstrip()

    line = ParsedLine(
        index=index,
        kind=kind,
        role=role,
        lead_whitespace=lead,
        open=open_,
        prefix=prefix,
        content=content,
        suffix=rest[len(content):],
        close=close,
    )
    return classify(line)

"""Data models for comment-reflow."""

from dataclasses import dataclass, field
from enum import Enum


class CommentKind(str, Enum):
    """Syntax of a comment span."""

    LINE = "line"
    BLOCK = "block"
    SHEBANG = "shebang"  # not a comment to reflow, only a run boundary


class LineRole(str, Enum):
    """Position of a physical line within its comment."""

    ONLY = "only"
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"

    @property
    def opens(self) -> bool:
        return self in (LineRole.ONLY, LineRole.FIRST)

    @property
    def closes(self) -> bool:
        return self in (LineRole.ONLY, LineRole.LAST)


REGIONS = ("lead_whitespace", "open", "prefix", "content", "suffix", "close")


@dataclass(frozen=True)
class CommentSpan:
    """A comment as reported by the host, with the text of every line it spans.

    Lines are 1-based, columns are 0-based and end_column is exclusive.
    """

    kind: CommentKind
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    lines: tuple[str, ...]
    shares_line: bool = False


@dataclass
class ParsedLine:
    """One physical comment line split into its structural regions."""

    index: int  # absolute 1-based line number
    kind: CommentKind
    role: LineRole
    lead_whitespace: str = ""
    open: str = ""
    prefix: str = ""
    content: str = ""
    suffix: str = ""
    close: str = ""
    markup: str = ""  # overlaps the start of content
    markup_space: str = ""
    directive: str = ""
    note_tag: str = ""

    @property
    def text(self) -> str:
        return "".join(getattr(self, region) for region in REGIONS)

    def end_of(self, region: str) -> int:
        """Column where the given region ends, counting every region before it."""
        if region not in REGIONS:
            raise ValueError(f"Unknown line region: {region}")
        stop = REGIONS.index(region) + 1
        return sum(len(getattr(self, name)) for name in REGIONS[:stop])


@dataclass
class Unit:
    """A reflow candidate: one block comment or a run of adjacent line comments.

    texts holds the physical lines of the unit. The first line starts at column
    0 and the last one is cut at end_column.
    """

    kind: CommentKind
    start_line: int
    end_line: int
    end_column: int
    texts: list[str] = field(default_factory=list)

    def role_of(self, position: int) -> LineRole:
        if self.kind is CommentKind.LINE or len(self.texts) == 1:
            return LineRole.ONLY
        if position == 0:
            return LineRole.FIRST
        if position == len(self.texts) - 1:
            return LineRole.LAST
        return LineRole.MIDDLE


@dataclass
class Edit:
    """A split or merge decided for one or two adjacent lines of a unit."""

    action: str  # split, merge
    line: int
    lines: list[str]
    measured: int = 0


@dataclass
class Correction:
    """A replacement of one unit's text, ready for the host to apply."""

    start: int
    end: int
    replacement: str
    action: str
    line: int
    message: str

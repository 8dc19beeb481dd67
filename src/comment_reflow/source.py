"""Source text access for the host side: lines, offsets and line breaks."""

from bisect import bisect_right

from .utils import sniff_line_break, split_lines


class SourceText:
    """A source file held in memory, addressed by 1-based line and 0-based column."""

    def __init__(self, text: str):
        self.text = text
        self.lines, self._starts = split_lines(text)
        self.line_break = sniff_line_break(text)

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return the text of a 1-based line, without its terminator."""
        if not 1 <= number <= len(self.lines):
            raise IndexError(f"Line {number} is outside 1..{len(self.lines)}")
        return self.lines[number - 1]

    def line_break_after(self, number: int) -> str:
        """Return the terminator that ends a 1-based line, empty for the last line."""
        text = self.line(number)
        if number == len(self.lines):
            return ""
        return self.text[self._starts[number - 1] + len(text): self._starts[number]]

    def offset(self, line: int, column: int) -> int:
        """Map a (line, column) location to an absolute offset in the text."""
        text = self.line(line)
        if not 0 <= column <= len(text):
            raise IndexError(f"Column {column} is outside line {line}")
        return self._starts[line - 1] + column

    def location(self, offset: int) -> tuple[int, int]:
        """Map an absolute offset back to a (line, column) location."""
        if not 0 <= offset <= len(self.text):
            raise IndexError(f"Offset {offset} is outside the text")
        index = bisect_right(self._starts, offset) - 1
        # an offset inside a CRLF terminator belongs to the line it ends
        column = min(offset - self._starts[index], len(self.lines[index]))
        return index + 1, column

"""Split and merge engines."""

from .merge import is_aligned, merge_lines
from .split import split_line

__all__ = ["is_aligned", "merge_lines", "split_line"]

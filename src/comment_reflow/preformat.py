"""Tracking of preformatted regions inside block comments.

Fenced markdown code and JSDoc @example sections are verbatim text. Lines
inside them are never split or merged.
"""

from dataclasses import dataclass

from .classifier import EXAMPLE_TAG, FENCE
from .models import CommentKind, ParsedLine


@dataclass
class PreformatFlag:
    """Per-unit state, advanced strictly in line order."""

    in_fence: bool = False
    in_example: bool = False

    @property
    def active(self) -> bool:
        return self.in_fence or self.in_example

    def reset(self) -> None:
        self.in_fence = False
        self.in_example = False

    def advance(self, line: ParsedLine) -> bool:
        """Update the state for the next line and return whether it is verbatim.

        The opening and closing fences and the @example line are verbatim
        themselves. The tag that ends an example section is not.
        """
        if line.kind is not CommentKind.BLOCK:
            return False

        content = line.content
        follows_open = not line.role.opens

        if self.in_fence:
            if follows_open and content.startswith(FENCE):
                self.in_fence = False
            return True

        if self.in_example:
            if content.startswith("@") and not content.startswith(EXAMPLE_TAG):
                self.in_example = False
                return False
            return True

        if follows_open and content.startswith(FENCE):
            self.in_fence = True
            return True

        if follows_open and content.startswith(EXAMPLE_TAG):
            self.in_example = True
            return True

        return False

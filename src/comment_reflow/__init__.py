"""Reflow source code comments to a maximum line width."""

from .config import Config, load_config
from .fixer import ReflowResult, apply_corrections, reflow_text
from .models import CommentKind, CommentSpan, Correction, LineRole, ParsedLine
from .parser import parse_line
from .scanner import analyze, analyze_text
from .source import SourceText

__version__ = "0.1.0"

__all__ = [
    "CommentKind",
    "CommentSpan",
    "Config",
    "Correction",
    "LineRole",
    "ParsedLine",
    "ReflowResult",
    "SourceText",
    "analyze",
    "analyze_text",
    "apply_corrections",
    "load_config",
    "parse_line",
    "reflow_text",
]

"""Custom exceptions for comment-reflow."""


class ReflowError(Exception):
    """Base exception for comment-reflow."""


class ConfigError(ReflowError):
    """Raised when configuration is missing or invalid."""


class ContractError(ReflowError):
    """Raised when a comment span contradicts the text it was built from."""


class ScanError(ReflowError):
    """Raised when comments cannot be discovered in the source text."""


class ConvergenceError(ReflowError):
    """Raised when repeated reflow passes never reach a fixed point."""

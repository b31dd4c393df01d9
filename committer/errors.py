"""Error types raised by committer.

Every error carries a ``kind`` so callers can branch on it without
walking the class hierarchy.
"""

from enum import Enum


class ErrorKind(Enum):
    CONFIG = "config"
    NOT_SETUP = "not_setup"
    FORMAT = "format"
    OVERLOAD = "overload"
    UNKNOWN = "unknown"
    PARSE = "parse"
    GIT = "git"


class CommitterError(Exception):
    """Base error for committer."""
    kind: ErrorKind = ErrorKind.UNKNOWN


class ConfigError(CommitterError):
    """Raised when a required setting is missing at client construction."""
    kind = ErrorKind.CONFIG


class NotSetupError(CommitterError):
    """Raised when neither the home nor the repository config exists."""
    kind = ErrorKind.NOT_SETUP

    def __init__(self, message: str = "Committer is not set up. Run 'committer setup' first."):
        super().__init__(message)


class FormatError(CommitterError):
    """Raised when a config file exists but is not a YAML mapping."""
    kind = ErrorKind.FORMAT


class OverloadError(CommitterError):
    """The provider reported a transient overload. Retrying later may succeed."""
    kind = ErrorKind.OVERLOAD

    def __init__(self, payload: dict | None = None):
        super().__init__("Claude API is overloaded, try again later")
        self.payload = payload or {}


class UnknownError(CommitterError):
    """Any other provider-reported error. Carries the full payload."""
    kind = ErrorKind.UNKNOWN

    def __init__(self, payload: dict):
        super().__init__(f"Claude API error: {payload!r}")
        self.payload = payload


class ParseError(CommitterError):
    """Raised when no text can be extracted from a model reply."""
    kind = ErrorKind.PARSE


class GitError(CommitterError):
    """Raised when git operations fail."""
    kind = ErrorKind.GIT

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


__all__ = [
    "ErrorKind",
    "CommitterError",
    "ConfigError",
    "NotSetupError",
    "FormatError",
    "OverloadError",
    "UnknownError",
    "ParseError",
    "GitError",
]

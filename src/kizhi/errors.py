"""
Error kinds and the line-level result type.

Every failure inside the interpreter is a ``KizhiError`` carrying an
``ErrorKind``.  The execute-one-line boundary converts it into a
``LineResult`` and a single output line; nothing above that boundary
ever sees the exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure kinds.  The value is the message template."""

    # Syntax
    COMMAND_NOT_RECOGNIZED = "Command not recognized"
    INVALID_NAME = "Variable name must consist of English letters"
    INVALID_VALUE = "Value must be a natural number"

    # Semantic
    VARIABLE_NOT_SET = "Variable is not in memory"
    FUNCTION_NOT_DEFINED = "Function {name} is not defined"
    FUNCTION_ALREADY_DEFINED = "Function {name} is already defined"
    NO_CODE_LOADED = "No code loaded"
    RECURSIVE_CALL = "Function {name} is already running"

    # State
    CODE_NOT_REQUESTED = "end set code without set code"

    @property
    def category(self) -> str:
        return _CATEGORIES[self]

    def format(self, **details) -> str:
        return self.value.format(**details)


_CATEGORIES = {
    ErrorKind.COMMAND_NOT_RECOGNIZED: "syntax",
    ErrorKind.INVALID_NAME: "syntax",
    ErrorKind.INVALID_VALUE: "syntax",
    ErrorKind.VARIABLE_NOT_SET: "semantic",
    ErrorKind.FUNCTION_NOT_DEFINED: "semantic",
    ErrorKind.FUNCTION_ALREADY_DEFINED: "semantic",
    ErrorKind.NO_CODE_LOADED: "semantic",
    ErrorKind.RECURSIVE_CALL: "semantic",
    ErrorKind.CODE_NOT_REQUESTED: "state",
}


class KizhiError(Exception):
    """Base class for every recoverable, line-scoped failure."""

    def __init__(self, kind: ErrorKind, **details):
        self.kind = kind
        self.details = details
        super().__init__(kind.format(**details))

    @property
    def message(self) -> str:
        return str(self)

    @staticmethod
    def for_kind(kind: ErrorKind, **details) -> "KizhiError":
        """Build the subclass matching the kind's category."""
        cls = {
            "syntax": KizhiSyntaxError,
            "semantic": KizhiSemanticError,
            "state": KizhiStateError,
        }[kind.category]
        return cls(kind, **details)


class KizhiSyntaxError(KizhiError):
    """Unrecognized command, malformed name or malformed value"""
    pass


class KizhiSemanticError(KizhiError):
    """Unset variable, unknown or duplicate function, missing code"""
    pass


class KizhiStateError(KizhiError):
    """Mode transition issued out of order"""
    pass


@dataclass(frozen=True)
class LineResult:
    """Outcome of executing one line."""

    ok: bool
    kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls) -> "LineResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: KizhiError) -> "LineResult":
        return cls(ok=False, kind=error.kind, message=error.message)

    def __bool__(self) -> bool:
        return self.ok

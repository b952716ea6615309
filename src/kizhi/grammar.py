"""
Command grammar.

A statement is a command name followed by space-separated arguments.
Command names may span several words ("end set code", "print trace"),
so matching always tries the longest name first.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

from .errors import ErrorKind, KizhiError

INDENT = " " * 4

_NAME_RE = re.compile(r"[A-Za-z]+")
_VALUE_RE = re.compile(r"[+-]?[0-9]+")
MAX_VALUE = 2 ** 31 - 1
# Significant digits of MAX_VALUE
_MAX_VALUE_DIGITS = 10


class Grammar:
    """Longest-match-first parser over a fixed command vocabulary."""

    def __init__(self, command_names: Iterable[str]):
        names = sorted(set(command_names), key=len, reverse=True)
        self._names: Tuple[str, ...] = tuple(names)
        alternatives = "|".join(re.escape(n) for n in self._names)
        self._command_re = re.compile(rf"^(?P<name>{alternatives})(?= |\Z)")

    @property
    def command_names(self) -> Tuple[str, ...]:
        return self._names

    def parse(self, line: str) -> Tuple[str, List[str]]:
        """Split *line* into ``(command_name, args)``."""
        match = self._command_re.match(line)
        if not match:
            raise KizhiError.for_kind(ErrorKind.COMMAND_NOT_RECOGNIZED)
        name = match.group("name")
        rest = line[match.end():]
        args = [token for token in rest.split(" ") if token]
        return name, args

    @staticmethod
    def read_name(token: Optional[str]) -> str:
        if token is None or not _NAME_RE.fullmatch(token):
            raise KizhiError.for_kind(ErrorKind.INVALID_NAME)
        return token

    @staticmethod
    def read_value(token: Optional[str]) -> int:
        if (token is None or len(token.lstrip("+-0")) > _MAX_VALUE_DIGITS
                or not _VALUE_RE.fullmatch(token)):
            raise KizhiError.for_kind(ErrorKind.INVALID_VALUE)
        value = int(token, 10)
        if not 0 < value <= MAX_VALUE:
            raise KizhiError.for_kind(ErrorKind.INVALID_VALUE)
        return value

    @staticmethod
    def try_dedent(line: str) -> Optional[str]:
        """Strip one indentation unit, or return None if *line* has none."""
        if not line.startswith(INDENT):
            return None
        return line[len(INDENT):]


def split_script(payload: str) -> List[str]:
    """Split a raw script payload into non-empty lines."""
    return [line for line in re.split(r"\r\n|\r|\n", payload) if line]

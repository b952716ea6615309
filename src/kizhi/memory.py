"""Program state shared by every command."""

from __future__ import annotations

from typing import Dict, Optional, Set

from .errors import ErrorKind, KizhiError
from .frames import ExecutionContext


class Memory:
    def __init__(self):
        self.variables: Dict[str, int] = {}
        self.last_change: Dict[str, Optional[int]] = {}
        self.functions: Dict[str, ExecutionContext] = {}
        self.breakpoints: Set[int] = set()
        # Root "main" context of the most recently loaded script
        self.code: Optional[ExecutionContext] = None

    def check_set(self, name: str) -> None:
        if name not in self.variables:
            raise KizhiError.for_kind(ErrorKind.VARIABLE_NOT_SET, name=name)

    def write(self, name: str, value: int, position: Optional[int]) -> None:
        self.variables[name] = value
        self.last_change[name] = position

    def remove(self, name: str) -> None:
        del self.variables[name]
        self.last_change.pop(name, None)

    def clear_variables(self) -> None:
        self.variables.clear()
        self.last_change.clear()

    def define_function(self, context: ExecutionContext) -> None:
        if context.name in self.functions:
            raise KizhiError.for_kind(
                ErrorKind.FUNCTION_ALREADY_DEFINED, name=context.name)
        self.functions[context.name] = context

    def get_function(self, name: str) -> ExecutionContext:
        try:
            return self.functions[name]
        except KeyError:
            raise KizhiError.for_kind(
                ErrorKind.FUNCTION_NOT_DEFINED, name=name) from None

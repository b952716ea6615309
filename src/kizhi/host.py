"""
Shared line-execution boundary.

``LineHost`` owns memory, the call stack, the grammar and the command
table, and implements the execute-one-line boundary: a line either feeds
the pending code block or is parsed and dispatched, and any
``KizhiError`` raised on the way becomes one output line plus a failed
``LineResult``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Type

from .commands import Command, build_command_table
from .config import KizhiConfig
from .errors import ErrorKind, KizhiError, LineResult
from .frames import CallStack
from .grammar import Grammar
from .lines import ListSink
from .memory import Memory
from .modes import InterpreterState

logger = logging.getLogger(__name__)


class LineHost:
    command_classes: Sequence[Type[Command]] = ()

    def __init__(self, sink=None, config: Optional[KizhiConfig] = None):
        self.sink = sink if sink is not None else ListSink()
        self.config = config or KizhiConfig()
        self.memory = Memory()
        self.stack = CallStack()
        self._state = InterpreterState.NO_CODE
        self._code_requested = False
        self._commands = build_command_table(self, self.command_classes)
        self.grammar = Grammar(self._commands.keys())

    # -- State -------------------------------------------------------------

    @property
    def state(self) -> InterpreterState:
        return self._state

    @state.setter
    def state(self, value: InterpreterState) -> None:
        if value is not self._state:
            logger.debug("state %s -> %s", self._state.name, value.name)
        self._state = value

    @property
    def commands(self) -> Mapping[str, Command]:
        return self._commands

    def request_code(self) -> None:
        self._code_requested = True
        self.state = InterpreterState.WAITING_FOR_CODE

    def end_code(self) -> None:
        if self.config.strict_code_brackets and not self._code_requested:
            raise KizhiError.for_kind(ErrorKind.CODE_NOT_REQUESTED)
        self._code_requested = False
        self.state = InterpreterState.CODE_ACQUIRED

    # -- Execution ---------------------------------------------------------

    def execute_line(self, line: str) -> LineResult:
        """Execute one logical line; errors are written to the sink."""
        try:
            if self._state is InterpreterState.WAITING_FOR_CODE:
                self.load_code(line)
            else:
                self.execute_statement(line)
        except KizhiError as e:
            logger.debug("line failed (%s): %r", e.kind.name, line)
            self.sink.write_line(e.message)
            return LineResult.failure(e)
        return LineResult.success()

    def execute_lines(self, lines: Iterable[str]) -> List[LineResult]:
        return [self.execute_line(line) for line in lines]

    def execute_statement(self, statement: str) -> None:
        name, args = self.grammar.parse(statement)
        self._commands[name].invoke(args)

    def top_level_position(self) -> Optional[int]:
        """Position recorded for writes made outside any frame."""
        return None

    def load_code(self, payload: str) -> None:
        raise NotImplementedError

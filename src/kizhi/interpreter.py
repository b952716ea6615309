"""
Immediate interpreter.

The non-debugging variant: statements run the moment they arrive.
``def <name>`` starts collecting the indented lines that follow into a
function body, and ``call <name>`` runs that body to completion on the
spot.  There are no breakpoints and no stepping; ``run`` is accepted and
ignored.
"""

from __future__ import annotations

import logging
from typing import Optional

from .commands import (
    CallCommand,
    DefCommand,
    EndSetCodeCommand,
    PrintCommand,
    PrintMemCommand,
    RemCommand,
    RunCommand,
    SetCodeCommand,
    SetCommand,
    SubCommand,
    argument,
)
from .errors import ErrorKind, KizhiError
from .frames import ExecutionContext
from .grammar import split_script
from .host import LineHost
from .modes import InterpreterState

logger = logging.getLogger(__name__)


class ImmediateDefCommand(DefCommand):
    """Open a new function; following indented lines become its body."""

    def invoke(self, args):
        function_name = self.grammar.read_name(argument(args, 0))
        context = ExecutionContext(function_name, [], self.host.position + 1)
        self.memory.define_function(context)
        self.host.open_function(context)


class ImmediateCallCommand(CallCommand):
    """Run a function body to completion before returning."""

    def invoke(self, args):
        function_name = self.grammar.read_name(argument(args, 0))
        context = self.memory.get_function(function_name)
        if any(frame is context for frame in self.stack):
            raise KizhiError.for_kind(ErrorKind.RECURSIVE_CALL, name=function_name)

        self.stack.push(context)
        try:
            for pointer, statement in enumerate(context.lines):
                context.instruction_pointer = pointer
                self.host.execute_statement(statement)
        finally:
            context.instruction_pointer = 0
            self.stack.pop()


class ImmediateRunCommand(RunCommand):
    def invoke(self, args):
        pass


IMMEDIATE_COMMANDS = (
    SetCommand,
    SubCommand,
    PrintCommand,
    RemCommand,
    ImmediateDefCommand,
    ImmediateCallCommand,
    SetCodeCommand,
    EndSetCodeCommand,
    ImmediateRunCommand,
    PrintMemCommand,
)


class ImmediateInterpreter(LineHost):
    command_classes = IMMEDIATE_COMMANDS

    def __init__(self, sink=None, config=None):
        super().__init__(sink, config)
        # Index of the last line fed through dispatch
        self.position = -1
        self._open_function: Optional[ExecutionContext] = None

    def open_function(self, context: ExecutionContext) -> None:
        logger.debug("collecting body of %s", context.name)
        self._open_function = context

    def top_level_position(self) -> Optional[int]:
        return self.position

    def execute_line(self, line):
        if self.state is not InterpreterState.WAITING_FOR_CODE:
            self.position += 1
        return super().execute_line(line)

    def execute_statement(self, statement: str) -> None:
        if self._open_function is not None and not self.stack:
            body_line = self.grammar.try_dedent(statement)
            if body_line is not None:
                self._open_function.lines.append(body_line)
                return
            self._open_function = None
        super().execute_statement(statement)

    def load_code(self, payload: str) -> None:
        """Run each line of *payload* as if it had been typed."""
        try:
            for line in split_script(payload):
                self.position += 1
                self.execute_statement(line)
        finally:
            self._open_function = None
            self.state = InterpreterState.CODE_ACQUIRED

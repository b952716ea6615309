"""
The command set.

Each command is a small class with a constant ``name`` and an ``invoke``
method.  Commands never own state: they reach memory, the call stack and
the output sink through the host (the debugger engine or the immediate
interpreter) they were built for.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Type

from .grammar import INDENT
from .modes import RunMode


def argument(args: Sequence[str], index: int) -> Optional[str]:
    return args[index] if index < len(args) else None


class Command:
    name = ""

    def __init__(self, host):
        self.host = host

    @property
    def memory(self):
        return self.host.memory

    @property
    def grammar(self):
        return self.host.grammar

    @property
    def stack(self):
        return self.host.stack

    def write(self, text) -> None:
        self.host.sink.write_line(str(text))

    def current_position(self) -> Optional[int]:
        """Absolute position of the executing frame, or the host's own
        notion of position for statements run outside any frame."""
        frame = self.stack.peek()
        if frame is None:
            return self.host.top_level_position()
        return frame.absolute_position

    def invoke(self, args: List[str]) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

class SetCommand(Command):
    name = "set"

    def invoke(self, args):
        variable = self.grammar.read_name(argument(args, 0))
        value = self.grammar.read_value(argument(args, 1))
        self.memory.write(variable, value, self.current_position())


class SubCommand(Command):
    name = "sub"

    def invoke(self, args):
        variable = self.grammar.read_name(argument(args, 0))
        self.memory.check_set(variable)
        value = self.grammar.read_value(argument(args, 1))
        self.memory.write(variable, self.memory.variables[variable] - value,
                          self.current_position())


class PrintCommand(Command):
    name = "print"

    def invoke(self, args):
        variable = self.grammar.read_name(argument(args, 0))
        self.memory.check_set(variable)
        self.write(self.memory.variables[variable])


class RemCommand(Command):
    name = "rem"

    def invoke(self, args):
        variable = self.grammar.read_name(argument(args, 0))
        self.memory.check_set(variable)
        self.memory.remove(variable)


class DefCommand(Command):
    """Skip an inline function body while scanning forward.

    Bodies were already lifted out by discovery; here the executing frame
    only has to jump over them.  The pointer is left on the last body line
    because the run loop advances it once more after every statement.
    """

    name = "def"

    def invoke(self, args):
        context = self.stack.peek()
        if context is None:
            return
        context.instruction_pointer += 1
        while (not context.end_reached
               and context.current_statement.startswith(INDENT)):
            context.instruction_pointer += 1
        context.instruction_pointer -= 1


class CallCommand(Command):
    name = "call"

    def invoke(self, args):
        function_name = self.grammar.read_name(argument(args, 0))
        self.stack.push(self.memory.get_function(function_name))


# ---------------------------------------------------------------------------
# Code loading
# ---------------------------------------------------------------------------

class SetCodeCommand(Command):
    name = "set code"

    def invoke(self, args):
        self.host.request_code()


class EndSetCodeCommand(Command):
    name = "end set code"

    def invoke(self, args):
        self.host.end_code()


# ---------------------------------------------------------------------------
# Debugging
# ---------------------------------------------------------------------------

class RunCommand(Command):
    name = "run"
    mode = RunMode.RUN

    def invoke(self, args):
        self.host.start(self.mode)


class StepCommand(RunCommand):
    name = "step"
    mode = RunMode.STEP


class StepOverCommand(RunCommand):
    name = "step over"
    mode = RunMode.STEP_OVER


class AddBreakCommand(Command):
    name = "add break"

    def invoke(self, args):
        line = self.grammar.read_value(argument(args, 0))
        self.memory.breakpoints.add(line)


class PrintMemCommand(Command):
    name = "print mem"

    def invoke(self, args):
        for variable, value in self.memory.variables.items():
            position = self.memory.last_change.get(variable)
            self.write(f"{variable} {value} "
                       f"{'-' if position is None else position}")


class PrintTraceCommand(Command):
    """Write one ``<call position> <callee>`` line per active call."""

    name = "print trace"

    def invoke(self, args):
        frames = self.stack.frames_top_first()
        for callee, caller in zip(frames, frames[1:]):
            self.write(f"{caller.absolute_position - 1} {callee.name}")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

DEBUGGER_COMMANDS = (
    SetCommand,
    SubCommand,
    PrintCommand,
    RemCommand,
    DefCommand,
    CallCommand,
    SetCodeCommand,
    EndSetCodeCommand,
    RunCommand,
    AddBreakCommand,
    StepCommand,
    StepOverCommand,
    PrintMemCommand,
    PrintTraceCommand,
)


def build_command_table(host, command_classes: Sequence[Type[Command]]
                        ) -> Mapping[str, Command]:
    """Instantiate *command_classes* for *host*, keyed by command name."""
    table = {}
    for cls in command_classes:
        if cls.name in table:
            raise ValueError(f"duplicate command name {cls.name!r}")
        table[cls.name] = cls(host)
    return MappingProxyType(table)

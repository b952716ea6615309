"""
Debugger engine — code loading and the stepping run loop.

The engine drives the call stack one statement at a time.  ``run``,
``step`` and ``step over`` all share one loop and differ only in when
it stops:

* **Run** — until the stack empties or a breakpoint is hit.
* **Step** — after one statement, wherever in the stack it lives.
* **Step over** — after one statement at the starting depth; deeper
  calls run to completion unless a breakpoint fires inside them.

Single-threaded: control returns to the caller of ``execute_line`` as
soon as the loop stops.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..commands import DEBUGGER_COMMANDS
from ..discovery import find_functions
from ..errors import ErrorKind, KizhiError
from ..frames import ExecutionContext
from ..grammar import split_script
from ..host import LineHost
from ..modes import InterpreterState, RunMode, StopReason

logger = logging.getLogger(__name__)

MAIN_CONTEXT = "main"


class Debugger(LineHost):
    """Line-driven debugger over the Kizhi statement language."""

    command_classes = DEBUGGER_COMMANDS

    def __init__(self, sink=None, config=None):
        super().__init__(sink, config)
        self.last_stop: Optional[StopReason] = None

    # -- Code acquisition --------------------------------------------------

    def load_code(self, payload: str) -> None:
        """Install *payload* as the root program.

        Functions registered before a discovery failure stay registered and
        the previous root program is kept; the code block is closed either
        way so the next line is treated as a command again.
        """
        lines = split_script(payload)
        try:
            discovery = find_functions(lines, self.memory, self.grammar)
            self.memory.code = ExecutionContext(MAIN_CONTEXT, lines, 0)
            logger.debug("acquired %d lines, functions: %s", len(lines),
                         ", ".join(f.name for f in discovery.functions) or "-")
        finally:
            self.state = (InterpreterState.CODE_ACQUIRED
                          if self.memory.code is not None
                          else InterpreterState.NO_CODE)

    # -- Running -----------------------------------------------------------

    def start(self, mode: RunMode) -> StopReason:
        """Enter the run loop, pushing the root program if nothing is running."""
        if not self.stack:
            if self.memory.code is None:
                raise KizhiError.for_kind(ErrorKind.NO_CODE_LOADED)
            self.stack.push(self.memory.code)
        return self.run(mode)

    def run(self, mode: RunMode) -> StopReason:
        self.last_stop = None
        starting_depth = self.stack.depth
        executed = 0
        logger.debug("run loop: mode=%s depth=%d", mode.name, starting_depth)

        reason = StopReason.FINISHED
        while self.stack:
            context = self.stack.peek()
            if context.end_reached:
                context.instruction_pointer = 0
                self.stack.pop()
                if mode is RunMode.STEP_OVER and self.stack.depth == starting_depth:
                    reason = StopReason.RETURNED
                    break
                if not self.stack:
                    self.memory.clear_variables()
                continue

            self.execute_statement(context.current_statement)
            at_start_depth = self.stack.depth == starting_depth
            if mode is not RunMode.STEP_OVER or at_start_depth:
                executed += 1
            context.instruction_pointer += 1

            if (context.absolute_position in self.memory.breakpoints
                    and (mode is not RunMode.STEP_OVER or at_start_depth)):
                reason = StopReason.BREAKPOINT
                break
            if mode is not RunMode.RUN and executed > 0:
                reason = StopReason.STEP
                break

        self.last_stop = reason
        logger.debug("run loop stopped: %s (depth=%d)", reason.name, self.stack.depth)
        return reason

"""Interpreter states, run modes and stop reasons."""

from enum import Enum, auto


class InterpreterState(Enum):
    NO_CODE = auto()
    WAITING_FOR_CODE = auto()
    CODE_ACQUIRED = auto()


class RunMode(Enum):
    RUN = auto()
    STEP = auto()
    STEP_OVER = auto()


class StopReason(Enum):
    BREAKPOINT = auto()
    STEP = auto()
    # A stepped-over call returned to the starting depth
    RETURNED = auto()
    # The call stack emptied
    FINISHED = auto()

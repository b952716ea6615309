"""Kizhi: a tiny line-oriented language with an interactive debugger."""

from .config import KizhiConfig
from .debugger import Debugger, InterpreterState, RunMode, StopReason
from .errors import ErrorKind, KizhiError, LineResult
from .interpreter import ImmediateInterpreter
from .lines import ListSink, assemble_payloads

__version__ = "0.1.0"

__all__ = [
    "Debugger",
    "ImmediateInterpreter",
    "InterpreterState",
    "RunMode",
    "StopReason",
    "ErrorKind",
    "KizhiError",
    "LineResult",
    "KizhiConfig",
    "ListSink",
    "assemble_payloads",
]

"""
Interactive debugger for Kizhi programs.

Provides breakpoints, single-step and step-over execution, and
memory / call-trace inspection over a loaded script.
"""

from .engine import Debugger, MAIN_CONTEXT
from ..modes import InterpreterState, RunMode, StopReason

__all__ = ["Debugger", "MAIN_CONTEXT", "InterpreterState", "RunMode", "StopReason"]

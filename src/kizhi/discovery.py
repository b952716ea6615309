"""
Function discovery pre-pass.

Walks a freshly loaded script once, left to right, and lifts every
``def <name>`` block (the following lines indented by one unit) into its
own ``ExecutionContext``.  The contexts keep absolute offsets into the
script so positions reported from inside a function line up with the
script as the user wrote it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .frames import ExecutionContext
from .grammar import Grammar
from .memory import Memory

logger = logging.getLogger(__name__)

DEF_COMMAND = "def"


@dataclass
class Discovery:
    functions: List[ExecutionContext] = field(default_factory=list)
    # Top-level statements, def headers included
    main_lines: List[str] = field(default_factory=list)


def find_functions(lines: Sequence[str], memory: Memory, grammar: Grammar,
                   line_offset: int = 0) -> Discovery:
    """Register every function defined in *lines* into *memory*.

    Each function is registered as soon as its header is seen, so a
    duplicate name fails on the second header and leaves the first body
    untouched.  Functions found before a failure stay registered.
    """
    found = Discovery()
    current: Optional[ExecutionContext] = None

    for index, line in enumerate(lines):
        if current is not None:
            body_line = grammar.try_dedent(line)
            if body_line is not None:
                current.lines.append(body_line)
                continue
            current = None

        command, args = grammar.parse(line)
        found.main_lines.append(line)
        if command != DEF_COMMAND:
            continue

        name = grammar.read_name(args[0] if args else None)
        current = ExecutionContext(name, [], line_offset + index + 1)
        memory.define_function(current)
        found.functions.append(current)

    for context in found.functions:
        logger.debug("discovered function %s at %d (%d lines)",
                     context.name, context.line_offset, len(context.lines))
    return found

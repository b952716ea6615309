"""Execution contexts and the call stack that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(eq=False)
class ExecutionContext:
    """A named run of statements with its own instruction pointer.

    ``line_offset`` places the first statement in the flattened script, so
    ``absolute_position`` is stable no matter which frame is executing.
    Function contexts are shared: every ``call`` pushes the same object.
    """

    name: str
    lines: List[str] = field(default_factory=list)
    line_offset: int = 0
    instruction_pointer: int = 0

    @property
    def absolute_position(self) -> int:
        return self.line_offset + self.instruction_pointer

    @property
    def end_reached(self) -> bool:
        return self.instruction_pointer == len(self.lines)

    @property
    def current_statement(self) -> str:
        return self.lines[self.instruction_pointer]

    def __repr__(self) -> str:
        return (f"ExecutionContext({self.name!r}, offset={self.line_offset}, "
                f"ip={self.instruction_pointer}/{len(self.lines)})")


class CallStack:
    """Frames ordered bottom to top; ``peek`` is the executing frame."""

    def __init__(self):
        self._frames: List[ExecutionContext] = []

    def push(self, context: ExecutionContext) -> None:
        self._frames.append(context)

    def pop(self) -> ExecutionContext:
        return self._frames.pop()

    def peek(self) -> Optional[ExecutionContext]:
        return self._frames[-1] if self._frames else None

    @property
    def depth(self) -> int:
        return len(self._frames)

    def frames_top_first(self) -> List[ExecutionContext]:
        return list(reversed(self._frames))

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    def __iter__(self) -> Iterator[ExecutionContext]:
        return iter(self.frames_top_first())

"""
Line sources and sinks.

The engine writes every output line to a sink with a single
``write_line(text)`` method.  Console input arrives one physical line at
a time; ``assemble_payloads`` groups it into the logical lines the engine
expects, a blank line closing each group.
"""

from __future__ import annotations

from typing import IO, Iterable, Iterator, List, Optional

from rich.console import Console


class ListSink:
    """Collects output lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def take(self) -> List[str]:
        lines, self.lines = self.lines, []
        return lines


class StreamSink:
    def __init__(self, stream: IO[str]):
        self.stream = stream

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")


class ConsoleSink:
    """Writes output through a rich ``Console`` without markup."""

    def __init__(self, console: Optional[Console] = None, style: Optional[str] = None):
        self.console = console or Console()
        self.style = style

    def write_line(self, text: str) -> None:
        self.console.print(text, style=self.style, markup=False,
                           highlight=False, soft_wrap=True)


def assemble_payloads(lines: Iterable[str]) -> Iterator[str]:
    """Join runs of non-blank lines with ``"\\n"``; blank lines end a run."""
    pending: List[str] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line:
            pending.append(line)
            continue
        if pending:
            yield "\n".join(pending)
            pending = []
    if pending:
        yield "\n".join(pending)

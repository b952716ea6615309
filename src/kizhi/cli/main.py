# ~/kizhi/src/kizhi/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import __version__
from ..config import LOG_LEVELS, KizhiConfig
from ..debugger import Debugger
from ..discovery import find_functions
from ..errors import KizhiError
from ..grammar import split_script
from ..interpreter import ImmediateInterpreter
from ..lines import ConsoleSink, assemble_payloads
from ..memory import Memory

console = Console()
err_console = Console(stderr=True)


def _configure_logging(level):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _make_host(config, immediate):
    sink = ConsoleSink(console)
    if immediate:
        return ImmediateInterpreter(sink, config)
    return Debugger(sink, config)


@click.group()
@click.version_option(version=__version__, prog_name="Kizhi")
@click.option('--log-level', default=None,
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level (defaults to $KIZHI_LOG_LEVEL or WARNING)")
@click.option('--strict', is_flag=True, default=False,
              help="Reject 'end set code' without a pending 'set code'")
@click.pass_context
def cli(ctx, log_level, strict):
    """Kizhi - a tiny statement language with a stepping debugger"""
    config = KizhiConfig.from_env(log_level=log_level.upper() if log_level else None,
                                  strict_code_brackets=True if strict else None)
    _configure_logging(config.log_level)
    ctx.obj = config


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--immediate', is_flag=True, help="Use the immediate interpreter")
@click.pass_obj
def run(config, file, immediate):
    """Replay a session file; blank lines separate logical lines"""
    with open(file, 'r') as f:
        payloads = list(assemble_payloads(f))

    host = _make_host(config, immediate)
    failed = 0
    for payload in payloads:
        if not host.execute_line(payload):
            failed += 1

    if failed:
        err_console.print(f"[bold red]{failed} line(s) failed[/bold red]")
        sys.exit(1)


@cli.command()
@click.option('--immediate', is_flag=True, help="Use the immediate interpreter")
@click.pass_obj
def repl(config, immediate):
    """Start an interactive session; an empty line submits the input"""
    host = _make_host(config, immediate)
    kind = "interpreter" if immediate else "debugger"
    console.print(f"[bold green]Kizhi {kind} v{__version__}[/bold green]")
    console.print("Finish each input with an empty line, 'exit' to quit\n")

    pending = []
    while True:
        try:
            line = console.input(config.prompt if not pending else "")
        except (KeyboardInterrupt, EOFError):
            console.print("\nGoodbye!")
            break

        if not pending and line.strip() in ('exit', 'quit'):
            break
        if line:
            pending.append(line)
            continue
        if pending:
            host.execute_line("\n".join(pending))
            pending = []


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def check(config, file):
    """List the functions defined in a script"""
    with open(file, 'r') as f:
        lines = split_script(f.read())

    memory = Memory()
    grammar = Debugger(config=config).grammar
    try:
        discovery = find_functions(lines, memory, grammar)
    except KizhiError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        sys.exit(1)

    table = Table(title="Functions")
    table.add_column("Name", style="cyan")
    table.add_column("Offset", style="yellow")
    table.add_column("Lines", style="yellow")
    for context in discovery.functions:
        table.add_row(context.name, str(context.line_offset), str(len(context.lines)))
    console.print(table)
    console.print(f"[bold green]{len(lines)} lines, "
                  f"{len(discovery.main_lines)} top-level statements[/bold green]")


if __name__ == "__main__":
    cli()

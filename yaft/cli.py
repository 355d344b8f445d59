"""Command-line entry point: one-shot evaluation or the interactive loop."""

from __future__ import annotations

import logging
import sys

import click

from yaft.config import apply_recursion_limit, get_log_level
from yaft.interpreter import Interpreter
from yaft.printer import format_stack
from yaft.repl import repl as run_repl
from yaft.types.errors import YaftError

logger = logging.getLogger(__name__)


@click.command()
@click.argument('files', nargs=-1, type=click.File('r'))
@click.option('--command', '-c', 'commands', multiple=True, type=str, help='Evaluate program text from the command line.')
@click.option('--repl', is_flag=True, help='Start the interactive loop after running commands and files.')
@click.option('--verbose', '-v', default=0, count=True, help='Increase log verbosity (-v info, -vv debug).')
def main(files: tuple, commands: tuple, repl: bool, verbose: int):
    """Evaluate yaft programs. With no program given, read lines interactively."""
    level = get_log_level()
    if verbose:
        level = logging.DEBUG if verbose > 1 else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    apply_recursion_limit()

    interp = Interpreter()
    programs = list(commands) + [f.read() for f in files]

    for program in programs:
        try:
            interp.eval(program)
        except YaftError as err:
            click.echo(f"error: {err}", err=True)
            click.echo(format_stack(interp.stack))
            sys.exit(1)

    if programs:
        click.echo(format_stack(interp.stack))

    if repl or not programs:
        run_repl(interp, sys.stdin, sys.stdout)


if __name__ == '__main__':
    main()

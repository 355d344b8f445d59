"""Line-oriented interactive loop: evaluate each line, print the stack."""

from __future__ import annotations

import logging
from typing import TextIO

from yaft.config import get_prompt
from yaft.interpreter import Interpreter
from yaft.printer import format_stack
from yaft.types.errors import YaftError

logger = logging.getLogger(__name__)


def eval_line(interp: Interpreter, line: str) -> str:
    """Evaluate one line and return the text to show for it."""
    try:
        interp.eval(line)
    except YaftError as err:
        logger.warning("%s: %s", type(err).__name__, err)
        return f"error: {err}\n{format_stack(interp.stack)}"
    return format_stack(interp.stack)


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str | None = None) -> None:
    """Run until `stdin` is exhausted. The session persists across lines."""
    if prompt is None:
        prompt = get_prompt()
    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        stdout.write(eval_line(interp, line.rstrip("\n")) + "\n")
        stdout.flush()

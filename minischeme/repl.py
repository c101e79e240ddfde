"""
Line-oriented read/eval/print loop.

Each input line may hold several forms. Every produced value is echoed in its
external representation; a failing form prints `error: <message>` and the loop
carries on with the next line. End of input ends the loop.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from minischeme.config import get_prompt
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string

_logger = logging.getLogger("minischeme.repl")

BANNER = "Welcome to minischeme"


def eval_line(interp: Interpreter, line: str, out: TextIO) -> None:
    try:
        for result in interp.eval_iter(line):
            if result is not None:
                out.write(to_string(result) + "\n")
    except SchemeError as ex:
        _logger.debug("%s: %s", type(ex).__name__, ex)
        out.write(f"error: {ex}\n")


def run(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
    banner: bool = True,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = get_prompt() if prompt is None else prompt

    if banner:
        stdout.write(BANNER + "\n")
    while True:
        stdout.write(prompt)
        stdout.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            stdout.write("\n")
            continue
        if not line:
            stdout.write("\n")
            break
        if not line.strip():
            continue
        try:
            eval_line(interp, line, stdout)
        except KeyboardInterrupt:
            stdout.write("\n")

"""Read-eval-print loop over any input port."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from sprig.errors import SchemeError
from sprig.evaluation.evaluator import evaluate
from sprig.interpreter import Interpreter
from sprig.printer import to_string
from sprig.reader.parser import InPort
from sprig.types.empty import Empty

logger = logging.getLogger(__name__)


def repl(port: InPort, interpreter: Interpreter, out: TextIO | None = None) -> None:
    """Evaluate forms from `port` until it runs dry, printing each result.

    A failing form prints its error and is dropped; the loop then carries on
    with the next form. Values from the failed form are not kept.
    """
    out = out if out is not None else sys.stdout
    while True:
        try:
            expr = port.read()
        except SchemeError as exc:
            logger.debug("read failed: %s", exc)
            # Whatever is left of the line belongs to the broken form
            port.reset()
            out.write(f"Error: {exc}\n")
            continue
        except RecursionError:
            logger.debug("reading exhausted the stack")
            port.reset()
            out.write("Error: parser: maximum recursion depth exceeded\n")
            continue
        if expr is None:
            break

        try:
            value = evaluate(expr, interpreter.env)
        except SchemeError as exc:
            logger.debug("evaluation failed: %s", exc)
            out.write(f"Error: {exc}\n")
            continue
        except RecursionError:
            logger.debug("evaluation exhausted the stack: %r", expr)
            out.write("Error: eval: maximum recursion depth exceeded\n")
            continue

        if value is not Empty:
            out.write(f"=> {to_string(value)}\n")

from __future__ import annotations

import logging
import os
from typing import Iterator, Literal

from sprig import SchemeValue
from sprig.builtin.env_builtin import register
from sprig.config import get_prelude_path
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import InPort
from sprig.reader.ports import FilePort, StringPort
from sprig.types.empty import Empty
from sprig.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Sprig code against one root Environment, so
    definitions persist across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: primitives only
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None and path.is_file():
                self.load(path)
            else:
                logger.debug("no prelude file at %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_port(StringPort(code)):
            pass

    def eval_port(self, port: InPort) -> Iterator[SchemeValue]:
        """Evaluate each form read from `port`, yielding its value."""
        while (expr := port.read()) is not None:
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> SchemeValue:
        """Evaluate every form in `code`.

        Returns Empty for no forms, the value itself for one form, and a list
        of the values for several. Use `eval_port` to tell several values
        apart from a single list value.
        """
        results: list[SchemeValue] = list(self.eval_port(StringPort(code)))
        if not results:
            return Empty
        if len(results) == 1:
            return results[0]
        return results

    def load(self, path: str | os.PathLike) -> None:
        """Evaluate every form in a source file, discarding the values."""
        logger.debug("loading %s", path)
        with FilePort(path) as port:
            for _ in self.eval_port(port):
                pass

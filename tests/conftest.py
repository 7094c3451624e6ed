import pytest

from sprig.builtin.env_builtin import register
from sprig.errors import SchemeError
from sprig.interpreter import Interpreter
from sprig.printer import to_string
from sprig.types.environment import Environment


@pytest.fixture
def env():
    """A fresh root environment holding the primitive table."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """An interpreter without the Scheme prelude, so tests start from primitives only."""
    return Interpreter(prelude=None)


@pytest.fixture
def check_io(interp):
    """Evaluate (source, rendering) pairs in order against one interpreter.

    Errors render as "Error: <reason>".
    """
    def _check(pairs):
        for source, expected in pairs:
            try:
                result = to_string(interp.eval(source))
            except SchemeError as exc:
                result = f"Error: {exc}"
            assert result == expected, source
    return _check

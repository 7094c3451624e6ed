import io
import sys

from sprig.reader.ports import StringPort
from sprig.repl import repl


def run(interp, source):
    out = io.StringIO()
    repl(StringPort(source), interp, out)
    return out.getvalue()


def test_prints_values_but_not_empty(interp):
    assert run(interp, "(define x 2)\n(+ x 1)\n(quote a)\n") == "=> 3\n=> 'a\n"


def test_definitions_persist_between_runs(interp):
    run(interp, "(define x 2)")
    assert run(interp, "x") == "=> 2\n"


def test_evaluation_error_continues_with_next_form(interp):
    assert run(interp, "(car null) (+ 1 2)\n") == (
        "Error: car: expected a non-empty List\n=> 3\n"
    )


def test_parse_error_drops_rest_of_line(interp):
    assert run(interp, ") (+ 1 2)\n(+ 2 2)\n") == (
        'Error: parser: Extra ")" found\n=> 4\n'
    )


def test_unfinished_form_at_end_of_input(interp):
    assert run(interp, "(+ 1 2)\n(+ 1") == "=> 3\nError: parser: Unexpected EOF\n"


def test_runaway_recursion_is_reported(interp):
    output = run(interp, "(define (f x) (f x))\n(f 1)\n(+ 1 1)\n")
    assert output == "Error: eval: maximum recursion depth exceeded\n=> 2\n"


def test_deeply_nested_input_is_reported(interp):
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        output = run(interp, "(" * 5000 + ")" * 5000 + "\n(+ 1 1)\n")
    finally:
        sys.setrecursionlimit(limit)
    assert output == "Error: parser: maximum recursion depth exceeded\n=> 2\n"

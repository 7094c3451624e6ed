import pytest
from hypothesis import given, strategies as st

from sprig.errors import SchemeError
from sprig.reader.parser import InPort, atom
from sprig.reader.ports import StringPort
from sprig.types.symbol import Symbol


def tokens(source):
    port = StringPort(source)
    out = []
    while (tok := port.next_token()) is not None:
        out.append(tok)
    return out


def read_all(source):
    return list(StringPort(source))


class ListPort(InPort):
    """Hands out prepared lines and counts how often it was asked."""

    def __init__(self, lines):
        super().__init__()
        self.lines = list(lines)
        self.calls = 0

    def read_line(self):
        self.calls += 1
        return self.lines.pop(0) if self.lines else None


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("'a", ["'", "a"]),
        ("`a ,b ,@c", ["`", "a", ",", "b", ",@", "c"]),
        ('"hello world"', ['"hello world"']),
        ('"a \\"b\\""', ['"a \\"b\\""']),
        ("x)y", ["x", ")", "y"]),
        ("; comment\n a b", ["a", "b"]),
        ("a ; trailing (ignored\nb", ["a", "b"]),
        ("(a\n  (b c))", ["(", "a", "(", "b", "c", ")", ")"]),
        ("", []),
        ("   \n\n  ", []),
    ],
)
def test_tokenizer(source, expected):
    assert tokens(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ("1e-8", 1e-8),
        ("abc", Symbol("abc")),
        ("+", Symbol("+")),
        ("null?", Symbol("null?")),
        ("#t", Symbol("#t")),
        ("1_000", Symbol("1_000")),
        ('"hi"', Symbol('"hi"')),
        ("()", []),
        ("(1 (2 3) ())", [1.0, [2.0, 3.0], []]),
        ("'x", [Symbol("quote"), Symbol("x")]),
        ("'(1 2)", [Symbol("quote"), [1.0, 2.0]]),
        ("(f 'a)", [Symbol("f"), [Symbol("quote"), Symbol("a")]]),
    ],
)
def test_parse_single_form(source, expected):
    assert read_all(source) == [expected]


def test_numbers_are_floats():
    (value,) = read_all("42")
    assert type(value) is float


def test_several_forms_on_one_line():
    assert read_all("a (b) 1") == [Symbol("a"), [Symbol("b")], 1.0]


def test_form_spanning_lines_with_comments():
    source = """(begin
        (define one ; something here
            ; generating the number 1
            ;; more quotes
            (lambda () 1))
        (+ (one) 2))"""
    (form,) = read_all(source)
    assert form[0] == Symbol("begin")
    assert form[2] == [Symbol("+"), [Symbol("one")], 2.0]


def test_lines_are_requested_lazily():
    port = ListPort(["(+ 1\n", "2)\n", "(never read\n"])
    assert port.read() == [Symbol("+"), 1.0, 2.0]
    assert port.calls == 2


def test_end_of_input_reads_none():
    port = StringPort("  ; only a comment\n")
    assert port.read() is None
    assert port.read() is None


@pytest.mark.parametrize(
    "source, message",
    [
        ("(+ 1 2", "parser: Unexpected EOF"),
        ("(a (b c)", "parser: Unexpected EOF"),
        ("'", "parser: Unexpected EOF"),
        (")", 'parser: Extra ")" found'),
        ("`x", "parser: quasiquote is not supported"),
        ("(a ,b)", "parser: unquote is not supported"),
        ("(a ,@b)", "parser: unquote-splicing is not supported"),
        ('"abc', "parser: unterminated string literal"),
    ],
)
def test_parse_errors(source, message):
    with pytest.raises(SchemeError) as exc_info:
        read_all(source)
    assert str(exc_info.value) == message


def test_reading_continues_after_error():
    port = StringPort(") 5")
    with pytest.raises(SchemeError):
        port.read()
    assert port.read() == 5.0


def test_reset_drops_rest_of_line():
    port = StringPort(") 5\n6")
    with pytest.raises(SchemeError):
        port.read()
    port.reset()
    assert port.read() == 6.0


def test_reader_desugars_forms():
    (form,) = read_all("(define (f x) x)")
    assert form == [
        Symbol("define"),
        Symbol("f"),
        [Symbol("lambda"), [Symbol("x")], Symbol("x")],
    ]


@given(st.floats(allow_nan=False))
def test_float_tokens_read_as_numbers(x):
    assert atom(repr(x)) == x


@given(st.from_regex(r"x[a-z0-9?!*<>=-]*", fullmatch=True))
def test_identifiers_read_as_symbols(name):
    assert read_all(name) == [Symbol(name)]

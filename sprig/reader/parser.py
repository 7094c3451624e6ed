"""
  Scheme Reader: tokenizer and structural parser

- Line-buffered: a port holds the unread remainder of its current line and
  asks its source for another line only when that remainder is used up.
- Emits the same values the evaluator works on:

    - numbers -> float
    - ( ... ) -> Python list
    - anything else -> Symbol (including "#t", "#f" and string literals)
    - 'x -> [Symbol("quote"), x]

  Every top-level form is desugared before it is handed out.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from sprig import SExpression
from sprig.errors import SchemeError
from sprig.reader.desugar import desugar
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"\s*("
    r",@|[('`,)]"  # parens and the quote family
    r'|"(?:\\.|[^\\"])*"'  # double-quoted strings
    r"|;.*"  # comment to end of line
    r"|[^\s('\"`,;)]*"  # fallback: atoms
    r")(.*)",
    re.DOTALL,
)

QUOTE = Symbol("quote")

UNSUPPORTED_PREFIXES: dict[str, str] = {
    "`": "quasiquote",
    ",": "unquote",
    ",@": "unquote-splicing",
}


def atom(token: str) -> SExpression:
    """Numbers are floats; every other token is a Symbol."""
    if "_" not in token:
        try:
            return float(token)
        except ValueError:
            pass
    return Symbol(token)


class InPort:
    """A line-buffered source of tokens and forms.

    Subclasses supply `read_line`, returning the next line of text or None
    once the source is exhausted.
    """

    def __init__(self):
        self.line: str = ""
        # True while the tokens of a started form are still being collected
        self.reading: bool = False

    def read_line(self) -> Optional[str]:
        raise NotImplementedError

    def reset(self) -> None:
        """Drop whatever is left of the current line."""
        self.line = ""
        self.reading = False

    def next_token(self) -> Optional[str]:
        while True:
            if not self.line:
                line = self.read_line()
                if line is None:
                    return None
                self.line = line
                continue
            token, self.line = TOKEN_RE.match(self.line).groups()
            if token == "":
                # No progress is only possible at an opening quote with no close
                if self.line.strip():
                    self.line = ""
                    raise SchemeError("parser: unterminated string literal")
                continue
            if token.startswith(";"):
                continue
            return token

    def read_ahead(self, token: str) -> SExpression:
        """Parse one form whose first token has already been consumed."""
        if token == "(":
            items: list[SExpression] = []
            while True:
                token = self.next_token()
                if token is None:
                    raise SchemeError("parser: Unexpected EOF")
                if token == ")":
                    return items
                items.append(self.read_ahead(token))
        if token == ")":
            raise SchemeError('parser: Extra ")" found')
        if token == "'":
            quoted = self.next_token()
            if quoted is None:
                raise SchemeError("parser: Unexpected EOF")
            return [QUOTE, self.read_ahead(quoted)]
        if token in UNSUPPORTED_PREFIXES:
            raise SchemeError(f"parser: {UNSUPPORTED_PREFIXES[token]} is not supported")
        return atom(token)

    def read(self) -> Optional[SExpression]:
        """Read and desugar the next top-level form; None at end of input."""
        token = self.next_token()
        if token is None:
            return None
        self.reading = True
        try:
            expr = self.read_ahead(token)
        finally:
            self.reading = False
        logger.debug("read form: %r", expr)
        return desugar(expr)

    def __iter__(self):
        while (expr := self.read()) is not None:
            yield expr

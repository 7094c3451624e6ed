"""Concrete input ports: in-memory text, files, and the interactive console."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Iterator, Optional

from sprig.errors import SchemeError
from sprig.reader.parser import InPort

logger = logging.getLogger(__name__)


class StringPort(InPort):
    """Reads the lines of an in-memory string."""

    def __init__(self, text: str):
        super().__init__()
        self._lines: Iterator[str] = iter(text.splitlines(keepends=True))

    def read_line(self) -> Optional[str]:
        return next(self._lines, None)


class FilePort(InPort):
    """Reads a UTF-8 source file line by line."""

    def __init__(self, path: str | os.PathLike):
        super().__init__()
        self.path = Path(path)
        try:
            self._file: IO[str] = self.path.open("r", encoding="utf-8")
        except OSError as exc:
            raise SchemeError(f"port: cannot open {self.path}: {exc}") from exc
        logger.debug("opened %s", self.path)

    def read_line(self) -> Optional[str]:
        try:
            line = self._file.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SchemeError(f"port: cannot read {self.path}: {exc}") from exc
        return line or None

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> FilePort:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class ConsolePort(InPort):
    """Reads lines typed at the terminal.

    Shows `prompt` when a new form starts and `continuation` while a form is
    still open. Line editing and history come from the readline module when
    it is available.
    """

    def __init__(
        self,
        prompt: str = ">> ",
        continuation: str = ".. ",
        history_file: Path | None = None,
    ):
        super().__init__()
        self.prompt = prompt
        self.continuation = continuation
        self.history_file = history_file
        self._readline = None
        try:
            import readline
        except ImportError:
            logger.debug("readline unavailable, line editing disabled")
        else:
            self._readline = readline
            self._load_history()

    def _load_history(self) -> None:
        if self.history_file is None or not self.history_file.exists():
            return
        try:
            self._readline.read_history_file(self.history_file)
        except OSError as exc:
            logger.warning("cannot load history from %s: %s", self.history_file, exc)

    def save_history(self) -> None:
        if self._readline is None or self.history_file is None:
            return
        try:
            self._readline.write_history_file(self.history_file)
        except OSError as exc:
            logger.warning("cannot save history to %s: %s", self.history_file, exc)

    def read_line(self) -> Optional[str]:
        try:
            return input(self.continuation if self.reading else self.prompt) + "\n"
        except EOFError:
            return None
        except OSError as exc:
            raise SchemeError(f"port: cannot read from console: {exc}") from exc

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Literal

from lispy.builtin.env_builtin import register
from lispy.config import get_prelude_path
from lispy.errors import LispyLoadError, LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import is_blank, open_depth, parse
from lispy.reader.read import read
from lispy.types.environment import Environment
from lispy.types.value import Error, ErrorKind, Value


def chunks(lines: Iterable[str]) -> Iterator[str]:
    """Group lines so that every yielded chunk has balanced brackets.

    A trailing unbalanced chunk is yielded as-is so the reader can report it.
    """
    buffer: list[str] = []
    for line in lines:
        buffer.append(line.rstrip("\n"))
        text = "\n".join(buffer)
        if open_depth(text) > 0:
            continue
        buffer = []
        yield text
    if buffer:
        yield "\n".join(buffer)


class Interpreter:
    """
    One Lispy session: a global Environment holding the builtin library and
    every top-level definition made through it.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self._logger = logging.getLogger("Interpreter")
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude(get_prelude_path())
        elif prelude:
            self._report_prelude(self.eval_lines(prelude.splitlines()), "<string>")

    def load_prelude(self, path: Path) -> None:
        if not path.is_file():
            self._logger.info("No prelude found at %s, continuing without one", path)
            return
        self._report_prelude(self.load_file(path), path)
        self._logger.info("Loaded prelude from %s", path)

    def _report_prelude(self, results: list[Value], origin: object) -> None:
        for result in results:
            if isinstance(result, Error):
                self._logger.warning("Prelude %s produced an error: %s", origin, result.message)

    def eval(self, source: str) -> Value:
        """Read `source` as one implicit S-expression and evaluate it."""
        try:
            node = parse(source)
        except LispySyntaxError as e:
            self._logger.debug("Syntax error in %r: %s", source, e.message)
            return Error(e.message, ErrorKind.SYNTAX)

        result = evaluate(self.env, read(node))
        if isinstance(result, Error):
            self._logger.debug("Evaluation of %r failed: %s", source, result.message)
        return result

    def eval_lines(self, lines: Iterable[str]) -> list[Value]:
        """Evaluate every balanced, non-blank chunk of `lines` in order."""
        return [self.eval(chunk) for chunk in chunks(lines) if not is_blank(chunk)]

    def load_file(self, path: str | Path) -> list[Value]:
        self._logger.debug("Loading %s", path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as e:
            raise LispyLoadError(f"'{path}' could not be opened: {e.strerror}") from e
        return self.eval_lines(lines)

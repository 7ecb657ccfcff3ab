"""Interactive shell and command-line entry point for Lispy.

With file arguments each file is evaluated in order and every result is
printed; without, an interactive line-editing shell is started.
"""

from __future__ import annotations

import argparse
import cmd
import logging
import sys

from termcolor import colored

from lispy import __version__
from lispy.config import get_log_level, get_recursion_limit
from lispy.errors import LispyConfigError, LispyLoadError
from lispy.interpreter import Interpreter
from lispy.reader.parser import is_blank, open_depth
from lispy.types.value import Error, Value, render

ERROR = "red"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def format_value(value: Value) -> str:
    """Render a result for the terminal, highlighting error values."""
    text = render(value)
    if isinstance(value, Error):
        return colored(text, ERROR, attrs=["bold"])
    return text


class Shell(cmd.Cmd):
    """Lispy interpreter shell."""
    intro = f"Lispy {__version__}\nType ':help' for more information, ':exit' or Ctrl-D to quit."
    command_prefix = ":"  # shell commands; every other line is Lispy source
    prompt = "lispy> "
    primary_prompt = "lispy> "
    secondary_prompt = ". "  # used while brackets are still open

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self._logger = logging.getLogger("Shell")
        self._pending: list[str] = []

    def onecmd(self, line):
        """Dispatch ':'-prefixed lines as shell commands, everything else as Lispy.

        Continuation lines always belong to the pending expression, so names
        like `help` or `exit` stay usable as Lispy symbols.
        """
        if line == "EOF":
            return super().onecmd(line)
        if not self._pending and line.startswith(self.command_prefix):
            command = line[len(self.command_prefix):]
            name = self.parseline(command)[0]
            if not name:
                return self.emptyline()
            if not hasattr(self, f"do_{name}"):
                return self.default_command(command)
            return super().onecmd(command)
        return self.default(line)

    def default(self, line):
        """Evaluates an arbitrary Lispy expression."""
        self._pending.append(line)
        text = "\n".join(self._pending)
        depth = open_depth(text)
        if depth > 0:
            self._logger.debug("Input incomplete, %d bracket(s) still open", depth)
            self.prompt = self.secondary_prompt
            return None

        self._pending = []
        self.prompt = self.primary_prompt
        if is_blank(text):
            return None

        self.stdout.write(format_value(self.interpreter.eval(text)) + "\n")
        return None

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write(
            "Lispy evaluates one expression per line; the outer parentheses are implied.\n\n"
            "  + 1 2 3                      => 6\n"
            "  head {1 2 3}                 => {1}\n"
            "  def {add1} (\\ {x} {+ x 1})   => ()\n"
            "  add1 41                      => 42\n\n"
            "Q-expressions {...} are never evaluated automatically; 'eval' evaluates one.\n\n"
            "Shell commands start with ':'  (:help, :exit).\n"
        )

    def default_command(self, line):
        """Reports a ':' line that names no shell command."""
        self.stdout.write(f"Unknown shell command: {self.command_prefix}{line}\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return None

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def _fail(label: str, message: str) -> None:
    print(colored(f"{label}: ", ERROR, attrs=["bold"]) + message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Runs the lispy interpreter. Called from the lispy console script."""
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy interpreter")
    parser.add_argument("files", nargs="*", help="files to evaluate in order (if empty, starts the interactive shell)")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="logging level")
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=args.log_level or get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        limit = get_recursion_limit()
        if limit is not None:
            sys.setrecursionlimit(limit)

        interpreter = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.files:
            for path in args.files:
                for result in interpreter.load_file(path):
                    print(format_value(result))
        else:
            Shell(interpreter).cmdloop()

    except (LispyConfigError, LispyLoadError) as e:
        _fail("error", str(e))
        return 1
    except RecursionError:
        _fail("fatal", "maximum recursion depth exceeded")
        return 2

    return 0

"""Interactive mode for the crisp interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging

from termcolor import colored

from crisp.config import get_prompt
from crisp.display import to_display
from crisp.interpreter import Interpreter
from crisp.types.errors import CrispError

log = logging.getLogger(__name__)


def paren_balance(text: str) -> int:
    """Open parens minus close parens."""
    return text.count("(") - text.count(")")


class Shell(cmd.Cmd):
    """crisp read-eval-print loop.

    Input is buffered while parentheses are unbalanced, then the whole buffer is
    evaluated as one program. The interpreter, and so every `def`, is kept for
    the life of the shell.
    """
    intro = "crisp :: type an expression, 'exit' or Ctrl-D to quit."
    secondary_prompt = ". "  # used for line continuations

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.prompt = self._primary_prompt = get_prompt()
        self._pending: list[str] = []

    def onecmd(self, line):
        """Only a whole-line `exit` or end of input is a shell command; all else is crisp."""
        stripped = line.strip()
        if stripped == "EOF" or (stripped == "exit" and not self._pending):
            return super().onecmd(stripped)
        if not stripped:
            return self.emptyline()
        return self.default(stripped)

    def default(self, line):
        """Evaluates an expression, or buffers it until its parens balance."""
        self._pending.append(line)
        source = "\n".join(self._pending)
        if paren_balance(source) > 0:
            self.prompt = self.secondary_prompt
            return
        self._pending = []
        self.prompt = self._primary_prompt
        self.evaluate(source)

    def evaluate(self, source: str) -> None:
        try:
            result = self.interpreter.eval(source)
        except CrispError as err:
            # The environment is unchanged by a failed evaluation; keep going
            log.debug("evaluation failed: %r", err)
            print(colored(f"Error: {err}", "red"), file=self.stdout)
            return
        print(to_display(result), file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._pending:
            self._pending.append("")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

"""Interactive mode for the toylang interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd

from termcolor import colored

from toylang.errors import SourceError, ToylangError, UnbalancedError
from toylang.interpreter import Interpreter
from toylang.printer import to_display


def format_error(error: ToylangError) -> str:
    """Render an error with a coloured header and, when known, the source excerpt."""
    header = colored("error: ", "red", attrs=["bold"])
    if isinstance(error, SourceError):
        return header + error.format().rstrip("\n")
    return header + str(error)


class Shell(cmd.Cmd):
    """toylang read-eval-print loop."""
    intro = "toylang interpreter\nType 'help' for more information, 'exit' to quit."
    prompt = "> "
    secondary_prompt = ". "  # used while parens are still open

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter or Interpreter()
        self._pending = ""

    def default(self, line):
        """Evaluates a line, buffering it while parens remain open."""
        code = f"{self._pending}\n{line}" if self._pending else line
        try:
            result = self.interpreter.eval(code)
        except UnbalancedError:
            self._pending = code
            self.prompt = self.secondary_prompt
            return
        except ToylangError as e:
            print(format_error(e), file=self.stdout)
        else:
            print(to_display(result), file=self.stdout)
        self._pending = ""
        self.prompt = Shell.prompt

    def do_help(self, arg):
        """Prints a short intro."""
        print("Enter s-expressions such as (+ 1 2) or (let (x 5) (+ x 1)).\n"
              "Builtins: + - * / = < > list concat.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

"""Runs a toylang file, or starts the interactive shell when no file is given."""

import argparse
import logging
import sys
from dataclasses import replace

from toylang.config import get_config
from toylang.errors import ToylangError
from toylang.interpreter import Interpreter
from toylang.printer import to_display
from toylang.shell import Shell, format_error


def main(argv=None):
    parser = argparse.ArgumentParser(prog="toylang")
    parser.add_argument("file", help="file to run (if empty, starts the interactive shell)", nargs="?")
    parser.add_argument("--strict", action="store_true", help="raise on unbound symbols")
    parser.add_argument("-v", "--verbose", action="store_true", help="log tokens, forms and results")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = get_config()
    if args.strict:
        config = replace(config, strict_unbound=True)
    interpreter = Interpreter(config=config)

    if args.file is None:
        Shell(interpreter).cmdloop()
        return 0

    with open(args.file, encoding="utf-8") as f:
        code = f.read()
    try:
        result = interpreter.eval(code)
    except ToylangError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    print(to_display(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

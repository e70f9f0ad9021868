from __future__ import annotations

from argparse import ArgumentParser, FileType
import atexit
import logging
import sys

from yu import config
from yu.interpreter import Interpreter, RECURSION_ERROR
from yu.printer import render
from yu.types.errors import YuError

log = logging.getLogger(__name__)


def _setup_history() -> None:
    histfile = config.get_history_file()
    if histfile is None:
        return
    try:
        import readline
    except ImportError:
        log.info('readline not available')
        return

    try:
        readline.read_history_file(histfile)
    except OSError:
        pass
    atexit.register(readline.write_history_file, histfile)


def run_file(interp: Interpreter, source) -> int:
    try:
        print(render(interp.eval(source.read())))
    except YuError as ex:
        print(f"error: {ex}")
        return 1
    except RecursionError:
        print(RECURSION_ERROR)
        return 1
    return 0


def repl(interp: Interpreter) -> None:
    print(config.BANNER)
    prompt = config.get_prompt()

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            break

        if not line.strip():
            continue

        print(interp.eval_line(line))

    print(config.FAREWELL)


def main(argv: list[str] | None = None) -> int:
    argparser = ArgumentParser("yu", description="Yu expression evaluator")
    argparser.add_argument(
        '-d', '--debug', action='store_true',
        help="debug output")
    argparser.add_argument(
        'file', type=FileType('r'), nargs='?',
        help="program read from file")

    args = argparser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    interp = Interpreter()

    if args.file:
        with args.file:
            return run_file(interp, args.file)

    _setup_history()
    repl(interp)
    return 0


if __name__ == '__main__':
    sys.exit(main())

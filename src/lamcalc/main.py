import argparse
import logging
import os
import sys

from termcolor import colored

from lamcalc.parser import ParseError
from lamcalc.printer import show, show_toplevel
from lamcalc.session import Failure, Options, Outcome, Session

DEFAULT_RECURSION_LIMIT = 10000


def main(argv=None) -> int:
    args = make_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    sys.setrecursionlimit(args.recursion_limit)

    session = Session(Options(typed=args.typed, numerals=args.numerals))

    if args.file is not None:
        return run_file(session, args.file)
    repl(session)
    return 0


def make_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lamcalc", description="Interactive lambda calculus evaluator."
    )
    ap.add_argument(
        "file", nargs="?", help="script to run (if omitted, start the interactive prompt)"
    )
    ap.add_argument(
        "--typed", action="store_true", help="type check terms before evaluating them"
    )
    ap.add_argument(
        "--numerals",
        action="store_true",
        help="print church numerals in normal form as decimal literals",
    )
    ap.add_argument(
        "--recursion-limit",
        type=int,
        default=int(os.environ.get("LAMCALC_RECURSION_LIMIT", DEFAULT_RECURSION_LIMIT)),
        help="maximum python recursion depth used while evaluating",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log reduction steps")
    return ap


def run_file(session: Session, path: str) -> int:
    try:
        with open(path) as fd:
            src = fd.read()
    except OSError as e:
        print(format_error(f"'{path}' could not be opened: {e.strerror}"))
        return 1

    for outcome in session.execute_script(src):
        print(render(outcome, session.options))
        if not outcome.ok:
            return 1
    return 0


def repl(session: Session):
    while True:
        try:
            src = input("> ")
        except EOFError:
            print()
            break
        if not src.strip():
            continue

        try:
            outcome = session.execute(src)
        except KeyboardInterrupt:
            print(format_error("interrupted"))
            continue
        print(render(outcome, session.options))


def render(outcome: Outcome, options: Options) -> str:
    match outcome:
        case Failure(ParseError() as e, _):
            return format_error(f"syntax error: {e}") + "\n" + e.show_line()
        case Failure(e, _):
            return format_error(str(e))

    lines = [show_toplevel(outcome.item, options.numerals)]
    if outcome.type is not None:
        lines.append(f"  : {outcome.type}")
    lines.append(show(outcome.result, options.numerals))
    return "\n".join(lines)


def format_error(msg: str) -> str:
    return colored("error: ", "red", attrs=["bold"]) + msg


if __name__ == "__main__":
    sys.exit(main())

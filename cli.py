"""
logika - LaTeX truth tables from list notation.

    >> ((p => q) * p)

prints a tabular block with one column per step of the expression.
With --no-steps only the variables and the final result are shown.
"""

import argparse
import fileinput
import logging
import sys

from logic import TOO_DEEP, ParseError, ReadError, TooManyVariables, parse
from reader import read
from tables import MAX_VARIABLES, render_table

logger = logging.getLogger(__name__)

PROMPT = ">> "


def process_line(line, steps=True, max_vars=MAX_VARIABLES):
    """Table for one input line, or a short diagnostic if the line is rejected."""
    try:
        tree = read(line)
    except ReadError as e:
        logger.debug("read failed for %r: %s", line, e)
        return str(e)
    try:
        expr = parse(tree)
        return render_table(expr, steps=steps, max_vars=max_vars)
    except ParseError as e:
        logger.debug("parse failed for %r: %s", line, e)
        return "can't parse line"
    except TooManyVariables as e:
        logger.info("%s rejected: %s", line, e)
        return str(e)
    except RecursionError:
        logger.info("%s rejected: nested too deeply", line)
        return TOO_DEEP


def skip_line(line):
    return not line or line.startswith(";")


def run_lines(lines, steps=True, max_vars=MAX_VARIABLES):
    for line in lines:
        line = line.strip()
        if skip_line(line):
            continue
        print(process_line(line, steps, max_vars))


def repl(steps=True, max_vars=MAX_VARIABLES):
    """Interactive loop, ends on EOF or Ctrl-C."""
    import readline  # noqa: F401  line editing and history for input()

    while True:
        try:
            line = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if skip_line(line):
            continue
        print(process_line(line, steps, max_vars))


def non_negative(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {n}")
    return n


def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="logika", description="LaTeX truth tables for propositional logic")
    ap.add_argument('files', nargs='*', metavar='FILE', help="read expressions from files, one per line ('-' for stdin)")
    ap.add_argument('-e', '--expr', help="render a single expression and exit, e.g. '(p => q)'", metavar='"EXPR"')
    ap.add_argument('--no-steps', dest='steps', action='store_false', help="show only the variables and the final column")
    ap.add_argument('--max-vars', type=non_negative, default=MAX_VARIABLES, help=f"refuse expressions with more variables (default: {MAX_VARIABLES}, 0 for no limit)")
    ap.add_argument('-v', '--verbose', action='store_true', help="log debugging information to stderr")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    max_vars = args.max_vars or None

    if args.expr is not None:
        out = process_line(args.expr.strip(), args.steps, max_vars)
        print(out)
        return 0 if out.startswith("\\begin{tabular}") else 1

    if args.files or not sys.stdin.isatty():
        with fileinput.input(files=args.files or ('-',)) as lines:
            run_lines(lines, args.steps, max_vars)
    else:
        repl(args.steps, max_vars)
    return 0


if __name__ == "__main__":
    sys.exit(main())

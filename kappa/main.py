"""Command-line entry point: `kappa [FILE] [--tokens | --parse]`.

Reads a whole program from FILE (or standard input), evaluates every
top-level form against one global frame and prints each result. Any error is
fatal: one diagnostic line goes to stderr and the exit status is 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from kappa import config
from kappa.errors import KappaError
from kappa.interpreter import Interpreter
from kappa.printer import render, to_string
from kappa.reader.tokenizer import display_tokens, lex

logger = logging.getLogger(__name__)


def _report(phase: str, message: str, out: TextIO) -> int:
    out.flush()
    print(f"{phase} error: {message}", file=sys.stderr)
    return 1


def _run_program(source: str, mode: str, out: TextIO) -> int:
    with Interpreter() as interp:
        try:
            if mode == "tokens":
                out.write(display_tokens(lex(source)))
                return 0
            forms = interp.parse(source)
            if mode == "parse":
                for form in forms:
                    print(to_string(form), file=out)
                return 0
        except KappaError as e:
            return _report("Syntax", str(e), out)
        except RecursionError:
            return _report("Syntax", "maximum nesting depth exceeded", out)

        for index, form in enumerate(forms, start=1):
            try:
                text = render(interp.evaluate(form))
            except KappaError as e:
                logger.debug("Form %d failed: %r", index, e)
                return _report("Evaluation", str(e), out)
            except RecursionError:
                return _report("Evaluation", "maximum recursion depth exceeded", out)
            if text is not None:
                print(text, file=out)
        logger.debug("Evaluated %d top-level forms", len(forms))
        return 0


def main_with_args(file: Optional[Path] = None, mode: str = "run", out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    logging.basicConfig(level=config.get_log_level(), format="%(message)s", stream=sys.stderr)

    try:
        limit = config.get_recursion_limit()
    except ValueError as e:
        print(f"kappa: {e}", file=sys.stderr)
        return 1
    if limit is not None:
        logger.info("Setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    try:
        source = file.read_text() if file is not None else sys.stdin.read()
    except OSError as e:
        print(f"kappa: cannot read {file}: {e.strerror}", file=sys.stderr)
        return 1
    return _run_program(source, mode, out)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="kappa",
        description="Evaluate a Kappa (Scheme subset) program",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Program file to run; standard input when omitted",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--tokens",
        dest="mode",
        action="store_const",
        const="tokens",
        help="Print the token stream instead of evaluating",
    )
    modes.add_argument(
        "--parse",
        dest="mode",
        action="store_const",
        const="parse",
        help="Print each parsed top-level form instead of evaluating",
    )
    parser.set_defaults(mode="run")
    args = parser.parse_args(argv)
    sys.exit(main_with_args(args.file, args.mode))


if __name__ == "__main__":
    main()

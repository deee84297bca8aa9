"""Interactive Read-Eval-Print-Loop and command line entry point."""

from __future__ import annotations

import argparse
import atexit
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from mlisp import __version__, config
from mlisp.interpreter import Interpreter

# importing this gives line editing and history on systems
# where it is supported (i.e. UNIX-y systems)
try:
    import readline
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

PROGRAM = "mlisp"


def version_banner(program: str = PROGRAM) -> str:
    return "\n".join(
        [
            f"{program} {__version__}",
            "License GPLv3+: GNU GPL version 3 or later <http://gnu.org/licenses/gpl.html>.",
            "This is free software: you are free to change and redistribute it.",
            "There is NO WARRANTY, to the extent permitted by law.",
        ]
    )


def setup_history(path: Optional[Path]) -> None:
    """Load readline history from `path` and save it back at exit."""
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not read history file %s: %s", path, e)
    atexit.register(_save_history, path)


def _save_history(path: Path) -> None:
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning("could not write history file %s: %s", path, e)


def repl(
    interp: Interpreter,
    prompt: str = "",
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    """Evaluate one line at a time until end of input, printing each result."""
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            return
        except KeyboardInterrupt:
            output("")
            continue
        output(str(interp.eval(line)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog=PROGRAM, description="A minimal Lisp REPL")
    parser.add_argument(
        "-v", "--version", action="store_true", help="print version and license, then exit"
    )
    args = parser.parse_args(argv)

    if args.version:
        print(version_banner())
        return 0

    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(config.get_recursion_limit())

    interactive = sys.stdin.isatty()
    if interactive:
        setup_history(config.get_history_file())

    repl(Interpreter(), prompt=config.get_prompt() if interactive else "")
    return 0

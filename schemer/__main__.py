"""Command line driver: schemer EXPR

Evaluates the first argument and prints the rendered result. Any further
arguments are ignored.
"""

import logging
import sys

from schemer.config import get_log_level
from schemer.errors import EvalError, SchemerRenderError
from schemer.interpreter import Interpreter

logger = logging.getLogger("schemer")

USAGE = "usage: schemer EXPR"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    if not args:
        print(USAGE, file=sys.stderr)
        return 2
    if len(args) > 1:
        logger.debug("ignoring %d extra argument(s)", len(args) - 1)
    try:
        print(Interpreter().run(args[0]))
    except (EvalError, SchemerRenderError) as ex:
        logger.debug("evaluation of %r failed", args[0], exc_info=True)
        print(f"{type(ex).__name__}: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

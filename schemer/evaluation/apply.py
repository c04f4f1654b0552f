"""Primitive application for Schemer.

Operators are looked up by name in the fixed PRIMITIVES table. A name that
is not in the table is not an error: the application yields #f.
"""

import logging
from typing import Sequence

from schemer.evaluation.primitives import PRIMITIVES
from schemer.types.values import Value, FALSE

logger = logging.getLogger(__name__)


def apply(name: str, args: Sequence[Value]) -> Value:
    primitive = PRIMITIVES.get(name)
    if primitive is None:
        logger.debug("unknown operator %r, yielding #f", name)
        return FALSE
    logger.debug("applying %s to %d argument(s)", name, len(args))
    return primitive(list(args))

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable
from dataclasses import dataclass

from werft_lib.core.error import InvalidOrderExpressionError
from werft_lib.core.logger import get_logger

logger = get_logger(__name__)

# direction marking an ascending order
ASCENDING = "asc"
# direction marking a descending order
DESCENDING = "desc"


@dataclass(frozen=True)
class OrderTerm:
    """
    Sort directive for the job listing.
    """

    field: str
    ascending: bool

    def __str__(self) -> str:
        return f"{self.field}:{ASCENDING if self.ascending else DESCENDING}"

    def toDict(self) -> dict[str, str | bool]:
        """Return the wire representation of the term."""
        return {"field": self.field, "ascending": self.ascending}


def parse_order_expression(expr: str) -> OrderTerm:
    """
    Parse a single order expression of the form `<field>:<direction>`.

    Only the direction `asc` yields an ascending order; any other direction
    is treated as descending.

    Raises:
        InvalidOrderExpressionError: If the expression does not consist of
            exactly two colon-separated parts.
    """
    segments = expr.split(":")
    if len(segments) != 2:
        raise InvalidOrderExpressionError(expr)

    field, direction = segments
    if direction not in {ASCENDING, DESCENDING}:
        logger.warning(
            f"Unknown order direction '{direction}' in '{expr}'. Ordering by '{field}' in descending order."
        )

    return OrderTerm(field=field, ascending=direction == ASCENDING)


def parse_order(exprs: Iterable[str]) -> list[OrderTerm]:
    """
    Convert raw order expressions into sort directives for the werft service.

    Args:
        exprs (Iterable[str]): Raw expressions, e.g. `["name:desc"]`.

    Returns:
        list[OrderTerm]: One term per input expression, in the same order.

    Raises:
        InvalidOrderExpressionError: If any of the expressions is invalid.
    """
    order = [parse_order_expression(expr) for expr in exprs]
    logger.debug(f"Parsed order: {', '.join(str(o) for o in order)}.")
    return order

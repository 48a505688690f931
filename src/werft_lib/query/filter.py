# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Self

from werft_lib.core.error import (
    InvalidPhaseError,
    MalformedExpressionError,
    MissingOperatorError,
)
from werft_lib.core.logger import get_logger
from werft_lib.properties.phase import JobPhase

logger = get_logger(__name__)


class FilterOp(Enum):
    """
    Comparison requested by a filter expression.

    The value of each variant is the two-character marker used in expressions.
    """

    EQUALS = "=="
    CONTAINS = "~="
    STARTS_WITH = "|="
    ENDS_WITH = "=|"

    def __str__(self) -> str:
        return self.value

    @property
    def marker(self) -> str:
        """Textual marker of the operator, e.g. `==`."""
        return self.value

    @property
    def wireName(self) -> str:
        """Name of the operator understood by the werft service, e.g. `OP_EQUALS`."""
        return f"OP_{self.name}"

    @classmethod
    def fromMarker(cls, marker: str) -> Self:
        """
        Return the operator identified by `marker`.

        Raises:
            ValueError: If `marker` is not a known operator marker.
        """
        return cls(marker)


@dataclass(frozen=True)
class FilterTerm:
    """
    Single comparison of a job field against a value.
    """

    field: str
    operator: FilterOp
    value: str

    def __str__(self) -> str:
        return f"{self.field}{self.operator.marker}{self.value}"

    def toDict(self) -> dict[str, str]:
        """Return the wire representation of the term."""
        return {
            "field": self.field,
            "value": self.value,
            "operation": self.operator.wireName,
        }


@dataclass(frozen=True)
class FilterExpression:
    """
    Group of filter terms sent to the werft service as one expression.

    Expressions parsed from the command line always hold exactly one term.
    """

    terms: tuple[FilterTerm, ...]

    def toDict(self) -> dict[str, list[dict[str, str]]]:
        """Return the wire representation of the expression."""
        return {"terms": [term.toDict() for term in self.terms]}


def find_operator(expr: str) -> FilterOp | None:
    """
    Detect the operator of a filter expression.

    If the expression contains more than one operator marker, the one occurring
    first (leftmost) is selected. No two markers can start at the same position,
    so the result never depends on the order in which markers are checked.

    Args:
        expr (str): Raw filter expression, e.g. `phase==running`.

    Returns:
        FilterOp | None: The detected operator or None if no marker is present.
    """
    found = [(expr.find(op.marker), op) for op in FilterOp if op.marker in expr]
    if not found:
        return None

    return min(found, key=lambda x: x[0])[1]


def normalize_value(field: str, value: str) -> str:
    """
    Apply field-specific normalization to a filter value.

    - `success`: `true` becomes `1`, anything else becomes `0`.
    - `phase`: the value must name a known job phase (case-insensitive).
      It is returned unchanged.
    - all other fields are returned unchanged.

    Raises:
        InvalidPhaseError: If a phase value does not name a known phase.
    """
    match field:
        case "success":
            if value not in {"true", "false"}:
                logger.warning(
                    f"Value '{value}' of the 'success' filter is neither 'true' nor 'false'. Treating it as 'false'."
                )
            return "1" if value == "true" else "0"
        case "phase":
            if not JobPhase.isKnown(f"PHASE_{value}".upper()):
                raise InvalidPhaseError(value)
            return value
        case _:
            return value


def parse_filter_expression(expr: str) -> FilterExpression:
    """
    Parse a single filter expression of the form `<field><op><value>`.

    Raises:
        MissingOperatorError: If the expression contains no operator marker.
        MalformedExpressionError: If the field name or the value is empty.
        InvalidPhaseError: If a phase value does not name a known phase.
    """
    op = find_operator(expr)
    if op is None:
        raise MissingOperatorError(expr)

    field, _, value = expr.partition(op.marker)
    if not field or not value:
        raise MalformedExpressionError(expr)

    term = FilterTerm(field=field, operator=op, value=normalize_value(field, value))
    logger.debug(f"Parsed filter expression '{expr}' into {term}.")
    return FilterExpression(terms=(term,))


def parse_filter(exprs: Iterable[str]) -> list[FilterExpression]:
    """
    Convert raw filter expressions into filter expressions for the werft service.

    Args:
        exprs (Iterable[str]): Raw expressions, e.g. `["phase==done", "success==true"]`.

    Returns:
        list[FilterExpression]: One expression per input expression, in the same order.

    Raises:
        WerftError: If any of the expressions is invalid. No partial result is returned.
    """
    return [parse_filter_expression(expr) for expr in exprs]

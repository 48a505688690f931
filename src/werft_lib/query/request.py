# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Self

from werft_lib.core.config import CFG
from werft_lib.core.error import WerftError

from .filter import FilterExpression, parse_filter
from .order import OrderTerm, parse_order


@dataclass(frozen=True)
class ListJobsRequest:
    """
    Request for the list jobs procedure of the werft service.
    """

    filter: tuple[FilterExpression, ...] = ()
    order: tuple[OrderTerm, ...] = ()
    limit: int = CFG.list_defaults.limit
    start: int = CFG.list_defaults.offset

    def __post_init__(self):
        if self.limit < 0:
            raise WerftError(f"Limit must be non-negative, got {self.limit}.")
        if self.start < 0:
            raise WerftError(f"Offset must be non-negative, got {self.start}.")

    @classmethod
    def fromExpressions(
        cls,
        filter_exprs: Iterable[str],
        order_exprs: Iterable[str],
        limit: int = CFG.list_defaults.limit,
        offset: int = CFG.list_defaults.offset,
    ) -> Self:
        """
        Build a request from raw filter and order expressions.

        Args:
            filter_exprs (Iterable[str]): Raw filter expressions, e.g. `phase==running`.
            order_exprs (Iterable[str]): Raw order expressions, e.g. `name:desc`.
            limit (int): Maximal number of jobs to return.
            offset (int): Number of jobs to skip.

        Returns:
            ListJobsRequest: The assembled request.

        Raises:
            WerftError: If any expression is invalid or limit/offset is negative.
        """
        return cls(
            filter=tuple(parse_filter(filter_exprs)),
            order=tuple(parse_order(order_exprs)),
            limit=limit,
            start=offset,
        )

    def toDict(self) -> dict[str, Any]:
        """Return the JSON-serializable wire representation of the request."""
        return {
            "filter": [expr.toDict() for expr in self.filter],
            "order": [term.toDict() for term in self.order],
            "limit": self.limit,
            "start": self.start,
        }

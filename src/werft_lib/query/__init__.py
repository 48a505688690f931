# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Parsing of job search expressions.

Filter expressions of the form `<field><op><value>` (e.g. `phase==running`)
and order expressions of the form `<field>:<direction>` (e.g. `name:desc`)
are translated into typed terms and assembled into a `ListJobsRequest`.
"""

from .filter import FilterExpression, FilterOp, FilterTerm, parse_filter
from .order import OrderTerm, parse_order
from .request import ListJobsRequest

__all__ = [
    "FilterExpression",
    "FilterOp",
    "FilterTerm",
    "ListJobsRequest",
    "OrderTerm",
    "parse_filter",
    "parse_order",
]

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout werft.

This module defines the werft-specific exceptions: errors raised while parsing
filter and order expressions, and errors raised when talking to the remote
werft service. Each exception carries an associated exit code used by werft
commands to report failures consistently.
"""

from werft_lib.core.config import CFG


class WerftError(Exception):
    """Common exception type for all recoverable werft errors."""

    exit_code = CFG.exit_codes.default


class MissingOperatorError(WerftError):
    """Raised when a filter expression contains no recognized operator."""

    def __init__(self, expression: str):
        super().__init__("invalid expression: missing operator")
        self.expression = expression


class MalformedExpressionError(WerftError):
    """Raised when a filter expression has an empty field name or value."""

    def __init__(self, expression: str):
        super().__init__(f"invalid expression: {expression}")
        self.expression = expression


class InvalidPhaseError(WerftError):
    """Raised when a phase filter names an unknown job phase."""

    def __init__(self, value: str):
        super().__init__(f"invalid phase: {value}")
        self.value = value


class InvalidOrderExpressionError(WerftError):
    """Raised when an order expression is not of the form `<field>:<direction>`."""

    def __init__(self, expression: str):
        super().__init__(f"invalid order expression: {expression}")
        self.expression = expression


class WerftTransportError(WerftError):
    """Raised when the werft service cannot be reached or returns an unusable response."""

    exit_code = CFG.exit_codes.transport

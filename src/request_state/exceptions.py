"""RequestStateError hierarchy for library misuse."""

from __future__ import annotations

from typing import Any


class RequestStateError(Exception):
    """Base for all request-state exceptions."""


class InvalidOperation(RequestStateError, TypeError):
    """The wrapped operation is not callable."""

    def __init__(self, operation: Any) -> None:
        super().__init__(
            f"Request operation must be callable, got {type(operation).__name__}"
        )
        self.operation = operation

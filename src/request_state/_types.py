"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx

from request_state.snapshot import RequestSnapshot

T = TypeVar("T")
D = TypeVar("D")

# The wrapped request: async (or plain) callable producing a result or None
Operation = Callable[..., Awaitable[T | None] | T | None]

# Failure callback; may be a coroutine function
ErrorHandler = Callable[[httpx.HTTPError | Exception], Any]

Listener = Callable[[RequestSnapshot[Any]], None]

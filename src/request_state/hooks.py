"""RequestHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from request_state.snapshot import RequestSnapshot


class RequestHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    def on_change(self, snapshot: RequestSnapshot[Any]) -> None:
        pass

    def on_load_start(self, snapshot: RequestSnapshot[Any]) -> None:
        pass

    def on_load_end(
        self,
        snapshot: RequestSnapshot[Any],
        error: Exception | None,
    ) -> None:
        pass


class OnChange(RequestHook):
    """Convenience hook that fires after every state change."""

    def __init__(self, callback: Callable[[RequestSnapshot[Any]], None]) -> None:
        self._callback = callback

    def on_change(self, snapshot: RequestSnapshot[Any]) -> None:
        self._callback(snapshot)


class BeforeLoad(RequestHook):
    """Convenience hook that only fires once a load is in flight."""

    def __init__(self, callback: Callable[[RequestSnapshot[Any]], None]) -> None:
        self._callback = callback

    def on_load_start(self, snapshot: RequestSnapshot[Any]) -> None:
        self._callback(snapshot)


class AfterLoad(RequestHook):
    """Convenience hook that fires when a load settles, stale loads included."""

    def __init__(
        self,
        callback: Callable[[RequestSnapshot[Any], Exception | None], None],
    ) -> None:
        self._callback = callback

    def on_load_end(
        self,
        snapshot: RequestSnapshot[Any],
        error: Exception | None,
    ) -> None:
        self._callback(snapshot, error)

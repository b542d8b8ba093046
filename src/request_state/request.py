"""RequestState — lifecycle container for one on-demand async request."""

from __future__ import annotations

import dataclasses
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any, Generic

import httpx

from request_state._types import D, ErrorHandler, Listener, Operation, T
from request_state.exceptions import InvalidOperation
from request_state.hooks import OnChange, RequestHook
from request_state.snapshot import LoadOutcome, RequestSnapshot
from request_state.trace import LoadTrace, TraceEntry

logger = logging.getLogger(__name__)


class RequestState(Generic[T, D]):
    """Tracks whether a request is in flight and what it last produced.

    ``load`` never raises the operation's failure: it is forwarded to
    ``on_error`` when one is given and dropped otherwise. A dropped failure is
    only observable as ``is_loading`` returning to False with ``value``
    unchanged, which looks the same as a load that produced the same value.

    When loads overlap, only the most recently started one may commit its
    result; older invocations settle as stale and leave the state alone,
    though their failures still reach ``on_error``.
    """

    def __init__(
        self,
        operation: Operation[T],
        is_invalid: bool = False,
        default: D = None,  # type: ignore[assignment]
        on_error: ErrorHandler | None = None,
        *,
        name: str | None = None,
        debug: bool = False,
    ) -> None:
        if not callable(operation):
            raise InvalidOperation(operation)
        self._operation = operation
        self._is_invalid = is_invalid
        self._default = default
        self._on_error = on_error
        self._name = name or getattr(operation, "__qualname__", repr(operation))
        self._hooks: list[RequestHook] = []
        self._token = 0
        self._snapshot: RequestSnapshot[T | D] = RequestSnapshot(value=default)
        self._trace = LoadTrace() if debug else None

    def __repr__(self) -> str:
        return (
            f"RequestState({self._name!r}, is_loading={self.is_loading}, "
            f"value={self.value!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    @property
    def value(self) -> T | D:
        return self._snapshot.value

    @property
    def default(self) -> D:
        return self._default

    @property
    def is_invalid(self) -> bool:
        return self._is_invalid

    @property
    def outcome(self) -> LoadOutcome | None:
        return self._snapshot.outcome

    @property
    def trace(self) -> LoadTrace | None:
        return self._trace

    def snapshot(self) -> RequestSnapshot[T | D]:
        return self._snapshot

    def set_value(self, new_value: T | D) -> None:
        """Overwrite the stored value without running the operation."""
        self._commit(value=new_value)

    def reset(self) -> None:
        self.set_value(self._default)

    def add_hook(self, hook: RequestHook) -> RequestState[T, D]:
        self._hooks.append(hook)
        return self

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with a fresh snapshot after every state change.

        Returns a callable that removes the subscription.
        """
        hook = OnChange(listener)
        self.add_hook(hook)

        def unsubscribe() -> None:
            if hook in self._hooks:
                self._hooks.remove(hook)

        return unsubscribe

    async def load(self, *params: Any) -> None:
        """Run the operation with ``params`` and store what it produces."""
        if self._is_invalid:
            logger.debug("Request %s is invalid, skipping load", self._name)
            return

        self._token += 1
        token = self._token
        started = time.perf_counter()
        result: Any = None
        error: Exception | None = None
        outcome: LoadOutcome | None = None

        try:
            self._commit(is_loading=True)
            self._dispatch("on_load_start", self._snapshot)

            try:
                result = self._operation(*params)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                error = exc
                outcome = LoadOutcome.FAILED
                await self._handle_failure(exc)
            else:
                outcome = LoadOutcome.EMPTY if result is None else LoadOutcome.OK
        finally:
            stale = token != self._token
            if stale:
                logger.debug(
                    "Request %s load #%d superseded by #%d, discarding",
                    self._name,
                    token,
                    self._token,
                )
            else:
                self._settle(result, outcome)
            self._record(token, started, outcome, error, stale)
            if outcome is not None:
                self._dispatch("on_load_end", self._snapshot, error)

    def _settle(self, result: Any, outcome: LoadOutcome | None) -> None:
        if outcome is None:
            # cancelled before the operation settled
            self._commit(is_loading=False)
        elif outcome is LoadOutcome.FAILED:
            self._commit(is_loading=False, outcome=outcome)
        else:
            self._commit(
                is_loading=False,
                outcome=outcome,
                value=self._default if result is None else result,
            )

    async def _handle_failure(self, exc: Exception) -> None:
        if isinstance(exc, httpx.HTTPStatusError):
            logger.debug(
                "Request %s failed with HTTP %d from %s",
                self._name,
                exc.response.status_code,
                exc.request.url,
            )
        if self._on_error is None:
            logger.debug("Request %s failure dropped: %r", self._name, exc)
            return
        handled = self._on_error(exc)
        if inspect.isawaitable(handled):
            await handled

    def _commit(self, **changes: Any) -> None:
        if "value" not in changes and all(
            getattr(self._snapshot, key) == change for key, change in changes.items()
        ):
            return
        snapshot = dataclasses.replace(self._snapshot, **changes)
        self._snapshot = snapshot
        self._dispatch("on_change", snapshot)

    def _dispatch(self, method: str, *args: Any) -> None:
        for hook in list(self._hooks):
            try:
                getattr(hook, method)(*args)
            except Exception:
                logger.exception(
                    "Hook %s.%s failed for request %s",
                    type(hook).__name__,
                    method,
                    self._name,
                )

    def _record(
        self,
        token: int,
        started: float,
        outcome: LoadOutcome | None,
        error: Exception | None,
        stale: bool,
    ) -> None:
        elapsed = (time.perf_counter() - started) * 1000
        if outcome is None:
            logger.debug(
                "Request %s load #%d cancelled after %.2fms",
                self._name,
                token,
                elapsed,
            )
            return
        logger.debug(
            "Request %s load #%d settled in %.2fms (%s)",
            self._name,
            token,
            elapsed,
            "stale" if stale else outcome,
        )
        if self._trace is None:
            return
        self._trace.entries.append(
            TraceEntry(
                token=token,
                duration_ms=elapsed,
                outcome="STALE" if stale else outcome.name,  # type: ignore[arg-type]
                reason=str(error) if error is not None else None,
            )
        )


def use_request(
    operation: Operation[T],
    is_invalid: bool = False,
    default: D = None,  # type: ignore[assignment]
    on_error: ErrorHandler | None = None,
    **kwargs: Any,
) -> RequestState[T, D]:
    """Create a RequestState for one logical request.

    Callers own one container per request and decide when to call ``load``,
    typically whenever the parameters the request depends on change.
    """
    return RequestState(operation, is_invalid, default, on_error, **kwargs)

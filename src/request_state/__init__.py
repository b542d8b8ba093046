"""Request State - lifecycle tracking for on-demand async requests."""

from request_state.exceptions import InvalidOperation, RequestStateError
from request_state.hooks import AfterLoad, BeforeLoad, OnChange, RequestHook
from request_state.request import RequestState, use_request
from request_state.snapshot import LoadOutcome, RequestSnapshot
from request_state.trace import LoadTrace, TraceEntry

__all__ = [
    "AfterLoad",
    "BeforeLoad",
    "InvalidOperation",
    "LoadOutcome",
    "LoadTrace",
    "OnChange",
    "RequestHook",
    "RequestSnapshot",
    "RequestState",
    "RequestStateError",
    "TraceEntry",
    "use_request",
]

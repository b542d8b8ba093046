"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import request_state

PUBLIC_SYMBOLS = [
    # Core
    "RequestState",
    "use_request",
    "RequestSnapshot",
    "LoadOutcome",
    # Exceptions
    "RequestStateError",
    "InvalidOperation",
    # Trace
    "LoadTrace",
    "TraceEntry",
    # Hooks
    "RequestHook",
    "OnChange",
    "BeforeLoad",
    "AfterLoad",
]


class TestPublicAPIContract:
    def test_all_symbols_importable(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert hasattr(request_state, symbol), (
                f"Symbol '{symbol}' not found in request_state"
            )

    def test_all_symbols_in_all(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert symbol in request_state.__all__, (
                f"Symbol '{symbol}' not in request_state.__all__"
            )

    def test_no_extra_symbols(self) -> None:
        assert sorted(request_state.__all__) == sorted(PUBLIC_SYMBOLS)

    def test_request_state_surface(self) -> None:
        for attr in ("is_loading", "value", "load", "set_value", "reset", "subscribe"):
            assert hasattr(request_state.RequestState, attr)

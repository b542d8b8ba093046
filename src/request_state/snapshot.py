"""RequestSnapshot — immutable view of a request's state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

V = TypeVar("V")


class LoadOutcome(Enum):
    """How the last committed load settled."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestSnapshot(Generic[V]):
    """State of a RequestState at one instant, handed to listeners and hooks.

    ``outcome`` is None until a load has settled, which lets consumers tell
    "never loaded" apart from "loaded but empty" even though ``value`` holds
    the default in both cases.
    """

    value: V
    is_loading: bool = False
    outcome: LoadOutcome | None = None

    @property
    def has_loaded(self) -> bool:
        return self.outcome is not None

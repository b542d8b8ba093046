"""LoadTrace and TraceEntry — debug recording of settled loads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class TraceEntry:
    """Single load invocation record."""

    token: int
    duration_ms: float
    outcome: Literal["OK", "EMPTY", "FAILED", "STALE"]
    reason: str | None = None


@dataclass
class LoadTrace:
    """Structured record of every settled load of one request."""

    entries: list[TraceEntry] = field(default_factory=list)

    @property
    def total_loads(self) -> int:
        return len(self.entries)

    @property
    def last(self) -> TraceEntry | None:
        return self.entries[-1] if self.entries else None

"""
Hooks and debug trace example of request-state.

Demonstrates:
- Lifecycle hooks around each load
- Overlapping loads where only the newest one commits
- Inspecting the debug trace
"""

import asyncio
import logging
import random

from request_state import AfterLoad, BeforeLoad, RequestState


async def search(query: str) -> list[str]:
    """Fake search endpoint with variable latency."""
    await asyncio.sleep(random.uniform(0.01, 0.2))
    return [f"{query}-{n}" for n in range(3)]


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    results = RequestState(search, default=[], name="search", debug=True)
    results.add_hook(BeforeLoad(lambda snapshot: print("searching...")))
    results.add_hook(
        AfterLoad(lambda snapshot, error: print("settled:", snapshot.value, error))
    )

    # Typing fast: three overlapping searches, the last one wins
    await asyncio.gather(*(results.load(q) for q in ("a", "ap", "apt")))
    print("final:", results.value)

    assert results.trace is not None
    for entry in results.trace.entries:
        print(f"#{entry.token} {entry.outcome} {entry.duration_ms:.1f}ms")


if __name__ == "__main__":
    asyncio.run(main())

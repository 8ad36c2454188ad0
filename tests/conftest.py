from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class FakeTimers:
    """Stands in for async_call_later: timers only fire when a test says so."""

    def __init__(self) -> None:
        self.armed: list[tuple[float, Callable[[Any], None]]] = []
        self.cancelled = 0
        self.scheduled = 0

    def schedule_later(self, delay: float, action: Callable[[Any], None]) -> Callable[[], None]:
        entry = (delay, action)
        self.armed.append(entry)
        self.scheduled += 1

        def _cancel() -> None:
            if entry in self.armed:
                self.armed.remove(entry)
                self.cancelled += 1

        return _cancel

    def fire_all(self) -> None:
        armed, self.armed = self.armed, []
        for _delay, action in armed:
            action(None)


@pytest.fixture
def timers() -> FakeTimers:
    return FakeTimers()

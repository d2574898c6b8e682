"""State behind small interactive views: an event log, a list of counters and a theme."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

EVENT_LOG_CAPACITY = 20


class EventLog:
    """The most recent events, oldest first, at most ``capacity`` of them."""

    def __init__(self, capacity: int = EVENT_LOG_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._events: deque[Any] = deque()

    def log(self, event: Any) -> None:
        """Record an event, dropping the oldest one once the log is full."""
        if len(self._events) >= self.capacity:
            self._events.popleft()
        self._events.append(event)

    @property
    def events(self) -> list[Any]:
        return list(self._events)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)


class Counters:
    """An ordered list of integer counters that can grow, shrink and be edited."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self.values: list[int] = [0, 0, 0] if values is None else list(values)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self.values):
            raise IndexError(
                f"counter index {index} out of range for {len(self.values)} counters"
            )
        return index

    def add(self) -> None:
        """Append a new counter starting at zero."""
        self.values.append(0)

    def remove_last(self) -> None:
        """Drop the last counter; does nothing when there are none."""
        if self.values:
            self.values.pop()

    def increment(self, index: int) -> None:
        self.values[self._check(index)] += 1

    def decrement(self, index: int) -> None:
        self.values[self._check(index)] -= 1

    def set(self, index: int, value: int) -> None:
        self.values[self._check(index)] = value

    def remove(self, index: int) -> None:
        """Remove the counter at ``index``; later counters shift down."""
        del self.values[self._check(index)]

    def total(self) -> int:
        return sum(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


class Theme(Enum):
    """Colour scheme of the page."""

    LIGHT = "light"
    DARK = "dark"

    def stylesheet(self) -> str:
        """CSS class that applies this theme."""
        return f"{self.value}-theme"
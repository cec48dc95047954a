"""Sources of the current wall-clock and monotonic time."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Union

from omaha.complex_time import ComplexTime
from omaha.timepoints import Duration, Instant, SystemTime


class TimeSource(ABC):
    """Provides the current wall ("system") time and monotonic time."""

    @abstractmethod
    def now_in_walltime(self) -> SystemTime:
        """The current wall time."""

    @abstractmethod
    def now_in_monotonic(self) -> Instant:
        """The current monotonic time."""

    @abstractmethod
    def now(self) -> ComplexTime:
        """The current wall and monotonic times together."""


class StandardTimeSource(TimeSource):
    """A time source reading the real system and monotonic clocks."""

    def __repr__(self) -> str:
        return "StandardTimeSource()"

    def now_in_walltime(self) -> SystemTime:
        return SystemTime.now()

    def now_in_monotonic(self) -> Instant:
        return Instant.now()

    def now(self) -> ComplexTime:
        return ComplexTime(SystemTime.now(), Instant.now())


class _SharedTime:
    """A ComplexTime cell guarded by a lock, shared between cloned sources."""

    def __init__(self, time: ComplexTime) -> None:
        self._lock = threading.Lock()
        self._time = time

    def get(self) -> ComplexTime:
        with self._lock:
            return self._time

    def update(self, change) -> None:
        with self._lock:
            self._time = change(self._time)


class MockTimeSource(TimeSource):
    """A time source that only moves when told to.

    Clones share their time: advancing one advances all of them.
    """

    def __init__(self, time: Union[ComplexTime, tuple[SystemTime, Instant]]) -> None:
        if isinstance(time, tuple):
            time = ComplexTime(*time)
        if not isinstance(time, ComplexTime):
            raise TypeError(f"expected a ComplexTime, got {time!r}")
        self._shared = _SharedTime(time)

    @classmethod
    def new_from_now(cls) -> MockTimeSource:
        """A mock source starting at the current real time."""
        return cls(StandardTimeSource().now())

    def clone(self) -> MockTimeSource:
        """A second handle onto the same, shared, mock time."""
        other = object.__new__(type(self))
        other._shared = self._shared
        return other

    def __repr__(self) -> str:
        return f"MockTimeSource({self._shared.get()!r})"

    def now_in_walltime(self) -> SystemTime:
        return self._shared.get().wall

    def now_in_monotonic(self) -> Instant:
        return self._shared.get().mono

    def now(self) -> ComplexTime:
        return self._shared.get()

    def advance(self, duration: Duration) -> None:
        """Move both clocks forward by ``duration``, for every clone."""
        if not isinstance(duration, Duration):
            raise TypeError(f"expected a Duration, got {duration!r}")
        self._shared.update(lambda current: current + duration)

    def truncate_submicrosecond_walltime(self) -> None:
        """Drop the sub-microsecond part of the wall time, as storage would."""
        self._shared.update(lambda current: current.truncate_submicrosecond_walltime())
"""Times paired across the wall-clock and monotonic timelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from omaha.timepoints import (
    Duration,
    Instant,
    ReadableSystemTime,
    SystemTime,
    SystemTimeError,
    checked_system_time_to_micros_from_epoch,
    micros_from_epoch_to_system_time,
)

_NANOS_PER_MICRO = 1_000


@dataclass(frozen=True)
class ComplexTime:
    """A time with values on both the wall-clock and the monotonic timeline.

    The two values need not describe the same moment; they may be independent
    bounds, for example when waiting on a timer.
    """

    wall: SystemTime
    mono: Instant

    def truncate_submicrosecond_walltime(self) -> ComplexTime:
        """Return a copy whose wall time has its sub-microsecond part dropped."""
        try:
            since_epoch = self.wall_duration_since(SystemTime.UNIX_EPOCH)
            submicro = since_epoch.nanos % _NANOS_PER_MICRO
        except SystemTimeError as error:
            submicro = _NANOS_PER_MICRO - error.duration.nanos % _NANOS_PER_MICRO
        return ComplexTime(self.wall - Duration.from_nanos(submicro), self.mono)

    def wall_duration_since(self, earlier: Union[SystemTime, ComplexTime]) -> Duration:
        """Duration from ``earlier`` to this wall time; raises SystemTimeError if negative."""
        if isinstance(earlier, ComplexTime):
            earlier = earlier.wall
        return self.wall.duration_since(earlier)

    def is_after_or_eq_any(self, other: object) -> bool:
        """True if this time is at or after any time held by ``other``."""
        partial = PartialComplexTime.from_value(other)
        wall_reached = partial.wall is not None and self.wall >= partial.wall
        mono_reached = partial.mono is not None and self.mono >= partial.mono
        return wall_reached or mono_reached

    def __add__(self, duration: Duration) -> ComplexTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return ComplexTime(self.wall + duration, self.mono + duration)

    def __sub__(self, duration: Duration) -> ComplexTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return ComplexTime(self.wall - duration, self.mono - duration)

    def __str__(self) -> str:
        return f"{ReadableSystemTime(self.wall)} at {self.mono!r}"


@dataclass(frozen=True)
class PartialComplexTime:
    """A time on at least one of the wall-clock and monotonic timelines."""

    wall: Optional[SystemTime] = None
    mono: Optional[Instant] = None

    def __post_init__(self) -> None:
        if self.wall is None and self.mono is None:
            raise ValueError("a PartialComplexTime needs a wall time, a monotonic time, or both")
        if self.wall is not None and not isinstance(self.wall, SystemTime):
            raise TypeError(f"wall must be a SystemTime, got {self.wall!r}")
        if self.mono is not None and not isinstance(self.mono, Instant):
            raise TypeError(f"mono must be an Instant, got {self.mono!r}")

    @classmethod
    def from_value(cls, value: object) -> PartialComplexTime:
        """Build from a SystemTime, Instant, ComplexTime, (SystemTime, Instant) pair or itself."""
        if isinstance(value, PartialComplexTime):
            return value
        if isinstance(value, ComplexTime):
            return cls(value.wall, value.mono)
        if isinstance(value, SystemTime):
            return cls(wall=value)
        if isinstance(value, Instant):
            return cls(mono=value)
        if isinstance(value, tuple) and len(value) == 2:
            wall, mono = value
            return cls(ComplexTime(wall, mono).wall, mono)
        raise TypeError(f"cannot make a PartialComplexTime from {value!r}")

    @classmethod
    def from_micros_since_epoch(cls, micros: int) -> PartialComplexTime:
        """A wall-only time the given signed microseconds from the UNIX epoch."""
        return cls(wall=micros_from_epoch_to_system_time(micros))

    @property
    def is_complex(self) -> bool:
        """True if both timelines have a value."""
        return self.wall is not None and self.mono is not None

    def checked_to_system_time(self) -> Optional[SystemTime]:
        """The wall time, if there is one."""
        return self.wall

    def checked_to_instant(self) -> Optional[Instant]:
        """The monotonic time, if there is one."""
        return self.mono

    def checked_to_micros_since_epoch(self) -> Optional[int]:
        """Wall time in signed epoch microseconds; None without a wall time or on overflow."""
        if self.wall is None:
            return None
        return checked_system_time_to_micros_from_epoch(self.wall)

    def complete_with(self, complex_time: ComplexTime) -> ComplexTime:
        """A ComplexTime from this time, taking any missing value from ``complex_time``."""
        wall = complex_time.wall if self.wall is None else self.wall
        mono = complex_time.mono if self.mono is None else self.mono
        return ComplexTime(wall, mono)

    def destructure(self) -> tuple[Optional[SystemTime], Optional[Instant]]:
        """The (wall, mono) pair, with None for a missing value."""
        return self.wall, self.mono

    def __add__(self, duration: Duration) -> PartialComplexTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return PartialComplexTime(
            None if self.wall is None else self.wall + duration,
            None if self.mono is None else self.mono + duration,
        )

    def __sub__(self, duration: Duration) -> PartialComplexTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return PartialComplexTime(
            None if self.wall is None else self.wall - duration,
            None if self.mono is None else self.mono - duration,
        )

    def __str__(self) -> str:
        if self.wall is not None and self.mono is not None:
            return str(ComplexTime(self.wall, self.mono))
        if self.wall is not None:
            return f"{ReadableSystemTime(self.wall)} and No Monotonic"
        return f"No Wall and {self.mono!r}"
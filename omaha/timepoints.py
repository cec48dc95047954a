"""Wall-clock and monotonic time points, durations and conversions to epoch microseconds."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional

_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SEC = 1_000_000_000
_I64_MAX = 2**63 - 1
_EPOCH_DATETIME = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _require_non_negative_int(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of time with nanosecond precision."""

    nanos: int = 0

    def __post_init__(self) -> None:
        _require_non_negative_int(self.nanos, "duration nanoseconds")

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        """Create a duration of whole seconds."""
        return cls(_require_non_negative_int(secs, "seconds") * _NANOS_PER_SEC)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        """Create a duration of whole milliseconds."""
        return cls(_require_non_negative_int(millis, "milliseconds") * _NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        """Create a duration of whole microseconds."""
        return cls(_require_non_negative_int(micros, "microseconds") * _NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Create a duration of whole nanoseconds."""
        return cls(_require_non_negative_int(nanos, "nanoseconds"))

    def as_micros(self) -> int:
        """Whole microseconds in this duration; the sub-microsecond part is dropped."""
        return self.nanos // _NANOS_PER_MICRO

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanos + other.nanos)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        if other.nanos > self.nanos:
            raise OverflowError("overflow when subtracting durations")
        return Duration(self.nanos - other.nanos)

    def __mul__(self, factor: int) -> Duration:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        if factor < 0:
            raise OverflowError("cannot multiply a duration by a negative number")
        return Duration(self.nanos * factor)

    def __rmul__(self, factor: int) -> Duration:
        return self.__mul__(factor)


class SystemTimeError(ValueError):
    """Raised when a wall time is earlier than the time it is measured from."""

    def __init__(self, duration: Duration) -> None:
        super().__init__("second time provided was later than self")
        self.duration = duration


@dataclass(frozen=True, order=True)
class SystemTime:
    """A wall-clock time, held as signed nanoseconds from the UNIX epoch."""

    nanos: int = 0

    UNIX_EPOCH: ClassVar[SystemTime]

    @classmethod
    def now(cls) -> SystemTime:
        """The current wall-clock time."""
        return cls(time.time_ns())

    def duration_since(self, earlier: SystemTime) -> Duration:
        """Time elapsed since ``earlier``; raises SystemTimeError if ``earlier`` is later."""
        difference = self.nanos - earlier.nanos
        if difference < 0:
            raise SystemTimeError(Duration(-difference))
        return Duration(difference)

    def __add__(self, duration: Duration) -> SystemTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return SystemTime(self.nanos + duration.nanos)

    def __sub__(self, duration: Duration) -> SystemTime:
        if not isinstance(duration, Duration):
            return NotImplemented
        return SystemTime(self.nanos - duration.nanos)


SystemTime.UNIX_EPOCH = SystemTime(0)


@dataclass(frozen=True, order=True, repr=False)
class Instant:
    """A point on the monotonic clock, whose epoch is unspecified."""

    nanos: int = 0

    @classmethod
    def now(cls) -> Instant:
        """The current monotonic time."""
        return cls(time.monotonic_ns())

    def duration_since(self, earlier: Instant) -> Duration:
        """Time elapsed since ``earlier``, or zero if ``earlier`` is later."""
        return Duration(max(0, self.nanos - earlier.nanos))

    def __add__(self, duration: Duration) -> Instant:
        if not isinstance(duration, Duration):
            return NotImplemented
        return Instant(self.nanos + duration.nanos)

    def __sub__(self, duration: Duration) -> Instant:
        if not isinstance(duration, Duration):
            return NotImplemented
        return Instant(self.nanos - duration.nanos)

    def __repr__(self) -> str:
        secs, nsec = divmod(self.nanos, _NANOS_PER_SEC)
        return f"Instant {{ tv_sec: {secs}, tv_nsec: {nsec} }}"


@dataclass(frozen=True)
class ReadableSystemTime:
    """Human-readable UTC rendering of a SystemTime, with raw epoch seconds appended."""

    time: SystemTime

    def __str__(self) -> str:
        secs, subsec_nanos = divmod(self.time.nanos, _NANOS_PER_SEC)
        moment = _EPOCH_DATETIME + timedelta(seconds=secs)
        millis = subsec_nanos // _NANOS_PER_MILLI
        return (
            f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
            f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}.{millis:03d} UTC "
            f"({secs}.{subsec_nanos:09d})"
        )

    def __repr__(self) -> str:
        return str(self)


def checked_system_time_to_micros_from_epoch(time: SystemTime) -> Optional[int]:
    """Signed microseconds from the UNIX epoch, or None if outside the 64-bit range."""
    try:
        micros = time.duration_since(SystemTime.UNIX_EPOCH).as_micros()
    except SystemTimeError as error:
        magnitude = error.duration.as_micros()
        return -magnitude if magnitude <= _I64_MAX else None
    return micros if micros <= _I64_MAX else None


def micros_from_epoch_to_system_time(micros: int) -> SystemTime:
    """The SystemTime that lies the given signed microseconds from the UNIX epoch."""
    if micros > 0:
        return SystemTime.UNIX_EPOCH + Duration.from_micros(micros)
    return SystemTime.UNIX_EPOCH - Duration.from_micros(-micros)
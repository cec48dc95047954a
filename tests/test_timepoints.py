import pytest

from omaha.timepoints import (
    Duration,
    Instant,
    ReadableSystemTime,
    SystemTime,
    SystemTimeError,
    checked_system_time_to_micros_from_epoch,
    micros_from_epoch_to_system_time,
)

U64_MAX = 2**64 - 1
I64_MAX = 2**63 - 1
I64_MIN = -(2**63)


def test_readable_system_time():
    sys_time = SystemTime.UNIX_EPOCH + Duration.from_nanos(994610096026420000)
    assert str(ReadableSystemTime(sys_time)) == "2001-07-08 16:34:56.026 UTC (994610096.026420000)"


def test_readable_system_time_repr_matches_str():
    sys_time = SystemTime.UNIX_EPOCH + Duration.from_nanos(994610096026420000)
    readable = ReadableSystemTime(sys_time)
    assert repr(readable) == str(readable)


def test_readable_system_time_epoch():
    assert str(ReadableSystemTime(SystemTime.UNIX_EPOCH)) == "1970-01-01 00:00:00.000 UTC (0.000000000)"


def test_system_time_to_micros():
    system_time = SystemTime.UNIX_EPOCH + Duration.from_micros(123456789)
    assert checked_system_time_to_micros_from_epoch(system_time) == 123456789


def test_system_time_to_micros_negative():
    system_time = SystemTime.UNIX_EPOCH - Duration.from_micros(123456789)
    assert checked_system_time_to_micros_from_epoch(system_time) == -123456789


def test_system_time_to_micros_overflow_is_none():
    system_time = SystemTime.UNIX_EPOCH + 2 * Duration.from_micros(U64_MAX)
    assert checked_system_time_to_micros_from_epoch(system_time) is None


def test_system_time_to_micros_negative_overflow_is_none():
    system_time = SystemTime.UNIX_EPOCH - 2 * Duration.from_micros(U64_MAX)
    assert checked_system_time_to_micros_from_epoch(system_time) is None


def test_system_time_from_micros():
    system_time = SystemTime.UNIX_EPOCH + Duration.from_micros(123456789)
    assert micros_from_epoch_to_system_time(123456789) == system_time


def test_system_time_from_micros_negative():
    system_time = SystemTime.UNIX_EPOCH - Duration.from_micros(123456789)
    assert micros_from_epoch_to_system_time(-123456789) == system_time


def test_system_time_from_micros_positive_max():
    system_time = SystemTime.UNIX_EPOCH + Duration.from_micros(I64_MAX)
    assert micros_from_epoch_to_system_time(I64_MAX) == system_time


def test_system_time_from_micros_negative_min():
    system_time = SystemTime.UNIX_EPOCH - Duration.from_micros(I64_MAX + 1)
    assert micros_from_epoch_to_system_time(I64_MIN) == system_time


@pytest.mark.parametrize("micros", [0, 1, -1, 123456789, -987654321, I64_MAX])
def test_micros_round_trip(micros):
    assert checked_system_time_to_micros_from_epoch(micros_from_epoch_to_system_time(micros)) == micros


def test_to_micros_drops_submicrosecond():
    system_time = SystemTime.UNIX_EPOCH + Duration.from_nanos(1_999)
    assert checked_system_time_to_micros_from_epoch(system_time) == 1
    before = SystemTime.UNIX_EPOCH - Duration.from_nanos(1_999)
    assert checked_system_time_to_micros_from_epoch(before) == -1


def test_duration_constructors_agree():
    assert Duration.from_secs(2) == Duration.from_millis(2000)
    assert Duration.from_millis(3) == Duration.from_micros(3000)
    assert Duration.from_micros(4) == Duration.from_nanos(4000)


def test_duration_as_micros_truncates():
    assert Duration.from_nanos(56789_999).as_micros() == 56789


def test_duration_arithmetic():
    one = Duration.from_secs(1)
    two = Duration.from_secs(2)
    assert one + one == two
    assert two - one == one
    assert one * 3 == Duration.from_secs(3)
    assert 3 * one == Duration.from_secs(3)
    assert one < two


def test_duration_subtract_overflow():
    with pytest.raises(OverflowError):
        Duration.from_secs(1) - Duration.from_secs(2)


def test_duration_rejects_negative():
    with pytest.raises(ValueError):
        Duration.from_secs(-1)


def test_system_time_duration_since():
    early = SystemTime.now()
    later = early + Duration.from_secs(200)
    assert later.duration_since(early) == Duration.from_secs(200)


def test_system_time_duration_since_error_carries_duration():
    early = SystemTime.now()
    later = early + Duration.from_secs(200)
    with pytest.raises(SystemTimeError) as info:
        early.duration_since(later)
    assert info.value.duration == Duration.from_secs(200)


def test_system_time_add_then_sub_round_trip():
    now = SystemTime.now()
    dur = Duration.from_secs(3600)
    assert (now + dur) - dur == now
    assert now - dur < now < now + dur


def test_instant_add_sub_and_duration_since():
    mono = Instant.now()
    dur = Duration.from_secs(60 * 60)
    assert (mono + dur).duration_since(mono) == dur
    assert mono.duration_since(mono - dur) == dur


def test_instant_duration_since_saturates_to_zero():
    mono = Instant.now()
    later = mono + Duration.from_secs(5)
    assert mono.duration_since(later) == Duration()


def test_instant_repr():
    assert repr(Instant(5_000_000_123)) == "Instant { tv_sec: 5, tv_nsec: 123 }"


def test_instant_now_is_monotonic():
    first = Instant.now()
    second = Instant.now()
    assert second >= first
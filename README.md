# omaha

Building blocks for a client of the Omaha update protocol, usable on their own:

- `omaha.version.Version`: Omaha-style versions (`A`, `A.B`, `A.B.C` or `A.B.C.D`) of
  unsigned 32-bit numbers, compared field by field, with missing fields treated as zero.
- `omaha.timepoints`: wall-clock (`SystemTime`) and monotonic (`Instant`) time points,
  `Duration`, `ReadableSystemTime` for display, and conversion to and from signed
  microseconds since the UNIX epoch (`checked_system_time_to_micros_from_epoch`,
  `micros_from_epoch_to_system_time`).
- `omaha.complex_time`: `ComplexTime`, which holds both a wall and a monotonic time, and
  `PartialComplexTime`, which holds at least one of the two.
- `omaha.time_source`: the `TimeSource` interface, `StandardTimeSource` reading the real
  clocks, and `MockTimeSource`, which only moves when advanced and is shared between clones.
- `omaha.unless.unless`: keep a default value unless an override is given.

## Installation

```
pip install .
```

## Examples

Versions:

```python
import json
from omaha.version import Version

v = Version.parse("1.2")
str(v)                                                # "1.2.0.0"
Version.parse("1.2.3") < Version.parse("1.2.3.4")     # True
Version([1, 0]) == Version.parse("1.0.0.0")           # True
json.dumps(Version([1, 2, 3]).to_json())              # '"1.2.3.0"'
Version.from_json("1.2.3.4")                          # 1.2.3.4
Version.parse("1.2.3.4.5")                            # raises ValueError
```

Time points and epoch microseconds:

```python
from omaha.timepoints import (
    Duration,
    ReadableSystemTime,
    SystemTime,
    checked_system_time_to_micros_from_epoch,
    micros_from_epoch_to_system_time,
)

t = SystemTime.UNIX_EPOCH + Duration.from_nanos(994610096026420000)
str(ReadableSystemTime(t))   # "2001-07-08 16:34:56.026 UTC (994610096.026420000)"

checked_system_time_to_micros_from_epoch(SystemTime.UNIX_EPOCH - Duration.from_micros(5))  # -5
micros_from_epoch_to_system_time(123456789) == SystemTime.UNIX_EPOCH + Duration.from_micros(123456789)  # True
```

Wall and monotonic time together:

```python
from omaha.complex_time import PartialComplexTime
from omaha.time_source import MockTimeSource
from omaha.timepoints import Duration

source = MockTimeSource.new_from_now()
other = source.clone()
start = source.now()
source.advance(Duration.from_secs(3600))
other.now() == start + Duration.from_secs(3600)          # True: clones share their time

deadline = PartialComplexTime.from_value(start.wall)     # wall time only
source.now().is_after_or_eq_any(deadline)                # True
deadline.complete_with(source.now()).mono == source.now().mono   # True
```

Overrides:

```python
from omaha.unless import unless

unless("default", None)      # "default"
unless("default", "other")   # "other"
```

## What this package does not do

It has no key-value storage for persisting state between runs and no timers for waiting
on a `ComplexTime` or `PartialComplexTime`; nor does it talk to an update server, run
update checks or install anything. It provides the version and time types such a client
is built on.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Omaha-style versions of the form A.B.C.D, A.B.C, A.B or A."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_MAX_PARTS = 4
_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, order=True)
class Version:
    """A version of up to four unsigned 32-bit numbers; missing ones are zero."""

    numbers: tuple[int, ...]

    def __init__(self, numbers: Iterable[int]) -> None:
        parts = tuple(numbers)
        if not parts:
            raise ValueError("a version needs at least one number")
        if len(parts) > _MAX_PARTS:
            raise ValueError("Too many numbers in version, the maximum is 4.")
        for part in parts:
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(f"version numbers must be integers, got {part!r}")
            if not 0 <= part <= _U32_MAX:
                raise ValueError(f"version number out of range: {part}")
        object.__setattr__(self, "numbers", parts + (0,) * (_MAX_PARTS - len(parts)))

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a dotted version string, raising ValueError if it is malformed."""
        pieces = text.split(".")
        values = []
        for index, piece in enumerate(pieces):
            if index >= _MAX_PARTS:
                raise ValueError("Too many numbers in version, the maximum is 4.")
            if not _NUMBER.fullmatch(piece):
                raise ValueError(f"invalid number in version: {piece!r}")
            value = int(piece)
            if value > _U32_MAX:
                raise ValueError(f"number too large in version: {piece!r}")
            values.append(value)
        return cls(values)

    def to_json(self) -> str:
        """Return the value used to represent this version in JSON: its string form."""
        return str(self)

    @classmethod
    def from_json(cls, data: object) -> Version:
        """Build a version from its JSON representation, a string of the form A.B.C.D."""
        if not isinstance(data, str):
            raise TypeError(f"expected a string of the format A.B.C.D, got {data!r}")
        return cls.parse(data)

    def __str__(self) -> str:
        return ".".join(str(number) for number in self.numbers)

    def __repr__(self) -> str:
        return str(self)
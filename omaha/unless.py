"""Fluent override helper: keep a default value unless an override is given."""

from typing import Optional, TypeVar

T = TypeVar("T")


def unless(value: T, option: Optional[T]) -> T:
    """Return ``value``, unless ``option`` holds a value, in which case return that.

    This reads best where the default is the common case and ``option`` is a
    rarely-set override.
    """
    return value if option is None else option
from __future__ import annotations

import secrets
import string
from collections.abc import Container

from forge.lib import clock

_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 4


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_id(timestamp_ms: int | None = None) -> str:
    """Time-ordered task id: base36 milliseconds plus a random base36 suffix.

    No counter and no coordination between processes. The suffix carries
    ~20 bits of randomness for ids minted in the same millisecond.
    """
    if timestamp_ms is None:
        timestamp_ms = clock.now_ms()
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return to_base36(timestamp_ms) + suffix


def unique_id(taken: Container[str], timestamp_ms: int | None = None) -> str:
    """Generate an id not already present in `taken`."""
    while True:
        task_id = generate_id(timestamp_ms)
        if task_id not in taken:
            return task_id


__all__ = ["generate_id", "to_base36", "unique_id"]

"""
Random 64-bit item identifiers.

Identifiers are drawn from the OS CSPRNG and never checked against existing
rows: with 63 bits of entropy a collision is rare enough to ignore (the
ostrich algorithm). A collision would surface as a primary-key violation on
insert.
"""
import secrets
from collections.abc import Callable

_INT64_MIN = -(2**63)


def generate_item_id(random_bytes: Callable[[int], bytes] = secrets.token_bytes) -> int:
    """Return a non-negative identifier in [0, 2**63 - 1]."""
    while True:
        value = int.from_bytes(random_bytes(8), byteorder="little", signed=True)
        # abs(INT64_MIN) does not fit in a signed 64-bit column; draw again.
        if value != _INT64_MIN:
            return abs(value)

"""How integers are laid out in memory."""

from __future__ import annotations

import struct


def byte_order() -> str:
    """Return "little" or "big" for the byte order of this machine."""
    first_byte = struct.pack("=i", 1)[0]
    return "little" if first_byte & 1 else "big"


def memory_layout(value: int, size: int = 4, order: str | None = None) -> str:
    """Return the bytes of a signed integer as space-separated hex pairs.

    The bytes follow ``order`` ("little" or "big"), or the machine's own order.
    """
    if size < 1:
        raise ValueError("size must be positive")
    data = value.to_bytes(size, order or byte_order(), signed=True)
    return " ".join(f"{byte:02x}" for byte in data)
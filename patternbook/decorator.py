"""Decorator pattern: a buffered reader wrapping an in-memory reader."""

from __future__ import annotations

import io


def read_buffered(data: bytes | str, size: int = 10) -> bytes:
    """Read once through a buffered reader into a zeroed buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"buffer size must not be negative: {size}")
    raw = data.encode() if isinstance(data, str) else bytes(data)
    buffer = bytearray(size)
    with io.BufferedReader(io.BytesIO(raw)) as reader:
        reader.readinto(buffer)
    return bytes(buffer)


def demo() -> None:
    """Read ten bytes of input data through a buffered reader."""
    buffer = read_buffered("Input data", 10)
    print("Read from a buffered reader: ", end="")
    print("".join(chr(byte) for byte in buffer))
"""Bit-level encoding of bytes into signals, least significant bit first."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from dataclasses import dataclass

BITS_PER_BYTE = 8
TERMINATOR = b"\n"


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries *bit*: SIGUSR1 for 1, SIGUSR2 for 0."""
    if bit == 1:
        return signal.SIGUSR1
    if bit == 0:
        return signal.SIGUSR2
    raise ValueError(f"bit must be 0 or 1, got {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by *signum*."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


def encode_byte(value: int) -> Iterator[int]:
    """Yield the eight bits of *value*, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    for shift in range(BITS_PER_BYTE):
        yield (value >> shift) & 1


def encode_message(data: bytes | str) -> Iterator[int]:
    """Yield the bits of *data* followed by a terminating newline.

    Text is encoded as UTF-8.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    for byte in payload + TERMINATOR:
        yield from encode_byte(byte)


@dataclass
class BitDecoder:
    """Reassemble bytes from bits arriving least significant first."""

    count: int = 0
    value: int = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the completed byte, or None if incomplete."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if bit:
            self.value |= 1 << self.count
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.count = 0
        self.value = 0
        return byte
"""Moves exchanged between two processes, one bit per signal, least significant bit first."""

from __future__ import annotations

import os
import signal
import time
from typing import Callable, Optional

from .board import Square

BITS_PER_BYTE = 8
BYTES_PER_MOVE = 4
DEFAULT_DELAY = 0.001
ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2


def encode_byte(value: int) -> list[bool]:
    """Return the eight bits of *value*, least significant first."""
    if not 0 <= value < 1 << BITS_PER_BYTE:
        raise ValueError(f"{value!r} does not fit in one byte")
    return [bool(value >> bit & 1) for bit in range(BITS_PER_BYTE)]


def encode_move(from_square: Square, to_square: Square) -> list[bool]:
    """Return the bits for a move: from column, from row, to column, to row."""
    values = (*from_square, *to_square)
    if len(values) != BYTES_PER_MOVE:
        raise ValueError("a move is two (column, row) squares")
    return [bit for value in values for bit in encode_byte(value)]


class MoveDecoder:
    """Reassembles moves from a stream of bits."""

    def __init__(self) -> None:
        self._bit_count = 0
        self._value = 0
        self._bytes: list[int] = []

    def feed(self, bit: bool) -> Optional[tuple[Square, Square]]:
        """Take one bit; return the move once its last bit has arrived."""
        if bit:
            self._value |= 1 << self._bit_count
        self._bit_count += 1
        if self._bit_count < BITS_PER_BYTE:
            return None
        self._bytes.append(self._value)
        self._bit_count = 0
        self._value = 0
        if len(self._bytes) < BYTES_PER_MOVE:
            return None
        from_column, from_row, to_column, to_row = self._bytes
        self._bytes = []
        return (from_column, from_row), (to_column, to_row)


class SignalLink:
    """Sends bits to a peer process as SIGUSR1 (one) and SIGUSR2 (zero)."""

    def __init__(self, peer_pid: Optional[int] = None, delay: float = DEFAULT_DELAY) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.peer_pid = peer_pid
        self.delay = delay

    def _signal(self, bit: bool) -> None:
        if self.peer_pid is None or self.peer_pid <= 0:
            raise RuntimeError("no peer process to signal")
        os.kill(self.peer_pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        time.sleep(self.delay)

    def _send_bits(self, bits: list[bool]) -> None:
        for bit in bits:
            self._signal(bit)

    def send_byte(self, value: int) -> None:
        self._send_bits(encode_byte(value))

    def send_move(self, from_square: Square, to_square: Square) -> None:
        self._send_bits(encode_move(from_square, to_square))

    def install(self, on_bit: Callable[[bool], None]) -> None:
        """Call *on_bit* with each bit signalled to this process."""

        def _handler(signum: int, _frame: object) -> None:
            on_bit(signum == ONE_SIGNAL)

        signal.signal(ONE_SIGNAL, _handler)
        signal.signal(ZERO_SIGNAL, _handler)
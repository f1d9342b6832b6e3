"""Fixed-size byte ring buffer used to queue serial data."""

from __future__ import annotations

__all__ = [
    "BufferFullError",
    "RingBuffer",
    "UART_RX_BUFFER_SIZE",
    "UART_TX_BUFFER_SIZE",
]

UART_TX_BUFFER_SIZE = 1000
UART_RX_BUFFER_SIZE = 600


class BufferFullError(Exception):
    """Raised when data does not fit in the free space of a buffer."""


class RingBuffer:
    """A bounded FIFO of bytes backed by a circular array."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._data = bytearray(capacity)
        self._in = 0
        self._out = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def free_space(self) -> int:
        """Number of bytes that can still be written."""
        return self.capacity - self._count

    def reset(self) -> None:
        """Discard all queued data."""
        self._in = 0
        self._out = 0
        self._count = 0

    def write(self, data: bytes) -> None:
        """Append data as a whole; raises BufferFullError if it does not fit."""
        size = len(data)
        if size == 0:
            return
        if size > self.free_space():
            raise BufferFullError(
                f"{size} bytes do not fit, {self.free_space()} free"
            )
        head = min(size, self.capacity - self._in)
        self._data[self._in:self._in + head] = data[:head]
        self._data[:size - head] = data[head:]
        self._in = (self._in + size) % self.capacity
        self._count += size

    def read(self, max_len: int) -> bytes:
        """Remove and return up to max_len bytes from the front."""
        if max_len < 0:
            raise ValueError(f"max_len must not be negative, got {max_len}")
        size = min(max_len, self._count)
        head = min(size, self.capacity - self._out)
        out = bytes(self._data[self._out:self._out + head]) + bytes(self._data[:size - head])
        self._out = (self._out + size) % self.capacity
        self._count -= size
        return out
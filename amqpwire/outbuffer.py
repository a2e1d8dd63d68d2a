"""Output buffers that encode values in AMQP network byte order."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod


def _pack(fmt: str, value) -> bytes:
    try:
        return struct.pack(fmt, value)
    except struct.error as error:
        raise ValueError(f"value {value!r} cannot be encoded as {fmt!r}: {error}") from None


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogateescape")
    return bytes(data)


class OutBuffer(ABC):
    """Base class for writers of the AMQP wire format.

    Integers are written big-endian. Floats and doubles are written in the
    host's native byte order, exactly as they are held in memory.
    """

    @abstractmethod
    def append(self, data: bytes) -> None:
        """Append raw bytes to the destination."""

    def add_bytes(self, data) -> None:
        """Append a binary string (str is encoded as UTF-8)."""
        self.append(_as_bytes(data))

    def add_uint8(self, value: int) -> None:
        self.append(_pack(">B", value))

    def add_int8(self, value: int) -> None:
        self.append(_pack(">b", value))

    def add_uint16(self, value: int) -> None:
        self.append(_pack(">H", value))

    def add_int16(self, value: int) -> None:
        self.append(_pack(">h", value))

    def add_uint32(self, value: int) -> None:
        self.append(_pack(">I", value))

    def add_int32(self, value: int) -> None:
        self.append(_pack(">i", value))

    def add_uint64(self, value: int) -> None:
        self.append(_pack(">Q", value))

    def add_int64(self, value: int) -> None:
        self.append(_pack(">q", value))

    def add_float(self, value: float) -> None:
        self.append(_pack("=f", value))

    def add_double(self, value: float) -> None:
        self.append(_pack("=d", value))

    def add_short_string(self, value) -> None:
        """Append a string prefixed with a one-byte length."""
        data = _as_bytes(value)
        if len(data) > 0xFF:
            raise ValueError(f"short string of {len(data)} bytes exceeds 255")
        self.add_uint8(len(data))
        self.append(data)

    def add_long_string(self, value) -> None:
        """Append a string prefixed with a four-byte length."""
        data = _as_bytes(value)
        if len(data) > 0xFFFFFFFF:
            raise ValueError(f"long string of {len(data)} bytes is too large")
        self.add_uint32(len(data))
        self.append(data)


class BytesOutBuffer(OutBuffer):
    """An output buffer that collects everything in memory."""

    def __init__(self):
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        self._data += data

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
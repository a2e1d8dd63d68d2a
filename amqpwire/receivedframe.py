"""Reader for a frame received in AMQP wire format."""

from __future__ import annotations

import struct

from .errors import ProtocolError

_HEADER = struct.Struct(">BHI")
_HEADER_SIZE = _HEADER.size
_TRAILER_SIZE = 1


class ReceivedFrame:
    """Wraps received bytes, parses the frame header and reads the payload.

    Reading starts right after the seven-byte header. Reading past the end
    of the payload, or past the end of the received bytes, raises
    ProtocolError.
    """

    def __init__(self, data, max_frame: int):
        self._data = bytes(data)
        self._skip = _HEADER_SIZE
        self._type = 0
        self._channel = 0
        self._payload_size = 0

        if not self.header():
            return

        self._type, self._channel, self._payload_size = _HEADER.unpack_from(self._data)

        if max_frame > 0 and self.total_size() > max_frame:
            raise ProtocolError(
                f"frame size {self.total_size()} exceeds maximum frame size {max_frame}"
            )

    def header(self) -> bool:
        """Has at least the full frame header been received?"""
        return len(self._data) >= _HEADER_SIZE

    def complete(self) -> bool:
        """Has the whole frame, including the end-of-frame byte, been received?"""
        return self.header() and len(self._data) >= self.total_size()

    def channel(self) -> int:
        return self._channel

    def frame_type(self) -> int:
        return self._type

    def payload_size(self) -> int:
        return self._payload_size

    def total_size(self) -> int:
        """Payload plus header and end-of-frame byte."""
        return self._payload_size + _HEADER_SIZE + _TRAILER_SIZE

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ProtocolError(f"invalid read size {size}")
        end = self._skip + size
        if end > _HEADER_SIZE + self._payload_size or end > len(self._data):
            raise ProtocolError("frame out of range")
        chunk = self._data[self._skip:end]
        self._skip = end
        return chunk

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def next_uint8(self) -> int:
        return self._unpack(">B")

    def next_int8(self) -> int:
        return self._unpack(">b")

    def next_uint16(self) -> int:
        return self._unpack(">H")

    def next_int16(self) -> int:
        return self._unpack(">h")

    def next_uint32(self) -> int:
        return self._unpack(">I")

    def next_int32(self) -> int:
        return self._unpack(">i")

    def next_uint64(self) -> int:
        return self._unpack(">Q")

    def next_int64(self) -> int:
        return self._unpack(">q")

    def next_float(self) -> float:
        return self._unpack("=f")

    def next_double(self) -> float:
        return self._unpack("=d")

    def next_data(self, size: int) -> bytes:
        """Return the next ``size`` raw bytes."""
        return self._take(size)

    def next_short_string(self) -> str:
        """Read a string prefixed with a one-byte length."""
        size = self.next_uint8()
        return self._take(size).decode("utf-8", "surrogateescape")

    def next_long_string(self) -> str:
        """Read a string prefixed with a four-byte length."""
        size = self.next_uint32()
        return self._take(size).decode("utf-8", "surrogateescape")
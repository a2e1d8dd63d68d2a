"""An output buffer that hands encoded frames straight to a connection handler."""

from __future__ import annotations

from .outbuffer import OutBuffer

_CAPACITY = 4096
_FRAME_END = 206


class PassthroughBuffer(OutBuffer):
    """Encodes one frame and passes the bytes to ``handler.on_data``.

    Data is collected in a buffer of 4096 bytes. The buffer is flushed when
    new data does not fit, and once more when the buffer is closed. A single
    piece of data larger than the buffer is passed on directly. The handler
    is called as ``handler.on_data(connection, data)``.
    """

    def __init__(self, connection, handler, frame):
        self._connection = connection
        self._handler = handler
        self._buffer = bytearray()
        self._closed = False
        frame.fill(self)
        # no end-of-frame byte while the protocol is still being negotiated
        if frame.needs_separator():
            self.add_uint8(_FRAME_END)

    def append(self, data: bytes) -> None:
        """Add bytes, flushing or passing them on when they do not fit."""
        if self._closed:
            raise ValueError("passthrough buffer is closed")
        data = bytes(data)
        if self._buffer and len(self._buffer) + len(data) > _CAPACITY:
            self.flush()
        if len(data) > _CAPACITY:
            self._handler.on_data(self._connection, data)
            return
        self._buffer += data

    def flush(self) -> None:
        """Pass everything buffered so far to the handler."""
        if not self._buffer:
            return
        data = bytes(self._buffer)
        self._buffer.clear()
        self._handler.on_data(self._connection, data)

    def close(self) -> None:
        """Flush the remaining data; further appends are refused."""
        if self._closed:
            return
        self.flush()
        self._closed = True

    def __enter__(self) -> PassthroughBuffer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
"""Buffer for outgoing data that could not be written to the socket at once."""

from __future__ import annotations

import socket
from collections import deque

_MAX_CHUNKS = 64
_SEND_FLAGS = getattr(socket, "MSG_NOSIGNAL", 0)


class TcpOutBuffer:
    """A queue of byte chunks waiting to be sent, with partial-send support."""

    def __init__(self):
        self._buffers: deque[bytes] = deque()
        self._skip = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def add(self, data) -> None:
        """Queue a copy of ``data``."""
        chunk = bytes(data)
        self._buffers.append(chunk)
        self._size += len(chunk)

    def shrink(self, toremove: int) -> None:
        """Drop ``toremove`` bytes from the front of the buffer."""
        if toremove >= self._size:
            self.clear()
            return
        while toremove > 0:
            available = len(self._buffers[0]) - self._skip
            if toremove >= available:
                self._size -= available
                self._skip = 0
                toremove -= available
                self._buffers.popleft()
            else:
                self._skip += toremove
                self._size -= toremove
                toremove = 0

    def clear(self) -> None:
        """Discard everything."""
        self._buffers.clear()
        self._skip = 0
        self._size = 0

    def chunks(self, count: int) -> list[memoryview]:
        """Views on at most ``count`` leading chunks, the first one trimmed."""
        result = []
        for index, chunk in enumerate(self._buffers):
            if index >= count:
                break
            view = memoryview(chunk)
            result.append(view[self._skip:] if index == 0 else view)
        return result

    def send_to(self, sock) -> int:
        """Write as much as possible to ``sock`` with ``sendmsg``.

        Returns the number of bytes written. An error raised before anything
        was written propagates; after a partial write it ends the loop.
        """
        total = 0
        while self._size > 0:
            buffers = self.chunks(_MAX_CHUNKS)
            if not buffers:
                break
            try:
                result = sock.sendmsg(buffers, [], _SEND_FLAGS)
            except (BlockingIOError, InterruptedError):
                return total
            except OSError:
                if total > 0:
                    return total
                raise
            if result <= 0:
                return total if total > 0 else result
            self.shrink(result)
            total += result
        return total

    def send_to_ssl(self, ssl_sock) -> int:
        """Write the first pending chunk to an SSL socket.

        Returns what ``ssl_sock.send`` returned, or 0 when nothing is pending.
        SSL errors such as a wanted read or write propagate to the caller.
        """
        buffers = self.chunks(1)
        if not buffers:
            return 0
        result = ssl_sock.send(buffers[0])
        if result > 0:
            self.shrink(result)
        return result
"""A pair of file descriptors used to wake up another thread."""

from __future__ import annotations

import os


class Pipe:
    """An OS pipe whose descriptors are not inherited by child processes."""

    def __init__(self):
        # os.pipe() creates close-on-exec descriptors; failures raise OSError
        self._read_fd, self._write_fd = os.pipe()

    @property
    def read_fd(self) -> int:
        """The end that is read from."""
        return self._read_fd

    @property
    def write_fd(self) -> int:
        """The end that is written to."""
        return self._write_fd

    def notify(self) -> bool:
        """Write one byte so that a thread waiting on the read end wakes up."""
        if self._write_fd < 0:
            raise ValueError("pipe is closed")
        return os.write(self._write_fd, b"\0") == 1

    def close(self) -> None:
        """Close both descriptors; calling it again does nothing."""
        for fd in (self._read_fd, self._write_fd):
            if fd >= 0:
                os.close(fd)
        self._read_fd = self._write_fd = -1

    def __enter__(self) -> Pipe:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
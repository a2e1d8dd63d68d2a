"""Frames of the connection class used during security and tuning negotiation."""

from __future__ import annotations

from .frames import ConnectionFrame

_LONG_STRING_PREFIX = 4


def _encoded_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


class ConnectionSecureFrame(ConnectionFrame):
    """A security challenge sent by the server."""

    def __init__(self, challenge: str):
        super().__init__(_encoded_len(challenge) + _LONG_STRING_PREFIX)
        self._challenge = challenge

    @classmethod
    def from_frame(cls, frame) -> ConnectionSecureFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._challenge = frame.next_long_string()
        return self

    def method_id(self) -> int:
        return 20

    @property
    def challenge(self) -> str:
        return self._challenge

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_long_string(self._challenge)


class ConnectionSecureOKFrame(ConnectionFrame):
    """The client's response to a security challenge."""

    def __init__(self, response: str):
        super().__init__(_encoded_len(response) + _LONG_STRING_PREFIX)
        self._response = response

    @classmethod
    def from_frame(cls, frame) -> ConnectionSecureOKFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._response = frame.next_long_string()
        return self

    def method_id(self) -> int:
        return 21

    @property
    def response(self) -> str:
        return self._response

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_long_string(self._response)


class ConnectionTuneOKFrame(ConnectionFrame):
    """The client's choice of channel limit, frame size and heartbeat."""

    def __init__(self, channels: int, frame_max: int, heartbeat: int):
        super().__init__(8)
        self._channels = channels
        self._frame_max = frame_max
        self._heartbeat = heartbeat

    @classmethod
    def from_frame(cls, frame) -> ConnectionTuneOKFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._channels = frame.next_uint16()
        self._frame_max = frame.next_uint32()
        self._heartbeat = frame.next_uint16()
        return self

    def method_id(self) -> int:
        return 31

    @property
    def channels(self) -> int:
        """Selected maximum number of channels."""
        return self._channels

    @property
    def frame_max(self) -> int:
        """Selected maximum frame size."""
        return self._frame_max

    @property
    def heartbeat(self) -> int:
        """Desired heartbeat delay in seconds."""
        return self._heartbeat

    def part_of_handshake(self) -> bool:
        return True

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_uint16(self._channels)
        buffer.add_uint32(self._frame_max)
        buffer.add_uint16(self._heartbeat)
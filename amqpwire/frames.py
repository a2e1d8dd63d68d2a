"""Base classes for AMQP frames other than the protocol header."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import ProtocolError
from .outbuffer import BytesOutBuffer

_FRAME_METHOD = 1
_FRAME_END = 206
_HEADER_SIZE = 7
_TRAILER_SIZE = 1
_METHOD_IDS_SIZE = 4


class Frame(ABC):
    """A frame with a type, a channel, a payload size and an end-of-frame byte."""

    def __init__(self, channel: int, size: int):
        self._channel = channel
        self._size = size

    @classmethod
    def _from_received(cls, frame):
        """Create an instance whose header fields come from a received frame."""
        instance = cls.__new__(cls)
        instance._channel = frame.channel()
        instance._size = frame.payload_size()
        return instance

    @abstractmethod
    def frame_type(self) -> int:
        """The frame type octet."""

    def channel(self) -> int:
        """The channel this frame belongs to."""
        return self._channel

    def header_size(self) -> int:
        """Type (1), channel (2) and payload size (4)."""
        return _HEADER_SIZE

    def trailer_size(self) -> int:
        """The end-of-frame byte."""
        return _TRAILER_SIZE

    def payload_size(self) -> int:
        return self._size

    def total_size(self) -> int:
        """Payload plus header and trailer."""
        return self._size + self.header_size() + self.trailer_size()

    def fill(self, buffer) -> None:
        """Write the frame, without the end-of-frame byte, to ``buffer``."""
        buffer.add_uint8(self.frame_type())
        buffer.add_uint16(self._channel)
        buffer.add_uint32(self._size)

    def to_bytes(self) -> bytes:
        """The complete encoded frame."""
        buffer = BytesOutBuffer()
        self.fill(buffer)
        if self.needs_separator():
            buffer.add_uint8(_FRAME_END)
        return buffer.getvalue()

    def synchronous(self) -> bool:
        """Must the sender wait for a reply before sending more frames?"""
        return False

    def part_of_handshake(self) -> bool:
        """Is this frame part of the connection setup?"""
        return False

    def needs_separator(self) -> bool:
        """Is the frame followed by an end-of-frame byte?"""
        return True

    def process(self, connection) -> bool:
        """Handle the frame after it was received over ``connection``."""
        raise ProtocolError(f"unimplemented frame type {self.frame_type()}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channel={self._channel}, size={self._size})"


class MethodFrame(Frame):
    """A frame carrying an AMQP method, identified by a class and method id."""

    def __init__(self, channel: int, size: int):
        super().__init__(channel, size + _METHOD_IDS_SIZE)

    def frame_type(self) -> int:
        return _FRAME_METHOD

    @abstractmethod
    def class_id(self) -> int:
        """The AMQP class id."""

    @abstractmethod
    def method_id(self) -> int:
        """The AMQP method id within the class."""

    def synchronous(self) -> bool:
        return True

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_uint16(self.class_id())
        buffer.add_uint16(self.method_id())


class ConnectionFrame(MethodFrame):
    """Method frames of the connection class; they always use channel 0."""

    def __init__(self, size: int):
        super().__init__(0, size)

    def class_id(self) -> int:
        return 10


class ChannelFrame(MethodFrame):
    """Method frames of the channel class."""

    def class_id(self) -> int:
        return 20


class ExchangeFrame(MethodFrame):
    """Method frames of the exchange class."""

    def class_id(self) -> int:
        return 40


class QueueFrame(MethodFrame):
    """Method frames of the queue class."""

    def class_id(self) -> int:
        return 50


class BasicFrame(MethodFrame):
    """Method frames of the basic class."""

    def class_id(self) -> int:
        return 60


class ConfirmFrame(MethodFrame):
    """Method frames of the confirm class."""

    def class_id(self) -> int:
        return 85


class TransactionFrame(MethodFrame):
    """Method frames of the transaction class."""

    def class_id(self) -> int:
        return 90
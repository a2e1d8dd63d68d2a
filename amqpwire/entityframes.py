"""Frames of the exchange and queue classes."""

from __future__ import annotations

from .booleanset import BooleanSet
from .frames import ExchangeFrame, QueueFrame


def _encoded_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


def _report_success(frame, connection, *args) -> bool:
    channel = connection.channel(frame.channel())
    if not channel:
        return False
    channel.report_success(*args)
    return True


class ExchangeDeleteFrame(ExchangeFrame):
    """Deletes an exchange."""

    def __init__(self, channel: int, name: str, if_unused: bool = False, no_wait: bool = False):
        # name, its length byte, the flags byte and the deprecated short
        super().__init__(channel, _encoded_len(name) + 4)
        self._deprecated = 0
        self._name = name
        self._bools = BooleanSet(if_unused, no_wait)

    @classmethod
    def from_frame(cls, frame) -> ExchangeDeleteFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._deprecated = frame.next_uint16()
        self._name = frame.next_short_string()
        self._bools = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 20

    def synchronous(self) -> bool:
        return not self.no_wait

    @property
    def name(self) -> str:
        return self._name

    @property
    def if_unused(self) -> bool:
        return self._bools.get(0)

    @property
    def no_wait(self) -> bool:
        return self._bools.get(1)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_uint16(self._deprecated)
        buffer.add_short_string(self._name)
        self._bools.fill(buffer)


class ExchangeBindOKFrame(ExchangeFrame):
    """Confirms that two exchanges were bound."""

    def __init__(self, channel: int):
        super().__init__(channel, 0)

    @classmethod
    def from_frame(cls, frame) -> ExchangeBindOKFrame:
        """Decode the fields following the class and method id."""
        return cls._from_received(frame)

    def method_id(self) -> int:
        return 31

    def process(self, connection) -> bool:
        """Report success to the channel; False if the channel is unknown."""
        return _report_success(self, connection)


class QueuePurgeFrame(QueueFrame):
    """Removes all messages from a queue."""

    def __init__(self, channel: int, name: str, no_wait: bool = False):
        super().__init__(channel, _encoded_len(name) + 4)
        self._deprecated = 0
        self._name = name
        self._no_wait = BooleanSet(no_wait)

    @classmethod
    def from_frame(cls, frame) -> QueuePurgeFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._deprecated = frame.next_int16()
        self._name = frame.next_short_string()
        self._no_wait = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 30

    def synchronous(self) -> bool:
        return not self.no_wait

    @property
    def name(self) -> str:
        return self._name

    @property
    def no_wait(self) -> bool:
        return self._no_wait.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_int16(self._deprecated)
        buffer.add_short_string(self._name)
        self._no_wait.fill(buffer)


class QueueBindOKFrame(QueueFrame):
    """Confirms that a queue was bound."""

    def __init__(self, channel: int):
        super().__init__(channel, 0)

    @classmethod
    def from_frame(cls, frame) -> QueueBindOKFrame:
        """Decode the fields following the class and method id."""
        return cls._from_received(frame)

    def method_id(self) -> int:
        return 21

    def process(self, connection) -> bool:
        """Report success to the channel; False if the channel is unknown."""
        return _report_success(self, connection)


class QueueDeleteOKFrame(QueueFrame):
    """Confirms that a queue was deleted, with the number of messages it held."""

    def __init__(self, channel: int, message_count: int):
        super().__init__(channel, 4)
        self._message_count = message_count

    @classmethod
    def from_frame(cls, frame) -> QueueDeleteOKFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._message_count = frame.next_int32()
        return self

    def method_id(self) -> int:
        return 41

    @property
    def message_count(self) -> int:
        """Number of deleted messages, as an unsigned 32-bit value."""
        return self._message_count & 0xFFFFFFFF

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_int32(self._message_count)

    def process(self, connection) -> bool:
        """Report the message count to the channel; False if it is unknown."""
        return _report_success(self, connection, self.message_count)
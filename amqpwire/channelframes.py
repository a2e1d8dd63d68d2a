"""Acknowledgement frames of the channel and transaction classes."""

from __future__ import annotations

from .booleanset import BooleanSet
from .frames import ChannelFrame, TransactionFrame


class ChannelFlowOKFrame(ChannelFrame):
    """Confirms a change in channel flow."""

    def __init__(self, channel: int, active: bool):
        super().__init__(channel, 1)
        self._active = BooleanSet(active)

    @classmethod
    def from_frame(cls, frame) -> ChannelFlowOKFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._active = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 21

    @property
    def active(self) -> bool:
        """Is channel flow active?"""
        return self._active.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        self._active.fill(buffer)

    def process(self, connection) -> bool:
        """Report success to the channel; False if the channel is unknown."""
        channel = connection.channel(self.channel())
        if not channel:
            return False
        channel.report_success()
        return True


class ChannelCloseOKFrame(ChannelFrame):
    """Confirms that a channel was closed."""

    def __init__(self, channel: int):
        super().__init__(channel, 0)

    @classmethod
    def from_frame(cls, frame) -> ChannelCloseOKFrame:
        """Decode the fields following the class and method id."""
        return cls._from_received(frame)

    def method_id(self) -> int:
        return 41

    def process(self, connection) -> bool:
        """Report the close to the channel; False if the channel is unknown."""
        channel = connection.channel(self.channel())
        if not channel:
            return False
        channel.report_closed()
        return True


class TransactionCommitOKFrame(TransactionFrame):
    """Confirms that a transaction was committed."""

    def __init__(self, channel: int):
        super().__init__(channel, 0)

    @classmethod
    def from_frame(cls, frame) -> TransactionCommitOKFrame:
        """Decode the fields following the class and method id."""
        return cls._from_received(frame)

    def method_id(self) -> int:
        return 21

    def process(self, connection) -> bool:
        """Report success to the channel; False if the channel is unknown."""
        channel = connection.channel(self.channel())
        if not channel:
            return False
        channel.report_success()
        return True
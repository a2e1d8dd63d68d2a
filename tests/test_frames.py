import pytest

from amqpwire.errors import ProtocolError
from amqpwire.frames import (
    BasicFrame,
    ChannelFrame,
    ConfirmFrame,
    ConnectionFrame,
    ExchangeFrame,
    Frame,
    MethodFrame,
    QueueFrame,
    TransactionFrame,
)
from amqpwire.receivedframe import ReceivedFrame


class _EmptyChannelMethod(ChannelFrame):
    def __init__(self, channel):
        super().__init__(channel, 0)

    def method_id(self):
        return 99


class _EmptyConnectionMethod(ConnectionFrame):
    def __init__(self):
        super().__init__(0)

    def method_id(self):
        return 7


def _concrete(base):
    class Concrete(base):
        def method_id(self):
            return 1

    return Concrete


def test_wire_bytes_of_empty_method_frame():
    data = _EmptyChannelMethod(5).to_bytes()
    assert data == bytes([1, 0, 5, 0, 0, 0, 4, 0, 20, 0, 99, 206])
    received = ReceivedFrame(data, 0)
    assert received.complete()
    assert received.channel() == 5


def test_sizes_are_consistent():
    frame = _EmptyChannelMethod(3)
    assert frame.header_size() == 7
    assert frame.trailer_size() == 1
    assert frame.total_size() == frame.payload_size() + 8
    data = frame.to_bytes()
    assert len(data) == frame.total_size()
    received = ReceivedFrame(data, 0)
    assert received.total_size() == frame.total_size()
    assert received.payload_size() == frame.payload_size()


def test_connection_frame_uses_channel_zero_and_class_ten():
    frame = _EmptyConnectionMethod()
    assert frame.channel() == 0
    assert frame.class_id() == 10
    received = ReceivedFrame(frame.to_bytes(), 0)
    assert received.channel() == 0
    assert received.next_uint16() == 10
    assert received.next_uint16() == 7


def test_class_ids_are_distinct():
    bases = [
        ChannelFrame,
        ExchangeFrame,
        QueueFrame,
        BasicFrame,
        ConfirmFrame,
        TransactionFrame,
    ]
    frames = [_concrete(ConnectionFrame)(0)]
    frames.extend(_concrete(base)(1, 0) for base in bases)
    ids = {ReceivedFrame(frame.to_bytes(), 0).next_uint16() for frame in frames}
    assert len(ids) == len(frames)
    assert ids == {frame.class_id() for frame in frames}


def test_defaults_of_method_frames():
    frame = _EmptyChannelMethod(1)
    assert ChannelFrame.synchronous(frame) is True
    assert ChannelFrame.part_of_handshake(frame) is False
    assert ChannelFrame.needs_separator(frame) is True


def test_process_raises_protocol_error():
    frame = _EmptyChannelMethod(1)
    with pytest.raises(ProtocolError, match="unimplemented frame type 1"):
        ChannelFrame.process(frame, object())


def test_header_round_trip_through_received_frame():
    frame = _EmptyChannelMethod(42)
    received = ReceivedFrame(frame.to_bytes(), 0)
    assert received.complete()
    assert received.frame_type() == frame.frame_type()
    assert received.channel() == 42
    assert received.payload_size() == frame.payload_size()
    assert received.next_uint16() == frame.class_id()
    assert received.next_uint16() == frame.method_id()


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Frame(1, 0)
    with pytest.raises(TypeError):
        MethodFrame(1, 0)


def test_from_received_copies_header():
    data = _EmptyChannelMethod(9).to_bytes()
    received = ReceivedFrame(data, 0)
    rebuilt = _EmptyChannelMethod._from_received(received)
    assert rebuilt.channel() == 9
    assert rebuilt.to_bytes() == data
import pytest

from amqpwire.errors import ProtocolError
from amqpwire.outbuffer import BytesOutBuffer
from amqpwire.receivedframe import ReceivedFrame


def _encode(frame_type: int, channel: int, payload: bytes, trailer: bool = True) -> bytes:
    buffer = BytesOutBuffer()
    buffer.add_uint8(frame_type)
    buffer.add_uint16(channel)
    buffer.add_uint32(len(payload))
    buffer.add_bytes(payload)
    if trailer:
        buffer.add_uint8(206)
    return buffer.getvalue()


def test_header_fields_are_parsed():
    frame = ReceivedFrame(_encode(1, 5, b"abc"), 0)
    assert frame.header() is True
    assert frame.complete() is True
    assert frame.frame_type() == 1
    assert frame.channel() == 5
    assert frame.payload_size() == 3
    assert frame.total_size() == 3 + 8


def test_short_data_has_no_header():
    frame = ReceivedFrame(b"\x01\x00", 0)
    assert frame.header() is False
    assert frame.complete() is False
    assert frame.channel() == 0
    assert frame.payload_size() == 0


def test_missing_trailer_is_incomplete():
    frame = ReceivedFrame(_encode(1, 1, b"abcd", trailer=False), 0)
    assert frame.header() is True
    assert frame.complete() is False


def test_frame_larger_than_max_is_rejected():
    data = _encode(1, 1, b"x" * 100)
    with pytest.raises(ProtocolError):
        ReceivedFrame(data, 50)


def test_frame_within_max_is_accepted():
    data = _encode(1, 1, b"x" * 10)
    frame = ReceivedFrame(data, len(data))
    assert frame.payload_size() == 10


def test_integer_round_trip():
    payload = BytesOutBuffer()
    payload.add_uint8(200)
    payload.add_int8(-5)
    payload.add_uint16(60000)
    payload.add_int16(-300)
    payload.add_uint32(4000000000)
    payload.add_int32(-70000)
    payload.add_uint64(2**63 + 1)
    payload.add_int64(-(2**40))
    frame = ReceivedFrame(_encode(1, 0, payload.getvalue()), 0)
    assert frame.next_uint8() == 200
    assert frame.next_int8() == -5
    assert frame.next_uint16() == 60000
    assert frame.next_int16() == -300
    assert frame.next_uint32() == 4000000000
    assert frame.next_int32() == -70000
    assert frame.next_uint64() == 2**63 + 1
    assert frame.next_int64() == -(2**40)


def test_float_round_trip():
    payload = BytesOutBuffer()
    payload.add_float(0.5)
    payload.add_double(3.25)
    frame = ReceivedFrame(_encode(1, 0, payload.getvalue()), 0)
    assert frame.next_float() == 0.5
    assert frame.next_double() == 3.25


def test_string_round_trip():
    payload = BytesOutBuffer()
    payload.add_short_string("myqueue")
    payload.add_long_string("a longer challenge")
    payload.add_short_string("")
    frame = ReceivedFrame(_encode(1, 2, payload.getvalue()), 0)
    assert frame.next_short_string() == "myqueue"
    assert frame.next_long_string() == "a longer challenge"
    assert frame.next_short_string() == ""


def test_next_data():
    frame = ReceivedFrame(_encode(3, 1, b"hello world"), 0)
    assert frame.next_data(5) == b"hello"
    assert frame.next_data(6) == b" world"


def test_reading_past_payload_raises():
    frame = ReceivedFrame(_encode(1, 0, b"\x01"), 0)
    assert frame.next_uint8() == 1
    with pytest.raises(ProtocolError):
        frame.next_uint8()


def test_trailer_is_not_part_of_payload():
    frame = ReceivedFrame(_encode(1, 0, b"\x00\x01"), 0)
    with pytest.raises(ProtocolError):
        frame.next_uint32()


def test_reading_past_received_data_raises():
    frame = ReceivedFrame(_encode(1, 0, b"abcdef", trailer=False)[:9], 0)
    assert frame.next_data(2) == b"ab"
    with pytest.raises(ProtocolError):
        frame.next_data(1)


def test_string_longer_than_payload_raises():
    frame = ReceivedFrame(_encode(1, 0, b"\x10abc"), 0)
    with pytest.raises(ProtocolError):
        frame.next_short_string()
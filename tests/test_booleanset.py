import pytest

from amqpwire.booleanset import BooleanSet
from amqpwire.outbuffer import BytesOutBuffer
from amqpwire.receivedframe import ReceivedFrame


def _frame_with_payload(payload: bytes) -> ReceivedFrame:
    buffer = BytesOutBuffer()
    buffer.add_uint8(1)
    buffer.add_uint16(0)
    buffer.add_uint32(len(payload))
    buffer.add_bytes(payload)
    buffer.add_uint8(206)
    return ReceivedFrame(buffer.getvalue(), 0)


def test_empty_set_is_all_false():
    flags = BooleanSet()
    assert flags.value() == 0
    assert [flags.get(i) for i in range(8)] == [False] * 8


def test_constructor_sets_flags_in_order():
    flags = BooleanSet(True, False, True)
    assert flags.get(0) is True
    assert flags.get(1) is False
    assert flags.get(2) is True
    assert flags.value() == 5


def test_set_and_clear():
    flags = BooleanSet()
    flags.set(7, True)
    assert flags.get(7) is True
    flags.set(7, False)
    assert flags.get(7) is False
    assert flags.value() == 0


def test_out_of_range_index_is_ignored():
    flags = BooleanSet(True)
    flags.set(8, True)
    assert flags.value() == 1
    assert flags.get(8) is False
    assert flags.get(100) is False


def test_too_many_arguments():
    with pytest.raises(TypeError):
        BooleanSet(*([True] * 9))


def test_all_eight_set():
    flags = BooleanSet(*([True] * 8))
    assert flags.value() == 0xFF
    assert all(flags.get(i) for i in range(8))


def test_str_format():
    assert str(BooleanSet(True, False, True)) == "booleanset(1,0,1,0,0,0,0,0)"


def test_size_and_type_id():
    flags = BooleanSet(True)
    assert flags.size() == 1
    assert flags.type_id() == "t"


def test_fill_writes_single_byte():
    buffer = BytesOutBuffer()
    flags = BooleanSet(False, True, False, True)
    flags.fill(buffer)
    assert buffer.getvalue() == bytes([flags.value()])


def test_round_trip_through_frame():
    original = BooleanSet(True, True, False, False, True)
    encoded = BytesOutBuffer()
    original.fill(encoded)
    decoded = BooleanSet.from_frame(_frame_with_payload(encoded.getvalue()))
    assert decoded == original
    assert [decoded.get(i) for i in range(8)] == [original.get(i) for i in range(8)]
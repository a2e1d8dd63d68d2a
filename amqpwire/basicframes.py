"""Frames of the basic and confirm classes."""

from __future__ import annotations

import struct
from collections.abc import Mapping

from .booleanset import BooleanSet
from .errors import ProtocolError
from .frames import BasicFrame, ConfirmFrame
from .outbuffer import BytesOutBuffer


def _encoded_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogateescape"))


def _encode_value(value, out) -> None:
    if isinstance(value, bool):
        out.add_bytes(b"t")
        out.add_uint8(1 if value else 0)
    elif isinstance(value, int):
        if -(2**31) <= value < 2**31:
            out.add_bytes(b"I")
            out.add_int32(value)
        else:
            out.add_bytes(b"l")
            out.add_int64(value)
    elif isinstance(value, float):
        out.add_bytes(b"d")
        out.add_double(value)
    elif isinstance(value, str):
        out.add_bytes(b"S")
        out.add_long_string(value)
    elif isinstance(value, (bytes, bytearray)):
        out.add_bytes(b"x")
        out.add_uint32(len(value))
        out.append(bytes(value))
    elif value is None:
        out.add_bytes(b"V")
    elif isinstance(value, Mapping):
        out.add_bytes(b"F")
        _encode_table(value, out)
    elif isinstance(value, (list, tuple)):
        body = BytesOutBuffer()
        for item in value:
            _encode_value(item, body)
        out.add_bytes(b"A")
        out.add_uint32(len(body))
        out.append(body.getvalue())
    else:
        raise TypeError(f"cannot encode {type(value).__name__} in a field table")


def _encode_table_body(table: Mapping) -> bytes:
    body = BytesOutBuffer()
    for key, value in table.items():
        body.add_short_string(key)
        _encode_value(value, body)
    return body.getvalue()


def _encode_table(table: Mapping, out) -> None:
    body = _encode_table_body(table)
    out.add_uint32(len(body))
    out.append(body)


_SIMPLE_TYPES = {
    "b": ">b",
    "B": ">B",
    "s": ">h",
    "U": ">h",
    "u": ">H",
    "I": ">i",
    "i": ">I",
    "L": ">q",
    "l": ">q",
    "T": ">Q",
    "f": "=f",
    "d": "=d",
}


class _TableReader:
    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def exhausted(self) -> bool:
        return self._pos >= len(self._data)

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ProtocolError("field table out of range")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: str):
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def short_string(self) -> str:
        return self.take(self.unpack(">B")).decode("utf-8", "surrogateescape")

    def value(self):
        code = chr(self.unpack(">B"))
        if code == "t":
            return bool(self.unpack(">B"))
        if code in _SIMPLE_TYPES:
            return self.unpack(_SIMPLE_TYPES[code])
        if code == "S":
            return self.take(self.unpack(">I")).decode("utf-8", "surrogateescape")
        if code == "x":
            return self.take(self.unpack(">I"))
        if code == "V":
            return None
        if code == "F":
            return _decode_table(self.take(self.unpack(">I")))
        if code == "A":
            items = _TableReader(self.take(self.unpack(">I")))
            result = []
            while not items.exhausted():
                result.append(items.value())
            return result
        raise ProtocolError(f"unknown field type {code!r}")


def _decode_table(data: bytes) -> dict:
    reader = _TableReader(data)
    table = {}
    while not reader.exhausted():
        key = reader.short_string()
        table[key] = reader.value()
    return table


class BasicCancelFrame(BasicFrame):
    """Cancels a consumer."""

    def __init__(self, channel: int, consumer_tag: str, no_wait: bool = False):
        super().__init__(channel, _encoded_len(consumer_tag) + 2)
        self._consumer_tag = consumer_tag
        self._no_wait = BooleanSet(no_wait)

    @classmethod
    def from_frame(cls, frame) -> BasicCancelFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._consumer_tag = frame.next_short_string()
        self._no_wait = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 30

    def synchronous(self) -> bool:
        return not self.no_wait

    @property
    def consumer_tag(self) -> str:
        return self._consumer_tag

    @property
    def no_wait(self) -> bool:
        return self._no_wait.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_short_string(self._consumer_tag)
        self._no_wait.fill(buffer)


class BasicConsumeFrame(BasicFrame):
    """Starts consuming from a queue."""

    def __init__(
        self,
        channel: int,
        queue_name: str,
        consumer_tag: str,
        no_local: bool = False,
        no_ack: bool = False,
        exclusive: bool = False,
        no_wait: bool = False,
        filter: Mapping | None = None,
    ):
        table = dict(filter or {})
        encoded = _encode_table_body(table)
        super().__init__(
            channel,
            _encoded_len(queue_name) + _encoded_len(consumer_tag) + 5 + 4 + len(encoded),
        )
        self._deprecated = 0
        self._queue_name = queue_name
        self._consumer_tag = consumer_tag
        self._bools = BooleanSet(no_local, no_ack, exclusive, no_wait)
        self._filter = table
        self._filter_bytes = encoded

    @classmethod
    def from_frame(cls, frame) -> BasicConsumeFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._deprecated = frame.next_uint16()
        self._queue_name = frame.next_short_string()
        self._consumer_tag = frame.next_short_string()
        self._bools = BooleanSet.from_frame(frame)
        self._filter_bytes = frame.next_data(frame.next_uint32())
        self._filter = _decode_table(self._filter_bytes)
        return self

    def method_id(self) -> int:
        return 20

    def synchronous(self) -> bool:
        return not self.no_wait

    @property
    def queue_name(self) -> str:
        return self._queue_name

    @property
    def consumer_tag(self) -> str:
        return self._consumer_tag

    @property
    def no_local(self) -> bool:
        return self._bools.get(0)

    @property
    def no_ack(self) -> bool:
        return self._bools.get(1)

    @property
    def exclusive(self) -> bool:
        return self._bools.get(2)

    @property
    def no_wait(self) -> bool:
        return self._bools.get(3)

    @property
    def filter(self) -> dict:
        return dict(self._filter)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_uint16(self._deprecated)
        buffer.add_short_string(self._queue_name)
        buffer.add_short_string(self._consumer_tag)
        self._bools.fill(buffer)
        buffer.add_uint32(len(self._filter_bytes))
        buffer.append(self._filter_bytes)


class BasicQosFrame(BasicFrame):
    """Sets the prefetch window of a channel."""

    def __init__(self, channel: int, prefetch_count: int = 0, global_: bool = False):
        super().__init__(channel, 7)
        self._prefetch_size = 0
        self._prefetch_count = prefetch_count
        self._global = BooleanSet(global_)

    @classmethod
    def from_frame(cls, frame) -> BasicQosFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._prefetch_size = frame.next_int32()
        self._prefetch_count = frame.next_int16()
        self._global = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 10

    @property
    def prefetch_size(self) -> int:
        return self._prefetch_size

    @property
    def prefetch_count(self) -> int:
        return self._prefetch_count

    @property
    def global_(self) -> bool:
        return self._global.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_int32(self._prefetch_size)
        buffer.add_int16(self._prefetch_count)
        self._global.fill(buffer)


class BasicRejectFrame(BasicFrame):
    """Rejects a single delivered message."""

    def __init__(self, channel: int, delivery_tag: int, requeue: bool = True):
        super().__init__(channel, 9)
        self._delivery_tag = delivery_tag
        self._requeue = BooleanSet(requeue)

    @classmethod
    def from_frame(cls, frame) -> BasicRejectFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._delivery_tag = frame.next_int64()
        self._requeue = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 90

    def synchronous(self) -> bool:
        return False

    @property
    def delivery_tag(self) -> int:
        return self._delivery_tag

    @property
    def requeue(self) -> bool:
        return self._requeue.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        buffer.add_int64(self._delivery_tag)
        self._requeue.fill(buffer)


class ConfirmSelectFrame(ConfirmFrame):
    """Puts a channel in publisher-confirm mode."""

    def __init__(self, channel: int, no_wait: bool = False):
        super().__init__(channel, 1)
        self._no_wait = BooleanSet(no_wait)

    @classmethod
    def from_frame(cls, frame) -> ConfirmSelectFrame:
        """Decode the fields following the class and method id."""
        self = cls._from_received(frame)
        self._no_wait = BooleanSet.from_frame(frame)
        return self

    def method_id(self) -> int:
        return 10

    @property
    def no_wait(self) -> bool:
        return self._no_wait.get(0)

    def fill(self, buffer) -> None:
        super().fill(buffer)
        self._no_wait.fill(buffer)
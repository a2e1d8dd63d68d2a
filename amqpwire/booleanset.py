"""Eight booleans packed into a single byte, as AMQP encodes them."""

from __future__ import annotations

_SLOTS = 8


class BooleanSet:
    """A set of up to eight flags stored in one octet.

    Index 0 is the least significant bit.
    """

    __slots__ = ("_byte",)

    def __init__(self, *args):
        if len(args) > _SLOTS:
            raise TypeError(f"BooleanSet takes at most {_SLOTS} flags, got {len(args)}")
        self._byte = 0
        for index, flag in enumerate(args):
            self.set(index, flag)

    @classmethod
    def from_frame(cls, frame) -> BooleanSet:
        """Read the packed byte from a received frame."""
        result = cls()
        result._byte = frame.next_uint8()
        return result

    def get(self, index: int) -> bool:
        """Return the flag at ``index``; indexes above 7 are always False."""
        if not 0 <= index < _SLOTS:
            return False
        return bool(self._byte & (1 << index))

    def set(self, index: int, value) -> None:
        """Set or clear the flag at ``index``; indexes above 7 are ignored."""
        if not 0 <= index < _SLOTS:
            return
        if value:
            self._byte |= 1 << index
        else:
            self._byte &= ~(1 << index) & 0xFF

    def fill(self, buffer) -> None:
        """Write the packed byte to an output buffer."""
        buffer.add_uint8(self._byte)

    def value(self) -> int:
        """The packed byte."""
        return self._byte

    def size(self) -> int:
        """Encoded size in bytes."""
        return 1

    def type_id(self) -> str:
        """Field type identifier used in AMQP tables."""
        return "t"

    def __iter__(self):
        return (self.get(index) for index in range(_SLOTS))

    def __eq__(self, other):
        if not isinstance(other, BooleanSet):
            return NotImplemented
        return self._byte == other._byte

    def __hash__(self):
        return hash(self._byte)

    def __str__(self) -> str:
        return "booleanset(" + ",".join("1" if flag else "0" for flag in self) + ")"

    def __repr__(self) -> str:
        return f"BooleanSet(value={self._byte:#04x})"
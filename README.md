# amqpwire

Building blocks for speaking AMQP 0-9-1 on the wire. The package encodes and
decodes a set of method frames, packs boolean fields, and provides the buffers
that sit between frames and a socket. It uses only the standard library.

## Installation

```
pip install amqpwire
```

To run the tests:

```
pip install "amqpwire[test]"
pytest
```

## What is inside

- `amqpwire.outbuffer`: `OutBuffer` is an abstract writer. Subclasses give it
  `append(data)`, and it provides `add_uint8` through `add_int64`, which write
  big-endian integers, as well as `add_float`, `add_double`, `add_bytes`,
  `add_short_string` (one-byte length prefix, at most 255 bytes) and
  `add_long_string` (four-byte length prefix). Floats and doubles are written
  in the host's native byte order. A value that does not fit its type raises
  `ValueError`. `BytesOutBuffer` collects the output in memory. Read it back
  with `getvalue()`.
- `amqpwire.receivedframe`: `ReceivedFrame(data, max_frame)` wraps received
  bytes and parses the 7-byte header. `header()` and `complete()` tell whether
  the header or the whole frame is present. `channel()`, `frame_type()`,
  `payload_size()` and `total_size()` describe the frame. The `next_*` methods
  read typed values from the payload one after another. A frame larger than
  `max_frame` (when it is positive) raises `ProtocolError`. So does a read past
  the end of the payload.
- `amqpwire.booleanset`: `BooleanSet(*flags)` packs up to eight flags into one
  octet, with index 0 as the lowest bit. `get` and `set` ignore indexes outside
  0–7. `str()` gives `booleanset(1,0,...)`.
- `amqpwire.frames`: the abstract `Frame` and `MethodFrame` classes.
  `to_bytes()` returns the full encoded frame, which ends with the frame-end
  octet `0xCE`. There is one base class for each AMQP method class:
  `ConnectionFrame` (10, always channel 0), `ChannelFrame` (20),
  `ExchangeFrame` (40), `QueueFrame` (50), `BasicFrame` (60), `ConfirmFrame`
  (85) and `TransactionFrame` (90). `Frame.process` raises `ProtocolError`
  unless a subclass overrides it.
- Concrete method frames. Each has a constructor for building it and a
  `from_frame(received)` class method that decodes it from a `ReceivedFrame`
  positioned after the class and method id:
  - `amqpwire.basicframes`: `BasicCancelFrame`, `BasicConsumeFrame` (its
    `filter` argument is encoded as an AMQP field table), `BasicQosFrame`,
    `BasicRejectFrame`, `ConfirmSelectFrame`
  - `amqpwire.connectionframes`: `ConnectionSecureFrame`,
    `ConnectionSecureOKFrame`, `ConnectionTuneOKFrame`
  - `amqpwire.channelframes`: `ChannelFlowOKFrame`, `ChannelCloseOKFrame`,
    `TransactionCommitOKFrame`
  - `amqpwire.entityframes`: `ExchangeDeleteFrame`, `ExchangeBindOKFrame`,
    `QueuePurgeFrame`, `QueueBindOKFrame`, `QueueDeleteOKFrame`
- `amqpwire.passthrough`: `PassthroughBuffer(connection, handler, frame)`
  encodes a frame into a 4096-byte buffer. It calls
  `handler.on_data(connection, data)` when the buffer fills up and again on
  `close()`. It can also be used as a context manager.
- `amqpwire.tcpoutbuffer`: `TcpOutBuffer` is a queue of pending output.
  `send_to(sock)` writes it with `sendmsg`, up to 64 chunks at a time.
  `send_to_ssl(ssl_sock)` writes one chunk with `send`. Both shrink the buffer
  by what was sent.
- `amqpwire.pipe`: `Pipe` is an OS pipe whose `notify()` writes one byte to
  wake a thread waiting on `read_fd`. It can be used as a context manager.
- `amqpwire.entity`: `Entity` is an abstract base for queue and exchange
  objects. It holds a name, the `durable`, `passive` and `auto_delete` flags
  and string arguments.
- `amqpwire.errors`: `AMQPError` and its subclass `ProtocolError`.

## Example

Encode a frame and decode it again:

```python
from amqpwire.basicframes import BasicQosFrame
from amqpwire.receivedframe import ReceivedFrame

frame = BasicQosFrame(1, prefetch_count=10, global_=False)
data = frame.to_bytes()

received = ReceivedFrame(data, 131072)
assert received.complete()
received.next_uint16()   # class id (60, basic)
received.next_uint16()   # method id (10, qos)
decoded = BasicQosFrame.from_frame(received)
assert decoded.prefetch_count == 10
```

## What this package does not do

This is not a complete AMQP client. It does not open connections, negotiate
the protocol header, manage channels, run an event loop or send heartbeats. It
covers only the frames listed above. There is no dispatcher that picks a frame
class from a received class and method id. That is the caller's job.

The `process(connection)` methods of the acknowledgement frames expect a
connection object supplied by the caller. Its `channel(id)` method should
return an object with `report_success(...)` and, for `ChannelCloseOKFrame`,
`report_closed()`. `Entity` leaves `bind`, `unbind`, `declare` and `remove`
for subclasses to implement.
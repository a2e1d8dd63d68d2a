"""Exceptions raised by the wire-format layer."""


class AMQPError(Exception):
    """Base class for every error raised by this package."""


class ProtocolError(AMQPError):
    """Invalid or unexpected data was received from the peer.

    The usual remedy is to close the connection.
    """
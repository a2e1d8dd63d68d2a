"""AMQP 0-9-1 wire-format frames, field encoding and transport buffers."""

__version__ = "4.1.4"
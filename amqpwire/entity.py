"""Common base for exchanges and queues."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Entity(ABC):
    """A named queue or exchange on a channel, with its declare settings.

    ``durable`` entities survive a broker restart, ``passive`` declarations
    only check that the entity exists, and ``auto_delete`` entities are
    removed once they are no longer used. Changes take effect on declare.
    """

    def __init__(self, channel, name: str = ""):
        self.channel = channel
        self.name = name
        self.durable = False
        self.passive = False
        self.auto_delete = False
        self.arguments: dict[str, str] = {}

    def set_argument(self, name: str, value: str) -> None:
        """Set a custom argument."""
        self.arguments[name] = value

    def argument(self, name: str) -> str:
        """Return an argument, creating it as an empty string if absent."""
        return self.arguments.setdefault(name, "")

    @abstractmethod
    def bind(self, exchange: str, key: str) -> bool:
        """Bind to an exchange with a routing key."""

    @abstractmethod
    def unbind(self, exchange: str, key: str) -> bool:
        """Unbind from an exchange."""

    @abstractmethod
    def declare(self) -> bool:
        """Declare the entity."""

    @abstractmethod
    def remove(self) -> bool:
        """Remove the entity."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Queued message model: destinations, header fields, and payload kinds.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# ---------------------------------------------------------------------------
# Flattened key prefixes
# ---------------------------------------------------------------------------

HEADER_PREFIX = "JMS_HEADER_FIELD:"
CUSTOM_PREFIX = "JMS_CUSTOM_FIELD:"
BODY_PREFIX = "JMS_BODY_FIELD:"

DEFAULT_PRIORITY = 4


class MessagingError(RuntimeError):
    """Raised when a message field cannot be read or written."""


class MessageFormatError(MessagingError):
    """Raised for invalid property or map field names."""


class DeliveryMode(IntEnum):
    """Message delivery guarantee."""

    NON_PERSISTENT = 1
    PERSISTENT = 2


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Destination:
    """
    Broker destination addressed by its physical name.

    ``str()`` gives the internal URI-style form; ``physical_name`` is the
    human-readable name shown to operators.
    """

    physical_name: str

    @property
    def scheme(self) -> str:
        return "destination"

    def __str__(self) -> str:
        return f"{self.scheme}://{self.physical_name}"


@dataclass(frozen=True, slots=True)
class Queue(Destination):
    """Point-to-point destination."""

    @property
    def scheme(self) -> str:
        return "queue"


@dataclass(frozen=True, slots=True)
class Topic(Destination):
    """Publish/subscribe destination."""

    @property
    def scheme(self) -> str:
        return "topic"


def _check_name(kind: str, name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise MessageFormatError(f"{kind} name must be a non-empty string, got {name!r}")


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Message:
    """
    A queued message with standard header fields and custom properties.

    Attributes:
        message_id: Broker-assigned identifier.
        correlation_id: Optional ID linking request and reply messages.
        delivery_mode: Persistence guarantee requested by the producer.
        destination: Destination the message was sent to.
        reply_to: Destination replies should be sent to.
        expiration: Expiry time in epoch milliseconds, ``0`` for never.
        priority: Priority level, ``0`` (lowest) to ``9``.
        redelivered: Whether the broker delivered this message before.
        timestamp: Send time in epoch milliseconds.
        message_type: Optional application-defined type name.
        properties: Application-defined custom properties, in insertion order.
    """

    message_id: str | None = field(default_factory=lambda: f"ID:{uuid.uuid4().hex}")
    correlation_id: str | None = None
    delivery_mode: DeliveryMode = DeliveryMode.PERSISTENT
    destination: Destination | None = None
    reply_to: Destination | None = None
    expiration: int = 0
    priority: int = DEFAULT_PRIORITY
    redelivered: bool = False
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))
    message_type: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in self.properties:
            _check_name("Property", name)

    def get_property(self, name: str) -> Any:
        """Return one custom property value, or ``None`` when absent."""
        return self.properties.get(name)

    def property_names(self) -> list[str]:
        """Return custom property names in enumeration order."""
        return list(self.properties)

    def set_property(self, name: str, value: Any) -> None:
        _check_name("Property", name)
        self.properties[name] = value


@dataclass(slots=True)
class TextMessage(Message):
    """Message carrying a text payload."""

    text: str | None = None


@dataclass(slots=True)
class BytesMessage(Message):
    """
    Message carrying a raw binary payload.

    ``body`` may be any sized buffer supporting slicing; only its length is
    needed to lay out chunks.
    """

    body: Any = b""

    @property
    def body_length(self) -> int:
        return len(self.body)


@dataclass(slots=True)
class ObjectMessage(Message):
    """Message carrying an arbitrary application object."""

    payload: Any = None


@dataclass(slots=True)
class MapMessage(Message):
    """Message carrying named fields."""

    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        Message.__post_init__(self)
        for name in self.fields:
            _check_name("Map field", name)

    def map_names(self) -> list[str]:
        """Return map field names in enumeration order."""
        return list(self.fields)

    def get_object(self, name: str) -> Any:
        return self.fields.get(name)

    def set_object(self, name: str, value: Any) -> None:
        _check_name("Map field", name)
        self.fields[name] = value


@dataclass(slots=True)
class StreamMessage(Message):
    """Message carrying an ordered stream of primitive values."""

    elements: list[Any] = field(default_factory=list)

    def write(self, value: Any) -> None:
        self.elements.append(value)

    def __str__(self) -> str:
        return (
            f"StreamMessage(message_id={self.message_id!r}, "
            f"destination={self.destination}, elements={self.elements!r})"
        )

"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Queued message model package.

Quick start::

    from brokerconsole.messaging import Queue, TextMessage

    msg = TextMessage(destination=Queue("orders"), text="hello")
    msg.set_property("tenant", "acme")
"""

from .types import (
    BODY_PREFIX,
    CUSTOM_PREFIX,
    DEFAULT_PRIORITY,
    HEADER_PREFIX,
    BytesMessage,
    DeliveryMode,
    Destination,
    MapMessage,
    Message,
    MessageFormatError,
    MessagingError,
    ObjectMessage,
    Queue,
    StreamMessage,
    TextMessage,
    Topic,
)

__all__ = [
    "BODY_PREFIX",
    "CUSTOM_PREFIX",
    "HEADER_PREFIX",
    "DEFAULT_PRIORITY",
    "DeliveryMode",
    "Destination",
    "Queue",
    "Topic",
    "Message",
    "TextMessage",
    "BytesMessage",
    "ObjectMessage",
    "MapMessage",
    "StreamMessage",
    "MessagingError",
    "MessageFormatError",
]

"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Map transform filter: flattens management beans and queued messages into
ordered string-to-string property maps.

Handlers are resolved from an exact-type table built once per filter. A
subclass of a supported type is not matched; it is reported as
unsupported, the same as any other unknown shape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..console.writer import OutputWriter, get_writer
from ..errors import TransformError
from ..management.types import (
    OBJECT_NAME_ATTRIBUTE,
    AttributeList,
    ObjectInstance,
    ObjectName,
)
from ..messaging.types import (
    BytesMessage,
    DeliveryMode,
    MapMessage,
    Message,
    ObjectMessage,
    StreamMessage,
    TextMessage,
)
from ..settings import FilterSettings
from .base import QueryFilter, ResultTransformFilter
from .bytes_rendering import get_chunk_renderer, iter_chunk_spans
from .metrics import (
    FAILED_TOTAL,
    TRANSFORMED_TOTAL,
    UNSUPPORTED_TOTAL,
    NoOpTransformMetrics,
    TransformMetrics,
)

logger = logging.getLogger("brokerconsole.filters.map_transform")

PropertyMap = dict[str, str]
MapHandler = Callable[[Any], PropertyMap]


def qualified_type_name(cls: type) -> str:
    """Return ``module.QualName`` for a type."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class MapTransformFilter(ResultTransformFilter):
    """
    Transform beans and messages into flat property maps.

    Supported shapes: ``ObjectInstance``, ``ObjectName``, ``AttributeList``,
    ``Message`` and its five payload kinds. Anything else is reported to the
    diagnostic writer and transformed to ``None``.
    """

    def __init__(
        self,
        next_filter: QueryFilter | None = None,
        *,
        settings: FilterSettings | None = None,
        writer: OutputWriter | None = None,
        metrics: TransformMetrics | None = None,
    ) -> None:
        super().__init__(next_filter)
        self._settings = settings or FilterSettings()
        self._writer = writer
        self._metrics = metrics or NoOpTransformMetrics()
        self._render_chunk = get_chunk_renderer(self._settings.bytes_rendering)
        self._handlers: dict[type, MapHandler] = {
            ObjectInstance: self.transform_object_instance,
            ObjectName: self.transform_object_name,
            AttributeList: self.transform_attribute_list,
            Message: self.transform_message,
            TextMessage: self.transform_text_message,
            BytesMessage: self.transform_bytes_message,
            ObjectMessage: self.transform_object_message,
            MapMessage: self.transform_map_message,
            StreamMessage: self.transform_stream_message,
        }

    @property
    def settings(self) -> FilterSettings:
        return self._settings

    def supported_types(self) -> list[type]:
        """List the exact types this filter can transform."""
        return list(self._handlers)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def transform_element(self, obj: Any) -> PropertyMap | None:
        """
        Transform one object to a property map.

        Returns:
            The property map, or ``None`` when no handler exists for the
            object's exact type.

        Raises:
            TransformError: If a field cannot be read from the object.
        """
        obj_type = type(obj)
        handler = self._handlers.get(obj_type)
        if handler is None:
            self._report_unsupported(obj_type)
            return None

        kind = obj_type.__name__
        try:
            props = handler(obj)
        except TransformError:
            self._metrics.incr(FAILED_TOTAL, tags={"kind": kind})
            raise
        except Exception as exc:
            self._metrics.incr(FAILED_TOTAL, tags={"kind": kind})
            raise TransformError(f"Failed to transform {kind}: {exc}") from exc

        self._metrics.incr(TRANSFORMED_TOTAL, tags={"kind": kind})
        logger.debug("Transformed %s into %d properties", kind, len(props))
        return props

    def _report_unsupported(self, obj_type: type) -> None:
        type_name = qualified_type_name(obj_type)
        logger.warning("No map transform registered for type %s", type_name)
        self._metrics.incr(UNSUPPORTED_TOTAL, tags={"type": type_name})
        writer = self._writer or get_writer()
        writer.print_line(
            f"Unable to transform mbean of type: {type_name}. "
            "No corresponding transformToMap method found."
        )

    # ------------------------------------------------------------------
    # Management beans
    # ------------------------------------------------------------------

    def transform_object_instance(self, obj: ObjectInstance) -> PropertyMap:
        return self.transform_object_name(obj.object_name)

    def transform_object_name(self, name: ObjectName) -> PropertyMap:
        props: PropertyMap = {}
        for key, val in name.key_property_list.items():
            if val is not None:
                props[str(key)] = _stringify(val)
        return props

    def transform_attribute_list(self, attributes: AttributeList) -> PropertyMap:
        """
        Flatten an attribute list in order.

        The embedded bean identity attribute is expanded and merged, so its
        components overwrite any earlier key of the same name.
        """
        props: PropertyMap = {}
        for attrib in attributes:
            if attrib.name == OBJECT_NAME_ATTRIBUTE:
                if not isinstance(attrib.value, ObjectName):
                    raise TransformError(
                        f"Attribute {OBJECT_NAME_ATTRIBUTE!r} must hold an ObjectName, "
                        f"got {type(attrib.value).__name__}"
                    )
                props.update(self.transform_object_name(attrib.value))
            elif attrib.value is not None:
                props[attrib.name] = _stringify(attrib.value)
        return props

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def transform_message(self, msg: Message) -> PropertyMap:
        """Flatten standard header fields and custom properties."""
        header = self._settings.header_prefix
        props: PropertyMap = {}

        if msg.correlation_id is not None:
            props[header + "JMSCorrelationID"] = str(msg.correlation_id)
        props[header + "JMSDeliveryMode"] = (
            "persistent"
            if msg.delivery_mode == DeliveryMode.PERSISTENT
            else "non-persistent"
        )
        if msg.destination is not None:
            props[header + "JMSDestination"] = msg.destination.physical_name
        props[header + "JMSExpiration"] = str(msg.expiration)
        if msg.message_id is not None:
            props[header + "JMSMessageID"] = str(msg.message_id)
        props[header + "JMSPriority"] = str(msg.priority)
        props[header + "JMSRedelivered"] = _stringify(msg.redelivered)
        if msg.reply_to is not None:
            props[header + "JMSReplyTo"] = msg.reply_to.physical_name
        props[header + "JMSTimestamp"] = str(msg.timestamp)
        if msg.message_type is not None:
            props[header + "JMSType"] = str(msg.message_type)

        custom = self._settings.custom_prefix
        for name in msg.property_names():
            value = msg.get_property(name)
            if value is not None:
                props[custom + name] = _stringify(value)

        return props

    def transform_text_message(self, msg: TextMessage) -> PropertyMap:
        props = self.transform_message(msg)
        if msg.text is not None:
            props[self._settings.body_prefix + "JMSText"] = msg.text
        return props

    def transform_bytes_message(self, msg: BytesMessage) -> PropertyMap:
        """
        Flatten a bytes message, splitting the body into indexed chunks.

        A body of ``L`` bytes yields ``L // chunk_size + 1`` entries keyed
        ``JMSBytes:1`` onwards; the last one holds the remainder and is
        always present.
        """
        props = self.transform_message(msg)
        body = self._settings.body_prefix
        length = msg.body_length
        chunk_size = self._settings.bytes_chunk_size

        for index, start, size in iter_chunk_spans(length, chunk_size):
            props[f"{body}JMSBytes:{index}"] = self._render_chunk(msg.body, start, size)

        logger.debug(
            "Split %d body bytes into %d chunk(s)", length, length // chunk_size + 1
        )
        return props

    def transform_object_message(self, msg: ObjectMessage) -> PropertyMap:
        props = self.transform_message(msg)
        obj = msg.payload
        if obj is not None:
            # Only the class name and string form of the payload are exposed.
            body = self._settings.body_prefix
            props[body + "JMSObjectClass"] = qualified_type_name(type(obj))
            props[body + "JMSObjectString"] = str(obj)
        return props

    def transform_map_message(self, msg: MapMessage) -> PropertyMap:
        props = self.transform_message(msg)
        body = self._settings.body_prefix
        for name in msg.map_names():
            value = msg.get_object(name)
            if value is not None:
                props[body + name] = _stringify(value)
        return props

    def transform_stream_message(self, msg: StreamMessage) -> PropertyMap:
        props = self.transform_message(msg)
        props[self._settings.body_prefix + "JMSStreamMessage"] = str(msg)
        return props

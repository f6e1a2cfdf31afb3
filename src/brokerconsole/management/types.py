"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Management-bean identity and attribute types.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import MalformedObjectNameError

# Attribute name under which an attribute query embeds the bean identity.
OBJECT_NAME_ATTRIBUTE = "Attribute:ObjectName:"


@dataclass(frozen=True, slots=True)
class ObjectName:
    """
    Structured name identifying one manageable component.

    Attributes:
        domain: Naming domain, the part before ``:``.
        key_properties: Ordered component key/value pairs. Values may be
            ``None``; such components are kept but never rendered.
    """

    domain: str
    key_properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.domain:
            raise MalformedObjectNameError("ObjectName domain must be non-empty")
        props = dict(self.key_properties)
        for key in props:
            if not isinstance(key, str) or not key:
                raise MalformedObjectNameError(
                    f"ObjectName key must be a non-empty string, got {key!r}"
                )
        object.__setattr__(self, "key_properties", props)

    def __hash__(self) -> int:
        # Equal names hash equal regardless of component order.
        return hash((self.domain, frozenset(self.key_properties.items())))

    @classmethod
    def parse(cls, value: str) -> "ObjectName":
        """
        Parse the canonical ``domain:key=value,key=value`` form.

        Component order follows the string. Only the unquoted subset is
        accepted: quoted values (``name="a,b"``) are split on their commas
        and the empty default domain (``:type=Foo``) is rejected.

        Raises:
            MalformedObjectNameError: If the string is not a valid name.
        """
        domain, sep, rest = value.partition(":")
        if not sep:
            raise MalformedObjectNameError(f"Missing ':' in ObjectName {value!r}")
        if not rest:
            raise MalformedObjectNameError(
                f"ObjectName {value!r} has no key properties"
            )

        props: dict[str, str] = {}
        for component in rest.split(","):
            key, eq, val = component.partition("=")
            if not eq:
                raise MalformedObjectNameError(
                    f"Component {component!r} of {value!r} is missing '='"
                )
            if not key:
                raise MalformedObjectNameError(
                    f"Component {component!r} of {value!r} has an empty key"
                )
            if key in props:
                raise MalformedObjectNameError(
                    f"Duplicate key {key!r} in ObjectName {value!r}"
                )
            props[key] = val
        return cls(domain=domain, key_properties=props)

    @property
    def key_property_list(self) -> dict[str, Any]:
        """Copy of the ordered component mapping."""
        return dict(self.key_properties)

    def get_key_property(self, key: str) -> Any:
        return self.key_properties.get(key)

    def __str__(self) -> str:
        parts = [
            f"{key}={val}" for key, val in self.key_properties.items() if val is not None
        ]
        return f"{self.domain}:{','.join(parts)}"


@dataclass(frozen=True, slots=True)
class ObjectInstance:
    """Bean identity plus the class name reported by a bean query."""

    object_name: ObjectName
    class_name: str | None = None


@dataclass(frozen=True, slots=True)
class Attribute:
    """One named attribute value of a management bean."""

    name: str
    value: Any = None


class AttributeList:
    """Ordered sequence of ``Attribute`` values describing one bean."""

    __slots__ = ("_items",)

    def __init__(self, attributes: Iterable[Attribute] = ()) -> None:
        self._items: list[Attribute] = []
        self.extend(attributes)

    def append(self, attribute: Attribute) -> None:
        if not isinstance(attribute, Attribute):
            raise TypeError(
                f"AttributeList accepts Attribute values, got {type(attribute).__name__}"
            )
        self._items.append(attribute)

    def extend(self, attributes: Iterable[Attribute]) -> None:
        for attribute in attributes:
            self.append(attribute)

    def as_list(self) -> list[Attribute]:
        return list(self._items)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"AttributeList({self._items!r})"

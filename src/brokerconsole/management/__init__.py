"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Management-bean model package.

Provides the bean identity (``ObjectName``/``ObjectInstance``) and the
attribute containers returned by bean attribute queries.
"""

from .types import (
    OBJECT_NAME_ATTRIBUTE,
    Attribute,
    AttributeList,
    ObjectInstance,
    ObjectName,
)

__all__ = [
    "OBJECT_NAME_ATTRIBUTE",
    "Attribute",
    "AttributeList",
    "ObjectInstance",
    "ObjectName",
]

"""Participant attribute system."""

from scrimmage.core.attributes.base import AttributeCategory, AttributeDefinition
from scrimmage.core.attributes.registry import (
    ATTRIBUTES,
    DEFAULT_ATTRIBUTE_VALUE,
    AttributeSet,
)

__all__ = [
    "ATTRIBUTES",
    "DEFAULT_ATTRIBUTE_VALUE",
    "AttributeCategory",
    "AttributeDefinition",
    "AttributeSet",
]

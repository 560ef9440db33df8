"""
Delivery SDK model generator.

Generates TypeScript content item models for the Kontent Delivery SDK.
"""

from .generator import DeliveryModelGenerator, create_delivery_generator
from .types import (
    DeliveryTypeMapper,
    ElementType,
    UnsupportedElementKind,
    map_kind,
    supported_kinds,
)

__all__ = [
    "DeliveryModelGenerator",
    "create_delivery_generator",
    "DeliveryTypeMapper",
    "ElementType",
    "UnsupportedElementKind",
    "map_kind",
    "supported_kinds",
]

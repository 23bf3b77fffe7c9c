"""Runtime type introspection: fields, generic arguments and value shapes."""

from .fields import FieldDescriptor, Modifier, fields
from .generics import resolve_type_arguments
from .markers import Byte, Char, Float32, Instant, Long, Short
from .shapes import Shape, classify, is_platform_type

__all__ = [
    "Byte",
    "Char",
    "FieldDescriptor",
    "Float32",
    "Instant",
    "Long",
    "Modifier",
    "Shape",
    "Short",
    "classify",
    "fields",
    "is_platform_type",
    "resolve_type_arguments",
]

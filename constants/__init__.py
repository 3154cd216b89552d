"""
Constants Package

Static data shared across the plugin.
"""

from .fields import (
    FIELD_TABLE,
    FIELD_KEYS,
    FieldDescriptor,
    InputKind,
    SanitizerKind,
)

__all__ = [
    'FIELD_TABLE',
    'FIELD_KEYS',
    'FieldDescriptor',
    'InputKind',
    'SanitizerKind',
]

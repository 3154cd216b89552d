"""
Settings Field Table

The fixed set of fields shown on the plugin settings page, in display order.
Each field names its default value, how it is rendered and how a submitted
value is cleaned.
"""

import enum
from dataclasses import dataclass


class InputKind(enum.Enum):
    """HTML input type used to render a field."""
    TEXT = 'text'
    PASSWORD = 'password'
    CHECKBOX = 'checkbox'


class SanitizerKind(enum.Enum):
    """Cleaning rule applied to a submitted field value."""
    TEXT = 'text'
    PASSWORD = 'password'
    BOOLEAN = 'boolean'


@dataclass(frozen=True)
class FieldDescriptor:
    key: str
    default: object
    input_kind: InputKind
    css_class: str
    sanitizer: SanitizerKind
    label: str


FIELD_TABLE = (
    FieldDescriptor('username', '', InputKind.TEXT, 'regular-text code',
                    SanitizerKind.TEXT, 'Username'),
    FieldDescriptor('password', '', InputKind.PASSWORD, 'regular-text code',
                    SanitizerKind.PASSWORD, 'Password'),
    FieldDescriptor('showlang', True, InputKind.CHECKBOX, '',
                    SanitizerKind.BOOLEAN, 'Show language name (English)?'),
    FieldDescriptor('showcode', False, InputKind.CHECKBOX, '',
                    SanitizerKind.BOOLEAN, 'Show language code?'),
    FieldDescriptor('shownative', False, InputKind.CHECKBOX, '',
                    SanitizerKind.BOOLEAN, 'Show language name (native)?'),
)

FIELD_KEYS = tuple(field.key for field in FIELD_TABLE)

"""
Typed request records and their encoding into the Lob wire format.
"""

from .records import LobRecord, Int64
from .encoder import FieldKind, encode_form, field_kind, query_string, record_fields
from .exceptions import UnsupportedFieldTypeError

__all__ = [
    'LobRecord',
    'Int64',
    'FieldKind',
    'encode_form',
    'field_kind',
    'query_string',
    'record_fields',
    'UnsupportedFieldTypeError'
]

"""
Record-to-form encoding.

Turns a LobRecord into the flat ``{wire name: string}`` mapping the Lob API
accepts as a query string or url-encoded body. Each field is rendered by the
rule for its semantic type; empty values are left out.
"""
import math
import types
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type, Union, get_args, get_origin
from urllib.parse import urlencode

from .exceptions import UnsupportedFieldTypeError
from .records import Int64, LobRecord

_UNION_ORIGINS = (Union, getattr(types, 'UnionType', Union))
_NONE_TYPE = type(None)


class FieldKind(Enum):
    """Semantic field types understood by the encoder."""
    OPTIONAL_STRING = 'optional string'
    STRING = 'string'
    INTEGER = 'integer'
    OPTIONAL_BOOL = 'optional boolean'
    INT64 = '64-bit integer'
    FLOAT = 'float'
    STRING_LIST = 'list of strings'
    STRING_MAP = 'mapping of string to string'


def _split_optional(annotation) -> Tuple[Any, bool]:
    """Return (inner annotation, is_optional) for Optional[X] / X | None."""
    if get_origin(annotation) in _UNION_ORIGINS:
        args = get_args(annotation)
        if len(args) == 2 and _NONE_TYPE in args:
            inner = args[0] if args[1] is _NONE_TYPE else args[1]
            return inner, True
    return annotation, False


def field_kind(annotation) -> Optional[FieldKind]:
    """Map a field annotation to its FieldKind, or None if it is not supported."""
    inner, optional = _split_optional(annotation)

    if inner is Int64:
        return FieldKind.INT64
    if inner is str:
        return FieldKind.OPTIONAL_STRING if optional else FieldKind.STRING
    if inner is bool:
        # A bare bool has no absent state, so only Optional[bool] is accepted
        return FieldKind.OPTIONAL_BOOL if optional else None
    if inner is int:
        return FieldKind.INTEGER
    if inner is float:
        return FieldKind.FLOAT

    origin = get_origin(inner)
    if origin is list and get_args(inner) == (str,):
        return FieldKind.STRING_LIST
    if origin is dict and get_args(inner) == (str, str):
        return FieldKind.STRING_MAP
    return None


def _optional_string(name: str, value: str) -> Iterator[Tuple[str, str]]:
    yield name, value


def _string(name: str, value: str) -> Iterator[Tuple[str, str]]:
    if value != '':
        yield name, value


def _integer(name: str, value: int) -> Iterator[Tuple[str, str]]:
    if value != 0:
        yield name, str(value)


def _optional_bool(name: str, value: bool) -> Iterator[Tuple[str, str]]:
    yield name, 'true' if value else 'false'


def _float(name: str, value: float) -> Iterator[Tuple[str, str]]:
    # non-finite values are spelled +Inf, -Inf and NaN
    if math.isnan(value):
        yield name, 'NaN'
    elif math.isinf(value):
        yield name, '+Inf' if value > 0 else '-Inf'
    else:
        yield name, f"{value:.2f}"


def _string_list(name: str, value: List[str]) -> Iterator[Tuple[str, str]]:
    if len(value) > 0:
        yield name, ' '.join(value)


def _string_map(name: str, value: Dict[str, str]) -> Iterator[Tuple[str, str]]:
    for map_key, map_value in value.items():
        yield f"{name}[{map_key}]", map_value


_RENDERERS = {
    FieldKind.OPTIONAL_STRING: _optional_string,
    FieldKind.STRING: _string,
    FieldKind.INTEGER: _integer,
    FieldKind.OPTIONAL_BOOL: _optional_bool,
    FieldKind.INT64: _integer,
    FieldKind.FLOAT: _float,
    FieldKind.STRING_LIST: _string_list,
    FieldKind.STRING_MAP: _string_map,
}


@lru_cache(maxsize=None)
def record_fields(record_type: Type[LobRecord]) -> Tuple[Tuple[str, str, FieldKind], ...]:
    """
    Describe the encodable fields of a record type.

    Returns:
        (attribute name, wire name, FieldKind) for every field, in declaration order

    Raises:
        UnsupportedFieldTypeError: If any field has an annotation the encoder does not support
    """
    fields = []
    for attribute, info in record_type.model_fields.items():
        kind = field_kind(info.annotation)
        if kind is None:
            raise UnsupportedFieldTypeError(record_type, attribute, info.annotation)
        fields.append((attribute, info.alias or attribute, kind))
    return tuple(fields)


def encode_form(record: LobRecord) -> Dict[str, str]:
    """
    Encode a record as a wire form.

    Args:
        record: The typed request record

    Returns:
        Mapping of wire field name to string value, with empty fields omitted

    Raises:
        UnsupportedFieldTypeError: If the record declares a field type the encoder does not know
    """
    form: Dict[str, str] = {}
    for attribute, wire_name, kind in record_fields(type(record)):
        value = getattr(record, attribute)
        if value is None:
            continue
        for key, text in _RENDERERS[kind](wire_name, value):
            form[key] = text
    return form


def query_string(params: Optional[Mapping[str, str]]) -> str:
    """Render a wire form as a '?'-prefixed query string, or '' when there is nothing to send."""
    if not params:
        return ''
    return '?' + urlencode(params)

"""Tests for encoding typed records into wire forms."""

import unittest
from typing import Dict, List, Optional, Set

from pydantic import Field

from lob_client.forms import (
    FieldKind,
    Int64,
    LobRecord,
    UnsupportedFieldTypeError,
    encode_form,
    field_kind,
    query_string,
    record_fields,
)


class Recipient(LobRecord):
    name: str = Field('', alias='name')
    zip: str = Field('', alias='zip')
    count: int = Field(0, alias='count')
    amount: float = Field(0.0, alias='amount')


class CheckRequest(LobRecord):
    description: Optional[str] = Field(None, alias='description')
    memo: str = Field('', alias='memo')
    check_number: int = Field(0, alias='check_number')
    logo: Optional[bool] = Field(None, alias='logo')
    amount_cents: Int64 = Field(0, alias='amount_cents')
    amount: float = Field(0.0, alias='amount')
    tags: List[str] = Field(default_factory=list, alias='tags')
    metadata: Dict[str, str] = Field(default_factory=dict, alias='metadata')


class OptionalFields(LobRecord):
    count: Optional[int] = None
    amount: Optional[float] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None


class WithSet(LobRecord):
    name: str = 'x'
    tags: Set[str] = Field(default_factory=set)


class WithPlainBool(LobRecord):
    verified: bool = False


class TestEncodeForm(unittest.TestCase):
    """Emptiness and rendering rules per field type."""

    def test_scenario_skips_empty_string_and_zero_integer(self):
        record = Recipient(name='Jane Doe', zip='', count=0, amount=3.5)
        self.assertEqual(encode_form(record), {'name': 'Jane Doe', 'amount': '3.50'})

    def test_empty_record_only_emits_float(self):
        # float has no empty value, so it is always present
        self.assertEqual(encode_form(CheckRequest()), {'amount': '0.00'})

    def test_populated_record_renders_every_type(self):
        record = CheckRequest(
            description='Rent',
            memo='March',
            check_number=1042,
            logo=False,
            amount_cents=Int64(12345678901),
            amount=12.5,
            tags=['a', 'b', 'c'],
            metadata={'customer': 'c_1', 'batch': '7'},
        )
        self.assertEqual(encode_form(record), {
            'description': 'Rent',
            'memo': 'March',
            'check_number': '1042',
            'logo': 'false',
            'amount_cents': '12345678901',
            'amount': '12.50',
            'tags': 'a b c',
            'metadata[customer]': 'c_1',
            'metadata[batch]': '7',
        })

    def test_optional_string_present_but_empty_is_included(self):
        form = encode_form(CheckRequest(description=''))
        self.assertEqual(form['description'], '')

    def test_optional_bool_true(self):
        self.assertEqual(encode_form(CheckRequest(logo=True))['logo'], 'true')

    def test_negative_integers_are_included(self):
        form = encode_form(CheckRequest(check_number=-3, amount_cents=Int64(-1)))
        self.assertEqual(form['check_number'], '-3')
        self.assertEqual(form['amount_cents'], '-1')

    def test_float_rendering_uses_two_decimals(self):
        self.assertEqual(encode_form(CheckRequest(amount=1))['amount'], '1.00')
        self.assertEqual(encode_form(CheckRequest(amount=-0.5))['amount'], '-0.50')
        self.assertEqual(encode_form(CheckRequest(amount=1234567.891))['amount'], '1234567.89')

    def test_non_finite_floats(self):
        self.assertEqual(encode_form(CheckRequest(amount=float('inf')))['amount'], '+Inf')
        self.assertEqual(encode_form(CheckRequest(amount=float('-inf')))['amount'], '-Inf')
        self.assertEqual(encode_form(CheckRequest(amount=float('nan')))['amount'], 'NaN')

    def test_single_element_list(self):
        self.assertEqual(encode_form(CheckRequest(tags=['only']))['tags'], 'only')

    def test_empty_mapping_contributes_nothing(self):
        form = encode_form(CheckRequest(metadata={}))
        self.assertFalse(any(key.startswith('metadata') for key in form))

    def test_none_values_are_skipped(self):
        self.assertEqual(encode_form(OptionalFields()), {})

    def test_optional_wrappers_follow_inner_rules(self):
        record = OptionalFields(count=0, amount=2.0, tags=[], metadata={'k': 'v'})
        self.assertEqual(encode_form(record), {'amount': '2.00', 'metadata[k]': 'v'})

    def test_attribute_name_used_when_no_alias(self):
        self.assertEqual(encode_form(OptionalFields(count=5)), {'count': '5'})

    def test_encoding_does_not_modify_record(self):
        record = CheckRequest(metadata={'a': '1'})
        encode_form(record)
        self.assertEqual(record.metadata, {'a': '1'})


class TestUnsupportedFieldTypes(unittest.TestCase):
    """Unknown field types must fail loudly instead of being dropped."""

    def test_set_field_raises(self):
        with self.assertRaises(UnsupportedFieldTypeError) as ctx:
            encode_form(WithSet(tags={'a'}))
        self.assertEqual(ctx.exception.field_name, 'tags')
        self.assertIs(ctx.exception.record_type, WithSet)

    def test_plain_bool_raises(self):
        with self.assertRaises(UnsupportedFieldTypeError):
            encode_form(WithPlainBool(verified=True))

    def test_raises_even_when_value_is_empty(self):
        with self.assertRaises(UnsupportedFieldTypeError):
            encode_form(WithSet())

    def test_is_a_type_error(self):
        self.assertTrue(issubclass(UnsupportedFieldTypeError, TypeError))


class TestFieldKind(unittest.TestCase):

    def test_supported_annotations(self):
        self.assertEqual(field_kind(Optional[str]), FieldKind.OPTIONAL_STRING)
        self.assertEqual(field_kind(str), FieldKind.STRING)
        self.assertEqual(field_kind(int), FieldKind.INTEGER)
        self.assertEqual(field_kind(Optional[bool]), FieldKind.OPTIONAL_BOOL)
        self.assertEqual(field_kind(Int64), FieldKind.INT64)
        self.assertEqual(field_kind(Optional[Int64]), FieldKind.INT64)
        self.assertEqual(field_kind(float), FieldKind.FLOAT)
        self.assertEqual(field_kind(List[str]), FieldKind.STRING_LIST)
        self.assertEqual(field_kind(Dict[str, str]), FieldKind.STRING_MAP)

    def test_unsupported_annotations(self):
        self.assertIsNone(field_kind(bool))
        self.assertIsNone(field_kind(bytes))
        self.assertIsNone(field_kind(List[int]))
        self.assertIsNone(field_kind(Dict[str, int]))
        self.assertIsNone(field_kind(Optional[Set[str]]))

    def test_record_fields_lists_wire_names_in_order(self):
        names = [wire for _, wire, _ in record_fields(Recipient)]
        self.assertEqual(names, ['name', 'zip', 'count', 'amount'])


class TestQueryString(unittest.TestCase):

    def test_empty_or_missing_params_give_no_query(self):
        self.assertEqual(query_string(None), '')
        self.assertEqual(query_string({}), '')

    def test_params_are_escaped_and_joined(self):
        query = query_string({'name': 'Jane Doe', 'city': 'a&b'})
        self.assertTrue(query.startswith('?'))
        self.assertEqual(sorted(query[1:].split('&')), ['city=a%26b', 'name=Jane+Doe'])

    def test_bracketed_keys_are_escaped(self):
        self.assertEqual(query_string({'metadata[k]': 'v'}), '?metadata%5Bk%5D=v')

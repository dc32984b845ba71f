from structlog.testing import capture_logs

from unijson import codec
from unijson.codec import build_decoder, decode, decode_text, encode, encode_text
from unijson.conf import CodecSettings
from unijson.exception import DecodeError, InvalidDescriptorError
from unijson.universal import (
    BINARY,
    BOOL,
    FLOAT,
    INT,
    OPAQUE,
    STRING,
    UNIT,
    BinaryValue,
    BoolValue,
    DictType,
    DictValue,
    EnumType,
    EnumValue,
    FloatValue,
    IntValue,
    ListType,
    ListValue,
    ObjectType,
    ObjectValue,
    OpaqueValue,
    OptionalType,
    OptionalValue,
    StringValue,
    UnionType,
    UnionValue,
    UnitValue,
)
from unijson.universal.primitive_type import INT64_MAX
from unijson.utils.result import Err, Ok
from unijson_tests import unittest

PERSON = ObjectType([('name', STRING), ('age', INT)])


class EncodeTestCase(unittest.TestCase):
    def test_not_a_value(self) -> None:
        for obj in [None, 1, 'a', [StringValue('a')], {'a': IntValue(1)}, STRING]:
            self.assertIsNone(encode(obj))

    def test_malformed_payloads(self) -> None:
        self.assertIsNone(encode(StringValue(1)))  # type: ignore[arg-type]
        self.assertIsNone(encode(BoolValue(1)))  # type: ignore[arg-type]
        self.assertIsNone(encode(IntValue(True)))  # type: ignore[arg-type]
        self.assertIsNone(encode(IntValue(INT64_MAX + 1)))
        self.assertIsNone(encode(FloatValue('1.0')))  # type: ignore[arg-type]
        self.assertIsNone(encode(FloatValue(10**400)))
        self.assertIsNone(encode(BinaryValue('AQID')))  # type: ignore[arg-type]

    def test_malformed_child_only_nulls_the_child(self) -> None:
        value = ObjectValue.of(name=StringValue(None), age=IntValue(21))  # type: ignore[arg-type]
        self.assertEqual(encode(value), {'name': None, 'age': 21})
        self.assertEqual(encode(ListValue((IntValue(1), 'two'))), [1, None])  # type: ignore[arg-type]

    def test_lenient_encode_strict_decode(self) -> None:
        value = ObjectValue.of(name=StringValue(None), age=IntValue(21))  # type: ignore[arg-type]
        self.assertDecodeFails(PERSON, encode(value), path=('name',), contains='expected string, got null')

    def test_fallback_is_logged(self) -> None:
        with capture_logs() as log_list:
            encode(object())
            encode(StringValue(1))  # type: ignore[arg-type]
        self.assertEqual([entry['log_level'] for entry in log_list], ['debug', 'debug'])
        self.assertEqual(log_list[0]['value_type'], 'object')
        self.assertEqual(log_list[1]['value_type'], 'StringValue')

    def test_to_json(self) -> None:
        self.assertEqual(IntValue(3).to_json(), 3)
        self.assertEqual(StringValue(3).to_json(), None)  # type: ignore[arg-type]

    def test_encode_text_compact(self) -> None:
        value = ListValue((StringValue('ã'), IntValue(1)))
        self.assertEqual(encode_text(value, settings=self.settings), '["ã",1]')

    def test_encode_text_ascii(self) -> None:
        value = ListValue((StringValue('ã'), IntValue(1)))
        settings = CodecSettings(JSON_ENSURE_ASCII=True)
        self.assertEqual(encode_text(value, settings=settings), '["\\u00e3",1]')

    def test_encode_text_indent(self) -> None:
        settings = CodecSettings(JSON_INDENT=2)
        self.assertEqual(encode_text(ListValue((IntValue(1),)), settings=settings), '[\n  1\n]')

    def test_encode_text_default_settings(self) -> None:
        self.assertEqual(encode_text(IntValue(1)), '1')

    def test_non_finite_floats_encode_as_null(self) -> None:
        for number in [float('nan'), float('inf'), float('-inf')]:
            self.assertIsNone(encode(FloatValue(number)))
            self.assertEqual(encode_text(ListValue((FloatValue(number),)), settings=self.settings), '[null]')
            self.assertEqual(encode_text(OpaqueValue([number]), settings=self.settings), 'null')


class DecodeTestCase(unittest.TestCase):
    def test_decode(self) -> None:
        result = decode(PERSON, {'name': 'Anna', 'age': 21}, settings=self.settings)
        self.assertEqual(result, Ok(ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))))

    def test_decode_text(self) -> None:
        result = decode_text(PERSON, '{"name": "Anna", "age": 21}', settings=self.settings)
        self.assertEqual(result, Ok(ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))))
        result = decode_text(PERSON, b'{"name": "Anna", "age": 21}', settings=self.settings)
        self.assertTrue(result.is_ok())

    def test_decode_text_mismatch(self) -> None:
        result = decode_text(PERSON, '{"name": "Anna", "age": "21"}', settings=self.settings)
        self.assertEqual(result, Err(DecodeError('expected int, got string', ('age',))))

    def test_decode_text_invalid_json(self) -> None:
        for text in ['', '{', '{"name": }', 'nope', '[1, 2']:
            result = decode_text(PERSON, text, settings=self.settings)
            self.assertTrue(result.is_err())
            error = result.unwrap_err()
            self.assertEqual(error.path, ())
            self.assertTrue(error.message.startswith('invalid JSON: '), error.message)

    def test_decode_text_rejects_non_finite_numbers(self) -> None:
        for text in ['NaN', 'Infinity', '-Infinity', '1e400', '[1.5, NaN]']:
            for descriptor in [FLOAT, OPAQUE, ListType(FLOAT)]:
                result = decode_text(descriptor, text, settings=self.settings)
                self.assertTrue(result.is_err(), text)
                self.assertTrue(result.unwrap_err().message.startswith('invalid JSON: '))

    def test_error_can_be_raised(self) -> None:
        result = decode_text(PERSON, '{"name": "Anna"}', settings=self.settings)
        with self.assertRaises(DecodeError) as cm:
            result.unwrap_or_raise()
        self.assertEqual(str(cm.exception), "$: missing required field 'age'")

    def test_build_decoder_is_reused(self) -> None:
        decoder = build_decoder(ListType(INT), settings=self.settings)
        self.assertIs(build_decoder(ListType(INT), settings=self.settings), decoder)
        self.assertIs(build_decoder(ListType(INT), settings=CodecSettings()), decoder)
        self.assertIsNot(build_decoder(ListType(INT), settings=CodecSettings(FLOAT_ACCEPTS_INT=False)), decoder)
        self.assertGreater(codec._build_decoder_cached.cache_info().hits, 0)

    def test_build_decoder_rejects_non_descriptors(self) -> None:
        for obj in [None, int, 'string', IntValue(1)]:
            with self.assertRaises(InvalidDescriptorError):
                build_decoder(obj, settings=self.settings)  # type: ignore[arg-type]

    def test_descriptor_shortcuts(self) -> None:
        self.assertEqual(INT.json_to_value(1, settings=self.settings), Ok(IntValue(1)))
        self.assertEqual(STRING.text_to_value('"a"', settings=self.settings), Ok(StringValue('a')))
        self.assertTrue(BOOL.text_to_value('1', settings=self.settings).is_err())


class RoundTripTestCase(unittest.TestCase):
    def test_mixed_document(self) -> None:
        descriptor = ObjectType([
            ('id', BINARY),
            ('name', STRING),
            ('score', FLOAT),
            ('active', BOOL),
            ('nickname', OptionalType(STRING)),
            ('counts', DictType(STRING, ListType(INT))),
            ('outcome', UnionType(UNIT, STRING)),
            ('status', EnumType([('pending', UNIT), ('done', ObjectType([('at', INT)]))])),
            ('extra', OPAQUE),
        ])
        value = ObjectValue.of(
            id=BinaryValue(b'\x00\xffhathor'),
            name=StringValue('Anna'),
            score=FloatValue(0.5),
            active=BoolValue(True),
            nickname=OptionalValue(StringValue('Ann')),
            counts=DictValue({
                StringValue('a'): ListValue((IntValue(1), IntValue(2))),
                StringValue('b'): ListValue(()),
            }),
            outcome=UnionValue.error(StringValue('timeout')),
            status=EnumValue('done', ObjectValue.of(at=IntValue(1700000000))),
            extra=OpaqueValue({'any': ['thing', None]}),
        )
        json_value = self.assertRoundTrip(descriptor, value)
        assert isinstance(json_value, dict)
        self.assertEqual(json_value['counts'], [['a', [1, 2]], ['b', []]])
        self.assertEqual(json_value['outcome'], {'type': 'error', 'value': 'timeout'})

        text = encode_text(value, settings=self.settings)
        self.assertEqual(decode_text(descriptor, text, settings=self.settings), Ok(value))

    def test_deep_error_path(self) -> None:
        descriptor = ListType(DictType(STRING, UnionType(ObjectType([('x', INT)]), STRING)))
        json_value = [[], [['k', {'type': 'ok', 'value': {'x': 'nope'}}]]]
        error = self.assertDecodeFails(descriptor, json_value, path=(1, 0, 1, 'value', 'x'))
        self.assertEqual(str(error), '$[1][0][1].value.x: expected int, got string')

    def test_unit_value_anywhere(self) -> None:
        descriptor = ListType(UNIT)
        self.assertRoundTrip(descriptor, ListValue((UnitValue(), UnitValue())))

from unijson.codec import encode, encode_text
from unijson.exception import InvalidDescriptorError
from unijson.universal import (
    BOOL,
    INT,
    STRING,
    IntValue,
    ListType,
    ObjectType,
    ObjectValue,
    OptionalType,
    OptionalValue,
    StringValue,
)
from unijson_tests import unittest

PERSON = ObjectType([('name', STRING), ('age', INT)])


class ObjectTestCase(unittest.TestCase):
    def test_person(self) -> None:
        value = ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))
        self.assertEqual(encode_text(value, settings=self.settings), '{"name":"Anna","age":21}')
        self.assertDecodes(PERSON, {'name': 'Anna', 'age': 21}, value)

    def test_field_order_preserved(self) -> None:
        value = ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))
        self.assertEqual(list(encode(value)), ['name', 'age'])  # type: ignore[arg-type]
        reversed_value = ObjectValue.of(age=IntValue(21), name=StringValue('Anna'))
        self.assertEqual(list(encode(reversed_value)), ['age', 'name'])  # type: ignore[arg-type]

    def test_decode_follows_declared_order(self) -> None:
        result = self.decode(PERSON, {'age': 21, 'name': 'Anna'}).unwrap()
        assert isinstance(result, ObjectValue)
        self.assertEqual([name for name, _ in result.fields], ['name', 'age'])

    def test_extra_keys_ignored(self) -> None:
        value = ObjectValue.of(name=StringValue('Anna'), age=IntValue(21))
        self.assertDecodes(PERSON, {'name': 'Anna', 'age': 21, 'email': None}, value)

    def test_missing_field(self) -> None:
        self.assertDecodeFails(PERSON, {'name': 'Anna'}, contains="missing required field 'age'")

    def test_field_failure_path(self) -> None:
        self.assertDecodeFails(PERSON, {'name': 'Anna', 'age': '21'}, path=('age',), contains='expected int')

    def test_not_an_object(self) -> None:
        self.assertDecodeFails(PERSON, [['name', 'Anna']], contains='expected object, got array')

    def test_empty_object(self) -> None:
        self.assertRoundTrip(ObjectType([]), ObjectValue(()))

    def test_nested_path(self) -> None:
        descriptor = ObjectType([('people', ListType(PERSON))])
        json_value = {'people': [{'name': 'Anna', 'age': 21}, {'name': 'Bob', 'age': None}]}
        error = self.assertDecodeFails(descriptor, json_value, path=('people', 1, 'age'))
        self.assertEqual(str(error), '$.people[1].age: expected int, got null')

    def test_descriptor_from_mapping(self) -> None:
        self.assertEqual(ObjectType({'name': STRING, 'age': INT}), PERSON)
        self.assertEqual(hash(ObjectType({'name': STRING, 'age': INT})), hash(PERSON))

    def test_duplicate_field_names(self) -> None:
        with self.assertRaises(InvalidDescriptorError):
            ObjectType([('name', STRING), ('name', INT)])

    def test_invalid_fields(self) -> None:
        with self.assertRaises(InvalidDescriptorError):
            ObjectType([(1, STRING)])  # type: ignore[list-item]
        with self.assertRaises(InvalidDescriptorError):
            ObjectType([('name', str)])  # type: ignore[list-item]
        with self.assertRaises(InvalidDescriptorError):
            ObjectType([('name',)])  # type: ignore[list-item]

    def test_getitem(self) -> None:
        value = ObjectValue.of(name=StringValue('Anna'))
        self.assertEqual(value['name'], StringValue('Anna'))
        with self.assertRaises(KeyError):
            value['age']

    def test_duplicate_field_names_are_malformed(self) -> None:
        value = ObjectValue((('name', StringValue('Anna')), ('name', StringValue('Bob'))))
        self.assertIsNone(encode(value))
        nested = ObjectValue.of(person=value, age=IntValue(21))
        self.assertEqual(encode(nested), {'person': None, 'age': 21})


class OptionalTestCase(unittest.TestCase):
    def test_absent(self) -> None:
        self.assertEqual(self.assertRoundTrip(OptionalType(STRING), OptionalValue(None)), None)
        self.assertFalse(OptionalValue().is_present)

    def test_present(self) -> None:
        value = OptionalValue(StringValue('hathor'))
        self.assertEqual(self.assertRoundTrip(OptionalType(STRING), value), 'hathor')
        self.assertTrue(value.is_present)

    def test_present_empty_string(self) -> None:
        self.assertRoundTrip(OptionalType(STRING), OptionalValue(StringValue('')))

    def test_inner_failure(self) -> None:
        self.assertDecodeFails(OptionalType(BOOL), 'yes', contains='expected bool, got string')

    def test_optional_field(self) -> None:
        descriptor = ObjectType([('name', STRING), ('nickname', OptionalType(STRING))])
        value = ObjectValue.of(name=StringValue('Anna'), nickname=OptionalValue(None))
        self.assertEqual(self.assertRoundTrip(descriptor, value), {'name': 'Anna', 'nickname': None})
        # the key must still be present
        self.assertDecodeFails(descriptor, {'name': 'Anna'}, contains="missing required field 'nickname'")

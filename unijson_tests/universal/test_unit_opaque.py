from unijson.codec import encode
from unijson.universal import (
    OPAQUE,
    UNIT,
    DictValue,
    ListType,
    ListValue,
    ObjectType,
    ObjectValue,
    OpaqueValue,
    UnitType,
    UnitValue,
)
from unijson_tests import unittest


class UnitTestCase(unittest.TestCase):
    def test_encodes_as_null(self) -> None:
        self.assertIsNone(encode(UnitValue()))
        self.assertRoundTrip(UNIT, UnitValue())

    def test_decoding_never_fails(self) -> None:
        for json_value in [None, 0, 'x', [1, 2], {'a': None}, True, 1.5]:
            self.assertDecodes(UNIT, json_value, UnitValue())

    def test_all_units_are_equal(self) -> None:
        self.assertEqual(UnitValue(), UnitValue())
        self.assertEqual(UnitType(), UNIT)
        self.assertEqual(len({UnitValue(), UnitValue()}), 1)


class OpaqueTestCase(unittest.TestCase):
    def test_passthrough(self) -> None:
        for node in [None, 1, -2.5, 'text', [1, [2, {'a': None}]], {'b': [True, False]}]:
            self.assertDecodes(OPAQUE, node, OpaqueValue(node))
            self.assertEqual(encode(OpaqueValue(node)), node)

    def test_inside_object(self) -> None:
        descriptor = ObjectType([('meta', OPAQUE), ('tags', ListType(OPAQUE))])
        value = ObjectValue.of(meta=OpaqueValue({'x': [1, 2]}), tags=ListValue((OpaqueValue('a'), OpaqueValue(1))))
        self.assertEqual(self.assertRoundTrip(descriptor, value), {'meta': {'x': [1, 2]}, 'tags': ['a', 1]})

    def test_equality_follows_json_rendering(self) -> None:
        self.assertNotEqual(OpaqueValue(1), OpaqueValue(1.0))
        self.assertNotEqual(OpaqueValue(1), OpaqueValue(True))
        self.assertNotEqual(OpaqueValue([1]), OpaqueValue([1.0]))
        self.assertNotEqual(OpaqueValue(1), 1)

    def test_as_dict_keys(self) -> None:
        entries = {OpaqueValue(1): UnitValue(), OpaqueValue(1.0): UnitValue(), OpaqueValue(1): UnitValue()}
        self.assertEqual(len(DictValue(entries).entries), 2)
        for a, b in [(OpaqueValue(1), OpaqueValue(1.0)), (OpaqueValue({'a': 1}), OpaqueValue({'a': 1}))]:
            self.assertEqual(a == b, hash(a) == hash(b))

    def test_unserializable_node_is_malformed(self) -> None:
        self.assertIsNone(encode(OpaqueValue({(1, 2): 'a'})))  # type: ignore[dict-item]
        self.assertIsNone(encode(OpaqueValue([object()])))  # type: ignore[list-item]
        self.assertIsNone(encode(OpaqueValue(float('nan'))))

    def test_hashable(self) -> None:
        self.assertEqual(hash(OpaqueValue({'a': 1, 'b': 2})), hash(OpaqueValue({'b': 2, 'a': 1})))
        self.assertEqual(OpaqueValue({'a': 1, 'b': 2}), OpaqueValue({'b': 2, 'a': 1}))
        self.assertEqual(len({OpaqueValue([1, 2]), OpaqueValue([1, 2]), OpaqueValue([2, 1])}), 2)

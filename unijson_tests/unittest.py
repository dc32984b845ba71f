import unittest
from typing import Optional
from unittest import main as ut_main

from structlog import get_logger

from unijson.codec import build_decoder, encode
from unijson.conf import CodecSettings
from unijson.exception import DecodeError, PathSegment
from unijson.universal import Json, UniversalType, UniversalValue
from unijson.util import json_dumps, json_loads

logger = get_logger()
main = ut_main


class TestCase(unittest.TestCase):
    """Base class for unijson tests, with helpers to check decoding results and round-trips.

    Tests build decoders with an explicit `settings`, the defaults unless a test sets another one.
    """

    settings: CodecSettings = CodecSettings()

    def setUp(self) -> None:
        super().setUp()
        self.log = logger.new(test=self.id())

    def decode(self, descriptor: UniversalType, json_value: Json, *, settings: Optional[CodecSettings] = None):
        return build_decoder(descriptor, settings=settings or self.settings)(json_value)

    def assertDecodes(self, descriptor: UniversalType, json_value: Json, expected: UniversalValue,
                      *, settings: Optional[CodecSettings] = None) -> None:
        result = self.decode(descriptor, json_value, settings=settings)
        self.assertTrue(result.is_ok(), f'unexpected decode failure: {result!r}')
        self.assertEqual(result.unwrap(), expected)

    def assertDecodeFails(self, descriptor: UniversalType, json_value: Json, *,
                          path: tuple[PathSegment, ...] = (), contains: Optional[str] = None,
                          settings: Optional[CodecSettings] = None) -> DecodeError:
        result = self.decode(descriptor, json_value, settings=settings)
        self.assertTrue(result.is_err(), f'unexpected decode success: {result!r}')
        error = result.unwrap_err()
        self.assertIsInstance(error, DecodeError)
        self.assertEqual(error.path, path)
        if contains is not None:
            self.assertIn(contains, error.message)
        return error

    def assertRoundTrip(self, descriptor: UniversalType, value: UniversalValue) -> Json:
        """Encode `value`, render and parse the JSON text, decode it back and compare with the original.
        """
        json_value = json_loads(json_dumps(encode(value)))
        self.assertDecodes(descriptor, json_value, value)
        return json_value

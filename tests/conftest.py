"""
Pytest configuration and shared fixtures for jstream tests.

Provides immutable test data fixtures built from the json.org JSON_checker
corpus, split by how the decoder's permissiveness policy treats each case.
"""

import io
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None


class FailingReader(io.TextIOBase):
    """Text stream that raises OSError once ``fail_after`` reads succeed."""

    def __init__(self, chunks: list[str], fail_after: int) -> None:
        self._chunks: Iterator[str] = iter(chunks)
        self._remaining = fail_after

    def read(self, size: int | None = -1) -> str:
        if self._remaining == 0:
            raise OSError("connection reset")
        self._remaining -= 1
        return next(self._chunks, "")


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents the decoder must reject.

    Covers unterminated containers, bad keys and delimiters, illegal
    characters and escapes, malformed numbers and trailing data.
    """
    fail_docs = {
        2: '["Unclosed array"',
        3: '{unquoted_key: "keys must be quoted"}',
        7: '["Comma after the close"],',
        8: '["Extra close"]]',
        10: '{"Extra value after close": true} "misplaced quoted value"',
        11: '{"Illegal expression": 1 + 2}',
        12: '{"Illegal invocation": alert()}',
        14: '{"Numbers cannot be hex": 0x14}',
        15: '["Illegal backslash escape: \\x15"]',
        16: "[\\naked]",
        17: '["Illegal backslash escape: \\017"]',
        19: '{"Missing colon" null}',
        20: '{"Double colon":: null}',
        21: '{"Comma instead of colon", null}',
        22: '["Colon instead of comma": false]',
        23: '["Bad value", truth]',
        24: "['single quote']",
        25: '["\ttab\tcharacter\tin\tstring\t"]',
        26: '["tab\\   character\\   in\\  string\\  "]',
        27: '["line\nbreak"]',
        28: '["line\\\nbreak"]',
        29: "[0e]",
        30: "[0e+]",
        31: "[0e+-1]",
        32: '{"Comma instead if closing brace": true,',
        33: '["mismatch"}',
    }

    cases = [
        JsonTestCase(
            description=f"fail{number}.json",
            input_data=doc,
            should_fail=True,
        )
        for number, doc in fail_docs.items()
    ]
    # https://code.google.com/archive/p/simplejson/issues/3
    cases.append(
        JsonTestCase(
            "control character in string",
            '["A\u001fZ control characters in string"]',
            should_fail=True,
        )
    )
    return cases


@pytest.fixture
def json_tolerated_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker "fail" documents the decoder accepts.

    Separators inside containers are skipped rather than validated, leading
    zeros are read as decimal, and neither the top-level type nor nesting
    depth is restricted. Each case pins the value produced.
    """
    too_deep: Any = "Too deep"
    for _ in range(19):
        too_deep = [too_deep]

    return [
        JsonTestCase(
            "fail1.json - scalar payload",
            '"A JSON payload should be an object or array, not a string."',
            expected_output=(
                "A JSON payload should be an object or array, not a string."
            ),
        ),
        JsonTestCase(
            "fail4.json - trailing comma",
            '["extra comma",]',
            expected_output=["extra comma"],
        ),
        JsonTestCase(
            "fail5.json - double trailing comma",
            '["double extra comma",,]',
            expected_output=["double extra comma"],
        ),
        JsonTestCase(
            "fail6.json - leading comma",
            '[   , "<-- missing value"]',
            expected_output=["<-- missing value"],
        ),
        JsonTestCase(
            "fail9.json - trailing comma in object",
            '{"Extra comma": true,}',
            expected_output={"Extra comma": True},
        ),
        JsonTestCase(
            "fail13.json - leading zeroes",
            '{"Numbers cannot have leading zeroes": 013}',
            expected_output={"Numbers cannot have leading zeroes": 13},
        ),
        JsonTestCase(
            "fail18.json - nesting depth",
            "[" * 19 + '"Too deep"' + "]" * 19,
            expected_output=too_deep,
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must decode successfully.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental decoding.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("unquoted key", "{key: 1}", True),
        JsonTestCase("incomplete keyword", "tru", True),
    ]

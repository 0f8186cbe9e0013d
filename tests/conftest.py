"""
Pytest configuration and shared fixtures for jsontree tests.

Provides immutable test data fixtures for documents the parser must reject,
the non-standard input it deliberately accepts, and a representative
document exercising every value type.
"""

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
    expected_msg: str = ""


@pytest.fixture
def parse_fail_cases() -> list[JsonTestCase]:
    """
    Provides documents the parser must reject, with the expected message.
    """
    cases = [
        ("empty document", "", "Top level value does not start"),
        ("top level array", "[1, 2]", "Top level value does not start"),
        ("top level string", '"text"', "Top level value does not start"),
        ("top level number", "42", "Top level value does not start"),
        (
            "trailing text",
            '{"a": 1} "misplaced"',
            "Unexpected text after end of top level object",
        ),
        (
            "second object",
            "{}{}",
            "Unexpected text after end of top level object",
        ),
        (
            "unclosed object",
            '{"a": 1,',
            "Unexpected end of input while reading object",
        ),
        (
            "unclosed nested object",
            '{"a": {',
            "Unexpected end of input while reading object",
        ),
        (
            "unclosed array",
            '{"a": [1, 2',
            "Unexpected end of input while reading array",
        ),
        (
            "unquoted key",
            '{unquoted: "value"}',
            "No opening quote when reading string",
        ),
        (
            "missing colon",
            '{"Missing colon" null}',
            "Missing : between name and value",
        ),
        (
            "comma instead of colon",
            '{"Comma instead of colon", null}',
            "Missing : between name and value",
        ),
        (
            "missing comma between pairs",
            '{"a": 1 "b": 2}',
            "Unexpected character after name/value pair",
        ),
        (
            "illegal expression",
            '{"Illegal expression": 1 + 2}',
            "Unexpected character after name/value pair",
        ),
        (
            "bare word value",
            '{"Illegal invocation": alert()}',
            "Unexpected character in integer value",
        ),
        (
            "single quotes",
            "{\"a\": ['single quote']}",
            "Unexpected character in integer value",
        ),
        (
            "unterminated string",
            '{"a": "no end}',
            "Unexpected end of input while reading string",
        ),
        (
            "illegal escape",
            '{"a": "Illegal backslash escape: \\x15"}',
            "Unsupported escape character",
        ),
        (
            "octal style escape",
            '{"a": "Illegal backslash escape: \\017"}',
            "Unsupported escape character",
        ),
        (
            "short unicode escape",
            '{"a": "\\u12"}',
            "\\u not followed by four hex digits",
        ),
        (
            "escape at end of input",
            '{"a": "\\',
            "Unexpected end of input while reading string escape",
        ),
        (
            "missing value",
            '{"a": ',
            "Unexpected end of input while looking for value",
        ),
        (
            "integer overflow",
            '{"big": 99999999999999999999}',
            "Integer out of range",
        ),
        (
            "negative integer overflow",
            '{"small": -99999999999999999999}',
            "Integer out of range",
        ),
        ("float overflow", '{"huge": 1e400}', "Float out of range"),
        (
            "dot without digits",
            '{"a": .e5}',
            "Unexpected character in float value",
        ),
        (
            "sign before dot",
            '{"a": -.5}',
            "Unexpected character in integer value",
        ),
    ]
    return [
        JsonTestCase(
            description=description,
            input_data=doc,
            should_fail=True,
            expected_msg=msg,
        )
        for description, doc, msg in cases
    ]


@pytest.fixture
def lax_cases() -> list[JsonTestCase]:
    """
    Provides non-standard input that parses, with the expected member "v".

    Expected outputs are plain Python values compared through to_python().
    """
    return [
        JsonTestCase("hash comment", '{ # comment\n "v": 1 }', False, 1),
        JsonTestCase("comment at end", '{"v": 1} # done', False, 1),
        JsonTestCase("hex integer", '{"v": 0x1A}', False, 26),
        JsonTestCase("upper hex integer", '{"v": 0XfF}', False, 255),
        JsonTestCase("negative hex", '{"v": -0x10}', False, -16),
        JsonTestCase("octal integer", '{"v": 017}', False, 15),
        JsonTestCase("plus sign", '{"v": +5}', False, 5),
        JsonTestCase("leading dot float", '{"v": .5}', False, 0.5),
        JsonTestCase("trailing dot float", '{"v": 1.}', False, 1.0),
        JsonTestCase("hex float", '{"v": 0x1.8p1}', False, 3.0),
        JsonTestCase("array commas", '{"v": [1,,2,]}', False, [1, 2]),
        JsonTestCase("leading comma", '{"v": [,1]}', False, [1]),
        JsonTestCase("only commas", '{"v": [,,,]}', False, []),
        JsonTestCase("trailing object comma", '{"v": 1,}', False, 1),
        JsonTestCase(
            "raw control character", '{"v": "a\tb"}', False, "a\tb"
        ),
    ]


@pytest.fixture
def sample_document() -> str:
    """A document exercising every value type, nesting and duplicate keys."""
    return """{
    # catalogue entry
    "id": 1234567890,
    "ratio": -9876.54321,
    "tiny": 0.123456789e-12,
    "name": "Stereolab",
    "escaped": "tab\\there \\u00e9",
    "active": true,
    "retired": false,
    "missing": null,
    "tags": ["post-rock", "krautrock", 1996, 2.5, true, null, {}],
    "members": {
        "lead": {"name": "Laetitia", "instruments": ["vocals"]},
        "empty": []
    },
    "id": 42
}"""

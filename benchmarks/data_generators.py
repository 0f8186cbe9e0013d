"""
Test data generators for jsontree parsing benchmarks.

Every generator returns a document whose top-level value is an object, since
that is the only shape jsontree accepts:
- small and large catalogue records
- a wide array of mixed scalar types
- deep nesting
- string-heavy content with escapes and surrogate pairs
- a commented document using jsontree's extensions
"""

import json
import random
import string
from typing import Any

_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3

# Fixed seed so every run benchmarks identical documents
_rng = random.Random(1686)


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "extended_syntax": _generate_extended_syntax,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small record (< 1KB) with basic key-value pairs."""
    data = {
        "id": "a74b1b7f-71a5-4011-9441-d0b5e4122711",
        "name": "Radiohead",
        "sort-name": "Radiohead",
        "type": "Group",
        "country": "GB",
        "score": 100,
        "rating": 4.65,
        "disambiguation": "",
        "ended": False,
        "area": {"name": "United Kingdom", "iso-3166-1-codes": ["GB"]},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates a large catalogue record (> 10KB) with many releases."""
    data = {
        "id": _random_string(36),
        "name": _random_string(20),
        "genres": [
            {"name": _random_string(8), "count": _rng.randint(1, 50)}
            for _ in range(10)
        ],
        "releases": [
            {
                "id": f"rel_{i:06d}",
                "title": _random_string(25),
                "date": f"{_rng.randint(1960, 2024)}-"
                f"{_rng.randint(1, 12):02d}-{_rng.randint(1, 28):02d}",
                "country": _rng.choice(["GB", "US", "JP", "DE", "XE"]),
                "status": _rng.choice(["Official", "Promotion", "Bootleg"]),
                "track-count": _rng.randint(1, 30),
                "length-ms": _rng.randint(60_000, 4_800_000),
                "quality": round(_rng.uniform(0.0, 1.0), 4),
                "packaging": None,
            }
            for i in range(80)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types under one member."""
    array: list[Any] = []

    for i in range(200):
        choice = _rng.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(_rng.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(_rng.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(_rng.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(_rng.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(_rng.uniform(0, 100), 2),
                }
            )

    return json.dumps({"items": array})


def _generate_nested_structure() -> str:
    """Generates deeply nested JSON structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy() -> str:
    """Generates strings dense with escapes, including surrogate pairs."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if _rng.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    _rng.choice(
                        [
                            '\\"',
                            "\\\\",
                            "\\/",
                            "\\n",
                            "\\t",
                            "\\u00e9",
                            "\\ud83c\\udfb5",
                        ]
                    )
                )
            else:
                chars.append(
                    _rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    # Built by hand so the escapes reach the parser unchanged
    members = ",".join(
        f'"key_{i}": "{create_escaped_string()}"' for i in range(200)
    )
    return "{" + members + "}"


def _generate_extended_syntax() -> str:
    """Generates a document using comments, hex integers and lax commas."""
    lines = ["# generated catalogue", "{"]
    for i in range(200):
        lines.append(f"    # entry {i}")
        lines.append(
            f'    "entry_{i}": {{"flags": 0x{_rng.randint(0, 0xFFFF):04X}, '
            f'"ratio": .{_rng.randint(0, 999):03d}, '
            f'"tags": [1,,2,{i},]}},'
        )
    lines.append("}")
    return "\n".join(lines)


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(_rng.choices(string.ascii_letters, k=length))

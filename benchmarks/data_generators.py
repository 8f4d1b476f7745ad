"""
Test data generators for decoder benchmarks.

Each generator returns a JSON document as text. Data is produced from a
seeded random source so runs are comparable:
- small and record-heavy objects
- number-heavy arrays mixing 32-bit, 64-bit and float values
- deeply nested containers
- strings dense with escape sequences
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_NESTING_DEPTH = 500


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators: dict[str, Callable[[random.Random], str]] = {
        "small_object": _generate_small_object,
        "record_array": _generate_record_array,
        "number_array": _generate_number_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


DATA_TYPES = (
    "small_object",
    "record_array",
    "number_array",
    "nested_structure",
    "string_heavy",
)


def _generate_small_object(rng: random.Random) -> str:
    """A small object (< 1KB) with scalar members and one nested object."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_record_array(rng: random.Random) -> str:
    """An array of 500 flat records, the shape of a typical API export."""
    records = [
        {
            "id": f"txn_{i:06d}",
            "amount": round(rng.uniform(1.0, 1000.0), 2),
            "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
            "status": rng.choice(["completed", "pending", "failed"]),
            "refunded": rng.random() < 0.1,
            "note": None,
            "description": f"Payment for {_random_string(rng, 20)}",
        }
        for i in range(500)
    ]
    return json.dumps(records)


def _generate_number_array(rng: random.Random) -> str:
    """Numbers only, exercising both integer widths and floats."""
    values: list[Any] = []
    for _ in range(2000):
        kind = rng.randint(1, 3)
        if kind == 1:
            values.append(rng.randint(-(2**31), 2**31 - 1))
        elif kind == 2:
            values.append(rng.randint(2**31, 2**63 - 1))
        else:
            values.append(rng.uniform(-1e6, 1e6))
    return json.dumps(values)


def _generate_nested_structure(rng: random.Random) -> str:
    """Alternating objects and arrays nested well past typical depth."""
    text = "null"
    for level in range(_NESTING_DEPTH):
        if level % 2:
            text = f'{{"level": {level}, "child": {text}}}'
        else:
            text = f'[{level}, "{_random_string(rng, 4)}", {text}]'
    return text


def _generate_string_heavy(rng: random.Random) -> str:
    """Strings with simple escapes, \\u escapes and surrogate pairs."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    rng.choice(
                        ["\\\"", "\\\\", "\\/", "\\b", "\\n", "\\t", "\\u00e9"]
                    )
                )
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ", ".join(create_escaped_string() for _ in range(200))
    emoji = ", ".join('"\\ud83d\\ude00 smile"' for _ in range(50))
    return f'{{"strings": [{strings}], "emoji": [{emoji}]}}'


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))

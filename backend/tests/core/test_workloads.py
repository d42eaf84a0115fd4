"""Tests for core.workloads: query parsing, Fibonacci, random records, throughput."""

import random

import pytest

from stress_api.core.workloads import (
    DEFAULT_DELAY_MS, MAX_DELAY_MS,
    DEFAULT_FIBONACCI_N, MAX_FIBONACCI_N,
    DEFAULT_ERROR_RATE,
    fibonacci, generate_records, parse_bounded_int, parse_rate,
    requests_per_second, should_fail, to_base36,
)


# --- parse_bounded_int --------------------------------------------------------

@pytest.mark.parametrize("raw,expected", [
    (None, DEFAULT_DELAY_MS),
    ("200", 200),
    ("0", 0),
    ("5000", 5000),
    ("9999", MAX_DELAY_MS),
    ("-5", DEFAULT_DELAY_MS),
    ("abc", DEFAULT_DELAY_MS),
    ("", DEFAULT_DELAY_MS),
    ("1.5", 1),
    ("12abc", 12),
    ("abc12", DEFAULT_DELAY_MS),
    ("+7", 7),
    (" 300 ", 300),
])
def test_parse_bounded_int_clamps_and_defaults(raw, expected):
    assert parse_bounded_int(raw, DEFAULT_DELAY_MS, MAX_DELAY_MS) == expected


def test_parse_bounded_int_clamps_fibonacci_input_to_40():
    assert parse_bounded_int("100", DEFAULT_FIBONACCI_N, MAX_FIBONACCI_N) == 40


# --- parse_rate ---------------------------------------------------------------

@pytest.mark.parametrize("raw,expected", [
    (None, DEFAULT_ERROR_RATE),
    ("0", 0.0),
    ("1", 1.0),
    ("0.25", 0.25),
    ("2.5", 2.5),
    ("-1", -1.0),
    ("nope", DEFAULT_ERROR_RATE),
    ("nan", DEFAULT_ERROR_RATE),
    ("0.3x", 0.3),
    (".5", 0.5),
    ("1e-1", 0.1),
    ("", DEFAULT_ERROR_RATE),
])
def test_parse_rate(raw, expected):
    assert parse_rate(raw) == expected


# --- fibonacci ----------------------------------------------------------------

@pytest.mark.parametrize("n,expected", [
    (0, 0), (1, 1), (2, 1), (10, 55), (20, 6765),
])
def test_fibonacci_known_values(n, expected):
    assert fibonacci(n) == expected


# --- random records -----------------------------------------------------------

def test_generate_records_shape():
    records = generate_records(5, random.Random(42))
    assert [r["id"] for r in records] == [1, 2, 3, 4, 5]
    for r in records:
        assert 0 <= r["value"] < 1
        assert r["name"].startswith("item-")
        assert len(r["name"]) > len("item-")
        assert isinstance(r["active"], bool)


def test_generate_records_empty():
    assert generate_records(0) == []


def test_generate_records_unseeded_calls_differ():
    first = generate_records(20)
    second = generate_records(20)
    assert [r["value"] for r in first] != [r["value"] for r in second]


@pytest.mark.parametrize("number,expected", [
    (0, "0"), (35, "z"), (36, "10"), (46655, "zzz"),
])
def test_to_base36(number, expected):
    assert to_base36(number) == expected


# --- throughput / failure draw ------------------------------------------------

def test_requests_per_second_zero_uptime_is_integer_zero():
    result = requests_per_second(10, 0)
    assert result == 0
    assert isinstance(result, int)


def test_requests_per_second_rounds_to_two_places():
    assert requests_per_second(10, 3) == 3.33


def test_should_fail_boundaries():
    rng = random.Random(0)
    assert not any(should_fail(0.0, rng) for _ in range(200))
    assert all(should_fail(1.0, rng) for _ in range(200))

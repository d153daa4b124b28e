import logging
import random

import pytest

from passgen.generator import (
    ALPHABET,
    MAX_PASSWORD_LENGTH,
    PasswordGenerator,
    generate_password,
    parse_length,
)


def test_alphabet_is_the_fixed_ten_characters():
    assert ALPHABET == ("a", "b", "c", "d", "e", "*", "!", "-", "1", "9")
    assert MAX_PASSWORD_LENGTH == 100


@pytest.mark.parametrize("length", [0, 1, 5, 37, 99, 100])
def test_generate_returns_requested_length_from_alphabet(length):
    password = generate_password(length)
    assert len(password) == length
    assert set(password) <= set(ALPHABET)


def test_generate_zero_is_empty():
    assert generate_password(0) == ""


def test_generate_five_characters():
    password = PasswordGenerator(rng=random.Random(1234)).generate(5)
    assert len(password) == 5
    assert all(ch in ALPHABET for ch in password)


@pytest.mark.parametrize("length", [101, 500, 2 ** 63 - 1])
def test_generate_over_ceiling_is_empty(length):
    assert generate_password(length) == ""


def test_generate_over_ceiling_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="passgen.generator"):
        assert generate_password(101) == ""

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert "100" in record.getMessage()
    assert "101" in record.getMessage()


def test_generate_negative_is_refused(caplog):
    with caplog.at_level(logging.WARNING, logger="passgen.generator"):
        assert generate_password(-3) == ""
    assert "negative length (got -3)" in caplog.text
    assert "greater than" not in caplog.text


def test_generate_within_ceiling_logs_no_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="passgen.generator"):
        generate_password(100)
    assert caplog.records == []


def test_repeated_calls_keep_invariants():
    generator = PasswordGenerator()
    for _ in range(50):
        password = generator.generate(20)
        assert len(password) == 20
        assert set(password) <= set(ALPHABET)


def test_seeded_generators_agree():
    first = PasswordGenerator(rng=random.Random(7)).generate(30)
    second = PasswordGenerator(rng=random.Random(7)).generate(30)
    assert first == second


def test_every_alphabet_character_can_appear():
    generator = PasswordGenerator(rng=random.Random(0))
    seen = set()
    for _ in range(20):
        seen.update(generator.generate(100))
    assert seen == set(ALPHABET)


def test_custom_alphabet_and_ceiling():
    generator = PasswordGenerator(alphabet="xy", max_length=3, rng=random.Random(3))
    assert set(generator.generate(3)) <= {"x", "y"}
    assert generator.generate(4) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", 5),
        ("100", 100),
        (" 12", 12),
        ("\t7\n", 7),
        ("+8", 8),
        ("-3", -3),
        ("12abc", 12),
        ("007", 7),
        ("abc", 0),
        ("", 0),
        ("   ", 0),
        ("-", 0),
        ("1 2", 1),
        ("99999999999999999999999", 2 ** 63 - 1),
        ("-99999999999999999999999", -(2 ** 63)),
    ],
)
def test_parse_length(text, expected):
    assert parse_length(text) == expected


def test_unparseable_text_generates_empty_password():
    assert generate_password(parse_length("abc")) == ""

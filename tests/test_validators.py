# tests/test_validators.py
import pytest
from sims.errors import OutOfRangeError, ValidationFailedError
from sims.validators import (
    is_blank, is_valid_class_label, is_valid_gender, is_valid_identifier, is_valid_name,
    is_valid_score, normalize_gender, parse_score,
)


def test_is_blank():
    assert is_blank("")
    assert is_blank(None)
    assert is_blank(" \t ")
    assert not is_blank(" a ")


def test_name_length_limits():
    assert is_valid_name("A")
    assert is_valid_name("x" * 20)
    assert not is_valid_name("x" * 21)
    assert not is_valid_name("   ")


def test_identifier_rules():
    assert is_valid_identifier("A001")
    assert is_valid_identifier("a" * 20)
    assert not is_valid_identifier("A01")
    assert not is_valid_identifier("a" * 21)
    assert not is_valid_identifier("A-001")
    assert not is_valid_identifier("А001")  # кириллическая А


def test_class_label():
    assert is_valid_class_label("C1")
    assert not is_valid_class_label("")
    assert not is_valid_class_label("c" * 21)


@pytest.mark.parametrize("token", ["男", "女", "м", "ж", "male", "female", "M", "F", "1", "0", " M "])
def test_accepted_gender_tokens(token):
    assert is_valid_gender(token)


def test_rejected_gender_tokens():
    assert not is_valid_gender("m")
    assert not is_valid_gender("x")
    assert not is_valid_gender("")


def test_normalize_gender():
    assert normalize_gender("M") == "male"
    assert normalize_gender("1") == "male"
    assert normalize_gender("男") == "male"
    assert normalize_gender("ж") == "female"
    assert normalize_gender("0") == "female"
    with pytest.raises(ValidationFailedError):
        normalize_gender("unknown")


def test_score_bounds():
    assert is_valid_score(0)
    assert is_valid_score(100)
    assert is_valid_score(55.5)
    assert not is_valid_score(-0.1)
    assert not is_valid_score(100.01)
    assert not is_valid_score(float("nan"))
    assert not is_valid_score(True)
    assert not is_valid_score("50")


def test_parse_score():
    assert parse_score(" 87.5 ") == 87.5
    with pytest.raises(OutOfRangeError):
        parse_score("101")
    with pytest.raises(ValidationFailedError):
        parse_score("abc")


def test_non_string_input_is_invalid():
    assert is_blank(123)
    assert not is_valid_name(123)
    assert not is_valid_identifier(12345)
    assert not is_valid_class_label(["C1"])
    assert not is_valid_gender(1)
    assert not is_valid_gender(None)
    with pytest.raises(ValidationFailedError):
        normalize_gender(0)

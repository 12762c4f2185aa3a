# sims/validators.py
"""Чистые функции проверки полей записи студента."""
import math
from typing import Optional

from .config import (
    NAME_MAX_LEN, ID_MIN_LEN, ID_MAX_LEN, CLASS_MAX_LEN,
    SCORE_MIN, SCORE_MAX, GENDER_TOKENS,
)
from .errors import ValidationFailedError, OutOfRangeError


def is_blank(s: Optional[str]) -> bool:
    """Строка пустая или состоит только из пробелов и табуляций (не строка - тоже пустая)."""
    if not isinstance(s, str) or not s:
        return True
    return all(ch in " \t" for ch in s)


def is_valid_name(s: Optional[str]) -> bool:
    if is_blank(s):
        return False
    return 1 <= len(s) <= NAME_MAX_LEN


def is_valid_identifier(s: Optional[str]) -> bool:
    """Номер студента: 4-20 символов, только латинские буквы и цифры."""
    if is_blank(s):
        return False
    if not ID_MIN_LEN <= len(s) <= ID_MAX_LEN:
        return False
    return s.isascii() and s.isalnum()


def is_valid_class_label(s: Optional[str]) -> bool:
    if is_blank(s):
        return False
    return len(s) <= CLASS_MAX_LEN


def is_valid_gender(s: Optional[str]) -> bool:
    if not isinstance(s, str):
        return False
    return s.strip() in GENDER_TOKENS


def normalize_gender(s: str) -> str:
    """Приводит допустимое обозначение пола к 'male' или 'female'."""
    if not is_valid_gender(s):
        raise ValidationFailedError(f"Пол '{s}' недопустим. Введите 'м' или 'ж' (или M/F).")
    return GENDER_TOKENS[s.strip()]


def is_valid_score(x) -> bool:
    """Оценка — число в диапазоне 0-100 включительно."""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    if math.isnan(x):
        return False
    return SCORE_MIN <= x <= SCORE_MAX


def parse_score(text: str) -> float:
    """Преобразует введённый текст в оценку."""
    try:
        value = float(text.strip())
    except (ValueError, AttributeError):
        raise ValidationFailedError(f"'{text}' не является числом.")
    if not is_valid_score(value):
        raise OutOfRangeError(f"Оценка {text} недопустима. Разрешен диапазон 0-100.")
    return value

import re
from datetime import date
from typing import Any, Optional

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DIGITS = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")


def is_valid_calendar_date(value: Any) -> bool:
    """True for a literal YYYY-MM-DD string naming a real calendar day.

    Out-of-range components such as 2023-02-29 or 2025-13-01 are rejected
    rather than rolled over into the next month.
    """
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        return False
    year, month, day = (int(part) for part in value.split("-"))
    try:
        parsed = date(year, month, day)
    except ValueError:
        return False
    return (parsed.year, parsed.month, parsed.day) == (year, month, day)


def parse_calendar_date(value: Any) -> Optional[date]:
    if not is_valid_calendar_date(value):
        return None
    return date.fromisoformat(value)


def normalize_cpf(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def _cpf_check_digit(digits: str) -> int:
    # Weights run from len(digits) + 1 down to 2
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(value: Any) -> bool:
    """Validate a CPF (Brazilian national ID), punctuation allowed."""
    if not isinstance(value, str):
        return False
    cpf = normalize_cpf(value)
    if len(cpf) != 11:
        return False
    if cpf == cpf[0] * 11:
        return False
    if _cpf_check_digit(cpf[:9]) != int(cpf[9]):
        return False
    return _cpf_check_digit(cpf[:10]) == int(cpf[10])


def parse_positive_int(value: Any) -> Optional[int]:
    """Return value as an int if it is a positive integer (or its decimal string), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        text = value.strip()
        if not _DIGITS.fullmatch(text):
            return None
        number = int(text)
        return number if number > 0 else None
    return None

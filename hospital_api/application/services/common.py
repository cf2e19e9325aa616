from datetime import date
from typing import Any, Dict, Optional

from ...exceptions import InvalidArgument
from ..validators import parse_calendar_date, parse_positive_int

# Upper bound of the INTEGER columns
MAX_INT = 2**31 - 1


def clean_text(value: Any) -> Optional[str]:
    """Strip surrounding whitespace, folding blank strings to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_fields(fields: Dict[str, Any]) -> None:
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise InvalidArgument(f"Missing required fields: {', '.join(missing)}")


def check_lengths(fields: Dict[str, Optional[str]], limits: Dict[str, int]) -> None:
    for name, limit in limits.items():
        value = fields.get(name)
        if value is not None and len(value) > limit:
            raise InvalidArgument(f"Invalid {name}. Must be at most {limit} characters")


def parse_identifier(raw: Any, entity: str) -> int:
    identifier = parse_positive_int(raw)
    if identifier is None or identifier > MAX_INT:
        raise InvalidArgument(f"Invalid {entity} id")
    return identifier


def positive_int_field(value: Any, field: str) -> Optional[int]:
    if value is None:
        return None
    number = parse_positive_int(value)
    if number is None or number > MAX_INT:
        raise InvalidArgument(f"Invalid {field}. Must be a positive integer")
    return number


def date_field(value: Any, field: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise InvalidArgument(f"Invalid {field}. Use YYYY-MM-DD")
    return parsed

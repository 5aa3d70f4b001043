"""
Presence checks for service inputs
"""
from typing import Any, Dict, List

from app.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    """
    None and empty strings count as missing.
    0 and False are real values.
    """
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def require_fields(fields: Dict[str, Any]) -> None:
    """
    Raise ValidationError listing every missing field

    Args:
        fields: Mapping of wire field name to value
    """
    missing: List[str] = [name for name, value in fields.items() if is_missing(value)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

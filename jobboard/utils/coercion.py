"""Value coercion for loosely typed records.

Profile and vacancy records come from several stores: region ids are
integers in one table and strings in another, district ids are numeric for
imported vacancies and UUIDs for manually created ones, and salaries arrive
as numbers or numeric strings. These helpers turn such values into one
comparable form so that equality checks never depend on the storage type.
"""

import math
from typing import Any, Optional


def coerce_identifier(value: Any) -> Optional[str]:
    """Coerce an identifier to its canonical string form.

    Args:
        value: Identifier as int, float, str, UUID or None

    Returns:
        Stripped string, or None for missing/empty values

    Example:
        >>> coerce_identifier(140)
        '140'
        >>> coerce_identifier(140.0)
        '140'
        >>> coerce_identifier("  district-uuid ")
        'district-uuid'
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            value = int(value)

    text = str(value).strip()
    return text or None


def coerce_number(value: Any) -> Optional[float]:
    """Coerce a numeric field, treating unparseable input as missing.

    Example:
        >>> coerce_number("3000000")
        3000000.0
        >>> coerce_number("negotiable") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip().replace(" ", "")
        if not value:
            return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    return number if math.isfinite(number) else None


def identifiers_equal(left: Any, right: Any) -> bool:
    """Compare two identifiers after string coercion.

    Missing values never compare equal, not even to each other.
    """
    left_id = coerce_identifier(left)
    right_id = coerce_identifier(right)
    if left_id is None or right_id is None:
        return False
    return left_id == right_id


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Example:
        >>> round_half_up(50.5)
        51
        >>> round_half_up(2.4)
        2
    """
    return int(math.floor(value + 0.5))

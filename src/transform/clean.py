"""Field-level cleaning: numbers, colors, names, hometowns and display formats."""

import math

from src.extract.errors import MalformedField

NOT_AVAILABLE = "N/A"

# CFBD roster "year" is the number of seasons on campus
CLASS_NAMES: dict[int, str] = {
    1: "Freshman",
    2: "Sophomore",
    3: "Junior",
    4: "Senior",
    5: "Graduate",
}


def parse_int(value: object, field: str = "value") -> int | None:
    """Parse an upstream numeric field into an int.

    Ints pass through, floats are truncated, and numeric strings ("74",
    " 215 ", "74.0") are parsed. Missing values (None, "") give None.

    Raises:
        MalformedField: The value is present but not numeric (e.g. "6-2").
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise MalformedField(field, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedField(field, value)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError as e:
            raise MalformedField(field, value) from e
        if not math.isfinite(number):
            raise MalformedField(field, value)
        return int(number)
    raise MalformedField(field, value)


def normalize_color(color: object, default: str) -> str:
    """Return a '#'-prefixed hex color, or the default when missing.

    Examples:
        >>> normalize_color("bb0000", "#000000")
        '#bb0000'
        >>> normalize_color("#bb0000", "#000000")
        '#bb0000'
    """
    if not isinstance(color, str) or not color.strip():
        return default
    color = color.strip()
    return color if color.startswith("#") else f"#{color}"


def compose_hometown(
    city: str | None,
    state: str | None,
    description: str | None = None,
) -> str | None:
    """Build a hometown label: "City, State", then city or state, then description."""
    city = (city or "").strip()
    state = (state or "").strip()
    if city and state:
        return f"{city}, {state}"
    if city or state:
        return city or state
    description = (description or "").strip()
    return description or None


def split_full_name(full_name: str | None) -> tuple[str, str]:
    """Best-effort split of a combined name into (first, last)."""
    parts = (full_name or "").split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def format_height(inches: int | None) -> str:
    """Convert inches to feet'inches" display form.

    Examples:
        >>> format_height(74)
        '6\\'2"'
        >>> format_height(None)
        'N/A'
    """
    if not inches:
        return NOT_AVAILABLE
    return f"{inches // 12}'{inches % 12}\""


def format_weight(pounds: int | None) -> str:
    if not pounds:
        return NOT_AVAILABLE
    return f"{pounds} lbs"


def class_name(year: int | None) -> str | None:
    """Map a CFBD roster year (1-5) to a class label."""
    if year is None:
        return None
    return CLASS_NAMES.get(year)

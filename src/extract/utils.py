"""Season helpers for the upstream providers."""

from datetime import date


def current_season_year(today: date | None = None) -> int:
    """Return the current college football season year (e.g., 2025).

    The season kicks off in late August. Before August we're still in the
    offseason following the previous year's season.
    """
    today = today or date.today()
    if today.month >= 8:
        return today.year
    return today.year - 1


def parse_year(value: str | int | None, default: int | None = None) -> int:
    """Parse a season year from a query parameter.

    Raises:
        ValueError: The value is present but not a valid year.
    """
    if value is None or value == "":
        return default if default is not None else current_season_year()
    year = int(value)
    if year < 1869 or year > 2100:
        raise ValueError(f"Year out of range: {year}")
    return year

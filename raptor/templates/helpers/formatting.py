"""Formatting helpers: dates and currency.

Dates accept a datetime, a date, an ISO-8601 string or a number of
milliseconds since the Unix epoch.
"""

from datetime import date, datetime

from raptor.templates.helpers.registry import builtin_helper

DATE_FORMAT_SHORT = "%-m/%-d/%Y"
DATE_FORMAT_LONG = "%-m/%-d/%Y, %-I:%M:%S %p"


def _to_datetime(value) -> datetime:
    """Coerce a helper argument to a datetime.

    Raises:
        ValueError: value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise ValueError(f"Invalid date: {value!r}")


@builtin_helper(
    name="date",
    description="Format a date or epoch milliseconds ('short' gives 1/15/2024, default adds the time)",
    example='{{ date post.published "short" }}',
)
def helper_date(value, fmt="default") -> str:
    """Format a date. Numbers are milliseconds since the epoch, in local time."""
    dt = _to_datetime(value)
    if fmt == "short":
        return dt.strftime(DATE_FORMAT_SHORT)
    return dt.strftime(DATE_FORMAT_LONG)


@builtin_helper(
    name="currency",
    description="Format an amount as dollars with two decimals (e.g., '$12.50')",
    example="{{ currency order.total }}",
)
def helper_currency(amount) -> str:
    return f"${float(amount):.2f}"

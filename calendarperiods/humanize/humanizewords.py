"""Unit table and English wording for humanized durations."""

# Approximate seconds per unit
DAY = 86400
WEEK = 604800
MONTH = 2629743.83
YEAR = 31556926

# Largest unit first; decomposition order matters
UNITS = (
    ("year", YEAR),
    ("month", MONTH),
    ("week", WEEK),
    ("day", DAY),
)

# unit -> (singular, plural)
WORDS = {
    "year": ("year", "years"),
    "month": ("month", "months"),
    "week": ("week", "weeks"),
    "day": ("day", "days"),
}

SAME_DAY = "less than a day"
POSTFIX_PAST = "ago"
POSTFIX_FUTURE = "in future"


def pluralize(count: int, unit: str) -> str:
    """
    Render a count with its unit name.

    Examples:
        >>> pluralize(1, "year")
        '1 year'

        >>> pluralize(3, "week")
        '3 weeks'
    """
    singular, plural = WORDS[unit]
    return f"{count} {singular if count == 1 else plural}"

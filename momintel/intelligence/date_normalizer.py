"""Date normalization for meeting-relative due dates.

Converts due keywords and literals found in notes (e.g. "friday",
"tomorrow", "3/15") to concrete dates, using the meeting start as
the reference point.
"""

from datetime import date, datetime

import dateparser

# dateparser has no reading for these; map them onto phrases it knows.
_KEYWORD_ALIASES = {
    "tonight": "today",
    "eod": "today",
    "next week": "in 1 week",
}


def normalize_due_date(
    raw_due: str | None,
    meeting_start: datetime,
) -> date | None:
    """Convert a raw due keyword or literal to a date.

    Args:
        raw_due: Keyword or literal from the action item parser
        meeting_start: When the meeting started (reference for relative dates)

    Returns:
        Parsed date, or None if raw_due is empty or unparseable

    Examples:
        >>> normalize_due_date("tomorrow", datetime(2026, 1, 18, 10, 0))
        datetime.date(2026, 1, 19)
        >>> normalize_due_date(None, datetime(2026, 1, 18))
    """
    if raw_due is None or not raw_due.strip():
        return None

    phrase = _KEYWORD_ALIASES.get(raw_due.strip().lower(), raw_due.strip())
    settings: dict = {
        "RELATIVE_BASE": meeting_start.replace(tzinfo=None),
        "PREFER_DATES_FROM": "future",
        "RETURN_AS_TIMEZONE_AWARE": False,
    }

    try:
        parsed = dateparser.parse(phrase, settings=settings)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is None:
        return None
    return parsed.date()

# ABOUTME: Due-date computation for loans.
# ABOUTME: A loan is due a whole number of weeks after it starts.

from datetime import date, timedelta
from typing import TypeVar

MIN_LOAN_WEEKS = 1
MAX_LOAN_WEEKS = 4

_When = TypeVar("_When", bound=date)


def compute_due_date(started_at: _When, duration_weeks: int) -> _When:
    """Return the date a loan falls due.

    Adds duration_weeks * 7 calendar days to started_at. Works for both
    date and datetime values; a datetime keeps its time of day and tzinfo.
    Range checking is done by LoanLedger before this is called.
    """
    return started_at + timedelta(days=7 * duration_weeks)

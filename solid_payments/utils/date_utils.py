"""Date manipulation utilities"""

from datetime import date


def add_years(from_date: date, years: int) -> date:
    """Add whole years to a date, clamping Feb 29 to Feb 28 in non-leap years"""
    try:
        return from_date.replace(year=from_date.year + years)
    except ValueError:
        return from_date.replace(year=from_date.year + years, day=28)

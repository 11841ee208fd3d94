"""Helpers shared by the per-platform field mappers.

Mappers are pure functions ``(Profile, ApplicationOptions) -> ValueMap``.
They never look at the page, so a mapper produces the same values whether
or not the corresponding element exists.
"""

import math
import re
from datetime import datetime

from cv_autofill.profile.models import Basics, Profile, WorkEntry

# Start date assumed for work entries that do not state one
MISSING_START_DATE = datetime(2000, 1, 1)

DAYS_PER_YEAR = 365.25

_DATE_RE = re.compile(r"^\s*(\d{4})(?:-(\d{1,2}))?(?:-(\d{1,2}))?")


def split_name(full_name: str) -> tuple[str, str]:
    """Split a full name into (first name, last name).

    The first whitespace-separated token is the first name, the rest joined
    by single spaces is the last name.

    Examples:
        "Anna Maria Nowak" -> ("Anna", "Maria Nowak")
        "Prince" -> ("Prince", "")
    """
    parts = full_name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def linkedin_url(basics: Basics) -> str:
    """URL of the first profile whose network is LinkedIn (case-insensitive)."""
    for profile in basics.profiles:
        if profile.network.strip().lower() == "linkedin":
            return profile.url
    return ""


def skill_names(profile: Profile) -> str:
    """Comma-joined names of the skill groups."""
    return ", ".join(group.name for group in profile.skills if group.name)


def location_text(basics: Basics) -> str:
    return basics.location.address or basics.location.city


def parse_resume_date(value: str) -> datetime | None:
    """Parse JSON-Resume dates: ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``."""
    match = _DATE_RE.match(value or "")
    if not match:
        return None
    year, month, day = match.groups()
    try:
        return datetime(int(year), int(month or 1), int(day or 1))
    except ValueError:
        return None


def experience_years(work: list[WorkEntry], now: datetime | None = None) -> int:
    """Whole years since the earliest job start.

    Approximation at 365.25 days per year, not calendar-exact. Returns 0
    without work history.
    """
    if not work:
        return 0

    starts = [parse_resume_date(job.start_date) or MISSING_START_DATE for job in work]
    elapsed = (now or datetime.now()) - min(starts)
    years = math.floor(elapsed.total_seconds() / (DAYS_PER_YEAR * 24 * 3600))
    return max(years, 0)

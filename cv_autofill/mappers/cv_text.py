"""Plain-text CV rendering for textarea fields.

Some forms accept the CV as text next to (or instead of) a file upload.
The rendering is deterministic: fixed section order, no timestamps, and
sections whose source list is empty are left out entirely.
"""

from cv_autofill.config import settings
from cv_autofill.mappers.base import linkedin_url, parse_resume_date
from cv_autofill.profile.models import EducationEntry, Profile, WorkEntry

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pl": (
        "styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec",
        "lipiec", "sierpień", "wrzesień", "październik", "listopad", "grudzień",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}


def format_month_year(value: str, locale: str) -> str:
    """Format a JSON-Resume date as "<month name> <year>".

    Unparseable dates are returned unchanged.
    """
    parsed = parse_resume_date(value)
    if parsed is None:
        return value
    months = MONTH_NAMES.get(locale, MONTH_NAMES["en"])
    return f"{months[parsed.month - 1]} {parsed.year}"


def _year(value: str) -> str:
    parsed = parse_resume_date(value)
    return str(parsed.year) if parsed else ""


def _work_lines(job: WorkEntry, locale: str) -> list[str]:
    start = format_month_year(job.start_date, locale) if job.start_date else ""
    end = format_month_year(job.end_date, locale) if job.end_date else "Present"

    lines = [
        f"{job.position or 'Position'} at {job.name or 'Company'}",
        f"{start} - {end}",
    ]
    if job.location:
        lines.append(job.location)
    if job.summary:
        lines.append(job.summary)
    lines.extend(f"• {highlight}" for highlight in job.highlights)
    return lines


def _education_lines(edu: EducationEntry) -> list[str]:
    lines = [
        f"{edu.study_type or 'Degree'} in {edu.area or 'Field'}",
        edu.institution or "Institution",
    ]
    start, end = _year(edu.start_date), _year(edu.end_date)
    if start or end:
        lines.append(f"{start} - {end}")
    return lines


def _entries_section(title: str, entries: list[list[str]]) -> str:
    # A blank line separates the title and every entry
    lines = [title]
    for entry in entries:
        lines.append("")
        lines.extend(entry)
    return "\n".join(lines)


def format_cv_text(profile: Profile, locale: str | None = None) -> str:
    """Render the profile as human-readable plain text.

    Args:
        profile: Profile to render
        locale: Month-name locale ("pl" or "en"); defaults to settings

    Returns:
        The CV text, ending with a newline
    """
    locale = locale or settings.cv_locale
    basics = profile.basics
    sections: list[str] = []

    header = [line for line in (basics.name, basics.label) if line]
    if header:
        sections.append("\n".join(header))

    contact = []
    if basics.email:
        contact.append(f"Email: {basics.email}")
    if basics.phone:
        contact.append(f"Phone: {basics.phone}")
    if basics.url:
        contact.append(f"Website: {basics.url}")
    linkedin = linkedin_url(basics)
    if linkedin:
        contact.append(f"LinkedIn: {linkedin}")
    if contact:
        sections.append("\n".join(contact))

    if basics.summary:
        sections.append(f"SUMMARY\n{basics.summary}")

    if profile.work:
        sections.append(
            _entries_section("WORK EXPERIENCE", [_work_lines(job, locale) for job in profile.work])
        )

    if profile.education:
        sections.append(
            _entries_section("EDUCATION", [_education_lines(edu) for edu in profile.education])
        )

    skill_lines = [
        f"{group.name}: {', '.join(group.keywords)}".rstrip()
        for group in profile.skills
        if group.name
    ]
    if skill_lines:
        sections.append("SKILLS\n" + "\n".join(skill_lines))

    if profile.languages:
        sections.append(
            "LANGUAGES\n"
            + "\n".join(f"{lang.language} - {lang.fluency}" for lang in profile.languages)
        )

    if not sections:
        return ""
    return "\n\n".join(sections) + "\n"

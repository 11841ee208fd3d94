"""Profile document and per-submission options."""

from cv_autofill.profile.models import (
    ApplicationOptions,
    Basics,
    EducationEntry,
    LanguageEntry,
    Location,
    Profile,
    SkillGroup,
    SocialProfile,
    WorkEntry,
)

__all__ = [
    "ApplicationOptions",
    "Basics",
    "EducationEntry",
    "LanguageEntry",
    "Location",
    "Profile",
    "SkillGroup",
    "SocialProfile",
    "WorkEntry",
]

"""Per-platform field mappers: Profile + ApplicationOptions -> ValueMap."""

from cv_autofill.mappers.base import (
    experience_years,
    linkedin_url,
    split_name,
)
from cv_autofill.mappers.cv_text import format_cv_text
from cv_autofill.mappers.erecruiter import map_erecruiter
from cv_autofill.mappers.solidjobs import map_solidjobs
from cv_autofill.mappers.traffit import map_traffit

__all__ = [
    "experience_years",
    "format_cv_text",
    "linkedin_url",
    "map_erecruiter",
    "map_solidjobs",
    "map_traffit",
    "split_name",
]

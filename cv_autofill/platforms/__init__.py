"""Platform adapters for supported recruiting sites.

Each recruiting platform has its own form layout. Adapters pair a cheap
detector with a locator that binds semantic fields to page elements, and
name the field mapper that produces the values for those fields.
"""

from cv_autofill.platforms.base import FieldSpec, PlatformAdapter
from cv_autofill.platforms.registry import PlatformRegistry

# Importing the adapter modules registers them; detection order comes from priority
from cv_autofill.platforms.erecruiter import ERecruiterAdapter
from cv_autofill.platforms.solidjobs import SolidJobsAdapter
from cv_autofill.platforms.traffit import TraffitAdapter

__all__ = [
    "ERecruiterAdapter",
    "FieldSpec",
    "PlatformAdapter",
    "PlatformRegistry",
    "SolidJobsAdapter",
    "TraffitAdapter",
]

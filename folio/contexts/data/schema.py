"""
Site Data Store schema constants.

Field names are the JSON keys written by the CMS (camelCase where the CMS
uses it). Shared by the validator and the data structures.
"""

from enum import Enum
from typing import List

# (path, display name) pairs for the singleton site metadata
SITE_FIELDS = [
    (("title",), "title"),
    (("name", "first"), "name.first"),
    (("name", "last"), "name.last"),
    (("intro",), "intro"),
]

JOB_FIELDS = ["dateStart", "dateEnd", "role", "company"]
WIN_FIELDS = ["highlight", "description"]
SKILL_FIELDS = ["name"]
CONTACT_FIELDS = ["label", "value", "url"]

EXTERNAL_URL_SCHEME = "https://"
EMAIL_URL_SCHEME = "mailto:"
EMAIL_LABEL = "email"

# Anchor attributes added to links that leave the site
EXTERNAL_LINK_ATTRIBUTES = {"target": "_blank", "rel": "noopener"}


class SkillCategory(Enum):
    """Priority tier of a skill, controlling its visual emphasis."""

    HIGH = "hi"
    LOW = "lo"
    NONE = ""

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @property
    def css_classes(self) -> List[str]:
        """Class tokens added to the base tag class (none for uncategorized)."""
        return [self.value] if self.value else []

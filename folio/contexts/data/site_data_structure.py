"""
Site Data Store Data Structures

Typed, read-only representation of the single JSON document that holds all
page content. Documents are validated before they are parsed, so a
SiteDocument always satisfies the site schema.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from folio.contexts.data.exceptions import InvalidSiteDataError
from folio.contexts.data.schema import EXTERNAL_LINK_ATTRIBUTES, SkillCategory
from folio.contexts.data.validator import validate_site_data


@dataclass(frozen=True)
class PersonName:
    first: str
    last: str


@dataclass(frozen=True)
class SiteMetadata:
    """
    Page-level metadata.

    Attributes:
        title: Text of the page <title>
        name: Name shown in the page heading
        intro: Introductory paragraph
    """

    title: str
    name: PersonName
    intro: str


@dataclass(frozen=True)
class Job:
    """One entry of the job history. List order is display order."""

    date_start: str
    date_end: str
    role: str
    company: str


@dataclass(frozen=True)
class Win:
    highlight: str
    description: str


@dataclass(frozen=True)
class Skill:
    name: str
    category: SkillCategory = SkillCategory.NONE

    @property
    def css_classes(self) -> List[str]:
        """Full class list of the rendered tag, base class first."""
        return ["tag"] + self.category.css_classes


@dataclass(frozen=True)
class Contact:
    """
    Contact link.

    Attributes:
        label: What the link is (e.g., "Email", "GitHub")
        value: Human-readable form shown on the page
        url: Link target
        external: Whether the link leaves the site (opens in a new tab)
    """

    label: str
    value: str
    url: str
    external: bool

    @property
    def link_attributes(self) -> Dict[str, str]:
        """Extra anchor attributes; empty for links that stay on the site."""
        return dict(EXTERNAL_LINK_ATTRIBUTES) if self.external else {}


@dataclass(frozen=True)
class SiteDocument:
    """
    The complete Data Store.

    Attributes:
        site: Page metadata
        jobs: Job history in display order
        wins: Achievements in display order
        skills: Skills in display order
        contact: Contact links in display order
    """

    site: SiteMetadata
    jobs: List[Job]
    wins: List[Win]
    skills: List[Skill]
    contact: List[Contact]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], source_path: Path = None) -> "SiteDocument":
        """
        Validate and parse a raw Data Store document.

        Args:
            raw: Parsed JSON document
            source_path: Where the document came from (used in error messages)

        Returns:
            SiteDocument

        Raises:
            InvalidSiteDataError: If the document violates the site schema
        """
        validate_site_data(raw).raise_for_issues(source_path=source_path)

        site = raw["site"]
        return cls(
            site=SiteMetadata(
                title=site["title"],
                name=PersonName(first=site["name"]["first"], last=site["name"]["last"]),
                intro=site["intro"],
            ),
            jobs=[
                Job(
                    date_start=job["dateStart"],
                    date_end=job["dateEnd"],
                    role=job["role"],
                    company=job["company"],
                )
                for job in raw["jobs"]
            ],
            wins=[Win(highlight=w["highlight"], description=w["description"]) for w in raw["wins"]],
            skills=[
                Skill(name=s["name"], category=SkillCategory(s["category"])) for s in raw["skills"]
            ],
            contact=[
                Contact(label=c["label"], value=c["value"], url=c["url"], external=c["external"])
                for c in raw["contact"]
            ],
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SiteDocument":
        """
        Load a Data Store from a UTF-8 JSON file.

        Raises:
            InvalidSiteDataError: If the file is not valid JSON or violates the schema
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidSiteDataError([f"Malformed JSON: {e}"], source_path=path) from e

        return cls.from_dict(raw, source_path=path)

    def to_context(self) -> Dict[str, Any]:
        """Template scope, with sections bound under their JSON names."""
        return {
            "site": self.site,
            "jobs": self.jobs,
            "wins": self.wins,
            "skills": self.skills,
            "contact": self.contact,
        }

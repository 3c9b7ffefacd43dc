"""
Structural checks of the rendered page against its Data Store.

Parses the HTML and verifies that every section of the document is
reflected faithfully: element counts, visible role/company text, skill tag
classes and contact link attributes. A mismatch means the renderer is
wrong, since the data has already been validated.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import BeautifulSoup

from folio.contexts.data.schema import EXTERNAL_LINK_ATTRIBUTES, SkillCategory
from folio.contexts.data.site_data_structure import SiteDocument


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    TITLE_MISSING = "<title> does not contain site title {expected!r}"
    HEADING_MISSING = "<h1> does not contain {part} {expected!r}"
    COUNT_MISMATCH = "{what}: rendered {actual} (expected {expected})"
    TEXT_NOT_RENDERED = "{what} {expected!r} not found among rendered {selector} elements"
    LINK_HREF_WRONG = "contact {label!r}: .link has href {actual!r} (expected {expected!r})"
    LINK_ATTRIBUTE_WRONG = "contact {label!r}: {attr}={actual!r} (expected {expected!r})"
    LINK_ATTRIBUTE_PRESENT = "contact {label!r}: unexpected {attr}={actual!r} on non-external link"


@dataclass
class RenderDiagnostics:
    """
    Result of checking one rendered page.

    Attributes:
        job_count: Number of .job elements found
        win_count: Number of .win elements found
        tag_count: Number of .tag elements found
        link_count: Number of .link elements found
        issues: Mismatches between page and data (empty when consistent)
    """

    job_count: int = 0
    win_count: int = 0
    tag_count: int = 0
    link_count: int = 0
    issues: List[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.issues


def _attr_text(value) -> Optional[str]:
    """Normalize a BeautifulSoup attribute (multi-valued ones come back as lists)."""
    if isinstance(value, list):
        return " ".join(value)
    return value


def _check_count(what: str, actual: int, expected: int, issues: List[str]) -> None:
    if actual != expected:
        issues.append(
            IssueTemplates.COUNT_MISMATCH.format(what=what, actual=actual, expected=expected)
        )


def _check_texts(
    soup: BeautifulSoup, selector: str, what: str, expected: List[str], issues: List[str]
) -> None:
    rendered = {el.get_text().strip() for el in soup.select(selector)}
    for text in expected:
        if text.strip() not in rendered:
            issues.append(
                IssueTemplates.TEXT_NOT_RENDERED.format(what=what, expected=text, selector=selector)
            )


def check_rendered_page(document: SiteDocument, html: str) -> RenderDiagnostics:
    """
    Check a rendered page against the document it was rendered from.

    Args:
        document: Data Store the page was rendered from
        html: Rendered HTML

    Returns:
        RenderDiagnostics with element counts and any mismatches

    Example:
        >>> diagnostics = check_rendered_page(document, render_page(document))
        >>> assert diagnostics.is_consistent, diagnostics.issues
    """
    soup = BeautifulSoup(html, "html.parser")
    issues: List[str] = []

    # Page structure
    title = soup.find("title")
    if title is None or document.site.title.strip() not in title.get_text():
        issues.append(IssueTemplates.TITLE_MISSING.format(expected=document.site.title))

    heading_text = " ".join(h1.get_text() for h1 in soup.find_all("h1"))
    name = document.site.name
    for part, expected in [("first name", name.first), ("last name", name.last)]:
        if expected.strip() not in heading_text:
            issues.append(IssueTemplates.HEADING_MISSING.format(part=part, expected=expected))

    # Jobs
    jobs = soup.select(".job")
    _check_count("job entries", len(jobs), len(document.jobs), issues)
    _check_texts(soup, ".job-role", "role", [job.role for job in document.jobs], issues)
    _check_texts(soup, ".job-co", "company", [job.company for job in document.jobs], issues)

    # Wins
    wins = soup.select(".win")
    _check_count("win entries", len(wins), len(document.wins), issues)

    # Skills
    tags = soup.select(".tag")
    _check_count("skill tags", len(tags), len(document.skills), issues)
    for category in (SkillCategory.HIGH, SkillCategory.LOW):
        expected = sum(1 for skill in document.skills if skill.category is category)
        actual = len(soup.select(f".tag.{category.value}"))
        _check_count(f"'{category.value}' skill tags", actual, expected, issues)

    plain_expected = sum(1 for skill in document.skills if skill.category is SkillCategory.NONE)
    plain_actual = sum(1 for tag in tags if tag.get("class") == ["tag"])
    _check_count("uncategorized skill tags", plain_actual, plain_expected, issues)

    # Contact links, paired with the data by position
    links = soup.select(".link")
    _check_count("contact links", len(links), len(document.contact), issues)
    for contact, anchor in zip(document.contact, links):
        href = _attr_text(anchor.get("href"))
        if href != contact.url:
            issues.append(
                IssueTemplates.LINK_HREF_WRONG.format(
                    label=contact.label, actual=href, expected=contact.url
                )
            )
            continue

        for attr, expected in EXTERNAL_LINK_ATTRIBUTES.items():
            actual = _attr_text(anchor.get(attr))
            if contact.external and actual != expected:
                issues.append(
                    IssueTemplates.LINK_ATTRIBUTE_WRONG.format(
                        label=contact.label, attr=attr, actual=actual, expected=expected
                    )
                )
            elif not contact.external and anchor.has_attr(attr):
                issues.append(
                    IssueTemplates.LINK_ATTRIBUTE_PRESENT.format(
                        label=contact.label, attr=attr, actual=actual
                    )
                )

    return RenderDiagnostics(
        job_count=len(jobs),
        win_count=len(wins),
        tag_count=len(tags),
        link_count=len(links),
        issues=issues,
    )

"""
Data Store validation.

Checks the raw JSON document against the site schema before anything is
rendered. Every violation is collected (not just the first) and names the
entry it belongs to, so the author can find it in the source file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from folio.contexts.data.exceptions import InvalidSiteDataError
from folio.contexts.data.schema import (
    CONTACT_FIELDS,
    EMAIL_LABEL,
    EMAIL_URL_SCHEME,
    EXTERNAL_URL_SCHEME,
    JOB_FIELDS,
    SITE_FIELDS,
    SKILL_FIELDS,
    WIN_FIELDS,
    SkillCategory,
)

_MISSING = object()


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    # Document-level
    NOT_AN_OBJECT = "Site data must be a JSON object, got {actual}"
    SECTION_MISSING = "'{section}' section is missing"
    SECTION_WRONG_TYPE = "'{section}' must be {expected}, got {actual}"
    SECTION_EMPTY = "'{section}' must contain at least one entry"

    # Entry-level
    ENTRY_NOT_AN_OBJECT = "{entry}: entry must be an object, got {actual}"
    FIELD_EMPTY = "{entry}: '{field}' must be non-empty text"
    INVALID_CATEGORY = "{entry}: unexpected category {value!r} (expected one of {valid})"
    EXTERNAL_NOT_BOOLEAN = "{entry}: 'external' must be a boolean, got {actual}"
    EXTERNAL_NOT_HTTPS = "{entry}: external URL should start with " + EXTERNAL_URL_SCHEME + " (got {url!r})"
    EMAIL_NOT_MAILTO = "{entry}: email URL should start with " + EMAIL_URL_SCHEME + " (got {url!r})"


@dataclass
class DataValidationResult:
    """
    Result of Data Store validation.

    Attributes:
        issues: Schema violations, empty when the document is valid
    """

    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def raise_for_issues(self, source_path: Optional[Path] = None) -> None:
        """Raise InvalidSiteDataError if any issue was found."""
        if self.issues:
            raise InvalidSiteDataError(self.issues, source_path=source_path)


def is_non_empty_text(value: Any) -> bool:
    """True for strings with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def _type_name(value: Any) -> str:
    if value is _MISSING:
        return "nothing"
    if value is None:
        return "null"
    return type(value).__name__


def _entry_label(kind: str, entry: Dict[str, Any], key: str, index: int) -> str:
    """Identify an entry by its key field, falling back to its position."""
    value = entry.get(key)
    if is_non_empty_text(value):
        return f'{kind} "{value}"'
    return f"{kind} #{index + 1}"


def _get_section(raw: Dict[str, Any], section: str, expected: type, issues: List[str]):
    """Fetch a top-level section, recording an issue if missing or mistyped."""
    value = raw.get(section, _MISSING)
    if value is _MISSING:
        issues.append(IssueTemplates.SECTION_MISSING.format(section=section))
        return None
    if not isinstance(value, expected):
        expected_name = "an object" if expected is dict else "a list"
        issues.append(
            IssueTemplates.SECTION_WRONG_TYPE.format(
                section=section, expected=expected_name, actual=_type_name(value)
            )
        )
        return None
    return value


def _iter_entries(entries: List[Any], section: str, kind: str, key: str, issues: List[str]):
    """Yield (label, entry) for each entry that is an object."""
    if not entries:
        issues.append(IssueTemplates.SECTION_EMPTY.format(section=section))
        return

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            issues.append(
                IssueTemplates.ENTRY_NOT_AN_OBJECT.format(
                    entry=f"{kind} #{index + 1}", actual=_type_name(entry)
                )
            )
            continue
        yield _entry_label(kind, entry, key, index), entry


def _check_text_fields(entry: Dict[str, Any], fields: List[str], label: str, issues: List[str]):
    for name in fields:
        if not is_non_empty_text(entry.get(name)):
            issues.append(IssueTemplates.FIELD_EMPTY.format(entry=label, field=name))


def check_site(raw: Dict[str, Any], issues: List[str]) -> None:
    site = _get_section(raw, "site", dict, issues)
    if site is None:
        return

    for path, display_name in SITE_FIELDS:
        value = site
        for key in path:
            value = value.get(key) if isinstance(value, dict) else None
        if not is_non_empty_text(value):
            issues.append(IssueTemplates.FIELD_EMPTY.format(entry="site", field=display_name))


def check_jobs(raw: Dict[str, Any], issues: List[str]) -> None:
    jobs = _get_section(raw, "jobs", list, issues)
    if jobs is None:
        return
    for label, job in _iter_entries(jobs, "jobs", "job", "role", issues):
        _check_text_fields(job, JOB_FIELDS, label, issues)


def check_wins(raw: Dict[str, Any], issues: List[str]) -> None:
    wins = _get_section(raw, "wins", list, issues)
    if wins is None:
        return
    for label, win in _iter_entries(wins, "wins", "win", "highlight", issues):
        _check_text_fields(win, WIN_FIELDS, label, issues)


def check_skills(raw: Dict[str, Any], issues: List[str]) -> None:
    skills = _get_section(raw, "skills", list, issues)
    if skills is None:
        return

    valid = SkillCategory.values()
    for label, skill in _iter_entries(skills, "skills", "skill", "name", issues):
        _check_text_fields(skill, SKILL_FIELDS, label, issues)

        category = skill.get("category", _MISSING)
        if category is _MISSING or category not in valid:
            issues.append(
                IssueTemplates.INVALID_CATEGORY.format(
                    entry=label,
                    value=None if category is _MISSING else category,
                    valid=", ".join(repr(v) for v in valid),
                )
            )


def check_contact(raw: Dict[str, Any], issues: List[str]) -> None:
    """
    Check contact links, including the URL-scheme rules.

    External links must use https://. A non-external link labelled "email"
    (case-insensitive) must use mailto:. Other non-external links are not
    constrained.
    """
    contacts = _get_section(raw, "contact", list, issues)
    if contacts is None:
        return

    for label, link in _iter_entries(contacts, "contact", "contact", "label", issues):
        _check_text_fields(link, CONTACT_FIELDS, label, issues)

        external = link.get("external", _MISSING)
        if not isinstance(external, bool):
            issues.append(
                IssueTemplates.EXTERNAL_NOT_BOOLEAN.format(entry=label, actual=_type_name(external))
            )
            continue

        url = link.get("url")
        if not is_non_empty_text(url):
            continue

        if external and not url.startswith(EXTERNAL_URL_SCHEME):
            issues.append(IssueTemplates.EXTERNAL_NOT_HTTPS.format(entry=label, url=url))

        link_label = link.get("label")
        is_email = isinstance(link_label, str) and link_label.lower() == EMAIL_LABEL
        if not external and is_email and not url.startswith(EMAIL_URL_SCHEME):
            issues.append(IssueTemplates.EMAIL_NOT_MAILTO.format(entry=label, url=url))


def validate_site_data(raw: Any) -> DataValidationResult:
    """
    Validate a raw Data Store document.

    Args:
        raw: Parsed JSON document

    Returns:
        DataValidationResult listing every schema violation

    Example:
        >>> result = validate_site_data(json.loads(path.read_text()))
        >>> if not result.is_valid:
        ...     print("\\n".join(result.issues))
    """
    if not isinstance(raw, dict):
        return DataValidationResult(
            issues=[IssueTemplates.NOT_AN_OBJECT.format(actual=_type_name(raw))]
        )

    issues: List[str] = []
    check_site(raw, issues)
    check_jobs(raw, issues)
    check_wins(raw, issues)
    check_skills(raw, issues)
    check_contact(raw, issues)

    return DataValidationResult(issues=issues)

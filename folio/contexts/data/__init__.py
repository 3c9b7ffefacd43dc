"""
Data Context

Responsibilities:
- Defines the Data Store model (site metadata, jobs, wins, skills, contact)
- Loads the Data Store from JSON
- Validates the raw document against the site schema

Owns: Data Store representation, schema rules
Never: Produces markup
"""

from folio.contexts.data.exceptions import InvalidSiteDataError
from folio.contexts.data.schema import SkillCategory
from folio.contexts.data.site_data_structure import (
    Contact,
    Job,
    PersonName,
    SiteDocument,
    SiteMetadata,
    Skill,
    Win,
)
from folio.contexts.data.validator import DataValidationResult, validate_site_data

__all__ = [
    "Contact",
    "DataValidationResult",
    "InvalidSiteDataError",
    "Job",
    "PersonName",
    "SiteDocument",
    "SiteMetadata",
    "Skill",
    "SkillCategory",
    "Win",
    "validate_site_data",
]

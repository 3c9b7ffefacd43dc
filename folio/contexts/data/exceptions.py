"""Custom exceptions for the data context."""

from pathlib import Path
from typing import List, Optional


class InvalidSiteDataError(ValueError):
    """
    Exception raised when the Data Store does not conform to the site schema.

    Attributes:
        issues: Every schema violation found, each naming the offending entry
        source_path: Path of the JSON file the data came from (if any)
    """

    def __init__(self, issues: List[str], source_path: Optional[Path] = None):
        self.issues = list(issues)
        self.source_path = source_path

        header = f"Invalid site data ({len(self.issues)} issue(s))"
        if source_path is not None:
            header += f" in {source_path}"

        super().__init__("\n".join([header + ":"] + [f"  - {issue}" for issue in self.issues]))

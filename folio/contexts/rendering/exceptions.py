"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import List, Optional


class SiteRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"\nTemplate: {template_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class RenderMismatchError(Exception):
    """
    Exception raised when the rendered page does not reflect its Data Store.

    This is a renderer defect, not a data defect: the data already passed
    validation by the time the page is checked.

    Attributes:
        issues: Structural mismatches found in the rendered page
        url: Output URL of the page that was checked
    """

    def __init__(self, issues: List[str], url: str = "/"):
        self.issues = list(issues)
        self.url = url

        lines = [f"Rendered page {url} does not match site data ({len(self.issues)} issue(s)):"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))

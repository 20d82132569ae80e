"""Collect recoverable problems found while building a catalog."""

import logging
from pathlib import Path
from typing import Optional

from example_catalog.errors import CatalogError
from example_catalog.models.catalog import LoadIssue
from example_catalog.models.enums import IssueKind

logger = logging.getLogger("example_catalog.loading")


class LoadReport:
    """Accumulates LoadIssues for one catalog build."""

    def __init__(self):
        self._issues: list[LoadIssue] = []

    @property
    def issues(self) -> tuple[LoadIssue, ...]:
        return tuple(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def record(
        self,
        kind: IssueKind,
        path: Path,
        message: str,
        url: Optional[str] = None,
        level: int = logging.WARNING,
    ) -> LoadIssue:
        """Log a problem and keep it for the finished catalog."""
        issue = LoadIssue(kind=kind, path=str(path), message=message, url=url)
        logger.log(level, str(issue))
        self._issues.append(issue)
        return issue

    def record_error(
        self,
        kind: IssueKind,
        error: CatalogError,
        fallback_path: Path,
        url: Optional[str] = None,
    ) -> LoadIssue:
        """Record a caught CatalogError as an issue."""
        return self.record(
            kind,
            error.path if error.path is not None else fallback_path,
            error.message,
            url=url,
            level=logging.ERROR,
        )

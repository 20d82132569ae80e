"""Result types returned by the resolvers."""

from typing import Generic, Optional, TypeVar

from example_catalog.models.catalog import LoadIssue
from example_catalog.models.enums import ResolutionStatus

T = TypeVar("T")


class Resolution(Generic[T]):
    """Outcome of resolving one folder or example.

    A resolution is either OK and carries a value, or ABSENT and carries the
    issue explaining why the node is missing from the catalog.
    """

    __slots__ = ("status", "value", "issue")

    def __init__(
        self,
        status: ResolutionStatus,
        value: Optional[T] = None,
        issue: Optional[LoadIssue] = None,
    ):
        self.status = status
        self.value = value
        self.issue = issue

    @classmethod
    def ok(cls, value: T) -> "Resolution[T]":
        return cls(ResolutionStatus.OK, value=value)

    @classmethod
    def absent(cls, issue: LoadIssue) -> "Resolution[T]":
        return cls(ResolutionStatus.ABSENT, issue=issue)

    @property
    def is_ok(self) -> bool:
        return self.status == ResolutionStatus.OK

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Resolution(ok, {self.value!r})"
        return f"Resolution(absent, {self.issue})"

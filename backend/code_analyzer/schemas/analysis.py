"""Schemas for findings, per-category results, and analysis reports."""

from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Category(str, Enum):
    """Analysis categories, in canonical report order."""

    BUG = "bug"
    SECURITY = "security"
    PERFORMANCE = "performance"
    QUALITY = "quality"
    DOCUMENTATION = "documentation"

    @property
    def order(self) -> int:
        return list(Category).index(self)


class Severity(str, Enum):
    """Finding severity levels, ordered low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self.value]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def max_of(cls, severities: Iterable["Severity"]) -> "Severity":
        """Highest severity present, or LOW when there is none."""
        return max(severities, key=lambda s: s.rank, default=cls.LOW)


_SEVERITY_RANK = {"low": 0, "medium": 1, "high": 2, "critical": 3}


class Origin(str, Enum):
    """Which path produced a category's findings."""

    REMOTE = "remote"
    HEURISTIC = "heuristic"


class Finding(BaseModel):
    """A single detected issue."""

    model_config = ConfigDict(frozen=True)

    category: Category
    severity: Severity
    line: Optional[int] = Field(default=None, ge=1)
    column: Optional[int] = Field(default=None, ge=1)
    message: str = Field(..., min_length=1)
    suggestion: Optional[str] = None
    snippet: Optional[str] = None


class CategoryResult(BaseModel):
    """Findings produced for one category by one analyzer run."""

    model_config = ConfigDict(frozen=True)

    category: Category
    findings: list[Finding] = Field(default_factory=list)
    origin: Origin
    fallback_reason: Optional[str] = None

    @computed_field
    @property
    def severity(self) -> Severity:
        return Severity.max_of(f.severity for f in self.findings)


class Summary(BaseModel):
    """Issue counts across every category included in a report."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_issues: int = Field(default=0, ge=0, alias="totalIssues")
    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)
    by_category: dict[Category, int] = Field(default_factory=dict, alias="byCategory")

    @classmethod
    def from_results(cls, results: Iterable[CategoryResult]) -> "Summary":
        counts = {severity: 0 for severity in Severity}
        by_category: dict[Category, int] = {}

        for result in results:
            by_category[result.category] = len(result.findings)
            for finding in result.findings:
                counts[finding.severity] += 1

        return cls(
            total_issues=sum(by_category.values()),
            critical=counts[Severity.CRITICAL],
            high=counts[Severity.HIGH],
            medium=counts[Severity.MEDIUM],
            low=counts[Severity.LOW],
            by_category=by_category,
        )

    def count_for(self, severity: Severity) -> int:
        return getattr(self, severity.value)


class AnalysisReport(BaseModel):
    """Combined result of analyzing one file."""

    model_config = ConfigDict(frozen=True)

    language: str
    results: dict[Category, CategoryResult] = Field(default_factory=dict)
    summary: Summary = Field(default_factory=Summary)

    @property
    def findings(self) -> list[Finding]:
        """All findings, in category order."""
        return [f for result in self.results.values() for f in result.findings]

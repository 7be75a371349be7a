"""Quality analyzer for readability and unfinished work markers."""

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.analyzers.patterns import LineRule
from code_analyzer.schemas.analysis import Category, Severity

MAX_LINE_LENGTH = 120


class QualityAnalyzer(HeuristicAnalyzer):
    category = Category.QUALITY
    rules = (
        LineRule(
            rule_id="QUAL-001",
            severity=Severity.LOW,
            message=f"Line too long (exceeds {MAX_LINE_LENGTH} characters)",
            suggestion="Break long lines into multiple lines for better readability",
            pattern=rf"^.{{{MAX_LINE_LENGTH + 1},}}",
            include_snippet=False,
        ),
        LineRule(
            rule_id="QUAL-002",
            severity=Severity.MEDIUM,
            message="Unresolved TODO/FIXME comment",
            suggestion="Address the TODO/FIXME or create a task to track it",
            pattern=r"\b(?:TODO|FIXME)\b",
        ),
    )

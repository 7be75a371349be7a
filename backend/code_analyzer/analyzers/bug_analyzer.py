"""Bug analyzer for common equality and scoping mistakes."""

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.analyzers.patterns import LineRule
from code_analyzer.schemas.analysis import Category, Severity


class BugAnalyzer(HeuristicAnalyzer):
    category = Category.BUG
    rules = (
        LineRule(
            rule_id="BUG-001",
            severity=Severity.MEDIUM,
            message="Use strict equality (===) instead of loose equality (==)",
            suggestion="Replace == with === for type-safe comparison",
            pattern=r"(?<![=!<>])==(?!=)",
        ),
        LineRule(
            rule_id="BUG-002",
            severity=Severity.LOW,
            message="Avoid using var, use let or const instead",
            suggestion="Replace var with let or const for better scoping",
            pattern=r"\bvar\s+[\w$]",
        ),
    )

"""Performance analyzer for loop signals."""

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.analyzers.patterns import LineRule
from code_analyzer.schemas.analysis import Category, Severity


class PerformanceAnalyzer(HeuristicAnalyzer):
    category = Category.PERFORMANCE
    rules = (
        LineRule(
            rule_id="PERF-001",
            severity=Severity.LOW,
            message="Cache array length in loop condition",
            suggestion="Store the collection length in a variable before the loop",
            pattern=r"\bfor\b",
            requires=r"\.length\b|\.size\(\)|\blen\(",
        ),
    )

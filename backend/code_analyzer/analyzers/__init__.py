"""Heuristic analyzer registry."""

from typing import Sequence

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.analyzers.bug_analyzer import BugAnalyzer
from code_analyzer.analyzers.documentation_analyzer import DocumentationAnalyzer
from code_analyzer.analyzers.patterns import LineRule, split_lines
from code_analyzer.analyzers.performance_analyzer import PerformanceAnalyzer
from code_analyzer.analyzers.quality_analyzer import QualityAnalyzer
from code_analyzer.analyzers.security_analyzer import SecurityAnalyzer
from code_analyzer.schemas.analysis import Category, Finding

HEURISTIC_ANALYZERS: dict[Category, HeuristicAnalyzer] = {
    analyzer.category: analyzer
    for analyzer in (
        BugAnalyzer(),
        SecurityAnalyzer(),
        PerformanceAnalyzer(),
        QualityAnalyzer(),
        DocumentationAnalyzer(),
    )
}


def scan(lines: Sequence[str], language: str, category: Category | str) -> list[Finding]:
    """Run the heuristic rules for one category. Unknown categories yield no findings."""
    try:
        category = Category(category)
    except ValueError:
        return []
    return HEURISTIC_ANALYZERS[category].scan(lines, language)


__all__ = [
    "HEURISTIC_ANALYZERS",
    "HeuristicAnalyzer",
    "LineRule",
    "BugAnalyzer",
    "SecurityAnalyzer",
    "PerformanceAnalyzer",
    "QualityAnalyzer",
    "DocumentationAnalyzer",
    "scan",
    "split_lines",
]

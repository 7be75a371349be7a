"""Base analyzer interface for line-based heuristic scans."""

from typing import Sequence

from code_analyzer.analyzers.patterns import LineRule, match_lines
from code_analyzer.schemas.analysis import Category, Finding


class HeuristicAnalyzer:
    """Base class for per-category heuristic analyzers.

    Subclasses declare ``category`` and ``rules``; analyzers that need more
    than one line of context override ``scan``.
    """

    category: Category
    rules: tuple[LineRule, ...] = ()

    def scan(self, lines: Sequence[str], language: str) -> list[Finding]:
        return match_lines(lines, self.rules, self.category)

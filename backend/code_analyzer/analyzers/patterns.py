"""Pattern-based analyzer helpers."""

from dataclasses import dataclass
import re
from typing import Iterable, Optional, Sequence

from code_analyzer.schemas.analysis import Category, Finding, Severity


@dataclass(frozen=True)
class LineRule:
    rule_id: str
    severity: Severity
    message: str
    suggestion: str
    pattern: str
    # Second pattern that must also occur on the same line.
    requires: Optional[str] = None
    flags: int = 0
    include_snippet: bool = True

    def matches(self, line: str) -> bool:
        if not re.search(self.pattern, line, self.flags):
            return False
        if self.requires and not re.search(self.requires, line, self.flags):
            return False
        return True

    def to_finding(self, category: Category, line: str, line_number: int) -> Finding:
        return Finding(
            category=category,
            severity=self.severity,
            line=line_number,
            message=self.message,
            suggestion=self.suggestion,
            snippet=line.strip() if self.include_snippet else None,
        )


def split_lines(code: str) -> list[str]:
    return code.splitlines()


def match_lines(
    lines: Sequence[str],
    rules: Iterable[LineRule],
    category: Category,
) -> list[Finding]:
    """Evaluate every rule against every line, line by line, in rule order."""
    rules = tuple(rules)
    findings: list[Finding] = []
    for index, line in enumerate(lines):
        for rule in rules:
            if rule.matches(line):
                findings.append(rule.to_finding(category, line, index + 1))
    return findings

"""Documentation analyzer for undocumented function declarations."""

import re
from typing import Sequence

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.schemas.analysis import Category, Finding, Severity

FUNCTION_DECLARATION = re.compile(
    r"\bfunction\b\s*\*?\s*[\w$]*\s*\("
    r"|\b(?:const|let|var)\s+[\w$]+\s*=.*=>"
)

COMMENT_PREFIXES = ("//", "/*", "*", "#")


class DocumentationAnalyzer(HeuristicAnalyzer):
    category = Category.DOCUMENTATION

    def scan(self, lines: Sequence[str], language: str) -> list[Finding]:
        findings: list[Finding] = []
        for index, line in enumerate(lines):
            if not FUNCTION_DECLARATION.search(line):
                continue
            if index > 0 and lines[index - 1].strip().startswith(COMMENT_PREFIXES):
                continue
            findings.append(
                Finding(
                    category=self.category,
                    severity=Severity.LOW,
                    line=index + 1,
                    message="Function lacks documentation",
                    suggestion="Add a doc comment describing parameters and return value",
                    snippet=line.strip(),
                )
            )
        return findings

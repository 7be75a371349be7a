"""Security analyzer with deterministic pattern checks."""

from code_analyzer.analyzers.base import HeuristicAnalyzer
from code_analyzer.analyzers.patterns import LineRule
from code_analyzer.schemas.analysis import Category, Severity

CODE_EXEC_OR_HTML_SINK = (
    r"\beval\s*\("
    r"|\bexec\s*\("
    r"|\bnew\s+Function\s*\("
    r"|innerHTML"
    r"|outerHTML"
    r"|\bdocument\.write(?:ln)?\s*\("
)

CREDENTIAL_IDENTIFIER = r"(?i)(password|passwd|secret|token|api_?key)"

CONSOLE_OUTPUT = (
    r"\bconsole\.(?:log|info|warn|error|debug|trace)\s*\("
    r"|\bprint(?:f|ln)?\s*\("
    r"|\bSystem\.(?:out|err)\.print"
)


class SecurityAnalyzer(HeuristicAnalyzer):
    category = Category.SECURITY
    rules = (
        LineRule(
            rule_id="SEC-001",
            severity=Severity.HIGH,
            message="Potential XSS or code injection: dynamic code execution or unsafe HTML sink",
            suggestion="Avoid eval() and innerHTML with user input; use safe parsing and textContent",
            pattern=CODE_EXEC_OR_HTML_SINK,
        ),
        LineRule(
            rule_id="SEC-002",
            severity=Severity.CRITICAL,
            message="Sensitive information written to console output",
            suggestion="Remove logging statements that print passwords, secrets, or tokens",
            pattern=CREDENTIAL_IDENTIFIER,
            requires=CONSOLE_OUTPUT,
        ),
    )


"""Prompt construction for remote code analysis."""

from code_analyzer.schemas.analysis import Category

CATEGORY_GOALS = {
    Category.BUG: (
        "Analyze this {language} code for potential bugs, logic errors, and runtime issues "
        "such as null or undefined access, off-by-one errors, unhandled exceptions, "
        "type coercion mistakes, and incorrect control flow."
    ),
    Category.SECURITY: (
        "Analyze this {language} code for security vulnerabilities. Identify SQL injection, "
        "XSS, command injection, hardcoded secrets, sensitive data exposure, insecure "
        "deserialization, and authentication or authorization flaws."
    ),
    Category.PERFORMANCE: (
        "Analyze this {language} code for performance issues such as inefficient algorithms, "
        "redundant work inside loops, unnecessary allocations, blocking I/O, and memory leaks."
    ),
    Category.QUALITY: (
        "Analyze this {language} code for code quality issues such as best practice "
        "violations, code smells, duplicated logic, unclear naming, overly long lines or "
        "functions, and unresolved TODO/FIXME markers."
    ),
    Category.DOCUMENTATION: (
        "Analyze this {language} code for missing or inadequate documentation, including "
        "undocumented functions, parameters, return values, and non-obvious logic."
    ),
}

OUTPUT_SCHEMA = """Return ONLY a JSON array. Each element must be an object with these fields:
- "type": "{category}"
- "severity": one of "low", "medium", "high", "critical"
- "line": 1-based line number of the issue, or null if it is not tied to a line
- "message": short description of the issue
- "suggestion": how to fix it
- "code": the offending code excerpt

Return [] if there are no issues. Do not include any text outside the JSON array."""


def _resolve_category(category: Category | str) -> Category:
    try:
        return Category(category)
    except ValueError:
        return Category.BUG


def build_prompt(code: str, language: str, category: Category | str) -> str:
    """Build the user instruction for one category.

    Unknown categories use the bug template.
    """
    resolved = _resolve_category(category)
    goal = CATEGORY_GOALS[resolved].format(language=language)
    schema = OUTPUT_SCHEMA.format(category=resolved.value)

    return f"{goal}\n\n{schema}\n\nCode:\n```{language}\n{code}\n```"


def build_system_prompt(category: Category | str) -> str:
    resolved = _resolve_category(category)
    return (
        f"You are an expert code reviewer specializing in {resolved.value} analysis. "
        "Analyze the code and return results in JSON format."
    )

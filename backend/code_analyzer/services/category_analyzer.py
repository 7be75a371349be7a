"""Per-category analysis: one remote attempt, heuristic fallback."""

import logging
from typing import Optional, Protocol

from code_analyzer.analyzers import scan, split_lines
from code_analyzer.schemas.analysis import Category, CategoryResult, Finding, Origin
from code_analyzer.services.llm_service import RemoteAnalysisError
from code_analyzer.services.prompt_builder import build_prompt, build_system_prompt
from code_analyzer.services.response_normalizer import MalformedResponse, parse_findings

logger = logging.getLogger(__name__)

REMOTE_DISABLED = "remote_disabled"


class RemoteAnalyzer(Protocol):
    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        timeout: float | None = None,
    ) -> str: ...


class CategoryAnalyzer:
    """Analyzes code for a single category.

    With no remote analyzer configured every call takes the heuristic path.
    Remote and normalization failures are logged and absorbed; the heuristic
    scan is always available as the terminal fallback.
    """

    def __init__(self, remote: Optional[RemoteAnalyzer] = None):
        self.remote = remote

    async def analyze(
        self,
        code: str,
        language: str,
        category: Category,
        timeout: float | None = None,
    ) -> CategoryResult:
        if self.remote is None:
            logger.debug(f"Remote analysis disabled, using heuristics for {category.value}")
            return self._heuristic(code, language, category, REMOTE_DISABLED)

        try:
            raw = await self.remote.generate(
                build_prompt(code, language, category),
                system_prompt=build_system_prompt(category),
                timeout=timeout,
            )
            findings = parse_findings(raw, category)
        except (RemoteAnalysisError, MalformedResponse) as e:
            logger.warning(
                f"Remote {category.value} analysis failed ({e.reason}), "
                f"falling back to heuristics: {e}"
            )
            return self._heuristic(code, language, category, e.reason)

        return CategoryResult(
            category=category,
            findings=[self._stamp(f, category) for f in findings],
            origin=Origin.REMOTE,
        )

    def _heuristic(
        self,
        code: str,
        language: str,
        category: Category,
        reason: str,
    ) -> CategoryResult:
        return CategoryResult(
            category=category,
            findings=scan(split_lines(code), language, category),
            origin=Origin.HEURISTIC,
            fallback_reason=reason,
        )

    @staticmethod
    def _stamp(finding: Finding, category: Category) -> Finding:
        if finding.category == category:
            return finding
        return finding.model_copy(update={"category": category})

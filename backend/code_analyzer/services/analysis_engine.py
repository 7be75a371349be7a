"""Analysis engine: fans out category analyses and merges their results."""

import asyncio
import logging
from functools import lru_cache
from typing import Iterable, Optional

from code_analyzer.config import Settings, get_settings
from code_analyzer.schemas.analysis import AnalysisReport, Category, Summary
from code_analyzer.services.category_analyzer import CategoryAnalyzer, RemoteAnalyzer
from code_analyzer.services.llm_service import LLMService

logger = logging.getLogger(__name__)


class InvalidCategoryError(ValueError):
    """A requested category tag is not one of the known categories."""


def resolve_categories(categories: Iterable[Category | str] | str) -> list[Category]:
    """Validate, deduplicate and order requested categories.

    Raises:
        InvalidCategoryError: If any tag is unknown.
    """
    if isinstance(categories, (str, Category)):
        categories = [categories]

    resolved: set[Category] = set()
    for tag in categories:
        try:
            resolved.add(Category(tag))
        except ValueError:
            raise InvalidCategoryError(f"Unknown analysis category: {tag!r}") from None

    return sorted(resolved, key=lambda c: c.order)


class AnalysisEngine:
    """Runs every requested category analysis for one file.

    Stateless between calls. Remote analysis is used only when the settings
    carry a usable provider credential.
    """

    def __init__(self, settings: Settings, remote: Optional[RemoteAnalyzer] = None):
        self.settings = settings
        if not settings.remote_enabled:
            remote = None
        elif remote is None:
            remote = LLMService(settings)
        self.category_analyzer = CategoryAnalyzer(remote)

    async def run(
        self,
        code: str,
        language: str,
        categories: Iterable[Category | str] | None = None,
        deadline: float | None = None,
    ) -> AnalysisReport:
        """Analyze ``code`` for each requested category.

        Args:
            code: File content
            language: Language tag, advisory only
            categories: Categories to analyze; None uses the configured default set
            deadline: Optional time budget in seconds for each remote call

        Returns:
            AnalysisReport with one result per requested category

        Raises:
            InvalidCategoryError: Before any analysis runs, if a category is unknown
        """
        if categories is None:
            categories = self.settings.default_categories
        selected = resolve_categories(categories)

        if not selected:
            return AnalysisReport(language=language)

        results = await asyncio.gather(
            *(
                self.category_analyzer.analyze(code, language, category, timeout=deadline)
                for category in selected
            )
        )

        # gather preserves argument order, so results follow the canonical order.
        by_category = {result.category: result for result in results}
        summary = Summary.from_results(results)

        origins = ", ".join(f"{r.category.value}={r.origin.value}" for r in results)
        logger.info(f"Analyzed {language} file ({origins}): {summary.total_issues} issues")

        return AnalysisReport(language=language, results=by_category, summary=summary)

    def run_sync(
        self,
        code: str,
        language: str,
        categories: Iterable[Category | str] | None = None,
        deadline: float | None = None,
    ) -> AnalysisReport:
        """Blocking wrapper around ``run`` for callers without an event loop."""
        return asyncio.run(self.run(code, language, categories, deadline))


@lru_cache
def get_analysis_engine() -> AnalysisEngine:
    """Get the shared engine built from the application settings."""
    return AnalysisEngine(get_settings())

"""Tests for prompt construction."""

import pytest

from code_analyzer.schemas.analysis import Category
from code_analyzer.services.prompt_builder import (
    CATEGORY_GOALS,
    build_prompt,
    build_system_prompt,
)


class TestBuildPrompt:
    """Test user prompt construction."""

    @pytest.mark.parametrize("category", list(Category))
    def test_embeds_code_goal_and_schema(self, category):
        """Prompt contains the goal, the code, and the output fields."""
        code = "var x = 1;\nif (x == 2) {}"
        prompt = build_prompt(code, "javascript", category)

        assert CATEGORY_GOALS[category].format(language="javascript") in prompt
        assert f"```javascript\n{code}\n```" in prompt
        for field in ("type", "severity", "line", "message", "suggestion", "code"):
            assert f'"{field}"' in prompt
        assert f'"type": "{category.value}"' in prompt

    def test_security_goal_mentions_common_vulnerabilities(self):
        """Security prompt names the vulnerabilities to look for."""
        prompt = build_prompt("x", "python", Category.SECURITY)

        assert "SQL injection" in prompt
        assert "XSS" in prompt
        assert "hardcoded secrets" in prompt

    def test_unknown_category_uses_bug_template(self):
        """Unknown categories fall back to the bug template."""
        prompt = build_prompt("x", "go", "style")

        assert prompt == build_prompt("x", "go", Category.BUG)

    def test_accepts_string_category(self):
        """String category values are accepted."""
        assert build_prompt("x", "go", "quality") == build_prompt("x", "go", Category.QUALITY)

    def test_is_pure(self):
        """Same inputs give the same prompt."""
        assert build_prompt("a", "c", Category.PERFORMANCE) == build_prompt("a", "c", Category.PERFORMANCE)


class TestBuildSystemPrompt:
    """Test system prompt construction."""

    def test_names_category(self):
        """System prompt names the specialization."""
        assert "documentation analysis" in build_system_prompt(Category.DOCUMENTATION)

    def test_unknown_category_uses_bug(self):
        """Unknown categories fall back to bug."""
        assert build_system_prompt("nope") == build_system_prompt(Category.BUG)

"""Tests for file path helpers."""

import pytest

from code_analyzer.services.file_service import FileService


class TestGetFileLanguage:
    """Test extension to language mapping."""

    @pytest.mark.parametrize(
        "path, language",
        [
            ("src/index.js", "javascript"),
            ("src/App.JSX", "javascript"),
            ("lib/util.ts", "typescript"),
            ("main.py", "python"),
            ("config.yml", "yaml"),
            ("README.md", "markdown"),
        ],
    )
    def test_known_extensions(self, path, language):
        """Known extensions map to their language."""
        assert FileService.get_file_language(path) == language

    def test_unknown_extension_is_plaintext(self):
        """Unknown extensions default to plaintext."""
        assert FileService.get_file_language("notes.xyz") == "plaintext"

    def test_no_extension_is_plaintext(self):
        """Files without an extension default to plaintext."""
        assert FileService.get_file_language("Makefile") == "plaintext"


class TestShouldAnalyzeFile:
    """Test analyzable file detection."""

    @pytest.mark.parametrize("path", ["a.js", "b.tsx", "c.py", "d.go", "e.css"])
    def test_source_files_analyzed(self, path):
        """Source files are analyzable."""
        assert FileService.should_analyze_file(path)

    @pytest.mark.parametrize("path", ["package.json", "README.md", "config.yaml", "image.png", "LICENSE"])
    def test_other_files_skipped(self, path):
        """Data, docs and binaries are not analyzable."""
        assert not FileService.should_analyze_file(path)

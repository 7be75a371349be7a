"""File path helpers: language detection and analyzability."""

import os


class FileService:
    """Maps file paths to language tags. Never touches the disk."""

    DEFAULT_LANGUAGE = "plaintext"

    LANGUAGE_MAP = {
        ".js": "javascript",
        ".jsx": "javascript",
        ".ts": "typescript",
        ".tsx": "typescript",
        ".py": "python",
        ".java": "java",
        ".cpp": "cpp",
        ".c": "c",
        ".cs": "csharp",
        ".go": "go",
        ".rs": "rust",
        ".php": "php",
        ".rb": "ruby",
        ".swift": "swift",
        ".kt": "kotlin",
        ".html": "html",
        ".css": "css",
        ".json": "json",
        ".xml": "xml",
        ".yaml": "yaml",
        ".yml": "yaml",
        ".md": "markdown",
    }

    # Source files worth reviewing; data and markup formats are excluded
    ANALYZABLE_EXTENSIONS = {
        ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".cpp", ".c", ".cs",
        ".go", ".rs", ".php", ".rb", ".swift", ".kt", ".html", ".css",
    }

    @staticmethod
    def _extension(file_path: str) -> str:
        return os.path.splitext(file_path)[1].lower()

    @classmethod
    def get_file_language(cls, file_path: str) -> str:
        return cls.LANGUAGE_MAP.get(cls._extension(file_path), cls.DEFAULT_LANGUAGE)

    @classmethod
    def should_analyze_file(cls, file_path: str) -> bool:
        return cls._extension(file_path) in cls.ANALYZABLE_EXTENSIONS

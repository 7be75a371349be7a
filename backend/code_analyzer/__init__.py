"""LLM-backed source file analysis with deterministic heuristic fallback."""

__version__ = "0.1.0"

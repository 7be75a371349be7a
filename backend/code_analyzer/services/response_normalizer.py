"""Normalization of provider output into findings.

This is the only place raw provider JSON is inspected. Everything downstream
works with validated ``Finding`` objects.
"""

import json
import logging
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from code_analyzer.schemas.analysis import Category, Finding, Severity

logger = logging.getLogger(__name__)

# Keys under which a wrapped payload may carry the findings array, in lookup order.
RESULT_KEYS = ("issues", "results")

CODE_FENCE_RE = re.compile(r"^\s*```[\w+-]*[ \t]*\n(.*?)\n?[ \t]*```\s*$", re.DOTALL)


class MalformedResponse(Exception):
    """Provider output does not match the expected findings shape."""

    reason = "malformed_response"


def _coerce_position(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, int) and value >= 1:
        return value
    return None


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else None


class ProviderFinding(BaseModel):
    """Shape of one finding as returned by the provider."""

    model_config = ConfigDict(extra="ignore")

    severity: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    message: str
    suggestion: Optional[str] = None
    code: Optional[str] = None

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("message must be a non-empty string")
        return v.strip()

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v).strip().lower()

    @field_validator("line", "column", mode="before")
    @classmethod
    def coerce_position(cls, v: Any) -> Optional[int]:
        return _coerce_position(v)

    @field_validator("suggestion", "code", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return _optional_text(v)


def _strip_code_fence(raw: str) -> str:
    match = CODE_FENCE_RE.match(raw)
    return match.group(1) if match else raw


def _extract_items(payload: Any) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in RESULT_KEYS:
            items = payload.get(key)
            if isinstance(items, list):
                return items
    raise MalformedResponse(
        f"Expected a JSON array or an object with one of {RESULT_KEYS}, got {type(payload).__name__}"
    )


def _resolve_severity(value: Optional[str], category: Category) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        logger.warning(f"Coercing unknown severity {value!r} to medium for {category.value} finding")
        return Severity.MEDIUM


def parse_findings(raw: str, category: Category) -> list[Finding]:
    """Parse raw provider text into findings stamped with ``category``.

    Raises:
        MalformedResponse: The payload is not JSON, has no findings array, or
            any element fails validation.
    """
    try:
        payload = json.loads(_strip_code_fence(raw or ""))
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedResponse(f"Provider returned non-JSON output: {e}") from e

    items = _extract_items(payload)

    findings: list[Finding] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedResponse(f"Element {index} is not an object")
        try:
            parsed = ProviderFinding.model_validate(item)
        except ValidationError as e:
            raise MalformedResponse(f"Element {index} is invalid: {e.errors()[0]['msg']}") from e

        findings.append(
            Finding(
                category=category,
                severity=_resolve_severity(parsed.severity, category),
                line=parsed.line,
                column=parsed.column,
                message=parsed.message,
                suggestion=parsed.suggestion,
                snippet=parsed.code,
            )
        )

    return findings

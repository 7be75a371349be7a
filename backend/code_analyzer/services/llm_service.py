"""LLM service for Google Gemini code review calls."""

import asyncio
import logging

import httpx
from google import genai
from google.genai import errors, types

from code_analyzer.config import Settings, get_settings

logger = logging.getLogger(__name__)

MALFORMED_REQUEST_STATUSES = {400, 404, 413, 422}
RATE_LIMIT_STATUS = 429


class RemoteAnalysisError(Exception):
    """Remote provider could not produce a response."""

    reason = "provider_error"


class Unreachable(RemoteAnalysisError):
    """Provider could not be reached or did not answer in time."""

    reason = "unreachable"


class RateLimited(RemoteAnalysisError):
    reason = "rate_limited"


class MalformedRequest(RemoteAnalysisError):
    reason = "malformed_request"


class ProviderError(RemoteAnalysisError):
    """Provider answered with a non-success status or failed internally."""

    reason = "provider_error"

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def map_api_error(exc: errors.APIError) -> RemoteAnalysisError:
    """Translate a Gemini API error into the remote error taxonomy."""
    status = getattr(exc, "code", None)
    message = f"Gemini API error {status}: {getattr(exc, 'message', None) or exc}"

    if status == RATE_LIMIT_STATUS:
        return RateLimited(message)
    if status in MALFORMED_REQUEST_STATUSES:
        return MalformedRequest(message)
    return ProviderError(message, status=status)


class LLMService:
    """Service for Google Gemini LLM operations.

    Performs exactly one request per call. Retrying is left to the caller.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.timeout = settings.analysis_timeout_seconds
        # HttpOptions.timeout is in milliseconds.
        self.client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
        )
        self.model = settings.gemini_model
        self.max_tokens = settings.analysis_max_tokens
        self.temperature = settings.analysis_temperature

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        timeout: float | None = None,
    ) -> str:
        """Generate a JSON completion using Gemini.

        Args:
            prompt: User prompt
            system_prompt: Optional system prompt
            timeout: Optional per-call timeout in seconds; can only shorten
                the configured timeout

        Returns:
            Generated text

        Raises:
            Unreachable: Transport failure or timeout
            RateLimited: Provider answered 429
            MalformedRequest: Provider rejected the request as invalid
            ProviderError: Any other provider failure
        """
        effective_timeout = self.timeout if timeout is None else min(timeout, self.timeout)
        if effective_timeout <= 0:
            raise Unreachable("Deadline already passed before calling Gemini")

        config = types.GenerateContentConfig(
            max_output_tokens=self.max_tokens,
            temperature=self.temperature,
            system_instruction=system_prompt,
            response_mime_type="application/json",
        )

        try:
            response = await asyncio.wait_for(
                self.client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=config,
                ),
                timeout=effective_timeout,
            )
        except asyncio.TimeoutError:
            raise Unreachable(f"Gemini call timed out after {effective_timeout:.1f} seconds") from None
        except errors.APIError as e:
            raise map_api_error(e) from e
        except httpx.TransportError as e:
            raise Unreachable(f"Gemini transport error: {e}") from e
        except Exception as e:
            logger.error(f"LLM generation failed: {e}")
            raise ProviderError(f"Gemini call failed: {e}") from e

        return response.text or ""

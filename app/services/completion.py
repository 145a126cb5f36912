"""Completion provider: prompt in, text out, failures as values.

The provider never raises for provider-side problems. A missing API key,
a timeout, a network or API error, and an empty answer all come back as a
failed CompletionResult so callers choose their fallback explicitly.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from openai import AsyncOpenAI, OpenAIError

from app.core.config import get_settings
from app.core.errors import ProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionResult:
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)

    @classmethod
    def success(cls, text: str) -> "CompletionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, reason: str) -> "CompletionResult":
        return cls(error=reason)


class CompletionProvider(Protocol):
    async def complete(self, prompt: str, max_tokens: int) -> CompletionResult: ...


class OpenAICompletionProvider:
    """Chat-completions backed provider. One attempt per call, no retries."""

    def __init__(self, api_key: str | None, model: str, timeout: float):
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0) if api_key else None

    async def complete(self, prompt: str, max_tokens: int) -> CompletionResult:
        if self._client is None:
            logger.warning("Completion skipped: OPENAI_API_KEY is not configured")
            return CompletionResult.failure("OPENAI_API_KEY is not configured")
        try:
            text = await self._request(prompt, max_tokens)
        except (OpenAIError, ProviderError) as exc:
            logger.warning("Completion failed (%s): %s", type(exc).__name__, exc)
            return CompletionResult.failure(str(exc))
        return CompletionResult.success(text)

    async def _request(self, prompt: str, max_tokens: int) -> str:
        completion = await self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
        )
        if not completion.choices:
            raise ProviderError("Completion returned no choices")
        text = (completion.choices[0].message.content or "").strip()
        if not text:
            raise ProviderError("Completion returned empty text")
        return text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()


@lru_cache
def get_completion_provider() -> OpenAICompletionProvider:
    settings = get_settings()
    return OpenAICompletionProvider(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout,
    )

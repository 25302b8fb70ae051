"""
AP Physics C Study Backend: LLM Abstraction Layer
Blocking generation for structured calls, async streaming for tutor replies.
"""

import time
import logging
from typing import Protocol, Optional, AsyncGenerator
from dataclasses import dataclass

from openai import OpenAI, AsyncOpenAI

from physics_tutor.config import (
    OPENAI_API_KEY, LLM_MODEL, LLM_MAX_TOKENS, LLM_TEMPERATURE,
    LLM_PROVIDER,
)

logger = logging.getLogger(__name__)


@dataclass
class LLMResult:
    text: str
    latency_ms: int
    model: str
    usage: dict


class LLMProvider(Protocol):
    def generate(self, messages: list[dict], **kwargs) -> LLMResult: ...

    def generate_streaming(self, messages: list[dict], **kwargs) -> AsyncGenerator[str, None]: ...


# ─── OpenAI Chat Completions ─────────────────────────────────────────────────

class OpenAIChat:
    def __init__(self, model: str = LLM_MODEL):
        self.model = model
        self._client = OpenAI(api_key=OPENAI_API_KEY)
        self._async_client = AsyncOpenAI(api_key=OPENAI_API_KEY)

    def generate(
        self,
        messages: list[dict],
        max_tokens: int = LLM_MAX_TOKENS,
        temperature: float = LLM_TEMPERATURE,
    ) -> LLMResult:
        """Synchronous generation."""
        start = time.perf_counter()
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
            elapsed = int((time.perf_counter() - start) * 1000)
            content = response.choices[0].message.content
            text = (content or "").strip()
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.info(f"LLM response: {elapsed}ms, {usage['total_tokens']} tokens")
            return LLMResult(text=text, latency_ms=elapsed, model=self.model, usage=usage)
        except Exception as e:
            elapsed = int((time.perf_counter() - start) * 1000)
            logger.error(f"LLM error after {elapsed}ms: {e}")
            raise

    async def generate_streaming(
        self,
        messages: list[dict],
        max_tokens: int = LLM_MAX_TOKENS,
        temperature: float = LLM_TEMPERATURE,
    ) -> AsyncGenerator[str, None]:
        """Async streaming generation. Yields text deltas as they arrive."""
        start = time.perf_counter()
        chars = 0
        try:
            stream = await self._async_client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                stream=True,
            )

            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content or ""
                if delta:
                    chars += len(delta)
                    yield delta
        except Exception as e:
            elapsed = int((time.perf_counter() - start) * 1000)
            logger.error(f"LLM streaming error after {elapsed}ms ({chars} chars sent): {e}")
            raise

        elapsed = int((time.perf_counter() - start) * 1000)
        logger.info(f"LLM stream complete: {elapsed}ms, {chars} chars")


# ─── Provider Factory ────────────────────────────────────────────────────────

_providers = {
    "openai": OpenAIChat,
}

_instance: Optional[LLMProvider] = None


def get_llm() -> LLMProvider:
    """Get the configured LLM provider (singleton). Also used as a FastAPI dependency."""
    global _instance
    if _instance is None:
        provider_cls = _providers.get(LLM_PROVIDER)
        if not provider_cls:
            raise ValueError(f"Unknown LLM provider: {LLM_PROVIDER}")
        _instance = provider_cls()
    return _instance

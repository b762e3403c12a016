# /app/services/llm_service.py

"""
The single LLM entry point used by the bio generator.

`LLMClient` wraps a provider service (Gemini or OpenAI), picks the model for
the caller's tier, and applies the call policy: every attempt is bounded by a
timeout, and a failed attempt is retried with exponential backoff until
`max_retries` is exhausted. Whatever the provider raises is surfaced as
`LLMServiceError`.
"""

import asyncio
import logging
from typing import Protocol

from ..core import config
from ..models.bio_model import Entitlement
from . import prompt_library
from .bio_helpers.entitlement import model_for

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Raised when the upstream LLM could not produce a response."""


class TextGenerationProvider(Protocol):
    name: str

    async def generate_text(self, prompt: str, model_name: str, temperature: float = 0.8) -> str:
        ...


class LLMClient:
    def __init__(
        self,
        provider: TextGenerationProvider,
        timeout_seconds: float = 30.0,
        max_retries: int = 1,
        backoff_seconds: float = 1.0,
        temperature: float = 0.8,
    ):
        self.provider = provider
        self.timeout_seconds = timeout_seconds
        self.max_retries = max(0, max_retries)
        self.backoff_seconds = backoff_seconds
        self.temperature = temperature

    async def generate_text(self, prompt: str, entitlement: Entitlement) -> str:
        model_name = model_for(entitlement, self.provider.name)
        attempts = self.max_retries + 1
        last_error: Exception = LLMServiceError("LLM call was never attempted.")

        for attempt in range(attempts):
            try:
                return await asyncio.wait_for(
                    self.provider.generate_text(prompt, model_name, temperature=self.temperature),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError as e:
                last_error = e
                logger.warning(
                    "LLM call to %s/%s timed out after %.1fs (attempt %d/%d)",
                    self.provider.name, model_name, self.timeout_seconds, attempt + 1, attempts,
                )
            except Exception as e:
                last_error = e
                logger.warning(
                    "LLM call to %s/%s failed (attempt %d/%d): %s",
                    self.provider.name, model_name, attempt + 1, attempts, e,
                )
            if attempt < attempts - 1:
                await asyncio.sleep(self.backoff_seconds * (2 ** attempt))

        raise LLMServiceError(f"{self.provider.name} did not return a response: {last_error}") from last_error


def build_llm_client() -> LLMClient:
    """
    Builds the process-wide client from configuration. Called once from the
    application lifespan.
    """
    if config.LLM_PROVIDER == "openai":
        from .openai_service import OpenAIService
        provider = OpenAIService(config.OPENAI_API_KEY, system_instruction=prompt_library.SYSTEM_INSTRUCTION)
    elif config.LLM_PROVIDER == "gemini":
        from .gemini_service import GeminiService
        provider = GeminiService(config.GOOGLE_API_KEY, system_instruction=prompt_library.SYSTEM_INSTRUCTION)
    else:
        raise ValueError(f"Unsupported LLM_PROVIDER: {config.LLM_PROVIDER!r}")

    logger.info("LLM provider configured: %s", provider.name)
    return LLMClient(
        provider,
        timeout_seconds=config.LLM_TIMEOUT_SECONDS,
        max_retries=config.LLM_MAX_RETRIES,
        backoff_seconds=config.LLM_RETRY_BACKOFF_SECONDS,
        temperature=config.LLM_TEMPERATURE,
    )

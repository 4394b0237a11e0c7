# workflow_generator/integrations/llm_client.py

from __future__ import annotations

import openai

from workflow_generator.core.config import Settings, get_settings
from workflow_generator.core.errors import InvalidCredentialError


class LLMClient:
    """
    Wrapper for Gemini text generation through its OpenAI-compatible endpoint.
    One request per call, no retries.
    """

    @staticmethod
    def _build_client(settings: Settings) -> openai.OpenAI:
        if not settings.gemini_api_key:
            raise InvalidCredentialError("GEMINI_API_KEY is not set.")

        kwargs = {
            "api_key": settings.gemini_api_key,
            "base_url": settings.gemini_base_url,
            "max_retries": 0,
        }
        # unset keeps the openai client's own default
        if settings.gemini_timeout is not None:
            kwargs["timeout"] = settings.gemini_timeout
        return openai.OpenAI(**kwargs)

    @staticmethod
    def generate_content(prompt: str, settings: Settings | None = None) -> str:
        """
        Send a single-turn prompt and return the raw reply text.
        openai.OpenAIError propagates to the caller untouched.
        """
        settings = settings or get_settings()
        client = LLMClient._build_client(settings)
        response = client.chat.completions.create(
            model=settings.gemini_model,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.choices[0].message.content or ""

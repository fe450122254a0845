"""
Request-scoped helpers: API keys from headers, the model selection for a request.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException
from typing import Optional

from skillmapper.config import MODELS, settings
from skillmapper.models.llm_models import LLMSelection


class APIKeys:
    """Per-request API keys: request headers first, server defaults second."""

    def __init__(
        self,
        groq: str | None = None,
        google: str | None = None,
        openrouter: str | None = None,
    ):
        self.groq = groq or settings.groq_api_key
        self.google = google or settings.gemini_api_key
        self.openrouter = openrouter or settings.openrouter_api_key

    def get_key(self, provider: str) -> str | None:
        """Get the key for a specific provider."""
        if provider not in MODELS:
            return None
        return getattr(self, provider, None)

    def available_providers(self) -> list[str]:
        return [p for p in MODELS if self.get_key(p)]


async def get_api_keys(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        groq=x_groq_key or None,
        google=x_google_key or None,
        openrouter=x_openrouter_key or None,
    )


async def get_llm_selection(
    provider: Optional[str] = Header(None, alias="X-LLM-Provider"),
    model_key: Optional[str] = Header(None, alias="X-LLM-Model"),
    keys: APIKeys = Depends(get_api_keys),
) -> LLMSelection:
    """FastAPI dependency that resolves which model to call for this request, or raises 400."""
    provider = provider or settings.default_provider
    if provider not in MODELS:
        raise HTTPException(status_code=400, detail=f"Unknown provider '{provider}'")

    if not model_key:
        model_key = settings.default_model_key if provider == settings.default_provider else next(iter(MODELS[provider]))
    if model_key not in MODELS[provider]:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown model '{model_key}' for provider '{provider}'",
        )

    api_key = keys.get_key(provider)
    if not api_key:
        raise HTTPException(
            status_code=400,
            detail=f"No API key provided for provider '{provider}'. "
                   f"Add it on the Settings page first.",
        )
    return LLMSelection(provider=provider, model_key=model_key, api_key=api_key)

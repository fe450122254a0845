from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "SkillMapper"
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:3000"

    # LLM API Keys (users may send their own per-request via headers, these are server defaults)
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    # Model used when the request does not pick one
    default_provider: str = "google"
    default_model_key: str = "gemini-2.0-flash"

    # Upper bound for a single model call, in seconds
    llm_timeout_seconds: float = 60.0

    # Uploads
    max_upload_mb: int = 10

    # Parent/sub-skill filter (e.g. drop "pandas" when "python" is listed)
    subskill_filter_enabled: bool = False
    skill_hierarchy_file: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Solid skill extraction, fast",
            "recommended": True,
        },
        "llama-3.1-8b": {
            "name": "LLaMA 3.1 8B",
            "model_id": "groq/llama-3.1-8b-instant",
            "description": "Cheapest option, shorter skill lists",
            "recommended": False,
        },
    },
    "google": {
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Most reliable structured output",
            "recommended": True,
        },
        "gemini-1.5-flash": {
            "name": "Gemini 1.5 Flash",
            "model_id": "gemini/gemini-1.5-flash",
            "description": "Fallback when 2.0 hits rate limits",
            "recommended": False,
        },
    },
    "openrouter": {
        "deepseek-chat": {
            "name": "DeepSeek V3",
            "model_id": "openrouter/deepseek/deepseek-chat-v3-0324:free",
            "description": "Good at inferring implied skills",
            "recommended": False,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "job_skills": {"temperature": 0.1, "max_tokens": 1000},
    "resume_skills": {"temperature": 0.1, "max_tokens": 1000},
    "suggest_resources": {"temperature": 0.4, "max_tokens": 2000},
    "jd_generator": {"temperature": 0.7, "max_tokens": 1500},
    "technical_skills": {"temperature": 0.2, "max_tokens": 600},
}

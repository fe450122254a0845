from pydantic import BaseModel, ConfigDict


class LLMSelection(BaseModel):
    """Which hosted model to call, and with which key. Resolved once per request."""

    model_config = ConfigDict(frozen=True)

    provider: str
    model_key: str
    api_key: str

    def __repr__(self) -> str:
        # Never leak the key into logs
        return f"LLMSelection(provider={self.provider!r}, model_key={self.model_key!r})"

    __str__ = __repr__

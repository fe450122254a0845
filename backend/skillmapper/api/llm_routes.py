from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from skillmapper.config import settings
from skillmapper.services.llm_service import get_providers_info, validate_api_key
from skillmapper.utils.dependencies import APIKeys, get_api_keys

router = APIRouter()


class ValidateKeyRequest(BaseModel):
    provider: str
    key: str


class ValidateKeyResponse(BaseModel):
    valid: bool
    provider: str
    model_used: str
    error: str | None = None


@router.get("/providers")
async def list_providers(keys: APIKeys = Depends(get_api_keys)):
    """
    List LLM providers and their models, the default choice, and which
    providers currently have a key (header or server-side). No secrets returned.
    """
    return {
        "providers": get_providers_info(),
        "default": {"provider": settings.default_provider, "model_key": settings.default_model_key},
        "configured": keys.available_providers(),
    }


@router.post("/validate-key", response_model=ValidateKeyResponse)
async def validate_key_endpoint(req: ValidateKeyRequest):
    """
    Test if an API key is valid for a given provider.
    Makes a tiny completion call with the recommended model.
    """
    if not req.key or not req.key.strip():
        raise HTTPException(status_code=400, detail="API key cannot be empty")
    if not req.provider:
        raise HTTPException(status_code=400, detail="Provider is required")

    try:
        result = await validate_api_key(provider=req.provider, api_key=req.key.strip())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ValidateKeyResponse(**result)

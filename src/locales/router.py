from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.locales.registry import LocaleRegistry, get_registry

router = APIRouter(prefix="/locales", tags=["Locales"])


class LocalesResponse(BaseModel):
    """Supported locales with the default and fallback locale."""
    locales: list[str]
    default: str
    fallback: str


@router.get("/", response_model=LocalesResponse)
def list_locales(registry: LocaleRegistry = Depends(get_registry)):
    """List supported locales."""
    return LocalesResponse(
        locales=list(registry.supported_locales()),
        default=registry.default_locale(),
        fallback=registry.fallback_locale(),
    )

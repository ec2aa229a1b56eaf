# hook_studio/adapters/api/routers/languages.py
from typing import List

from fastapi import APIRouter

from hook_studio.core.domain.locales import get_default_locale, get_supported_locales
from hook_studio.core.domain.models import CamelModel
from hook_studio.shared.config import settings

router = APIRouter(prefix="/languages", tags=["System"])


class LanguageOut(CamelModel):
    code: str
    name: str
    display_name: str
    is_default: bool = False


@router.get("", response_model=List[LanguageOut])
async def list_languages() -> List[LanguageOut]:
    """
    Returns every language a request may ask for, sorted by code.
    Format: [{"code": "ko", "name": "korean", "displayName": "Korean", "isDefault": false}]
    """
    default_code = get_default_locale(settings.DEFAULT_LANGUAGE).code
    return [
        LanguageOut(
            code=locale.code,
            name=locale.name,
            display_name=locale.display_name,
            is_default=locale.code == default_code,
        )
        for locale in get_supported_locales()
    ]

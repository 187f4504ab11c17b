import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies.auth import verify_token
from app.models.accessibility.accessibility_models import (
    AccessibilitySettings, AccessibilitySettingsResponse, LanguageOption, LanguagesResponse,
    LANGUAGE_LABELS, Theme, ToggleFeature, ToggleRequest, UpdateAccessibilitySettingsRequest
)
from app.models.error_models import ErrorResponse
from app.utils.settings_store import load_settings, save_settings

router = APIRouter()


@router.get("/accessibility/languages", tags=["Accessibility"], response_model=LanguagesResponse)
async def get_languages():
    """
    Lists the interface languages a client can pick from.
    """
    return LanguagesResponse(
        languages=[LanguageOption(value=language, label=label) for language, label in LANGUAGE_LABELS.items()]
    )


@router.get("/accessibility/settings/{client_id}", tags=["Accessibility"],
            response_model=AccessibilitySettingsResponse,
            dependencies=[Depends(verify_token)])
async def get_settings(client_id: str):
    """
    Returns the client's saved settings, or the defaults if it never saved any.
    """
    try:
        settings = await load_settings(client_id)
        return AccessibilitySettingsResponse(client_id=client_id, settings=settings)
    except Exception as e:
        logging.error(f"Failed to load settings: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load settings")


@router.put("/accessibility/settings/{client_id}", tags=["Accessibility"],
            response_model=AccessibilitySettingsResponse,
            dependencies=[Depends(verify_token)],
            responses={400: {"model": ErrorResponse}})
async def replace_settings(client_id: str, request: AccessibilitySettings):
    try:
        settings = await save_settings(client_id, request)
        return AccessibilitySettingsResponse(client_id=client_id, settings=settings)
    except Exception as e:
        logging.error(f"Failed to save settings: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save settings")


@router.patch("/accessibility/settings/{client_id}", tags=["Accessibility"],
              response_model=AccessibilitySettingsResponse,
              dependencies=[Depends(verify_token)],
              responses={400: {"model": ErrorResponse}})
async def update_settings(client_id: str, request: UpdateAccessibilitySettingsRequest):
    """
    Updates only the fields present in the request body.
    """
    try:
        current = await load_settings(client_id)
        update_data = {k: v for k, v in request.model_dump().items() if v is not None}
        settings = await save_settings(client_id, current.model_copy(update=update_data))
        return AccessibilitySettingsResponse(client_id=client_id, settings=settings)
    except Exception as e:
        logging.error(f"Failed to update settings: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update settings")


@router.post("/accessibility/settings/{client_id}/toggle", tags=["Accessibility"],
             response_model=AccessibilitySettingsResponse,
             dependencies=[Depends(verify_token)],
             responses={400: {"model": ErrorResponse}})
async def toggle_setting(client_id: str, request: ToggleRequest):
    """
    Flips one switch: dyslexia font, high contrast, or light/dark theme.
    """
    try:
        settings = await load_settings(client_id)

        if request.feature == ToggleFeature.DYSLEXIA_FONT:
            settings.isDyslexiaFont = not settings.isDyslexiaFont
        elif request.feature == ToggleFeature.HIGH_CONTRAST:
            settings.isHighContrast = not settings.isHighContrast
        else:
            settings.theme = Theme.DARK if settings.theme == Theme.LIGHT else Theme.LIGHT

        settings = await save_settings(client_id, settings)
        return AccessibilitySettingsResponse(client_id=client_id, settings=settings)
    except Exception as e:
        logging.error(f"Failed to toggle {request.feature.value}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update settings")

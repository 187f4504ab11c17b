from app.database import accessibility_settings_collection
from app.models.accessibility.accessibility_models import AccessibilitySettings


async def load_settings(client_id: str) -> AccessibilitySettings:
    """
    Returns the stored settings for a client, or the defaults when nothing is stored yet.
    """
    document = await accessibility_settings_collection.find_one({"client_id": client_id})
    if not document:
        return AccessibilitySettings()
    return AccessibilitySettings(**document.get("settings", {}))


async def save_settings(client_id: str, settings: AccessibilitySettings) -> AccessibilitySettings:
    await accessibility_settings_collection.update_one(
        {"client_id": client_id},
        {"$set": {"settings": settings.model_dump(mode="json")}},
        upsert=True,
    )
    return settings

from enum import Enum
from typing import List

from pydantic import BaseModel


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Language(str, Enum):
    EN = "en"
    HI = "hi"
    PA = "pa"
    GU = "gu"
    ML = "ml"
    TA = "ta"
    TE = "te"
    BN = "bn"
    MR = "mr"


LANGUAGE_LABELS = {
    Language.EN: "English",
    Language.HI: "हिंदी (Hindi)",
    Language.PA: "ਪੰਜਾਬੀ (Punjabi)",
    Language.GU: "ગુજરાતી (Gujarati)",
    Language.ML: "മലയാളം (Malayalam)",
    Language.TA: "தமிழ் (Tamil)",
    Language.TE: "తెలుగు (Telugu)",
    Language.BN: "বাংলা (Bengali)",
    Language.MR: "मराठी (Marathi)",
}


class ToggleFeature(str, Enum):
    DYSLEXIA_FONT = "dyslexia_font"
    HIGH_CONTRAST = "high_contrast"
    THEME = "theme"


class AccessibilitySettings(BaseModel):
    isDyslexiaFont: bool = False
    isHighContrast: bool = False
    language: Language = Language.EN
    theme: Theme = Theme.LIGHT


class UpdateAccessibilitySettingsRequest(BaseModel):
    isDyslexiaFont: bool | None = None
    isHighContrast: bool | None = None
    language: Language | None = None
    theme: Theme | None = None


class ToggleRequest(BaseModel):
    feature: ToggleFeature


class AccessibilitySettingsResponse(BaseModel):
    client_id: str
    settings: AccessibilitySettings


class LanguageOption(BaseModel):
    value: Language
    label: str


class LanguagesResponse(BaseModel):
    languages: List[LanguageOption]

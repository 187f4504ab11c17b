import os
from pathlib import Path

from dotenv import load_dotenv
from openai import OpenAI

from app.exceptions import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(ENV_FILE)

AI_GATEWAY_URL = os.environ.get("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
AI_IMAGE_MODEL = os.environ.get("AI_IMAGE_MODEL", "google/gemini-2.5-flash-image-preview")
AI_TEXT_MODEL = os.environ.get("AI_TEXT_MODEL", "google/gemini-2.5-flash")

ACCESS_TOKEN = os.environ.get("ACCESS_TOKEN")
MONGODB_URL = os.environ.get("MONGODB_URL")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def get_ai_client() -> OpenAI:
    api_key = os.environ.get("AI_GATEWAY_API_KEY")
    if not api_key:
        raise ConfigurationError("AI_GATEWAY_API_KEY is not configured")
    return OpenAI(api_key=api_key, base_url=AI_GATEWAY_URL, max_retries=0)

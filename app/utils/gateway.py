from typing import List, Optional

from openai import OpenAI
from openai.types.chat import ChatCompletion


def complete(client: OpenAI, model: str, prompt: str, modalities: Optional[List[str]] = None) -> ChatCompletion:
    """
    Sends a single user message to the AI gateway and returns the raw completion.
    """
    extra_body = {"modalities": modalities} if modalities else None
    return client.chat.completions.create(
        model=model,
        messages=[
            {"role": "user", "content": prompt}
        ],
        extra_body=extra_body,
    )


def _first_message(completion: ChatCompletion) -> dict:
    choices = completion.model_dump().get("choices") or []
    if not choices:
        return {}
    return choices[0].get("message") or {}


def extract_image_url(completion: ChatCompletion) -> Optional[str]:
    # Gateway-specific field, not part of the OpenAI schema: message.images[0].image_url.url
    images = _first_message(completion).get("images") or []
    if not images:
        return None
    return (images[0].get("image_url") or {}).get("url")


def extract_text(completion: ChatCompletion) -> Optional[str]:
    return _first_message(completion).get("content")

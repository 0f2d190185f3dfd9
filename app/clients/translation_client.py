import logging

import httpx

from app.config import DEFAULT_TRANSLATION_BASE_URL
from app.models import TranslationResponse, TranslationStyle

logger = logging.getLogger(__name__)


class TranslationClient:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str = DEFAULT_TRANSLATION_BASE_URL):
        self.client = http_client
        self.base_url = base_url.rstrip("/")

    async def translate(self, style: TranslationStyle, text: str) -> str:
        """
        Translates text with the given style.
        Any failure leaves the text as is: translation is cosmetic and the API is heavily rate limited.
        """
        url = f"{self.base_url}/{style.endpoint}"
        logger.info(f"Translating with {style.value}: {text[:30]}...")

        try:
            response = await self.client.post(url, data={"text": text})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = f"Translation API failed with status {e.response.status_code}."
            if e.response.status_code == 429:
                detail += " Rate limit exceeded."
            logger.warning(f"{detail} Keeping original description.")
            return text
        except httpx.RequestError as e:
            logger.warning(f"Translation API network error: {e!r}. Keeping original description.")
            return text

        try:
            return TranslationResponse.model_validate(response.json()).contents.translated
        except ValueError:
            logger.warning("Translation API returned an unexpected response format. Keeping original description.")
            return text

import base64
import binascii
import logging

import httpx

from app.config import Settings, get_settings
from app.exceptions import GenerationFailedError
from app.schemas.thumbnail import AspectRatio

logger = logging.getLogger(__name__)

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_HARASSMENT",
)


class GeminiImageService:
    """
    Service for generating thumbnails with Google's Gemini image models.

    Talks to the ``generateContent`` REST endpoint directly and returns the
    decoded bytes of the first image part in the response.
    """

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        settings = settings or get_settings()
        self.api_key = settings.gemini_api_key
        self.base_url = settings.gemini_api_url.rstrip("/")
        self.model = settings.gemini_model
        self.image_size = settings.gemini_image_size
        self.temperature = settings.gemini_temperature
        self.top_p = settings.gemini_top_p
        self.max_output_tokens = settings.gemini_max_output_tokens
        self.timeout = settings.gemini_timeout
        self.disable_safety_filters = settings.gemini_disable_safety_filters
        self._transport = transport

    def _base64_to_image(self, base64_string: str) -> bytes:
        """Convert base64 string to image bytes."""
        return base64.b64decode(base64_string)

    def build_payload(self, prompt: str, aspect_ratio: AspectRatio | str) -> dict:
        """Build the generateContent request body."""
        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt}
                    ]
                }
            ],
            "generationConfig": {
                "maxOutputTokens": self.max_output_tokens,
                "temperature": self.temperature,
                "topP": self.top_p,
                "responseModalities": ["IMAGE"],
                "imageConfig": {
                    "aspectRatio": AspectRatio(aspect_ratio).value,
                    "imageSize": self.image_size,
                },
            },
        }

        if self.disable_safety_filters:
            payload["safetySettings"] = [
                {"category": category, "threshold": "OFF"}
                for category in SAFETY_CATEGORIES
            ]

        return payload

    def extract_image(self, result: dict) -> bytes:
        """
        Return the first inline image in a generateContent response.

        Raises:
            GenerationFailedError: the response carries no usable image part
        """
        candidates = result.get("candidates") or []
        parts = []
        if candidates:
            parts = (candidates[0].get("content") or {}).get("parts") or []

        if not parts:
            block_reason = (result.get("promptFeedback") or {}).get("blockReason")
            if block_reason:
                raise GenerationFailedError(f"Image generation was blocked: {block_reason}")
            raise GenerationFailedError("Unexpected response from image model")

        for part in parts:
            inline_data = part.get("inlineData")
            if inline_data and inline_data.get("data"):
                try:
                    return self._base64_to_image(inline_data["data"])
                except (binascii.Error, ValueError) as e:
                    raise GenerationFailedError("Image model returned undecodable image data") from e

        raise GenerationFailedError("Image model returned no image")

    async def generate_image(self, prompt: str, aspect_ratio: AspectRatio | str = AspectRatio.LANDSCAPE_16_9) -> bytes:
        """
        Generate a single thumbnail image.

        Args:
            prompt: Fully built prompt
            aspect_ratio: Output aspect ratio (16:9, 1:1, 9:16)

        Returns:
            Raw image bytes
        """
        payload = self.build_payload(prompt, aspect_ratio)
        url = f"{self.base_url}/{self.model}:generateContent"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers={
                        "Content-Type": "application/json",
                        "x-goog-api-key": self.api_key,
                    }
                )
        except httpx.HTTPError as e:
            raise GenerationFailedError(f"Image model request failed: {e}") from e

        if response.status_code != 200:
            error_detail = response.text
            logger.error("Gemini API error (%s): %s", response.status_code, error_detail)
            raise GenerationFailedError(f"Image model error ({response.status_code})")

        try:
            result = response.json()
        except ValueError as e:
            raise GenerationFailedError("Image model returned invalid JSON") from e

        image_bytes = self.extract_image(result)
        logger.info("Generated %d byte image with %s", len(image_bytes), self.model)
        return image_bytes


# Singleton instance
imagen_service = GeminiImageService()

"""Async client for the Google Gemini API.

The flows in :mod:`instagenius.flows` talk to Gemini only through
:class:`GeminiClient`, which exposes the two calls they need:

- :meth:`GeminiClient.generate_copy` asks the text model for marketing copy
  and parses the JSON response into a Pydantic model.
- :meth:`GeminiClient.generate_image` asks the image model for a picture and
  returns it as a ``data:<mimetype>;base64,<data>`` URI.

The underlying ``google.genai.Client`` is created lazily on first use so the
application (and the test-suite) can start without an API key.

Usage
-----
::

    from instagenius.core.config import config
    from instagenius.core.gemini import GeminiClient

    client = GeminiClient(config)
    image = await client.generate_image("A bold minimalist poster ...")
"""

from __future__ import annotations

import base64
import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from .config import InstageniusConfig

logger = logging.getLogger(__name__)

CopyModel = TypeVar("CopyModel", bound=BaseModel)


class GenerationError(Exception):
    """A backend generation step failed or returned nothing usable.

    The message is shown to the user, so keep it short and readable.
    """

    pass


def to_data_uri(data: bytes | str, mime_type: str | None) -> str:
    """Encode inline image bytes as a data URI.

    Args:
        data: Raw image bytes, or an already base64-encoded string
        mime_type: MIME type reported by the API (defaults to image/png)

    Returns:
        ``data:<mime>;base64,<payload>``
    """
    payload = data if isinstance(data, str) else base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or 'image/png'};base64,{payload}"


class GeminiClient:
    """Thin async wrapper around ``google.genai.Client``.

    Attributes:
        config: Application configuration (API key and model names)
    """

    def __init__(self, config: InstageniusConfig, client: genai.Client | None = None) -> None:
        self.config = config
        self._client = client

    @property
    def client(self) -> genai.Client:
        """The underlying SDK client, created on first access.

        Raises:
            GenerationError: If no API key is configured
        """
        if self._client is None:
            if not self.config.gemini_api_key:
                raise GenerationError(
                    "Gemini API key is not configured. Set INSTAGENIUS_GEMINI_API_KEY."
                )
            self._client = genai.Client(api_key=self.config.gemini_api_key)
            logger.info("Created Gemini client")
        return self._client

    async def generate_copy(self, prompt: str, schema: type[CopyModel]) -> CopyModel:
        """Generate structured marketing copy.

        Args:
            prompt: Copywriting instructions including the post idea
            schema: Pydantic model describing the expected JSON object

        Returns:
            Parsed instance of ``schema``

        Raises:
            GenerationError: If the model returns no text or invalid JSON
        """
        logger.debug(f"Requesting {schema.__name__} from {self.config.text_model}")
        response = await self.client.aio.models.generate_content(
            model=self.config.text_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        if not response.text:
            raise GenerationError("Failed to generate text content.")
        try:
            return schema.model_validate_json(response.text)
        except ValidationError as e:
            logger.warning(f"Copy response did not match {schema.__name__}: {e}")
            raise GenerationError("Failed to generate text content.") from e

    async def generate_image(self, prompt: str) -> str:
        """Generate one image and return it as a data URI.

        Args:
            prompt: Full image prompt

        Returns:
            ``data:<mime>;base64,<data>`` string of the first image returned

        Raises:
            GenerationError: If the response contains no image
        """
        logger.debug(f"Requesting image from {self.config.image_model} ({len(prompt)} chars)")
        response = await self.client.aio.models.generate_content(
            model=self.config.image_model,
            contents=prompt,
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        for candidate in response.candidates or []:
            if candidate.content is None:
                continue
            for part in candidate.content.parts or []:
                if part.inline_data and part.inline_data.data:
                    return to_data_uri(part.inline_data.data, part.inline_data.mime_type)
        raise GenerationError("No image was generated.")

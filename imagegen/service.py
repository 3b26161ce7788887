"""Domain logic for relaying prompts to the image generation provider."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from .aiservices.imagegenerationclient import ImageGenerationClient
from .aiservices.vertexaiimagegenerationclient import VertexAIImageGenerationClient
from .config import Settings, get_settings
from .schemas import UpstreamResponse

logger = logging.getLogger(__name__)


class ImageGenService:
    """High-level entry point for the generation proxy."""

    def __init__(
        self,
        settings: Settings | None = None,
        image_client: Optional[ImageGenerationClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._image_client = image_client or VertexAIImageGenerationClient(self.settings)

    # ------------------------------------------------------------------
    # Image Generation
    # ------------------------------------------------------------------
    def generate_image(self, prompt: str) -> UpstreamResponse:
        """Forward a prompt and return the provider's payload as-is."""
        logger.debug("Generating image for prompt of %s chars", len(prompt))
        return self._image_client.generate(prompt)


@lru_cache
def get_imagegen_service() -> ImageGenService:
    return ImageGenService(get_settings())

from __future__ import annotations

from abc import ABC, abstractmethod

from ..schemas import UpstreamResponse


class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide a synchronous generation method returning
    the provider's raw JSON response, used by the rest of the application.
    """

    @abstractmethod
    def generate(self, prompt: str) -> UpstreamResponse:
        """Generate an image from a prompt."""


class TokenProvider(ABC):
    """Source of short-lived bearer tokens for the upstream provider."""

    @abstractmethod
    def get_access_token(self) -> str:
        """Return a bearer token, raising CredentialError when none is available."""

"""Error types raised along the generation round trip."""

from __future__ import annotations

from typing import Optional


class ImageGenError(Exception):
    """Base class for every failure the proxy or studio raises itself."""


class CredentialError(ImageGenError):
    """No usable bearer token could be obtained."""


class UpstreamError(ImageGenError):
    """Vertex AI answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, details: str) -> None:
        super().__init__(f"Vertex AI API Error: {reason}")
        self.status_code = status_code
        self.reason = reason
        self.details = details


class ResponseShapeError(ImageGenError):
    """The generation payload lacks candidates, parts or image data."""


class GenerationFailed(ImageGenError):
    """The proxy answered the studio with a non-success status."""

    def __init__(self, message: str, details: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.details = details
        self.status_code = status_code

"""Pydantic models shared by the proxy, the Vertex client and the studio."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Vertex AI responses are treated as a loosely typed external schema.
UpstreamResponse = Dict[str, Any]


class GenerationRequest(BaseModel):
    prompt: Optional[str] = Field(default=None, description="Text prompt for image generation")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


# ---- Outbound generateContent body ----
class UpstreamPart(BaseModel):
    text: str


class UpstreamContent(BaseModel):
    role: str = "user"
    parts: UpstreamPart


class GenerationConfig(BaseModel):
    response_modalities: List[str] = Field(default_factory=lambda: ["TEXT", "IMAGE"])


class UpstreamPayload(BaseModel):
    contents: UpstreamContent
    generation_config: GenerationConfig = Field(default_factory=GenerationConfig)


def build_upstream_payload(prompt: str) -> Dict[str, Any]:
    payload = UpstreamPayload(contents=UpstreamContent(parts=UpstreamPart(text=prompt)))
    return payload.model_dump()
# ----------------------------------------


class InlineImage(BaseModel):
    """Canonical form of an ``inline_data``/``inlineData`` response part."""

    mime_type: str = Field(default="image/jpeg", description="Declared MIME type of the payload")
    data: Optional[str] = Field(default=None, description="Base64-encoded image bytes")


class UIState(BaseModel):
    prompt: str = ""
    is_loading: bool = False
    generated_image: Optional[str] = Field(default=None, description="Data URL of the last image")
    error: Optional[str] = None
    error_details: Optional[str] = None
    error_status: Optional[int] = Field(default=None, description="HTTP status the proxy answered with")


class HealthResponse(BaseModel):
    status: str
    project: str
    location: str
    model: str

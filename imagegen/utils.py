import base64
import binascii
import mimetypes
import re
import time
from typing import Any, Mapping, Optional, Tuple

from .exceptions import ResponseShapeError
from .schemas import InlineImage, UpstreamResponse

DEFAULT_MIME_TYPE = "image/jpeg"
DEFAULT_EXTENSION = ".png"
DOWNLOAD_PREFIX = "gemini-gen-"

_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[^;,]*);base64,(?P<data>.*)$", re.DOTALL)

# mimetypes picks odd extensions for some image types (".jpe" on older interpreters)
_PREFERRED_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def normalise_inline_data(part: Mapping[str, Any]) -> Optional[InlineImage]:
    """
    Map either casing convention of an inline-data part onto InlineImage.

    Vertex AI returns ``inline_data``/``mime_type`` on some paths and
    ``inlineData``/``mimeType`` on others. Returns None when the part carries
    no inline data at all.
    """
    inline_data = part.get("inline_data")
    if inline_data is None:
        inline_data = part.get("inlineData")
    if inline_data is None:
        return None

    mime_type = inline_data.get("mime_type") or inline_data.get("mimeType") or DEFAULT_MIME_TYPE
    return InlineImage(mime_type=mime_type, data=inline_data.get("data") or None)


def extract_image(payload: UpstreamResponse) -> InlineImage:
    """
    Pull the first inline image out of a generateContent response.

    Only presence checks are applied; everything else in the payload is ignored.

    Raises:
        ResponseShapeError: when candidates, parts or image data are missing.
    """
    candidates = payload.get("candidates")
    if not candidates:
        raise ResponseShapeError("No candidates returned")

    parts = (candidates[0].get("content") or {}).get("parts")
    if parts is None:
        raise ResponseShapeError("No content parts returned")

    for part in parts:
        image = normalise_inline_data(part)
        if image is None:
            continue
        if not image.data:
            raise ResponseShapeError("No image data found in response candidate")
        return image

    raise ResponseShapeError("No image data found in response")


def to_data_url(image: InlineImage) -> str:
    return f"data:{image.mime_type};base64,{image.data}"


def parse_data_url(data_url: str) -> Tuple[str, bytes]:
    match = _DATA_URL_PATTERN.match(data_url)
    if not match:
        raise ValueError("not a base64 data URL")

    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 payload: {exc}") from exc

    return match.group("mime") or DEFAULT_MIME_TYPE, content


def extension_for(mime_type: str) -> str:
    if mime_type in _PREFERRED_EXTENSIONS:
        return _PREFERRED_EXTENSIONS[mime_type]
    return mimetypes.guess_extension(mime_type) or DEFAULT_EXTENSION


def download_filename(mime_type: str, timestamp_ms: Optional[int] = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{DOWNLOAD_PREFIX}{timestamp_ms}{extension_for(mime_type)}"

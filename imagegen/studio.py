"""Client side of the round trip: prompt submission, image extraction and download."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from .config import Settings, get_settings
from .exceptions import GenerationFailed
from .schemas import UIState
from .utils import download_filename, extract_image, parse_data_url, to_data_url

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


class ImageStudio:
    """Holds the transient UI state of one generation session.

    Each ``submit`` is independent of the previous one; concurrent duplicate
    submissions are not deduplicated.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.proxy_base_url).rstrip("/")
        self._http_client = http_client
        self.state = UIState()

    def submit(self, prompt: str) -> UIState:
        self.state.prompt = prompt
        if not prompt.strip():
            return self.state

        self.state.is_loading = True
        self.state.error = None
        self.state.error_details = None
        self.state.error_status = None
        self.state.generated_image = None

        try:
            data = self._request(prompt)
            self.state.generated_image = to_data_url(extract_image(data))
        except GenerationFailed as exc:
            logger.error("Generation failed: %s", exc)
            self.state.error = str(exc)
            self.state.error_details = exc.details
            self.state.error_status = exc.status_code
        except Exception as exc:
            logger.error("Generation failed: %s", exc)
            self.state.error = str(exc) or "An unexpected error occurred"
        finally:
            self.state.is_loading = False

        return self.state

    def download(self, directory: Path | str = ".") -> Optional[Path]:
        """Write the current image to ``directory`` and return its path."""
        if not self.state.generated_image:
            return None

        mime_type, content = parse_data_url(self.state.generated_image)
        target = Path(directory) / download_filename(mime_type)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        logger.info("Saved image to %s", target)
        return target

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def _request(self, prompt: str) -> dict:
        url = f"{self.base_url}{GENERATE_PATH}"
        if self._http_client is not None:
            response = self._http_client.post(url, json={"prompt": prompt})
        else:
            with httpx.Client(timeout=self.settings.request_timeout) as client:
                response = client.post(url, json={"prompt": prompt})

        data = response.json()
        if not response.is_success:
            error_body = data if isinstance(data, dict) else {}
            raise GenerationFailed(
                error_body.get("error") or "Failed to generate image",
                details=error_body.get("details"),
                status_code=response.status_code,
            )
        return data

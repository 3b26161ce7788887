# aiservices/vertexaiimagegenerationclient.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import Settings, get_settings
from ..exceptions import UpstreamError
from ..schemas import UpstreamResponse, build_upstream_payload
from .googletokenprovider import GoogleTokenProvider
from .imagegenerationclient import ImageGenerationClient, TokenProvider

logger = logging.getLogger(__name__)


class VertexAIImageGenerationClient(ImageGenerationClient):
    """
    Calls the Vertex AI ``generateContent`` endpoint of a Google publisher model
    and hands back the JSON body untouched.

    One POST per prompt. No retries, no partial-result salvage.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_provider: Optional[TokenProvider] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._token_provider = token_provider or GoogleTokenProvider(self.settings)
        self._http_client = http_client
        self._endpoint = self.settings.generate_content_url

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def generate(self, prompt: str) -> UpstreamResponse:
        token = self._token_provider.get_access_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        body = build_upstream_payload(prompt)

        logger.info("Requesting image from %s", self.settings.model_id)
        response = self._post(headers, body)

        if not response.is_success:
            error_text = response.text
            logger.error("Vertex AI Error: %s", error_text)
            raise UpstreamError(response.status_code, response.reason_phrase, error_text)

        return response.json()

    # --- Transport -------------------------------------------------------------

    def _post(self, headers: dict, body: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(
                self._endpoint, headers=headers, json=body, timeout=self.settings.request_timeout
            )
        with httpx.Client(timeout=self.settings.request_timeout) as client:
            return client.post(self._endpoint, headers=headers, json=body)

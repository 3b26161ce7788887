from __future__ import annotations

import logging
from typing import Optional, Sequence

import google.auth
from google.auth.transport.requests import Request

from ..config import Settings, get_settings
from ..exceptions import CredentialError
from .imagegenerationclient import TokenProvider

logger = logging.getLogger(__name__)


class GoogleTokenProvider(TokenProvider):
    """Bearer tokens from Google application-default credentials.

    Token caching and refresh are left to ``google-auth``; a fresh
    credential object is resolved for each call.
    """

    def __init__(self, settings: Optional[Settings] = None, scopes: Optional[Sequence[str]] = None) -> None:
        self.settings = settings or get_settings()
        self._scopes = list(scopes or self.settings.auth_scopes)

    def get_access_token(self) -> str:
        credentials, _ = google.auth.default(scopes=self._scopes)
        credentials.refresh(Request())
        token = getattr(credentials, "token", None)
        if not token:
            raise CredentialError("Failed to generate access token")
        logger.debug("Obtained access token for scopes %s", self._scopes)
        return token

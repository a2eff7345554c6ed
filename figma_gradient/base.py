# pyright: strict
from __future__ import annotations

import configuration as config


class FigmaSession:
    """Credentials and endpoints for reading a single Figma file."""

    def __init__(self, *, file_id: str = "", token: str = "", api_url: str = config.FIGMA_CONFIG.API_URL):
        self._file_id = file_id
        self._token = token
        self._api_url = api_url.rstrip("/")

    @property
    def file_id(self) -> str:
        return self._file_id

    @property
    def token(self) -> str:
        return self._token

    @property
    def headers(self) -> dict[str, str]:
        return {"X-Figma-Token": self._token}

    @property
    def is_configured(self) -> bool:
        return bool(self._file_id and self._token)

    @property
    def nodes_url(self) -> str:
        return f"{self._api_url}/files/{self._file_id}/nodes"

    @staticmethod
    def from_settings(settings: config.FigmaSettings = config.figma_settings) -> FigmaSession:
        return FigmaSession(file_id=settings.FIGMA_FILE_ID, token=settings.FIGMA_TOKEN)

    @file_id.setter  # type: ignore[no-redef, attr-defined]
    def file_id(self, file_id: str):
        if isinstance(file_id, str):
            self._file_id = file_id
        else:
            raise TypeError("'file_id' must be str")

    @token.setter  # type: ignore[no-redef, attr-defined]
    def token(self, token: str):
        if isinstance(token, str):
            self._token = token
        else:
            raise TypeError("'token' must be str")

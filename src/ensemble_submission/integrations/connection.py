from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account
from googleapiclient.discovery import build

LOGGER = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
SCOPES = (
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive.metadata.readonly",
)


@dataclass
class GoogleConfig:
    sheet_id: str
    parent_folder_id: str
    client_email: Optional[str] = None
    private_key: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None


class GoogleConnection:
    """Singleton-like factory for authenticated Sheets/Drive API clients.

    Note: clients are built lazily, one per thread; httplib2 transports
    must not be shared across threads.
    """

    _instance: Optional["GoogleConnection"] = None

    def __init__(self, config: GoogleConfig):
        self._config = config
        self._local = threading.local()

    @classmethod
    def get_instance(cls, config: GoogleConfig) -> "GoogleConnection":
        if cls._instance is None:
            cls._instance = GoogleConnection(config)
        return cls._instance

    @property
    def config(self) -> GoogleConfig:
        return self._config

    def _credentials(self):
        cfg = self._config
        if cfg.refresh_token:
            # OAuth client + refresh token takes precedence over the service account.
            return user_credentials.Credentials(
                None,
                refresh_token=cfg.refresh_token,
                client_id=cfg.client_id,
                client_secret=cfg.client_secret,
                token_uri=TOKEN_URI,
                scopes=list(SCOPES),
            )
        if not cfg.client_email or not cfg.private_key:
            raise RuntimeError("Google service account credentials are not configured")
        return service_account.Credentials.from_service_account_info(
            {
                "client_email": cfg.client_email,
                # Keys stored in env files carry literal "\n" sequences.
                "private_key": cfg.private_key.replace("\\n", "\n"),
                "token_uri": TOKEN_URI,
            },
            scopes=list(SCOPES),
        )

    def _client(self, api: str, version: str):
        client = getattr(self._local, api, None)
        if client is None:
            LOGGER.debug("Building %s %s client for thread %s", api, version, threading.current_thread().name)
            client = build(api, version, credentials=self._credentials(), cache_discovery=False)
            setattr(self._local, api, client)
        return client

    def sheets(self):
        return self._client("sheets", "v4")

    def drive(self):
        return self._client("drive", "v3")

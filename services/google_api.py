"""Google API client construction shared by the Drive and Sheets adapters."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable

import httplib2
from google.oauth2 import service_account
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build

SCOPES = [
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/spreadsheets",
]


class GoogleCredentialsMissing(RuntimeError):
    """Raised when a Google client is needed but no key file is configured."""


class GoogleClient:
    """A discovery service shared across worker threads.

    httplib2 connections are not thread-safe, so the service is only used to
    build requests. Each request executes over its own authorized ``Http``.
    """

    def __init__(
        self,
        api: str,
        version: str,
        credentials_file: Path | None,
        *,
        service: Any = None,
        http_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.api = api
        self.version = version
        self.credentials_file = credentials_file
        self._service = service
        self._http_factory = http_factory
        self._credentials: Any = None
        self._lock = threading.Lock()

    def _load_credentials(self) -> Any:
        if self.credentials_file is None:
            raise GoogleCredentialsMissing("GOOGLE_CREDENTIALS is not configured")
        return service_account.Credentials.from_service_account_file(str(self.credentials_file), scopes=SCOPES)

    def service(self) -> Any:
        with self._lock:
            if self._service is None:
                self._credentials = self._load_credentials()
                self._service = build(self.api, self.version, credentials=self._credentials, cache_discovery=False)
            return self._service

    def new_http(self) -> Any:
        if self._http_factory is not None:
            return self._http_factory()
        with self._lock:
            if self._credentials is None:
                self._credentials = self._load_credentials()
        return AuthorizedHttp(self._credentials, http=httplib2.Http())

    def execute(self, request: Any) -> Any:
        return request.execute(http=self.new_http())

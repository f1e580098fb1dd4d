"""Authenticated async HTTP access to the Kubernetes API server."""

from __future__ import annotations

import asyncio
import json
import logging
import ssl
from types import TracebackType
from typing import Any

import httpx

from kubetopo.controllers.cluster.fetchers.credential_resolver import Credentials
from kubetopo.errors import CredentialError, TransportError
from kubetopo.models.state.app_settings import TopologySettings

logger = logging.getLogger(__name__)


class KubeApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` for JSON GET requests.

    Use as an async context manager; one instance serves one poll.
    """

    def __init__(
        self,
        credentials: Credentials,
        settings: TopologySettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: Bearer token and CA bundle
            settings: Collector settings (URL, TLS, timeouts, retries)
            transport: Optional transport override, used by tests
        """
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.api_server_url,
            headers={
                "Authorization": f"Bearer {credentials.token}",
                "Accept": "application/json",
            },
            verify=self._build_verify(credentials, settings, transport),
            timeout=settings.request_timeout_seconds,
            transport=transport,
        )

    @staticmethod
    def _build_verify(
        credentials: Credentials,
        settings: TopologySettings,
        transport: httpx.AsyncBaseTransport | None,
    ) -> ssl.SSLContext | bool:
        if transport is not None:
            return True
        if not settings.verify_tls:
            logger.warning(
                "TLS certificate validation is disabled for %s", settings.api_server_url
            )
            return False
        try:
            if credentials.ca_data.strip():
                return ssl.create_default_context(cadata=credentials.ca_data)
            return ssl.create_default_context()
        except ssl.SSLError as exc:
            raise CredentialError(f"invalid CA bundle: {exc}") from exc

    async def __aenter__(self) -> KubeApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def probe(self, path: str, timeout: float) -> bool:
        """Return True when GET ``path`` answers 200; never raises on failure."""
        try:
            response = await self._client.get(path, timeout=timeout)
        except httpx.HTTPError as exc:
            logger.warning("Probe of %s failed: %s", path, exc)
            return False
        if response.status_code != 200:
            logger.warning("Probe of %s returned HTTP %s", path, response.status_code)
            return False
        return True

    async def get_json(
        self,
        path: str,
        *,
        reason: str,
        retries: int | None = None,
    ) -> dict[str, Any]:
        """GET ``path`` and decode the JSON body.

        Timeouts are retried up to ``retries`` times (default from settings)
        with linear backoff.

        Raises:
            TransportError: On transport failure, HTTP error or invalid JSON.
        """
        attempts = 1 + (self._settings.list_retry_attempts if retries is None else retries)
        response: httpx.Response | None = None
        for attempt in range(1, attempts + 1):
            try:
                response = await self._client.get(path)
                break
            except httpx.TimeoutException as exc:
                if attempt < attempts:
                    logger.warning(
                        "Request to %s timed out (attempt %s/%s), retrying",
                        path,
                        attempt,
                        attempts,
                    )
                    await asyncio.sleep(self._settings.retry_backoff_seconds * attempt)
                    continue
                raise TransportError(reason, detail=f"timed out: {exc}") from exc
            except httpx.HTTPError as exc:
                raise TransportError(reason, detail=str(exc) or type(exc).__name__) from exc

        assert response is not None
        if response.status_code >= 400:
            raise TransportError(
                reason,
                detail=f"HTTP {response.status_code} from {path}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TransportError(reason, detail=f"invalid JSON from {path}") from exc
        if not isinstance(data, dict):
            raise TransportError(reason, detail=f"unexpected payload from {path}")
        return data

    async def list_items(self, path: str, *, reason: str) -> list[dict[str, Any]]:
        """GET a list endpoint and return its ``items``."""
        data = await self.get_json(path, reason=reason)
        items = data.get("items") or []
        return [item for item in items if isinstance(item, dict)]

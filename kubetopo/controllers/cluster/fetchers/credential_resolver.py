"""Service account credential resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx
from kubernetes.client import Configuration
from kubernetes.config import ConfigException
from kubernetes.config.incluster_config import (
    SERVICE_HOST_ENV_NAME,
    SERVICE_PORT_ENV_NAME,
    InClusterConfigLoader,
)

from kubetopo.constants.defaults import (
    API_SERVER_URL_DEFAULT,
    CA_PATH_DEFAULT,
    TOKEN_PATH_DEFAULT,
)
from kubetopo.errors import CredentialError, NotInClusterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Bearer token and PEM trust bundle for the API server."""

    token: str
    ca_data: str

    def __repr__(self) -> str:
        return f"Credentials(token=<{len(self.token)} chars>, ca_data=<{len(self.ca_data)} chars>)"


class CredentialResolver:
    """Loads the mounted service account through the kubernetes in-cluster loader.

    The API server address comes from settings rather than the process
    environment, so only the token and CA files decide the outcome.
    """

    def __init__(
        self,
        token_path: str | Path = TOKEN_PATH_DEFAULT,
        ca_path: str | Path = CA_PATH_DEFAULT,
        api_server_url: str = API_SERVER_URL_DEFAULT,
    ) -> None:
        """Initialize with credential file locations.

        Args:
            token_path: Path to the bearer token file
            ca_path: Path to the CA bundle file
            api_server_url: API server the credentials are used against
        """
        self.token_path = Path(token_path)
        self.ca_path = Path(ca_path)
        self.api_server_url = api_server_url

    def _loader_environ(self) -> dict[str, str]:
        url = httpx.URL(self.api_server_url)
        return {
            SERVICE_HOST_ENV_NAME: url.host,
            SERVICE_PORT_ENV_NAME: str(url.port or 443),
        }

    def resolve(self) -> Credentials:
        """Load the token and CA bundle.

        Returns:
            Credentials read from disk.

        Raises:
            NotInClusterError: If either file does not exist.
            CredentialError: On any other load failure, such as an empty or
                unreadable file.
        """
        configuration = Configuration()
        loader = InClusterConfigLoader(
            token_filename=str(self.token_path),
            cert_filename=str(self.ca_path),
            try_refresh_token=False,
            environ=self._loader_environ(),
        )
        try:
            loader.load_and_set(configuration)
            ca_data = Path(configuration.ssl_ca_cert).read_text(encoding="utf-8")
        except ConfigException as exc:
            if not (self.token_path.exists() and self.ca_path.exists()):
                logger.info("Service account files not found (%s); running outside cluster", exc)
                raise NotInClusterError() from exc
            logger.error("Error loading service account credentials: %s", exc)
            raise CredentialError(str(exc)) from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading service account credentials: %s", exc)
            raise CredentialError(str(exc)) from exc

        # The loader stores the header value, "bearer <token>".
        _, _, token = configuration.api_key["authorization"].partition(" ")
        logger.info("Read service account credentials from %s", self.token_path.parent)
        return Credentials(token=token.strip(), ca_data=ca_data)

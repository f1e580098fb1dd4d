"""Tests for service account credential resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from kubetopo.controllers.cluster.fetchers import CredentialResolver
from kubetopo.errors import CredentialError, NotInClusterError


@pytest.fixture
def service_account(tmp_path: Path) -> tuple[Path, Path]:
    """Write token and CA files to a temporary directory."""
    token = tmp_path / "token"
    ca = tmp_path / "ca.crt"
    token.write_text("secret-token\n", encoding="utf-8")
    ca.write_text("-----BEGIN CERTIFICATE-----\n", encoding="utf-8")
    return token, ca


class TestCredentialResolver:
    """Tests for CredentialResolver class."""

    def test_resolve_reads_both_files(self, service_account: tuple[Path, Path]) -> None:
        """Test token is stripped and CA returned verbatim."""
        token, ca = service_account

        credentials = CredentialResolver(token, ca).resolve()

        assert credentials.token == "secret-token"
        assert credentials.ca_data == "-----BEGIN CERTIFICATE-----\n"

    def test_repr_redacts_token(self, service_account: tuple[Path, Path]) -> None:
        """Test credentials never print the token."""
        credentials = CredentialResolver(*service_account).resolve()
        assert "secret-token" not in repr(credentials)

    def test_missing_token_means_not_in_cluster(self, tmp_path: Path) -> None:
        """Test absent files raise NotInClusterError."""
        resolver = CredentialResolver(tmp_path / "missing", tmp_path / "ca.crt")

        with pytest.raises(NotInClusterError) as exc_info:
            resolver.resolve()

        assert exc_info.value.reason == "Running outside cluster"

    def test_missing_ca_means_not_in_cluster(self, service_account: tuple[Path, Path], tmp_path: Path) -> None:
        """Test a missing CA bundle also means not in cluster."""
        token, _ = service_account
        with pytest.raises(NotInClusterError):
            CredentialResolver(token, tmp_path / "nope.crt").resolve()

    def test_unreadable_token_is_credential_error(self, tmp_path: Path, service_account: tuple[Path, Path]) -> None:
        """Test read failures other than absence raise CredentialError."""
        _, ca = service_account
        token_dir = tmp_path / "token-dir"
        token_dir.mkdir()

        with pytest.raises(CredentialError) as exc_info:
            CredentialResolver(token_dir, ca).resolve()

        assert exc_info.value.reason.startswith("Service account credentials error: ")

    def test_empty_token_is_credential_error(self, service_account: tuple[Path, Path]) -> None:
        """Test an existing but empty token file is a credential failure."""
        token, ca = service_account
        token.write_text("", encoding="utf-8")

        with pytest.raises(CredentialError) as exc_info:
            CredentialResolver(token, ca).resolve()

        assert "empty" in exc_info.value.reason.lower()

    def test_empty_ca_is_credential_error(self, service_account: tuple[Path, Path]) -> None:
        """Test an existing but empty CA bundle is a credential failure."""
        token, ca = service_account
        ca.write_text("", encoding="utf-8")

        with pytest.raises(CredentialError):
            CredentialResolver(token, ca).resolve()

    def test_api_server_url_does_not_need_environment(
        self,
        service_account: tuple[Path, Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test resolution works without the in-cluster service variables."""
        monkeypatch.delenv("KUBERNETES_SERVICE_HOST", raising=False)
        monkeypatch.delenv("KUBERNETES_SERVICE_PORT", raising=False)

        credentials = CredentialResolver(
            *service_account, api_server_url="https://10.96.0.1:6443"
        ).resolve()

        assert credentials.token == "secret-token"

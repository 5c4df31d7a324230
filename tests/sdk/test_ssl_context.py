import os
import ssl
from pathlib import Path

import certifi
import pytest

from flyweight._utils import get_httpx_client_kwargs
from flyweight._utils._ssl_context import create_ssl_context


class TestClientKwargs:
    def test_defaults(self):
        kwargs = get_httpx_client_kwargs(timeout=12.0)

        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert kwargs["timeout"] == 12.0
        assert kwargs["follow_redirects"] is True

    def test_ssl_disabled(self):
        kwargs = get_httpx_client_kwargs(
            timeout=1.0, follow_redirects=False, verify_ssl=False
        )

        assert kwargs["verify"] is False
        assert kwargs["follow_redirects"] is False


class TestCreateSslContext:
    def test_explicit_bundle(self):
        context = create_ssl_context(ca_bundle=certifi.where())

        assert context.verify_mode == ssl.CERT_REQUIRED
        assert context.cert_store_stats()["x509_ca"] > 0

    def test_bundle_path_is_expanded(self, monkeypatch: pytest.MonkeyPatch):
        bundle = Path(certifi.where())
        monkeypatch.setenv("CERTS_DIR", str(bundle.parent))

        context = create_ssl_context(ca_bundle=f"$CERTS_DIR{os.sep}{bundle.name}")

        assert context.cert_store_stats()["x509_ca"] > 0

    def test_missing_bundle(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            create_ssl_context(ca_bundle=str(tmp_path / "missing.pem"))

import os
import ssl
from typing import Any, Optional, Union


def _expand(path: Optional[str]) -> Optional[str]:
    return os.path.expanduser(os.path.expandvars(path)) if path else None


def create_ssl_context(
    ca_bundle: Optional[str] = None, ca_dir: Optional[str] = None
) -> ssl.SSLContext:
    """Build the SSL context used to verify servers.

    Explicit CA locations win. Otherwise the system trust store is used when
    truststore is installed, and certifi's bundle when it is not.
    """
    if ca_bundle or ca_dir:
        return ssl.create_default_context(
            cafile=_expand(ca_bundle), capath=_expand(ca_dir)
        )

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(cafile=certifi.where())


def get_httpx_client_kwargs(
    *,
    timeout: float,
    follow_redirects: bool = True,
    verify_ssl: bool = True,
    ca_bundle: Optional[str] = None,
    ca_dir: Optional[str] = None,
) -> dict[str, Any]:
    """Keyword arguments shared by every `httpx.Client`/`httpx.AsyncClient`."""
    verify: Union[ssl.SSLContext, bool] = (
        create_ssl_context(ca_bundle, ca_dir) if verify_ssl else False
    )
    return {
        "verify": verify,
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }

import re
from typing import Mapping, Optional

from httpx import URL, InvalidURL

from ..models.errors import InvalidURLError

_SUPPORTED_SCHEMES = ("http", "https")

# Encoded host as produced by httpx: DNS labels (IDNA already applied) or an IP address
_VALID_HOST = re.compile(
    r"^(?:[A-Za-z0-9_-]+(?:\.[A-Za-z0-9_-]+)*\.?|[0-9A-Fa-f:.]+)$"
)


def build_url(url: str, params: Optional[Mapping[str, str]] = None) -> URL:
    """Resolve a base URL string and query parameters into an absolute URL.

    When `params` is given it replaces the query string of `url`; when it is
    omitted the query of `url` is kept as is.

    Args:
        url: The base URL, e.g. ``https://api.example.com/ships``.
        params: Query parameter names mapped to their values.

    Returns:
        URL: The resolved URL.

    Raises:
        InvalidURLError: If `url` cannot be parsed, contains whitespace or a
            malformed host, is not an absolute http(s) URL, or cannot be
            combined with `params`.
    """
    if isinstance(url, str) and any(char.isspace() for char in url):
        raise InvalidURLError(f"Invalid URL {url!r}: unescaped whitespace")

    try:
        resolved = URL(url)
    except (InvalidURL, TypeError) as e:
        raise InvalidURLError(f"Invalid URL {url!r}: {e}") from e

    if resolved.scheme not in _SUPPORTED_SCHEMES or not resolved.host:
        raise InvalidURLError(f"Invalid URL {url!r}: expected an absolute http(s) URL")

    if not _VALID_HOST.match(resolved.raw_host.decode("ascii", errors="replace")):
        raise InvalidURLError(f"Invalid URL {url!r}: invalid host")

    if params is not None:
        try:
            resolved = resolved.copy_with(params=dict(params))
        except (InvalidURL, TypeError, ValueError) as e:
            raise InvalidURLError(f"Invalid query parameters for {url!r}: {e}") from e

    return resolved

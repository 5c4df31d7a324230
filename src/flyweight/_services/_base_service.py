from contextlib import contextmanager
from logging import getLogger
from typing import Any, Generator, Optional

from httpx import (
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    Request,
    Response,
    Timeout,
)
from opentelemetry import trace
from opentelemetry.trace import Span, TracerProvider

from .._config import Config
from .._utils import (
    RequestSpec,
    build_headers,
    build_url,
    encode_body,
    get_httpx_client_kwargs,
)
from .._utils._request_spec import with_json_content_type
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_USER_AGENT,
    JSON_CONTENT_TYPE,
    LOGGER_NAME,
    NO_CACHE_HEADERS,
)
from ..models.enums import Method
from ..models.errors import APIError


class BaseService:
    """Builds requests and hands them to a freshly opened httpx client.

    Every call opens and closes its own client, so calls share no mutable
    state. A transport may be injected to replace the network stack.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        tracer_provider: Optional[TracerProvider] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        self._transport = transport
        self._async_transport = async_transport
        self._tracer = trace.get_tracer(__name__, tracer_provider=tracer_provider)

        super().__init__()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: JSON_CONTENT_TYPE,
            HEADER_USER_AGENT: self._config.user_agent,
        }

    def _client_kwargs(self) -> dict[str, Any]:
        return get_httpx_client_kwargs(
            timeout=self._config.timeout,
            follow_redirects=self._config.follow_redirects,
            verify_ssl=self._config.verify_ssl,
            ca_bundle=self._config.ca_bundle,
            ca_dir=self._config.ca_dir,
        )

    def _prepare(self, spec: RequestSpec) -> Request:
        """Turn a spec into a request without touching the network.

        Raises:
            InvalidURLError: If the URL or the query parameters are invalid.
            DecodingError: If the body is not JSON serializable.
        """
        url = build_url(spec.url, spec.params)
        content = encode_body(spec.body)

        headers = build_headers(self.default_headers, spec.headers)
        if content is not None:
            with_json_content_type(headers)
        headers.update(NO_CACHE_HEADERS)

        return Request(
            Method(spec.method).value,
            url,
            headers=headers,
            content=content,
            extensions={"timeout": Timeout(self._config.timeout).as_dict()},
        )

    @contextmanager
    def _span(self, request: Request) -> Generator[Span, None, None]:
        with self._tracer.start_as_current_span(f"HTTP {request.method}") as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.full", str(request.url))
            try:
                yield span
            except APIError as e:
                span.set_attribute("error.type", e.kind)
                raise

    def _send(self, request: Request) -> Response:
        self._logger.debug(f"Request: {request.method} {request.url}")

        with Client(transport=self._transport, **self._client_kwargs()) as client:
            return client.send(request)

    async def _send_async(self, request: Request) -> Response:
        self._logger.debug(f"Request: {request.method} {request.url}")

        async with AsyncClient(
            transport=self._async_transport, **self._client_kwargs()
        ) as client:
            return await client.send(request)

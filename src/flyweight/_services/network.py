import asyncio
from typing import Any, Generic, Mapping, Optional, TypeVar, Union, overload

from httpx import AsyncBaseTransport, BaseTransport, Request, Response
from opentelemetry.trace import Span, TracerProvider
from pydantic import JsonValue, TypeAdapter, ValidationError

from .._config import Config
from .._utils import RequestSpec, handle_errors, log_response
from ..models.enums import LoggingStyle, Method
from ..models.errors import APIError, DecodingError, StatusCodeError
from ..models.result import ResultEnvelope
from ._base_service import BaseService

T = TypeVar("T")


class Network(BaseService, Generic[T]):
    """Performs HTTP calls and decodes their JSON responses as `T`.

    `T` is any type pydantic can validate: a model, a ``list[...]``, a
    ``dict[...]`` or a ``TypedDict``. Every call resolves exactly once, with
    either the decoded value or one of the `APIError` kinds:

    - `InvalidURLError`: the URL and/or parameters are not valid. Raised
      before any network I/O.
    - `DecodingError`: the body could not be encoded, or the response does
      not match `T`.
    - `StatusCodeError`: the status code is outside 200-299.
    - `OtherError`: anything else, such as transport failures.

    Examples:
        ```python
        from pydantic import BaseModel
        from flyweight import Network

        class Ship(BaseModel):
            name: str

        class ShipList(BaseModel):
            ships: list[Ship]

        ships = await Network(ShipList).get_async(
            "https://api.example.com/ships", params={"page": "1"}
        )
        ```
    """

    @overload
    def __init__(
        self: "Network[T]",
        response_type: type[T],
        config: Optional[Config] = None,
        *,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        tracer_provider: Optional[TracerProvider] = None,
    ) -> None: ...

    @overload
    def __init__(
        self: "Network[Any]",
        response_type: Any,
        config: Optional[Config] = None,
        *,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        tracer_provider: Optional[TracerProvider] = None,
    ) -> None: ...

    def __init__(
        self,
        response_type: Any,
        config: Optional[Config] = None,
        *,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        tracer_provider: Optional[TracerProvider] = None,
    ) -> None:
        super().__init__(
            config=config,
            transport=transport,
            async_transport=async_transport,
            tracer_provider=tracer_provider,
        )
        self._response_type = response_type
        self._adapter: TypeAdapter[T] = TypeAdapter(response_type)

    @property
    def response_type(self) -> Any:
        return self._response_type

    def request(
        self,
        method: Union[Method, str],
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Mapping[str, JsonValue]] = None,
        log: Optional[LoggingStyle] = None,
    ) -> T:
        """Perform an HTTP call and decode the response.

        Args:
            method (Union[Method, str]): The HTTP method.
            url (str): The base URL.
            params (Optional[Mapping[str, str]]): Query parameters. Replace the query string of `url` when given.
            headers (Optional[Mapping[str, str]]): HTTP headers. Names are case-insensitive, the last write wins.
            body (Optional[Mapping[str, JsonValue]]): The request body. Must be JSON serializable.
            log (Optional[LoggingStyle]): Whether to log a summary line. Defaults to the config's `log_style`.

        Returns:
            T: The decoded response.

        Raises:
            InvalidURLError: If the URL and/or parameters are not valid.
            DecodingError: If the body is not JSON serializable or the response does not match `T`.
            StatusCodeError: If the status code is outside 200-299.
            OtherError: For any other failure, e.g. a transport error.
        """
        spec, request = self._build(method, url, params, headers, body, log)

        with self._span(request) as span:
            with handle_errors():
                response = self._send(request)
            return self._handle_response(spec, request, response, span)

    async def request_async(
        self,
        method: Union[Method, str],
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Mapping[str, JsonValue]] = None,
        log: Optional[LoggingStyle] = None,
    ) -> T:
        """Asynchronously perform an HTTP call and decode the response.

        See `request` for the arguments and the errors raised.
        """
        spec, request = self._build(method, url, params, headers, body, log)
        return await self._execute_async(spec, request)

    def publish(
        self,
        method: Union[Method, str],
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Mapping[str, JsonValue]] = None,
        log: Optional[LoggingStyle] = None,
    ) -> "asyncio.Task[T]":
        """Schedule an HTTP call on the running event loop.

        The request is built before this returns, so an invalid URL or body
        raises here and nothing is scheduled. The returned task resolves once,
        with the decoded value or an `APIError`. Cancelling it stops waiting
        for the response; the server may still process the request.

        Raises:
            InvalidURLError: If the URL and/or parameters are not valid.
            DecodingError: If the body is not JSON serializable.
            RuntimeError: If no event loop is running.
        """
        spec, request = self._build(method, url, params, headers, body, log)
        loop = asyncio.get_running_loop()
        return loop.create_task(self._execute_async(spec, request))

    def fetch(
        self,
        method: Union[Method, str],
        url: str,
        **kwargs: Any,
    ) -> ResultEnvelope[T]:
        """Like `request`, but returns the outcome instead of raising."""
        try:
            return ResultEnvelope.success(self.request(method, url, **kwargs))
        except APIError as e:
            return ResultEnvelope.failure(e)

    async def fetch_async(
        self,
        method: Union[Method, str],
        url: str,
        **kwargs: Any,
    ) -> ResultEnvelope[T]:
        """Like `request_async`, but returns the outcome instead of raising."""
        try:
            return ResultEnvelope.success(
                await self.request_async(method, url, **kwargs)
            )
        except APIError as e:
            return ResultEnvelope.failure(e)

    def get(self, url: str, **kwargs: Any) -> T:
        """Perform an HTTP GET call. See `request`."""
        return self.request(Method.GET, url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> T:
        """Perform an HTTP POST call. See `request`."""
        return self.request(Method.POST, url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> T:
        """Perform an HTTP PUT call. See `request`."""
        return self.request(Method.PUT, url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> T:
        """Perform an HTTP DELETE call. See `request`."""
        return self.request(Method.DELETE, url, **kwargs)

    async def get_async(self, url: str, **kwargs: Any) -> T:
        return await self.request_async(Method.GET, url, **kwargs)

    async def post_async(self, url: str, **kwargs: Any) -> T:
        return await self.request_async(Method.POST, url, **kwargs)

    async def put_async(self, url: str, **kwargs: Any) -> T:
        return await self.request_async(Method.PUT, url, **kwargs)

    async def delete_async(self, url: str, **kwargs: Any) -> T:
        return await self.request_async(Method.DELETE, url, **kwargs)

    def _build(
        self,
        method: Union[Method, str],
        url: str,
        params: Optional[Mapping[str, str]],
        headers: Optional[Mapping[str, str]],
        body: Optional[Mapping[str, JsonValue]],
        log: Optional[LoggingStyle],
    ) -> tuple[RequestSpec, Request]:
        with handle_errors():
            spec = RequestSpec(
                method=Method(method.upper()),
                url=url,
                params=params,
                headers=headers,
                body=body,
                log=LoggingStyle(log) if log is not None else self._config.log_style,
            )
            return spec, self._prepare(spec)

    async def _execute_async(self, spec: RequestSpec, request: Request) -> T:
        with self._span(request) as span:
            with handle_errors():
                response = await self._send_async(request)
            return self._handle_response(spec, request, response, span)

    def _handle_response(
        self, spec: RequestSpec, request: Request, response: Response, span: Span
    ) -> T:
        span.set_attribute("http.response.status_code", response.status_code)

        if not 200 <= response.status_code <= 299:
            raise StatusCodeError()

        log_response(spec.log, request, response)

        try:
            return self._adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodingError(
                f"Response does not match {self._response_type!r}", cause=e
            ) from e

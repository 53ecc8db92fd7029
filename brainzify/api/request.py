"""
All operations relating to building and sending requests to the API.
"""
import asyncio
import json
import logging
from collections.abc import Mapping, Callable, Sequence
from dataclasses import dataclass, field
from http import HTTPMethod
from typing import Any, Self

import aiohttp
from aiohttp import ClientSession
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError
from yarl import URL

from brainzify import URL_API
from brainzify.api.endpoint import Endpoint, PathValue
from brainzify.api.exception import NotAuthenticatedError, RequestError, RequestSerializationError, TransportError
from brainzify.api.response import ResponseOutcome, TransportFailure, classify
from brainzify.log.logger import BrainzifyLogger
from brainzify.model._base import BrainzifyResponse

type ParamValue = str | int | float | bool | None
type Params = Mapping[str, ParamValue] | Sequence[tuple[str, ParamValue]]
type Body = BaseModel | Mapping[str, Any]


@dataclass(frozen=True)
class RequestEnvelope:
    """
    A fully built request ready to be sent.

    :param method: The HTTP method of the request.
    :param url: The absolute URL of the request including its query.
    :param headers: The headers to send with the request.
    :param body: The serialized JSON body of the request, if any.
    """
    method: HTTPMethod
    url: URL
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


def format_params(params: Params | None) -> dict[str, str]:
    """
    Format the given query ``params`` into their string representations.

    Parameters with a value of None are dropped. Booleans are given as ``true`` or ``false``.
    When a key is given more than once, the last value is kept.
    """
    if not params:
        return {}

    items = params.items() if isinstance(params, Mapping) else params
    formatted = {}
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        formatted[key] = str(value)

    return formatted


def serialize_body(body: Body) -> str:
    """
    Serialize the given ``body`` to compact JSON.

    :raise RequestSerializationError: When the body cannot be represented as JSON.
    """
    if isinstance(body, BaseModel):
        try:
            return body.model_dump_json(exclude_none=True, by_alias=True)
        except PydanticSerializationError as ex:
            raise RequestSerializationError(f"Could not serialize {type(body).__name__}: {ex}") from ex

    try:
        return json.dumps(body, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as ex:
        raise RequestSerializationError(f"Could not serialize request body: {ex}") from ex


def build_request(
        endpoint: Endpoint,
        base_url: str | URL = URL_API,
        path_params: Mapping[str, PathValue] | None = None,
        params: Params | None = None,
        token: str | None = None,
        body: Body | None = None,
) -> RequestEnvelope:
    """
    Build the request for one call to the given ``endpoint``. No I/O is performed.

    :param endpoint: The endpoint to call.
    :param base_url: The root URL of the API. The resolved path is appended to this after exactly one ``/``.
    :param path_params: The values to substitute into the path of the endpoint.
    :param params: The query parameters to send. See :py:func:`format_params`.
    :param token: The user token to authorise the request with.
    :param body: The body to send as JSON. See :py:func:`serialize_body`.
    :raise NotAuthenticatedError: When the endpoint requires a token and none is given.
    :raise RequestSerializationError: When the body cannot be serialized.
    """
    if endpoint.auth and not token:
        raise NotAuthenticatedError(f"A token is required to call {endpoint.value.name!r}")

    path = endpoint.resolve(path_params)
    # the path is already escaped as required, do not let yarl re-quote it
    url = URL(f"{str(base_url).rstrip("/")}/{path}", encoded=True)
    if query := format_params(params):
        url = url.with_query(query)

    headers = {}
    if token:
        headers["Authorization"] = f"Token {token}"

    data = None
    if body is not None:
        data = serialize_body(body)
        headers["Content-Type"] = "application/json"

    return RequestEnvelope(method=endpoint.method, url=url, headers=headers, body=data)


class RequestHandler:
    """
    Generic API request handler which sends built requests and classifies their responses.
    No retries or backoff are applied. A failed request returns immediately.

    :param connector: When called, returns a new session to use when making requests.
    """

    __slots__ = ("logger", "_connector", "_session")

    @property
    def closed(self):
        """Is the stored client session closed."""
        return self._session is None or self._session.closed

    @property
    def session(self) -> ClientSession:
        """The :py:class:`ClientSession` object if it exists and is open."""
        if not self.closed:
            return self._session

    @classmethod
    def create(cls, **session_kwargs):
        """Create a new :py:class:`RequestHandler` with an appropriate session ``connector`` given the input kwargs"""
        def connector() -> ClientSession:
            """Create an appropriate session ``connector`` given the input kwargs"""
            return ClientSession(**session_kwargs)

        return cls(connector=connector)

    def __init__(self, connector: Callable[[], ClientSession]):
        # noinspection PyTypeChecker
        #: The :py:class:`BrainzifyLogger` for this  object
        self.logger: BrainzifyLogger = logging.getLogger(__name__)

        self._connector = connector
        self._session: ClientSession | None = None

    async def __aenter__(self) -> Self:
        if self.closed:
            self._session = self._connector()

        await self.session.__aenter__()
        return self

    async def __aexit__(self, __exc_type, __exc_value, __traceback) -> None:
        if self._session is not None:
            await self._session.__aexit__(__exc_type, __exc_value, __traceback)
        self._session = None

    async def close(self) -> None:
        """Close the current session. No more requests will be possible once this has been called."""
        if not self.closed:
            await self.session.close()

    async def send[T: BrainzifyResponse](self, request: RequestEnvelope, model: type[T]) -> ResponseOutcome[T]:
        """
        Send the given ``request`` and classify its response. This is the only step which performs I/O.

        :param request: The request to send.
        :param model: The model to deserialize a successful response into.
        :return: The classified outcome. Connection failures and timeouts give a :py:class:`TransportFailure`.
        :raise RequestError: When the session is closed.
        """
        if self.closed:
            raise RequestError("Session is closed. Enter the API context to start a new session.")

        body = json.loads(request.body) if request.body else None
        self.log(method=request.method, url=request.url, json=body if isinstance(body, Mapping) else None)

        try:
            async with self.session.request(
                    method=request.method.value,
                    url=request.url,
                    headers=request.headers,
                    data=request.body.encode("utf-8") if request.body is not None else None,
            ) as response:
                status = response.status
                headers = response.headers
                data = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            self.logger.debug(f"{type(ex).__name__}: {ex}")
            return TransportFailure(error=TransportError(f"Request failed: {type(ex).__name__}: {ex}"))

        outcome = classify(status=status, headers=headers, body=data, model=model)
        if not outcome.ok:
            self._log_response(request=request, status=status, headers=headers, body=data)
        if outcome.rate_limit is not None:
            limit = outcome.rate_limit
            self.logger.stat(
                f"Rate limit: {limit.remaining}/{limit.limit} requests remaining | Resets in {limit.reset_in}s"
            )

        return outcome

    def log(
            self, method: str, url: str | URL, message: str | list = None, level: int = logging.DEBUG, **kwargs
    ) -> None:
        """Format and log a request or request adjacent message to the given ``level``."""
        log: list[Any] = []

        url = URL(url, encoded=True) if isinstance(url, str) else url
        if url.query:
            log.extend(f"{k}: {v:<4}" for k, v in sorted(url.query.items()))
        if kwargs.get("json"):
            log.extend(f"{k}: {str(v):<4}" for k, v in sorted(kwargs.pop("json").items()))
        if len(kwargs) > 0:
            log.extend(f"{k.title()}: {str(v):<4}" for k, v in kwargs.items() if v)
        if message:
            log.append(message) if isinstance(message, str) else log.extend(message)

        url = str(url.with_query(None))
        url_pad_map = [30, 40, 70, 100]
        url_pad = next((pad for pad in url_pad_map if len(url) < pad), url_pad_map[-1])

        self.logger.log(
            level=level, msg=f"{method.upper():<7}: {url:<{url_pad}} | {" | ".join(map(str, log))}"
        )

    def _log_response(self, request: RequestEnvelope, status: int, headers: Mapping[str, str], body: bytes) -> None:
        """Log the method, URL, response text, and response headers of a failed request."""
        response_headers = json.dumps(dict(headers), indent=2)
        response_text = body.decode("utf-8", errors="replace")
        self.log(
            method=f"\33[91m{request.method.upper()}",
            url=request.url,
            message=[
                f"Status code: {status}",
                "Response text and headers follow:\n"
                f"Response text:\n\t{response_text.replace("\n", "\n\t")}\n"
                f"Headers:\n\t{response_headers.replace("\n", "\n\t")}"
                f"\33[0m"
            ]
        )

    def __copy__(self):
        """Do not copy handler"""
        return self

    def __deepcopy__(self, _: dict = None):
        """Do not copy handler"""
        return self

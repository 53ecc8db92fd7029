"""
Base functionality to be shared by all classes that implement endpoints of the ListenBrainz API.

All methods that interact with the API return the typed, deserialized response of exactly one request.
No method mutates the state of the API object.
"""
import logging
from collections.abc import Mapping
from typing import Self

from yarl import URL

from brainzify import URL_API
from brainzify.api.endpoint import Endpoint, PathValue
from brainzify.api.exception import ResponseDeserializationError
from brainzify.api.request import Body, Params, RequestHandler, build_request
from brainzify.api.response import NoContent
from brainzify.log.logger import BrainzifyLogger
from brainzify.model._base import BrainzifyResponse


class ListenBrainzAPIBase:
    """
    Base functionality required for all endpoint functions for the ListenBrainz API.

    :param url: The root URL of the API. Give this to use an alternative server implementing the same API.
    :param token: The default user token to use for endpoints which can optionally be authorised.
    :param session_kwargs: Passed to the :py:class:`ClientSession` used to make requests
        e.g. ``headers``, ``timeout``.
    """

    __slots__ = ("logger", "handler", "_url", "token")

    @property
    def url(self) -> URL:
        """The root URL of the API"""
        return self._url

    def __init__(self, url: str | URL = URL_API, token: str | None = None, **session_kwargs):
        # noinspection PyTypeChecker
        #: The :py:class:`BrainzifyLogger` for this  object
        self.logger: BrainzifyLogger = logging.getLogger(__name__)

        self._url = URL(str(url))
        #: The default token for endpoints where authorisation is optional
        self.token = token

        #: The :py:class:`RequestHandler` for sending requests to the API
        self.handler = RequestHandler.create(**session_kwargs)

    async def __aenter__(self) -> Self:
        await self.handler.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.handler.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        """Close the current session. No more requests will be possible once this has been called."""
        await self.handler.close()

    async def _call[T: BrainzifyResponse](
            self,
            endpoint: Endpoint,
            model: type[T],
            path_params: Mapping[str, PathValue] | None = None,
            params: Params | None = None,
            token: str | None = None,
            body: Body | None = None,
    ) -> T | None:
        """
        Build, send, and classify one request to the given ``endpoint``.

        :return: The deserialized response.
            None only when the endpoint may give no content and the API responded with 204.
        :raise APIError: The typed error for any failed request.
        """
        request = build_request(
            endpoint, base_url=self.url, path_params=path_params, params=params, token=token, body=body
        )
        outcome = await self.handler.send(request, model=model)

        if isinstance(outcome, NoContent) and not endpoint.no_content:
            raise ResponseDeserializationError(
                f"Unexpected empty response for {endpoint.value.name!r}", status=outcome.status
            )
        return outcome.unwrap()

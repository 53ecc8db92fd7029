"""
A high level client which holds the authentication state of one user.
"""
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from pydantic import ValidationError

from brainzify.api.exception import InvalidTokenError, NotAuthenticatedError
from brainzify.client import ListenBrainzAPI
from brainzify.exception import BrainzifyValueError
from brainzify.log.logger import BrainzifyLogger
from brainzify.model.core import SubmitListensResponse
from brainzify.model.request import Listen, ListenType, SubmitListens, TrackMetadata


@dataclass(frozen=True)
class _Auth:
    """A validated token and the name of the user it belongs to"""
    token: str
    user: str


class ListenBrainz:
    """
    An ergonomic client for the ListenBrainz API which holds the authentication state of one user.

    The client starts unauthenticated. A successful call to :py:meth:`authenticate` authenticates the client
    and makes the listen submission methods available.
    Authenticating again with a different token replaces the stored credentials only when the new token is valid.

    .. code-block:: python

        async with ListenBrainz() as client:
            await client.authenticate(token)
            await client.listen("Rick Astley", "Never Gonna Give You Up")

    :param api: The API to send requests with. A new :py:class:`ListenBrainzAPI` is created when not given.
    """

    __slots__ = ("logger", "api", "_auth")

    @property
    def is_authenticated(self) -> bool:
        """Whether this client holds a validated token"""
        return self._auth is not None

    @property
    def authenticated_token(self) -> str | None:
        """The validated token or None if not authenticated"""
        return self._auth.token if self._auth is not None else None

    @property
    def authenticated_user(self) -> str | None:
        """The name of the user of the validated token or None if not authenticated"""
        return self._auth.user if self._auth is not None else None

    def __init__(self, api: ListenBrainzAPI | None = None):
        # noinspection PyTypeChecker
        #: The :py:class:`BrainzifyLogger` for this  object
        self.logger: BrainzifyLogger = logging.getLogger(__name__)

        #: The :py:class:`ListenBrainzAPI` to send requests with
        self.api = api if api is not None else ListenBrainzAPI()
        self._auth: _Auth | None = None

    async def __aenter__(self) -> Self:
        await self.api.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.api.__aexit__(exc_type, exc_val, exc_tb)

    async def authenticate(self, token: str) -> str:
        """
        Authenticate this client with the given ``token``.

        :return: The name of the user the token belongs to.
        :raise InvalidTokenError: When the token fails validation. Any stored credentials are kept.
        :raise APIError: When the validation request itself fails. Any stored credentials are kept.
        """
        response = await self.api.validate_token(token)
        if not response.valid or not response.user_name:
            self.logger.debug(f"Token validation failed: {response.message}")
            raise InvalidTokenError()

        self._auth = _Auth(token=token, user=response.user_name)
        self.logger.info_extra(f"\33[92mAuthenticated as user: {response.user_name}\33[0m")
        return response.user_name

    def _get_token(self) -> str:
        if self._auth is None:
            raise NotAuthenticatedError()
        return self._auth.token

    async def _submit(self, listen_type: ListenType, payload: list[Listen]) -> SubmitListensResponse:
        token = self._get_token()
        try:
            data = SubmitListens(listen_type=listen_type, payload=payload)
        except ValidationError as ex:
            raise BrainzifyValueError(f"Invalid listens for a {listen_type.value!r} submission: {ex}") from ex
        return await self.api.submit_listens(token, data)

    @staticmethod
    def _create_listen(
            artist: str,
            track: str,
            release: str | None = None,
            additional_info: Mapping[str, Any] | None = None,
            listened_at: int | None = None,
    ) -> Listen:
        metadata = TrackMetadata(
            artist_name=artist,
            track_name=track,
            release_name=release,
            additional_info=dict(additional_info) if additional_info else None,
        )
        return Listen(listened_at=listened_at, track_metadata=metadata)

    async def listen(
            self,
            artist: str,
            track: str,
            release: str | None = None,
            additional_info: Mapping[str, Any] | None = None,
    ) -> SubmitListensResponse:
        """
        Submit a listen of a track using the current time as the time it was listened to.

        :raise NotAuthenticatedError: When this client is not authenticated.
        """
        listened_at = int(datetime.now().timestamp())
        listen = self._create_listen(artist, track, release, additional_info, listened_at=listened_at)
        return await self._submit(ListenType.SINGLE, [listen])

    async def playing_now(
            self,
            artist: str,
            track: str,
            release: str | None = None,
            additional_info: Mapping[str, Any] | None = None,
    ) -> SubmitListensResponse:
        """
        Submit a track as currently playing. No timestamp is sent.

        :raise NotAuthenticatedError: When this client is not authenticated.
        """
        listen = self._create_listen(artist, track, release, additional_info)
        return await self._submit(ListenType.PLAYING_NOW, [listen])

    async def import_listen(
            self,
            artist: str,
            track: str,
            listened_at: int,
            release: str | None = None,
            additional_info: Mapping[str, Any] | None = None,
    ) -> SubmitListensResponse:
        """
        Import a historical listen of a track at the given UNIX timestamp ``listened_at``.

        :raise NotAuthenticatedError: When this client is not authenticated.
        """
        listen = self._create_listen(artist, track, release, additional_info, listened_at=listened_at)
        return await self._submit(ListenType.IMPORT, [listen])

    async def import_listens(self, listens: Iterable[Listen]) -> SubmitListensResponse:
        """
        Import many historical listens in one request. Every listen must have a timestamp.

        :raise NotAuthenticatedError: When this client is not authenticated.
        :raise BrainzifyValueError: When no listens are given or any listen has no timestamp.
        """
        listens = list(listens)
        if not listens:
            raise BrainzifyValueError("No listens given to import")
        return await self._submit(ListenType.IMPORT, listens)

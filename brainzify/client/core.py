"""
Implements the core listen and user endpoints of the ListenBrainz API.
"""
from collections.abc import Sequence

from brainzify.api.endpoint import Endpoint
from brainzify.client.base import ListenBrainzAPIBase
from brainzify.model.core import (
    SubmitListensResponse,
    ValidateTokenResponse,
    DeleteListenResponse,
    UsersRecentListensResponse,
    UserListenCountResponse,
    UserPlayingNowResponse,
    UserListensResponse,
    UserSimilarUsersResponse,
    UserSimilarToResponse,
    GetLatestImportResponse,
    UpdateLatestImportResponse,
)
from brainzify.model.request import SubmitListens, DeleteListen, UpdateLatestImport


class ListenBrainzAPICore(ListenBrainzAPIBase):

    __slots__ = ()

    ###########################################################################
    ## POST endpoints
    ###########################################################################
    async def submit_listens(self, token: str, data: SubmitListens) -> SubmitListensResponse:
        """
        ``POST: /submit-listens`` - Submit listens to the server.

        :param token: The token of the user to submit listens for.
        :param data: The listens to submit.
        """
        return await self._call(Endpoint.SUBMIT_LISTENS, SubmitListensResponse, token=token, body=data)

    async def delete_listen(self, token: str, data: DeleteListen) -> DeleteListenResponse:
        """
        ``POST: /delete-listen`` - Delete a particular listen from a user's listen history.

        :param token: The token of the user to delete the listen for.
        :param data: The timestamp and MessyBrainz ID of the listen to delete.
        """
        return await self._call(Endpoint.DELETE_LISTEN, DeleteListenResponse, token=token, body=data)

    async def update_latest_import(self, token: str, data: UpdateLatestImport) -> UpdateLatestImportResponse:
        """
        ``POST: /latest-import`` - Update the timestamp of the newest listen submitted
        in previous imports to ListenBrainz.

        :param token: The token of the user to update.
        :param data: The new timestamp of the latest import.
        """
        return await self._call(Endpoint.UPDATE_LATEST_IMPORT, UpdateLatestImportResponse, token=token, body=data)

    ###########################################################################
    ## GET endpoints
    ###########################################################################
    async def validate_token(self, token: str) -> ValidateTokenResponse:
        """
        ``GET: /validate-token`` - Check whether a user token is a valid entry in the database.

        A token which fails validation still gives a successful response with ``valid`` set to False.
        """
        return await self._call(Endpoint.VALIDATE_TOKEN, ValidateTokenResponse, token=token)

    async def users_recent_listens(self, user_list: Sequence[str]) -> UsersRecentListensResponse:
        """
        ``GET: /users/{user_list}/recent-listens`` - Get the most recent listens for the given users.

        :param user_list: The names of the users. Commas in names are escaped before being joined.
        """
        return await self._call(
            Endpoint.USERS_RECENT_LISTENS, UsersRecentListensResponse, path_params={"user_list": list(user_list)}
        )

    async def user_listen_count(self, user_name: str) -> UserListenCountResponse:
        """``GET: /user/{user_name}/listen-count`` - Get the number of listens for a user."""
        return await self._call(
            Endpoint.USER_LISTEN_COUNT, UserListenCountResponse, path_params={"user_name": user_name}
        )

    async def user_playing_now(self, user_name: str) -> UserPlayingNowResponse:
        """``GET: /user/{user_name}/playing-now`` - Get the listen currently being played for a user."""
        return await self._call(
            Endpoint.USER_PLAYING_NOW, UserPlayingNowResponse, path_params={"user_name": user_name}
        )

    async def user_listens(
            self,
            user_name: str,
            min_ts: int | None = None,
            max_ts: int | None = None,
            count: int | None = None,
            time_range: int | None = None,
    ) -> UserListensResponse:
        """
        ``GET: /user/{user_name}/listens`` - Get listens for a user, newest first.

        :param user_name: The name of the user.
        :param min_ts: Only return listens with a timestamp greater than this.
        :param max_ts: Only return listens with a timestamp less than this.
        :param count: The maximum number of listens to return.
        :param time_range: The number of 5-day periods to search over when looking for listens.
        """
        params = {"min_ts": min_ts, "max_ts": max_ts, "count": count, "time_range": time_range}
        return await self._call(
            Endpoint.USER_LISTENS, UserListensResponse, path_params={"user_name": user_name}, params=params
        )

    async def user_similar_users(self, user_name: str) -> UserSimilarUsersResponse:
        """``GET: /user/{user_name}/similar-users`` - Get the users most similar to a user."""
        return await self._call(
            Endpoint.USER_SIMILAR_USERS, UserSimilarUsersResponse, path_params={"user_name": user_name}
        )

    async def user_similar_to(self, user_name: str, other_user_name: str) -> UserSimilarToResponse:
        """
        ``GET: /user/{user_name}/similar-to/{other_user_name}`` - Get the similarity of one user to another.
        """
        return await self._call(
            Endpoint.USER_SIMILAR_TO,
            UserSimilarToResponse,
            path_params={"user_name": user_name, "other_user_name": other_user_name},
        )

    async def get_latest_import(self, user_name: str) -> GetLatestImportResponse:
        """``GET: /latest-import`` - Get the timestamp of the newest listen submitted in previous imports."""
        return await self._call(Endpoint.GET_LATEST_IMPORT, GetLatestImportResponse, params={"user_name": user_name})

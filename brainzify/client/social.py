"""
Implements the social endpoints of the ListenBrainz API.
"""
from brainzify.api.endpoint import Endpoint
from brainzify.client.base import ListenBrainzAPIBase
from brainzify.model.social import (
    UserFollowersResponse, UserFollowingResponse, UserFollowResponse, UserUnfollowResponse
)


class ListenBrainzAPISocial(ListenBrainzAPIBase):

    __slots__ = ()

    async def user_followers(self, user_name: str) -> UserFollowersResponse:
        """``GET: /user/{user_name}/followers`` - Get the names of the users following a user."""
        return await self._call(Endpoint.USER_FOLLOWERS, UserFollowersResponse, path_params={"user_name": user_name})

    async def user_following(self, user_name: str) -> UserFollowingResponse:
        """``GET: /user/{user_name}/following`` - Get the names of the users a user is following."""
        return await self._call(Endpoint.USER_FOLLOWING, UserFollowingResponse, path_params={"user_name": user_name})

    async def user_follow(self, token: str, user_name: str) -> UserFollowResponse:
        """
        ``POST: /user/{user_name}/follow`` - Follow a user.

        :param token: The token of the user who will follow.
        :param user_name: The name of the user to follow.
        """
        return await self._call(
            Endpoint.USER_FOLLOW, UserFollowResponse, path_params={"user_name": user_name}, token=token
        )

    async def user_unfollow(self, token: str, user_name: str) -> UserUnfollowResponse:
        """
        ``POST: /user/{user_name}/unfollow`` - Unfollow a user.

        :param token: The token of the user who will unfollow.
        :param user_name: The name of the user to unfollow.
        """
        return await self._call(
            Endpoint.USER_UNFOLLOW, UserUnfollowResponse, path_params={"user_name": user_name}, token=token
        )

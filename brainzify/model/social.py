"""
Models for the responses of the social endpoints.
"""
from brainzify.model._base import BrainzifyResponse
from brainzify.model.core import StatusResponse


class UserFollowersResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/followers``"""
    followers: list[str]
    user: str


class UserFollowingResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/following``"""
    following: list[str]
    user: str


class UserFollowResponse(StatusResponse):
    """Response to ``POST: /user/{user_name}/follow``"""


class UserUnfollowResponse(StatusResponse):
    """Response to ``POST: /user/{user_name}/unfollow``"""

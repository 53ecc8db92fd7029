"""
Models for the responses of the core listen and user endpoints.
"""
from typing import Any

from pydantic import Field

from brainzify.model._base import BrainzifyResponse, BrainzifyResponseModel


class StatusResponse(BrainzifyResponse):
    """A generic response to a write operation which only confirms its status e.g. ``{"status": "ok"}``"""
    status: str = Field(
        description="The status of the operation.",
    )


class SubmitListensResponse(StatusResponse):
    """Response to ``POST: /submit-listens``"""


class DeleteListenResponse(StatusResponse):
    """Response to ``POST: /delete-listen``"""


class UpdateLatestImportResponse(StatusResponse):
    """Response to ``POST: /latest-import``"""


class ValidateTokenResponse(BrainzifyResponse):
    """Response to ``GET: /validate-token``"""
    code: int = Field(
        description="The status code given by the API for the validation.",
    )
    message: str = Field(
        description="A human-readable message describing the result of the validation.",
    )
    valid: bool = Field(
        description="Whether the token is valid.",
    )
    user_name: str | None = Field(
        description="The name of the user the token belongs to. Only given when the token is valid.",
        default=None,
    )


###########################################################################
## Listens
###########################################################################
class MappingArtist(BrainzifyResponseModel):
    """An artist credited on a recording mapped to MusicBrainz"""
    artist_mbid: str
    artist_credit_name: str
    join_phrase: str


class MBIDMapping(BrainzifyResponseModel):
    """The MusicBrainz entities a listen was mapped to"""
    artist_mbids: list[str] | None = None
    artists: list[MappingArtist] | None = None
    recording_mbid: str
    recording_name: str | None = None
    caa_id: int | None = None
    caa_release_mbid: str | None = None
    release_mbid: str | None = None


class ListenTrackMetadata(BrainzifyResponseModel):
    """The metadata of a track as stored against a listen"""
    artist_name: str
    track_name: str
    release_name: str | None = None
    additional_info: dict[str, Any] = Field(default_factory=dict)
    mbid_mapping: MBIDMapping | None = None


class UserListen(BrainzifyResponseModel):
    """A listen as stored against a user"""
    user_name: str
    # recent-listens gives this as a formatted date, other endpoints as a UNIX timestamp
    inserted_at: int | str
    listened_at: int
    recording_msid: str
    track_metadata: ListenTrackMetadata


class UsersRecentListensPayload(BrainzifyResponseModel):
    count: int
    listens: list[UserListen]
    user_list: str


class UsersRecentListensResponse(BrainzifyResponse):
    """Response to ``GET: /users/{user_list}/recent-listens``"""
    payload: UsersRecentListensPayload


class UserListenCountPayload(BrainzifyResponseModel):
    count: int


class UserListenCountResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/listen-count``"""
    payload: UserListenCountPayload


class PlayingNowListen(BrainzifyResponseModel):
    """A track currently being played by a user"""
    track_metadata: ListenTrackMetadata
    playing_now: bool


class UserPlayingNowPayload(BrainzifyResponseModel):
    count: int
    user_id: str
    listens: list[PlayingNowListen]
    playing_now: bool


class UserPlayingNowResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/playing-now``"""
    payload: UserPlayingNowPayload


class UserListensPayload(BrainzifyResponseModel):
    count: int
    latest_listen_ts: int
    oldest_listen_ts: int
    user_id: str
    listens: list[UserListen]


class UserListensResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/listens``"""
    payload: UserListensPayload


###########################################################################
## Similarity
###########################################################################
class SimilarUser(BrainzifyResponseModel):
    """A user similar to another user with their similarity score"""
    user_name: str
    similarity: float


class UserSimilarUsersResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/similar-users``"""
    payload: list[SimilarUser]


class UserSimilarToResponse(BrainzifyResponse):
    """Response to ``GET: /user/{user_name}/similar-to/{other_user_name}``"""
    user_name: str
    similarity: float


###########################################################################
## Imports
###########################################################################
class GetLatestImportResponse(BrainzifyResponse):
    """Response to ``GET: /latest-import``"""
    latest_import: int = Field(
        description="The UNIX timestamp of the latest import for this user.",
    )
    musicbrainz_id: str = Field(
        description="The name of the user.",
    )

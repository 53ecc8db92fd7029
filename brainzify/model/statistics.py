"""
Models for the responses of the statistics endpoints.

Statistics are calculated periodically by the service.
Where they have not yet been calculated for a user or entity, the API responds with 204 No Content
and no model is returned.
"""
from pydantic import Field

from brainzify.model._base import BrainzifyResponse, BrainzifyResponseModel


class StatsRange(BrainzifyResponseModel):
    """The time range a statistic was calculated over and when it was last updated"""
    from_ts: int = Field(
        description="The UNIX timestamp of the start of the range.",
    )
    to_ts: int = Field(
        description="The UNIX timestamp of the end of the range.",
    )
    last_updated: int = Field(
        description="The UNIX timestamp of when this statistic was last calculated.",
    )


###########################################################################
## Top entities
###########################################################################
class StatsArtist(BrainzifyResponseModel):
    artist_mbids: list[str] | None = None
    artist_msid: str | None = None
    artist_name: str
    listen_count: int


class StatsRelease(StatsArtist):
    release_mbid: str | None = None
    release_msid: str | None = None
    release_name: str


class StatsRecording(StatsArtist):
    recording_mbid: str | None = None
    recording_msid: str | None = None
    release_mbid: str | None = None
    release_msid: str | None = None
    release_name: str | None = None
    track_name: str | None = None


class StatsSitewideArtistsPayload(StatsRange):
    artists: list[StatsArtist]
    offset: int
    count: int
    range: str


class StatsSitewideArtistsResponse(BrainzifyResponse):
    """Response to ``GET: /stats/sitewide/artists``"""
    payload: StatsSitewideArtistsPayload


class StatsUserArtistsPayload(StatsRange):
    artists: list[StatsArtist]
    count: int
    total_artist_count: int
    user_id: str
    range: str


class StatsUserArtistsResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/artists``"""
    payload: StatsUserArtistsPayload


class StatsUserReleasesPayload(StatsRange):
    releases: list[StatsRelease]
    count: int
    total_release_count: int
    user_id: str
    range: str


class StatsUserReleasesResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/releases``"""
    payload: StatsUserReleasesPayload


class StatsUserRecordingsPayload(StatsRange):
    recordings: list[StatsRecording]
    count: int
    total_recording_count: int
    user_id: str
    range: str


class StatsUserRecordingsResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/recordings``"""
    payload: StatsUserRecordingsPayload


###########################################################################
## Activity
###########################################################################
class ListeningActivity(BrainzifyResponseModel):
    """The number of listens within one period of a listening activity range"""
    listen_count: int
    from_ts: int
    to_ts: int
    time_range: str


class StatsUserListeningActivityPayload(StatsRange):
    user_id: str
    listening_activity: list[ListeningActivity]


class StatsUserListeningActivityResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/listening-activity``"""
    payload: StatsUserListeningActivityPayload


class DailyActivityHour(BrainzifyResponseModel):
    hour: int = Field(ge=0, le=23)
    listen_count: int


class DailyActivity(BrainzifyResponseModel):
    #: Map of weekday name to the number of listens for each hour of that day
    days: dict[str, list[DailyActivityHour]]


class StatsUserDailyActivityPayload(StatsRange):
    user_id: str
    daily_activity: DailyActivity
    stats_range: str


class StatsUserDailyActivityResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/daily-activity``"""
    payload: StatsUserDailyActivityPayload


class ArtistMapCountry(BrainzifyResponseModel):
    """The number of artists listened to from a country given by its ISO 3166-1 alpha-3 code"""
    country: str
    artist_count: int


class StatsUserArtistMapPayload(StatsRange):
    artist_map: list[ArtistMapCountry]
    user_id: str
    range: str


class StatsUserArtistMapResponse(BrainzifyResponse):
    """Response to ``GET: /stats/user/{user_name}/artist-map``"""
    payload: StatsUserArtistMapPayload


###########################################################################
## Release groups
###########################################################################
class ReleaseGroupListener(BrainzifyResponseModel):
    user_name: str
    listen_count: int


class StatsReleaseGroupListenersPayload(StatsRange):
    artist_mbids: list[str]
    artist_name: str
    caa_id: int | None = None
    caa_release_mbid: str | None = None
    listeners: list[ReleaseGroupListener]
    release_group_mbid: str
    release_group_name: str
    stats_range: str
    total_listen_count: int


class StatsReleaseGroupListenersResponse(BrainzifyResponse):
    """Response to ``GET: /stats/release-group/{release_group_mbid}/listeners``"""
    payload: StatsReleaseGroupListenersPayload

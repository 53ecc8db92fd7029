"""
Implements the statistics endpoints of the ListenBrainz API.

Statistics which have not yet been calculated give no content. Each method returns None in this case.
"""
from brainzify.api.endpoint import Endpoint
from brainzify.client.base import ListenBrainzAPIBase
from brainzify.model.statistics import (
    StatsSitewideArtistsResponse,
    StatsUserArtistsResponse,
    StatsUserReleasesResponse,
    StatsUserRecordingsResponse,
    StatsUserListeningActivityResponse,
    StatsUserDailyActivityResponse,
    StatsUserArtistMapResponse,
    StatsReleaseGroupListenersResponse,
)


class ListenBrainzAPIStatistics(ListenBrainzAPIBase):

    __slots__ = ()

    async def stats_sitewide_artists(
            self, count: int | None = None, offset: int | None = None, range: str | None = None
    ) -> StatsSitewideArtistsResponse | None:
        """
        ``GET: /stats/sitewide/artists`` - Get the top artists for the entire site.

        :param count: The number of artists to return.
        :param offset: The number of artists to skip from the top.
        :param range: The time range to get statistics for e.g. ``week``, ``month``, ``all_time``.
        """
        params = {"count": count, "offset": offset, "range": range}
        return await self._call(Endpoint.STATS_SITEWIDE_ARTISTS, StatsSitewideArtistsResponse, params=params)

    async def stats_user_artists(
            self, user_name: str, count: int | None = None, offset: int | None = None, range: str | None = None
    ) -> StatsUserArtistsResponse | None:
        """``GET: /stats/user/{user_name}/artists`` - Get the top artists for a user."""
        return await self._call(
            Endpoint.STATS_USER_ARTISTS,
            StatsUserArtistsResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset, "range": range},
        )

    async def stats_user_releases(
            self, user_name: str, count: int | None = None, offset: int | None = None, range: str | None = None
    ) -> StatsUserReleasesResponse | None:
        """``GET: /stats/user/{user_name}/releases`` - Get the top releases for a user."""
        return await self._call(
            Endpoint.STATS_USER_RELEASES,
            StatsUserReleasesResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset, "range": range},
        )

    async def stats_user_recordings(
            self, user_name: str, count: int | None = None, offset: int | None = None, range: str | None = None
    ) -> StatsUserRecordingsResponse | None:
        """``GET: /stats/user/{user_name}/recordings`` - Get the top recordings for a user."""
        return await self._call(
            Endpoint.STATS_USER_RECORDINGS,
            StatsUserRecordingsResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset, "range": range},
        )

    async def stats_user_listening_activity(
            self, user_name: str, range: str | None = None
    ) -> StatsUserListeningActivityResponse | None:
        """
        ``GET: /stats/user/{user_name}/listening-activity`` - Get the number of listens
        for a user across each period of the given range.
        """
        return await self._call(
            Endpoint.STATS_USER_LISTENING_ACTIVITY,
            StatsUserListeningActivityResponse,
            path_params={"user_name": user_name},
            params={"range": range},
        )

    async def stats_user_daily_activity(
            self, user_name: str, range: str | None = None
    ) -> StatsUserDailyActivityResponse | None:
        """
        ``GET: /stats/user/{user_name}/daily-activity`` - Get the number of listens
        for a user for each hour of each day of the week.
        """
        return await self._call(
            Endpoint.STATS_USER_DAILY_ACTIVITY,
            StatsUserDailyActivityResponse,
            path_params={"user_name": user_name},
            params={"range": range},
        )

    async def stats_user_artist_map(
            self, user_name: str, range: str | None = None, force_recalculate: bool | None = None
    ) -> StatsUserArtistMapResponse | None:
        """
        ``GET: /stats/user/{user_name}/artist-map`` - Get the number of artists
        a user has listened to from each country.

        :param user_name: The name of the user.
        :param range: The time range to get statistics for.
        :param force_recalculate: When True, recalculate the statistics instead of returning stored values.
        """
        return await self._call(
            Endpoint.STATS_USER_ARTIST_MAP,
            StatsUserArtistMapResponse,
            path_params={"user_name": user_name},
            params={"range": range, "force_recalculate": force_recalculate},
        )

    async def stats_release_group_listeners(
            self, release_group_mbid: str, range: str | None = None
    ) -> StatsReleaseGroupListenersResponse | None:
        """
        ``GET: /stats/release-group/{release_group_mbid}/listeners`` - Get the top listeners of a release group.
        """
        return await self._call(
            Endpoint.STATS_RELEASE_GROUP_LISTENERS,
            StatsReleaseGroupListenersResponse,
            path_params={"release_group_mbid": release_group_mbid},
            params={"range": range},
        )

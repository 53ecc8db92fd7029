"""
Static definitions of every remote operation and the resolution of their relative URL paths.
"""
from collections.abc import Sequence, Mapping
from dataclasses import dataclass
from enum import Enum
from http import HTTPMethod
from string import Formatter

from brainzify.exception import BrainzifyKeyError

type PathValue = str | Sequence[str]


def join_path_list(values: Sequence[str]) -> str:
    """
    Join many identifiers into a single path segment.

    Commas within each identifier are escaped as ``%2C`` before joining with literal commas
    so that a separating comma is never confused with a comma in an identifier
    i.e. ``["a,b", "c"]`` gives ``a%2Cb,c``.
    No other escaping is applied.
    """
    return ",".join(value.replace(",", "%2C") for value in values)


@dataclass(frozen=True)
class Operation:
    """
    Immutable descriptor of one logical remote call.

    :param name: The name of this operation.
    :param method: The HTTP method to call the operation with.
    :param path: The path template relative to the API root. Variable segments are given as ``{name}``.
    :param auth: Whether a token must always be given to call this operation.
    :param no_content: Whether a 204 response is a valid 'no data' result for this operation.
    """
    name: str
    method: HTTPMethod
    path: str
    auth: bool = False
    no_content: bool = False

    @property
    def parameters(self) -> tuple[str, ...]:
        """The names of the variable segments of this operation's path in order of appearance"""
        return tuple(field for _, field, _, _ in Formatter().parse(self.path) if field)

    def resolve(self, params: Mapping[str, PathValue] | None = None, **kwargs: PathValue) -> str:
        """
        Resolve the path for this operation by substituting in the given path ``params``.

        Sequence values are joined with :py:func:`join_path_list`. String values are substituted as is.

        :raise BrainzifyKeyError: When any parameter is missing or unexpected.
        """
        params = dict(params or {}) | kwargs

        expected = set(self.parameters)
        if missing := expected - params.keys():
            raise BrainzifyKeyError(f"Missing path parameters for {self.name!r}: {", ".join(sorted(missing))}")
        if unexpected := params.keys() - expected:
            raise BrainzifyKeyError(f"Unexpected path parameters for {self.name!r}: {", ".join(sorted(unexpected))}")

        values = {
            key: value if isinstance(value, str) else join_path_list(value) for key, value in params.items()
        }
        return self.path.format_map(values)


class Endpoint(Enum):
    """All operations supported by the ListenBrainz API."""

    # core
    SUBMIT_LISTENS = Operation("submit_listens", HTTPMethod.POST, "submit-listens", auth=True)
    VALIDATE_TOKEN = Operation("validate_token", HTTPMethod.GET, "validate-token", auth=True)
    DELETE_LISTEN = Operation("delete_listen", HTTPMethod.POST, "delete-listen", auth=True)
    USERS_RECENT_LISTENS = Operation(
        "users_recent_listens", HTTPMethod.GET, "users/{user_list}/recent-listens"
    )
    USER_LISTEN_COUNT = Operation("user_listen_count", HTTPMethod.GET, "user/{user_name}/listen-count")
    USER_PLAYING_NOW = Operation("user_playing_now", HTTPMethod.GET, "user/{user_name}/playing-now")
    USER_LISTENS = Operation("user_listens", HTTPMethod.GET, "user/{user_name}/listens")
    USER_SIMILAR_USERS = Operation("user_similar_users", HTTPMethod.GET, "user/{user_name}/similar-users")
    USER_SIMILAR_TO = Operation(
        "user_similar_to", HTTPMethod.GET, "user/{user_name}/similar-to/{other_user_name}"
    )
    GET_LATEST_IMPORT = Operation("get_latest_import", HTTPMethod.GET, "latest-import")
    UPDATE_LATEST_IMPORT = Operation("update_latest_import", HTTPMethod.POST, "latest-import", auth=True)

    # statistics
    STATS_SITEWIDE_ARTISTS = Operation(
        "stats_sitewide_artists", HTTPMethod.GET, "stats/sitewide/artists", no_content=True
    )
    STATS_USER_ARTISTS = Operation(
        "stats_user_artists", HTTPMethod.GET, "stats/user/{user_name}/artists", no_content=True
    )
    STATS_USER_RELEASES = Operation(
        "stats_user_releases", HTTPMethod.GET, "stats/user/{user_name}/releases", no_content=True
    )
    STATS_USER_RECORDINGS = Operation(
        "stats_user_recordings", HTTPMethod.GET, "stats/user/{user_name}/recordings", no_content=True
    )
    STATS_USER_LISTENING_ACTIVITY = Operation(
        "stats_user_listening_activity",
        HTTPMethod.GET,
        "stats/user/{user_name}/listening-activity",
        no_content=True,
    )
    STATS_USER_DAILY_ACTIVITY = Operation(
        "stats_user_daily_activity", HTTPMethod.GET, "stats/user/{user_name}/daily-activity", no_content=True
    )
    STATS_USER_ARTIST_MAP = Operation(
        "stats_user_artist_map", HTTPMethod.GET, "stats/user/{user_name}/artist-map", no_content=True
    )
    STATS_RELEASE_GROUP_LISTENERS = Operation(
        "stats_release_group_listeners",
        HTTPMethod.GET,
        "stats/release-group/{release_group_mbid}/listeners",
        no_content=True,
    )

    # social
    USER_FOLLOWERS = Operation("user_followers", HTTPMethod.GET, "user/{user_name}/followers")
    USER_FOLLOWING = Operation("user_following", HTTPMethod.GET, "user/{user_name}/following")
    USER_FOLLOW = Operation("user_follow", HTTPMethod.POST, "user/{user_name}/follow", auth=True)
    USER_UNFOLLOW = Operation("user_unfollow", HTTPMethod.POST, "user/{user_name}/unfollow", auth=True)

    # playlists
    USER_PLAYLISTS = Operation("user_playlists", HTTPMethod.GET, "user/{user_name}/playlists")
    USER_PLAYLISTS_CREATED_FOR = Operation(
        "user_playlists_created_for", HTTPMethod.GET, "user/{user_name}/playlists/createdfor"
    )
    USER_PLAYLISTS_COLLABORATOR = Operation(
        "user_playlists_collaborator", HTTPMethod.GET, "user/{user_name}/playlists/collaborator"
    )
    GET_PLAYLIST = Operation("get_playlist", HTTPMethod.GET, "playlist/{playlist_mbid}")
    PLAYLIST_CREATE = Operation("playlist_create", HTTPMethod.POST, "playlist/create", auth=True)
    PLAYLIST_DELETE = Operation("playlist_delete", HTTPMethod.POST, "playlist/{playlist_mbid}/delete", auth=True)
    PLAYLIST_COPY = Operation("playlist_copy", HTTPMethod.POST, "playlist/{playlist_mbid}/copy", auth=True)

    # misc
    ART_GRID = Operation("art_grid", HTTPMethod.POST, "art/grid/")
    STATUS_GET_DUMP_INFO = Operation("status_get_dump_info", HTTPMethod.GET, "status/get-dump-info")

    @property
    def method(self) -> HTTPMethod:
        """The HTTP method to call this endpoint with"""
        return self.value.method

    @property
    def auth(self) -> bool:
        """Whether a token must always be given to call this endpoint"""
        return self.value.auth

    @property
    def no_content(self) -> bool:
        """Whether a 204 response is a valid 'no data' result for this endpoint"""
        return self.value.no_content

    def resolve(self, params: Mapping[str, PathValue] | None = None, **kwargs: PathValue) -> str:
        """Resolve the relative path for this endpoint. See :py:meth:`Operation.resolve`"""
        return self.value.resolve(params, **kwargs)

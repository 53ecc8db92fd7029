"""
Models for playlists in the JSON Shareable Playlist Format (JSPF) as extended by MusicBrainz.

The same models are used when reading playlists from the API and when creating them.
Fields assigned by the service on creation e.g. ``identifier``, ``date`` are therefore optional.
"""
from typing import Any

from pydantic import ConfigDict, Field

from brainzify.model._base import BrainzifyRequest, BrainzifyResponseModel

#: The key of the MusicBrainz extension on a JSPF playlist
PLAYLIST_EXTENSION_KEY = "https://musicbrainz.org/doc/jspf#playlist"
#: The key of the MusicBrainz extension on a JSPF track
TRACK_EXTENSION_KEY = "https://musicbrainz.org/doc/jspf#track"


class MusicBrainzPlaylistExtension(BrainzifyResponseModel):
    """MusicBrainz specific properties of a playlist"""
    public: bool = Field(
        description="Whether this playlist is visible to other users.",
        default=True,
    )
    created_for: str | None = Field(
        description="The name of the user this playlist was generated for.",
        default=None,
    )
    creator: str | None = Field(
        description="The name of the user who created this playlist.",
        default=None,
    )
    collaborators: list[str] | None = Field(
        description="The names of the users who may edit this playlist.",
        default=None,
    )
    copied_from: str | None = Field(
        description="The identifier of the playlist this playlist was copied from.",
        default=None,
    )
    copied_from_deleted: bool | None = Field(
        description="Whether the playlist this playlist was copied from has since been deleted.",
        default=None,
    )
    last_modified_at: str | None = Field(
        description="The date this playlist was last modified.",
        default=None,
    )
    additional_metadata: dict[str, Any] | None = Field(
        description="Any additional metadata e.g. the metadata of the algorithm which generated this playlist.",
        default=None,
    )


class PlaylistExtension(BrainzifyResponseModel):
    musicbrainz: MusicBrainzPlaylistExtension = Field(
        default_factory=MusicBrainzPlaylistExtension,
        alias=PLAYLIST_EXTENSION_KEY,
    )


class MusicBrainzTrackExtension(BrainzifyResponseModel):
    """MusicBrainz specific properties of a track in a playlist"""
    added_by: str | None = None
    added_at: str | None = None
    artist_identifiers: list[str] | None = None
    release_identifier: str | None = None
    additional_metadata: dict[str, Any] | None = None


class TrackExtension(BrainzifyResponseModel):
    musicbrainz: MusicBrainzTrackExtension = Field(
        default_factory=MusicBrainzTrackExtension,
        alias=TRACK_EXTENSION_KEY,
    )


class Track(BrainzifyResponseModel):
    """A track in a JSPF playlist"""
    identifier: str | list[str] = Field(
        description="The URI of the recording e.g. ``https://musicbrainz.org/recording/<mbid>``",
    )
    title: str | None = None
    creator: str | None = None
    album: str | None = None
    duration: int | None = None
    extension: TrackExtension | None = None


class PlaylistInfo(BrainzifyResponseModel):
    """The properties and tracks of a JSPF playlist"""
    title: str = Field(
        description="The title of this playlist.",
    )
    annotation: str | None = Field(
        description="A description of this playlist.",
        default=None,
    )
    creator: str | None = None
    date: str | None = None
    identifier: str | None = Field(
        description="The URI of this playlist e.g. ``https://listenbrainz.org/playlist/<mbid>``",
        default=None,
    )
    extension: PlaylistExtension | None = None
    track: list[Track] = Field(default_factory=list)

    @property
    def mbid(self) -> str | None:
        """The MBID of this playlist extracted from its identifier"""
        if not self.identifier:
            return
        return self.identifier.rstrip("/").split("/")[-1]


class Playlist(BrainzifyRequest):
    """A complete JSPF document i.e. ``{"playlist": {...}}``"""
    model_config = ConfigDict(extra="ignore")

    playlist: PlaylistInfo

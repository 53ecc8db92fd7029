"""
Models for the responses of the playlist endpoints.
"""
from brainzify.model._base import BrainzifyResponse
from brainzify.model.core import StatusResponse
from brainzify.model.jspf import Playlist, PlaylistInfo


class PlaylistsResponse(BrainzifyResponse):
    """A page of playlists"""
    count: int
    offset: int
    playlist_count: int
    playlists: list[Playlist]


class UserPlaylistsResponse(PlaylistsResponse):
    """Response to ``GET: /user/{user_name}/playlists``"""


class UserPlaylistsCreatedForResponse(PlaylistsResponse):
    """Response to ``GET: /user/{user_name}/playlists/createdfor``"""


class UserPlaylistsCollaboratorResponse(PlaylistsResponse):
    """Response to ``GET: /user/{user_name}/playlists/collaborator``"""


class GetPlaylistResponse(BrainzifyResponse):
    """Response to ``GET: /playlist/{playlist_mbid}``"""
    playlist: PlaylistInfo


class PlaylistCreateResponse(StatusResponse):
    """Response to ``POST: /playlist/create``"""
    playlist_mbid: str


class PlaylistDeleteResponse(StatusResponse):
    """Response to ``POST: /playlist/{playlist_mbid}/delete``"""


class PlaylistCopyResponse(StatusResponse):
    """Response to ``POST: /playlist/{playlist_mbid}/copy``"""
    playlist_mbid: str

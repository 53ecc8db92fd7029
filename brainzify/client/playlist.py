"""
Implements the playlist endpoints of the ListenBrainz API.

Endpoints which can optionally be authorised fall back to the default token of the API object
when no token is given. Private playlists are only visible to an authorised request from their owner.
"""
from brainzify.api.endpoint import Endpoint
from brainzify.client.base import ListenBrainzAPIBase
from brainzify.model.jspf import Playlist
from brainzify.model.playlist import (
    UserPlaylistsResponse,
    UserPlaylistsCreatedForResponse,
    UserPlaylistsCollaboratorResponse,
    GetPlaylistResponse,
    PlaylistCreateResponse,
    PlaylistDeleteResponse,
    PlaylistCopyResponse,
)


class ListenBrainzAPIPlaylists(ListenBrainzAPIBase):

    __slots__ = ()

    ###########################################################################
    ## GET endpoints
    ###########################################################################
    async def user_playlists(
            self, user_name: str, token: str | None = None, count: int | None = None, offset: int | None = None
    ) -> UserPlaylistsResponse:
        """
        ``GET: /user/{user_name}/playlists`` - Get the playlists created by a user.

        :param user_name: The name of the user.
        :param token: The token of the user. Give this to include the user's private playlists.
        :param count: The number of playlists to return.
        :param offset: The number of playlists to skip from the start.
        """
        return await self._call(
            Endpoint.USER_PLAYLISTS,
            UserPlaylistsResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset},
            token=token or self.token,
        )

    async def user_playlists_created_for(
            self, user_name: str, count: int | None = None, offset: int | None = None
    ) -> UserPlaylistsCreatedForResponse:
        """``GET: /user/{user_name}/playlists/createdfor`` - Get the playlists generated for a user."""
        return await self._call(
            Endpoint.USER_PLAYLISTS_CREATED_FOR,
            UserPlaylistsCreatedForResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset},
        )

    async def user_playlists_collaborator(
            self, user_name: str, token: str | None = None, count: int | None = None, offset: int | None = None
    ) -> UserPlaylistsCollaboratorResponse:
        """
        ``GET: /user/{user_name}/playlists/collaborator`` - Get the playlists a user is a collaborator on.

        :param user_name: The name of the user.
        :param token: The token of the user. Give this to include private playlists.
        :param count: The number of playlists to return.
        :param offset: The number of playlists to skip from the start.
        """
        return await self._call(
            Endpoint.USER_PLAYLISTS_COLLABORATOR,
            UserPlaylistsCollaboratorResponse,
            path_params={"user_name": user_name},
            params={"count": count, "offset": offset},
            token=token or self.token,
        )

    async def get_playlist(
            self, playlist_mbid: str, token: str | None = None, fetch_metadata: bool | None = None
    ) -> GetPlaylistResponse:
        """
        ``GET: /playlist/{playlist_mbid}`` - Get a playlist.

        :param playlist_mbid: The MBID of the playlist.
        :param token: The token of a user with access to the playlist. Required for private playlists.
        :param fetch_metadata: When False, skip loading the metadata of the playlist's recordings.
        """
        return await self._call(
            Endpoint.GET_PLAYLIST,
            GetPlaylistResponse,
            path_params={"playlist_mbid": playlist_mbid},
            params={"fetch_metadata": fetch_metadata},
            token=token or self.token,
        )

    ###########################################################################
    ## POST endpoints
    ###########################################################################
    async def playlist_create(self, token: str, playlist: Playlist) -> PlaylistCreateResponse:
        """
        ``POST: /playlist/create`` - Create a playlist.

        :param token: The token of the user to create the playlist for.
        :param playlist: The JSPF playlist to create. Only the title is required.
        """
        return await self._call(Endpoint.PLAYLIST_CREATE, PlaylistCreateResponse, token=token, body=playlist)

    async def playlist_delete(self, token: str, playlist_mbid: str) -> PlaylistDeleteResponse:
        """``POST: /playlist/{playlist_mbid}/delete`` - Delete a playlist owned by the user of the given token."""
        return await self._call(
            Endpoint.PLAYLIST_DELETE,
            PlaylistDeleteResponse,
            path_params={"playlist_mbid": playlist_mbid},
            token=token,
        )

    async def playlist_copy(self, token: str, playlist_mbid: str) -> PlaylistCopyResponse:
        """``POST: /playlist/{playlist_mbid}/copy`` - Copy a playlist to the user of the given token."""
        return await self._call(
            Endpoint.PLAYLIST_COPY,
            PlaylistCopyResponse,
            path_params={"playlist_mbid": playlist_mbid},
            token=token,
        )

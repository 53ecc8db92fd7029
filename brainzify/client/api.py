"""
The complete collection of endpoints for the ListenBrainz API.
"""
from brainzify.client.core import ListenBrainzAPICore
from brainzify.client.misc import ListenBrainzAPIMisc
from brainzify.client.playlist import ListenBrainzAPIPlaylists
from brainzify.client.social import ListenBrainzAPISocial
from brainzify.client.statistics import ListenBrainzAPIStatistics


class ListenBrainzAPI(
    ListenBrainzAPICore, ListenBrainzAPIStatistics, ListenBrainzAPISocial, ListenBrainzAPIPlaylists, ListenBrainzAPIMisc
):
    """
    Collection of endpoints for the ListenBrainz API.

    Each method sends exactly one request and returns its typed response.
    Failed requests raise the matching :py:class:`APIError` immediately and are never retried.
    Enter the context of this object to open a session before calling any endpoint.

    .. code-block:: python

        async with ListenBrainzAPI() as api:
            count = await api.user_listen_count("alice")

    :param url: The root URL of the API. Give this to use an alternative server implementing the same API.
    :param token: The default user token to use for endpoints which can optionally be authorised.
    :param session_kwargs: Passed to the :py:class:`ClientSession` used to make requests
        e.g. ``headers``, ``timeout``.
    """

    __slots__ = ()

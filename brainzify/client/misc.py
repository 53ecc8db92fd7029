"""
Implements the remaining endpoints of the ListenBrainz API.
"""
from brainzify.api.endpoint import Endpoint
from brainzify.client.base import ListenBrainzAPIBase
from brainzify.model.misc import StatusGetDumpInfoResponse, ArtGridResponse
from brainzify.model.request import ArtGrid


class ListenBrainzAPIMisc(ListenBrainzAPIBase):

    __slots__ = ()

    async def status_get_dump_info(self, id: int | None = None) -> StatusGetDumpInfoResponse:
        """
        ``GET: /status/get-dump-info`` - Get information about a data dump.

        :param id: The ID of the dump to get. Gives the latest dump when not given.
        """
        return await self._call(Endpoint.STATUS_GET_DUMP_INFO, StatusGetDumpInfoResponse, params={"id": id})

    async def art_grid(self, data: ArtGrid) -> ArtGridResponse:
        """
        ``POST: /art/grid/`` - Generate a grid of cover art for the given releases.

        :return: The response holding the generated image as SVG text.
        """
        return await self._call(Endpoint.ART_GRID, ArtGridResponse, body=data)

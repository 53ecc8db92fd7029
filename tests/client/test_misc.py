import pytest
from aioresponses import aioresponses

from brainzify.api.exception import APIResponseError
from brainzify.client import ListenBrainzAPI
from brainzify.model.request import ArtGrid
from tests.utils import get_request, get_request_json, url_for, url_pattern


class TestListenBrainzAPIMisc:

    async def test_status_get_dump_info(self, api: ListenBrainzAPI, requests_mock: aioresponses):
        payload = {"code": 200, "message": "success", "id": 712, "timestamp": "20231101-000002"}
        requests_mock.get(url_pattern("status/get-dump-info"), payload=payload)

        response = await api.status_get_dump_info()
        assert response.id == 712
        assert response.timestamp == "20231101-000002"

        url, _ = get_request(requests_mock)
        assert not url.query

    async def test_status_get_dump_info_by_id(self, api: ListenBrainzAPI, requests_mock: aioresponses):
        payload = {"code": 200, "message": "success", "id": 700, "timestamp": "20231015-000003"}
        requests_mock.get(url_pattern("status/get-dump-info"), payload=payload)

        response = await api.status_get_dump_info(id=700)
        assert response.id == 700

        url, _ = get_request(requests_mock)
        assert dict(url.query) == {"id": "700"}

    async def test_art_grid(self, api: ListenBrainzAPI, requests_mock: aioresponses):
        svg = '<svg xmlns="http://www.w3.org/2000/svg" width="750" height="750"></svg>'
        requests_mock.post(url_for("art/grid/"), body=svg, content_type="image/svg+xml")

        response = await api.art_grid(ArtGrid(release_mbids=["a", "b", "c", "d"], dimension=2))
        assert response.image == svg

        body = get_request_json(requests_mock)
        assert body["release_mbids"] == ["a", "b", "c", "d"]
        assert body["dimension"] == 2
        assert body["skip-missing"] is True

    async def test_art_grid_rejected(self, api: ListenBrainzAPI, requests_mock: aioresponses):
        error = "Invalid value for dimension"
        requests_mock.post(url_for("art/grid/"), status=400, payload={"code": 400, "error": error})

        with pytest.raises(APIResponseError) as ex:
            await api.art_grid(ArtGrid(release_mbids=["a"]))
        assert ex.value.error == error

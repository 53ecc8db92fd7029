import aiohttp
import pytest
from aioresponses import aioresponses
from faker import Faker
from yarl import URL

from brainzify.api.exception import (
    APIResponseError, NotAuthenticatedError, ResponseDeserializationError, TransportError
)
from brainzify.client import ListenBrainzAPI
from brainzify.model.core import UserListen
from brainzify.model.request import DeleteListen, Listen, ListenType, SubmitListens, TrackMetadata, UpdateLatestImport
from tests.utils import URL_TEST, get_request, get_request_json, rate_limit_headers, url_for, url_pattern


def listen_response(user_name: str, faker: Faker, inserted_at: int | str | None = None) -> dict:
    """Generate a listen as returned by the API"""
    return {
        "user_name": user_name,
        "inserted_at": inserted_at if inserted_at is not None else faker.random_int(10 ** 9, 2 * 10 ** 9),
        "listened_at": faker.random_int(10 ** 9, 2 * 10 ** 9),
        "recording_msid": faker.uuid4(),
        "track_metadata": {
            "artist_name": faker.name(),
            "track_name": faker.sentence(nb_words=3),
            "release_name": None,
            "additional_info": {"media_player": "BrainzPlayer"},
            "mbid_mapping": {
                "artist_mbids": [faker.uuid4()],
                "artists": [{"artist_mbid": faker.uuid4(), "artist_credit_name": faker.name(), "join_phrase": ""}],
                "recording_mbid": faker.uuid4(),
                "recording_name": faker.sentence(nb_words=3),
                "caa_id": faker.random_int(),
                "caa_release_mbid": faker.uuid4(),
                "release_mbid": faker.uuid4(),
            },
        },
    }


class TestListenBrainzAPICore:

    async def test_submit_listens(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str):
        requests_mock.post(url_for("submit-listens"), payload={"status": "ok"}, headers=rate_limit_headers())

        metadata = TrackMetadata(artist_name="Rick Astley", track_name="Never Gonna Give You Up")
        data = SubmitListens(
            listen_type=ListenType.SINGLE, payload=[Listen(listened_at=1700000000, track_metadata=metadata)]
        )
        response = await api.submit_listens(token, data)

        assert response.status == "ok"
        assert response.rate_limit is not None

        _, kwargs = get_request(requests_mock, method="POST")
        assert kwargs["data"] == (
            b'{"listen_type":"single","payload":[{"listened_at":1700000000,'
            b'"track_metadata":{"artist_name":"Rick Astley","track_name":"Never Gonna Give You Up"}}]}'
        )
        assert kwargs["headers"]["Authorization"] == f"Token {token}"
        assert kwargs["headers"]["Content-Type"] == "application/json"

    async def test_submit_listens_rejected(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str):
        error = "JSON document may only contain listen_type, payload fields"
        requests_mock.post(url_for("submit-listens"), status=400, payload={"code": 400, "error": error})

        metadata = TrackMetadata(artist_name="artist", track_name="track")
        data = SubmitListens(listen_type=ListenType.PLAYING_NOW, payload=[Listen(track_metadata=metadata)])
        with pytest.raises(APIResponseError) as ex:
            await api.submit_listens(token, data)

        assert ex.value.code == 400
        assert ex.value.error == error

    async def test_auth_required_before_any_request(self, api: ListenBrainzAPI, requests_mock: aioresponses):
        with pytest.raises(NotAuthenticatedError):
            await api.validate_token("")
        with pytest.raises(NotAuthenticatedError):
            await api.delete_listen("", DeleteListen(listened_at=1, recording_msid="msid"))

        assert not requests_mock.requests

    async def test_validate_token(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str, user_name: str):
        requests_mock.get(
            url_for("validate-token"),
            payload={"code": 200, "message": "Token valid.", "valid": True, "user_name": user_name},
        )

        response = await api.validate_token(token)
        assert response.valid
        assert response.user_name == user_name

        url, kwargs = get_request(requests_mock)
        assert kwargs["headers"] == {"Authorization": f"Token {token}"}
        assert not url.query

    async def test_validate_invalid_token(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str):
        requests_mock.get(url_for("validate-token"), payload={"code": 200, "message": "Token invalid.", "valid": False})

        response = await api.validate_token(token)
        assert not response.valid
        assert response.user_name is None

    async def test_delete_listen(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str, faker: Faker):
        requests_mock.post(url_for("delete-listen"), payload={"status": "ok"})

        msid = faker.uuid4()
        response = await api.delete_listen(token, DeleteListen(listened_at=1700000000, recording_msid=msid))
        assert response.status == "ok"
        assert get_request_json(requests_mock) == {"listened_at": 1700000000, "recording_msid": msid}

    async def test_users_recent_listens(self, api: ListenBrainzAPI, requests_mock: aioresponses, faker: Faker):
        listens = [listen_response("a,b", faker, inserted_at="Tue, 14 Nov 2023 22:13:20 GMT")]
        payload = {"payload": {"count": 1, "listens": listens, "user_list": "a%2Cb,c"}}
        requests_mock.get(url_pattern(r"users/.+/recent-listens"), payload=payload)

        response = await api.users_recent_listens(["a,b", "c"])
        assert response.payload.count == 1
        assert response.payload.listens[0].user_name == "a,b"
        assert response.payload.listens[0].inserted_at == "Tue, 14 Nov 2023 22:13:20 GMT"

        url, _ = get_request(requests_mock)
        assert url.raw_path == "/1/users/a%2Cb,c/recent-listens"

    async def test_user_listen_count(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(url_for(f"user/{user_name}/listen-count"), payload={"payload": {"count": 1234}})

        response = await api.user_listen_count(user_name)
        assert response.payload.count == 1234

    async def test_user_playing_now(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        payload = {
            "payload": {
                "count": 1,
                "user_id": user_name,
                "playing_now": True,
                "listens": [
                    {
                        "playing_now": True,
                        "track_metadata": {"artist_name": "artist", "track_name": "track", "additional_info": {}},
                    }
                ],
            }
        }
        requests_mock.get(url_for(f"user/{user_name}/playing-now"), payload=payload)

        response = await api.user_playing_now(user_name)
        assert response.payload.playing_now
        assert response.payload.listens[0].track_metadata.artist_name == "artist"
        assert response.payload.listens[0].track_metadata.release_name is None

    async def test_user_listens(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str, faker: Faker):
        listens = [listen_response(user_name, faker) for _ in range(3)]
        payload = {
            "payload": {
                "count": len(listens),
                "latest_listen_ts": 1700000000,
                "oldest_listen_ts": 1600000000,
                "user_id": user_name,
                "listens": listens,
            }
        }
        requests_mock.get(url_pattern(f"user/{user_name}/listens"), payload=payload)

        response = await api.user_listens(user_name, min_ts=1600000000, count=3)
        assert response.payload.count == 3
        assert all(isinstance(listen, UserListen) for listen in response.payload.listens)
        assert response.payload.listens[0].track_metadata.mbid_mapping.recording_mbid == (
            listens[0]["track_metadata"]["mbid_mapping"]["recording_mbid"]
        )

        url, _ = get_request(requests_mock)
        assert dict(url.query) == {"min_ts": "1600000000", "count": "3"}

    async def test_user_similar_users(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        payload = {"payload": [{"user_name": "other", "similarity": 0.75}, {"user_name": "another", "similarity": 0.5}]}
        requests_mock.get(url_for(f"user/{user_name}/similar-users"), payload=payload)

        response = await api.user_similar_users(user_name)
        assert [user.user_name for user in response.payload] == ["other", "another"]
        assert response.payload[0].similarity == 0.75

    async def test_user_similar_to(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(
            url_for(f"user/{user_name}/similar-to/other"), payload={"user_name": "other", "similarity": 0.25}
        )

        response = await api.user_similar_to(user_name, "other")
        assert response.user_name == "other"
        assert response.similarity == 0.25

    async def test_get_latest_import(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(
            url_pattern("latest-import"), payload={"latest_import": 1700000000, "musicbrainz_id": user_name}
        )

        response = await api.get_latest_import(user_name)
        assert response.latest_import == 1700000000
        assert response.musicbrainz_id == user_name

        url, kwargs = get_request(requests_mock)
        assert dict(url.query) == {"user_name": user_name}
        assert "Authorization" not in kwargs["headers"]

    async def test_update_latest_import(self, api: ListenBrainzAPI, requests_mock: aioresponses, token: str):
        requests_mock.post(url_for("latest-import"), payload={"status": "ok"})

        response = await api.update_latest_import(token, UpdateLatestImport(ts=1700000000))
        assert response.status == "ok"
        assert get_request_json(requests_mock) == {"ts": 1700000000}

    async def test_unexpected_no_content(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(url_for(f"user/{user_name}/listen-count"), status=204)

        with pytest.raises(ResponseDeserializationError) as ex:
            await api.user_listen_count(user_name)
        assert ex.value.status == 204

    async def test_malformed_response(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(url_for(f"user/{user_name}/listen-count"), status=200, body="not json")

        with pytest.raises(ResponseDeserializationError):
            await api.user_listen_count(user_name)

    async def test_transport_failure(self, api: ListenBrainzAPI, requests_mock: aioresponses, user_name: str):
        requests_mock.get(
            url_for(f"user/{user_name}/listen-count"), exception=aiohttp.ClientConnectionError("reset")
        )

        with pytest.raises(TransportError):
            await api.user_listen_count(user_name)

    async def test_close_within_context(self, requests_mock: aioresponses):
        async with ListenBrainzAPI(url=URL_TEST) as api:
            await api.close()
        assert api.handler.closed

    async def test_alternative_url(self, requests_mock: aioresponses, user_name: str):
        url = URL("http://localhost:8080/api/1/")
        requests_mock.get(f"{url}user/{user_name}/listen-count", payload={"payload": {"count": 1}})

        async with ListenBrainzAPI(url=url) as api:
            assert api.url == url
            response = await api.user_listen_count(user_name)
        assert response.payload.count == 1

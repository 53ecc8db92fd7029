import asyncio
import json
import math
from datetime import datetime
from http import HTTPMethod

import aiohttp
import pytest
from aioresponses import aioresponses
from yarl import URL

from brainzify import URL_API
from brainzify.api.endpoint import Endpoint
from brainzify.api.exception import (
    NotAuthenticatedError, RequestError, RequestSerializationError, ResponseDeserializationError, TransportError
)
from brainzify.api.request import RequestEnvelope, RequestHandler, build_request, format_params, serialize_body
from brainzify.api.response import APIFailure, NoContent, Success, TransportFailure
from brainzify.model.core import StatusResponse, UserListenCountResponse
from brainzify.model.request import DeleteListen
from tests.utils import URL_TEST, rate_limit_headers, url_for, url_pattern


class TestBuildRequest:

    def test_default_base_url(self):
        request = build_request(Endpoint.USER_LISTEN_COUNT, path_params={"user_name": "alice"})
        assert str(request.url) == URL_API + "user/alice/listen-count"
        assert request.method == HTTPMethod.GET
        assert request.headers == {}
        assert request.body is None

    @pytest.mark.parametrize("base_url", ["http://localhost/1", "http://localhost/1/", URL("http://localhost/1/")])
    def test_base_url_joined_with_one_slash(self, base_url: str | URL):
        request = build_request(Endpoint.GET_LATEST_IMPORT, base_url=base_url)
        assert str(request.url) == "http://localhost/1/latest-import"

    def test_path_escaping_kept(self):
        request = build_request(
            Endpoint.USERS_RECENT_LISTENS, base_url=URL_TEST, path_params={"user_list": ["a,b", "c"]}
        )
        assert request.url.raw_path == "/1/users/a%2Cb,c/recent-listens"
        assert str(request.url) == url_for("users/a%2Cb,c/recent-listens")

    def test_query_parameters(self):
        params = {"min_ts": 10, "max_ts": None, "count": 25, "force_recalculate": True, "fetch_metadata": False}
        request = build_request(
            Endpoint.USER_LISTENS, base_url=URL_TEST, path_params={"user_name": "alice"}, params=params
        )

        assert dict(request.url.query) == {
            "min_ts": "10", "count": "25", "force_recalculate": "true", "fetch_metadata": "false"
        }
        assert list(request.url.query) == ["min_ts", "count", "force_recalculate", "fetch_metadata"]
        assert "max_ts" not in request.url.query_string

    def test_no_query_when_all_parameters_absent(self):
        request = build_request(Endpoint.STATS_SITEWIDE_ARTISTS, base_url=URL_TEST, params={"count": None})
        assert not request.url.query_string
        assert str(request.url) == url_for("stats/sitewide/artists")

    def test_format_params(self):
        assert format_params(None) == {}
        assert format_params([("a", 1), ("b", None), ("a", 2)]) == {"a": "2"}
        assert format_params({"x": 1.5, "y": "value", "z": True}) == {"x": "1.5", "y": "value", "z": "true"}

    def test_token_header(self, token: str):
        request = build_request(Endpoint.VALIDATE_TOKEN, token=token)
        assert request.headers == {"Authorization": f"Token {token}"}

        request = build_request(Endpoint.GET_PLAYLIST, path_params={"playlist_mbid": "id"}, token=token)
        assert request.headers == {"Authorization": f"Token {token}"}

    @pytest.mark.parametrize("endpoint", [endpoint for endpoint in Endpoint if endpoint.auth])
    def test_auth_endpoint_without_token_fails(self, endpoint: Endpoint):
        params = {name: "value" for name in endpoint.value.parameters}
        with pytest.raises(NotAuthenticatedError):
            build_request(endpoint, path_params=params)
        with pytest.raises(NotAuthenticatedError):
            build_request(endpoint, path_params=params, token="")

    def test_model_body(self, token: str):
        data = DeleteListen(listened_at=1700000000, recording_msid="msid")
        request = build_request(Endpoint.DELETE_LISTEN, token=token, body=data)

        assert request.method == HTTPMethod.POST
        assert request.body == '{"listened_at":1700000000,"recording_msid":"msid"}'
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == f"Token {token}"

    def test_mapping_body(self, token: str):
        request = build_request(Endpoint.UPDATE_LATEST_IMPORT, token=token, body={"ts": 1700000000})
        assert request.body == '{"ts":1700000000}'
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.parametrize("body", [{"ts": datetime.now()}, {"ts": math.nan}, {"ts": {1, 2}}])
    def test_unserializable_body(self, body: dict, token: str):
        with pytest.raises(RequestSerializationError):
            build_request(Endpoint.UPDATE_LATEST_IMPORT, token=token, body=body)
        with pytest.raises(RequestSerializationError):
            serialize_body(body)

    def test_envelope_is_immutable(self):
        request = build_request(Endpoint.GET_LATEST_IMPORT)
        assert isinstance(request, RequestEnvelope)
        with pytest.raises(AttributeError):
            # noinspection PyDataclass
            request.body = "{}"


class TestRequestHandler:

    @pytest.fixture
    def request_handler(self) -> RequestHandler:
        """Yield a simple :py:class:`RequestHandler` object"""
        return RequestHandler.create(headers={"User-Agent": "brainzify-tests"})

    @pytest.fixture
    def request_envelope(self) -> RequestEnvelope:
        """Yield a simple GET :py:class:`RequestEnvelope` object"""
        return build_request(Endpoint.USER_LISTEN_COUNT, base_url=URL_TEST, path_params={"user_name": "alice"})

    async def test_context_management(self, request_handler: RequestHandler, request_envelope: RequestEnvelope):
        assert request_handler.closed
        assert request_handler.session is None

        with pytest.raises(RequestError):
            await request_handler.send(request_envelope, model=UserListenCountResponse)

        async with request_handler as handler:
            assert not handler.closed
            assert isinstance(handler.session, aiohttp.ClientSession)
            assert handler.session.headers["User-Agent"] == "brainzify-tests"

        assert request_handler.closed

    async def test_close_within_context(self, request_handler: RequestHandler):
        async with request_handler as handler:
            await handler.close()
            assert handler.closed

            # closing twice does nothing
            await handler.close()

        assert request_handler.closed
        assert request_handler.session is None

    async def test_send_success(
            self, request_handler: RequestHandler, request_envelope: RequestEnvelope, requests_mock: aioresponses
    ):
        requests_mock.get(
            url_for("user/alice/listen-count"), payload={"payload": {"count": 10}}, headers=rate_limit_headers()
        )

        async with request_handler as handler:
            outcome = await handler.send(request_envelope, model=UserListenCountResponse)

        assert isinstance(outcome, Success)
        assert outcome.status == 200
        assert outcome.payload.payload.count == 10
        assert outcome.rate_limit is not None
        assert outcome.payload.rate_limit == outcome.rate_limit

    async def test_send_post(self, request_handler: RequestHandler, requests_mock: aioresponses, token: str):
        url = url_for("latest-import")
        requests_mock.post(url, payload={"status": "ok"})
        request = build_request(Endpoint.UPDATE_LATEST_IMPORT, base_url=URL_TEST, token=token, body={"ts": 1})

        async with request_handler as handler:
            outcome = await handler.send(request, model=StatusResponse)
        assert outcome.unwrap().status == "ok"

        call = requests_mock.requests[("POST", URL(url))][0]
        assert json.loads(call.kwargs["data"]) == {"ts": 1}
        assert call.kwargs["headers"]["Authorization"] == f"Token {token}"
        assert call.kwargs["headers"]["Content-Type"] == "application/json"

    async def test_send_keeps_escaped_path(self, request_handler: RequestHandler, requests_mock: aioresponses):
        requests_mock.get(url_pattern("users/.+/recent-listens"), status=204)
        request = build_request(
            Endpoint.USERS_RECENT_LISTENS, base_url=URL_TEST, path_params={"user_list": ["a,b", "c"]}
        )

        async with request_handler as handler:
            outcome = await handler.send(request, model=StatusResponse)
        assert isinstance(outcome, NoContent)

        (method, url), = requests_mock.requests.keys()
        assert url.raw_path == "/1/users/a%2Cb,c/recent-listens"

    async def test_send_api_error(
            self, request_handler: RequestHandler, request_envelope: RequestEnvelope, requests_mock: aioresponses
    ):
        requests_mock.get(
            url_for("user/alice/listen-count"), status=404, payload={"code": 404, "error": "Cannot find user: alice"}
        )

        async with request_handler as handler:
            outcome = await handler.send(request_envelope, model=UserListenCountResponse)

        assert isinstance(outcome, APIFailure)
        assert outcome.code == 404
        assert outcome.message == "Cannot find user: alice"

    async def test_send_malformed_error(
            self, request_handler: RequestHandler, request_envelope: RequestEnvelope, requests_mock: aioresponses
    ):
        requests_mock.get(url_for("user/alice/listen-count"), status=502, body="<html>Bad Gateway</html>")

        async with request_handler as handler:
            outcome = await handler.send(request_envelope, model=UserListenCountResponse)

        assert isinstance(outcome, TransportFailure)
        assert isinstance(outcome.error, ResponseDeserializationError)
        assert outcome.status == 502

    @pytest.mark.parametrize("exception", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()])
    async def test_send_transport_error(
            self,
            request_handler: RequestHandler,
            request_envelope: RequestEnvelope,
            requests_mock: aioresponses,
            exception: Exception,
    ):
        requests_mock.get(url_for("user/alice/listen-count"), exception=exception)

        async with request_handler as handler:
            outcome = await handler.send(request_envelope, model=UserListenCountResponse)

        assert isinstance(outcome, TransportFailure)
        assert outcome.status is None
        with pytest.raises(TransportError):
            outcome.unwrap()

    async def test_send_does_not_retry(
            self, request_handler: RequestHandler, request_envelope: RequestEnvelope, requests_mock: aioresponses
    ):
        url = url_for("user/alice/listen-count")
        requests_mock.get(url, status=429, payload={"code": 429, "error": "Rate limited"}, repeat=True)

        async with request_handler as handler:
            outcome = await handler.send(request_envelope, model=UserListenCountResponse)

        assert isinstance(outcome, APIFailure)
        assert len(requests_mock.requests[("GET", URL(url))]) == 1

    def test_log(self, request_handler: RequestHandler, caplog: pytest.LogCaptureFixture):
        url = URL(url_for("user/alice/listens")).with_query({"count": "10"})
        with caplog.at_level("DEBUG", logger=request_handler.logger.name):
            request_handler.log(method="GET", url=url, json={"ts": 1}, message="extra")

        record = caplog.records[-1].getMessage()
        assert record.startswith("GET    : " + url_for("user/alice/listens"))
        assert "count: 10" in record
        assert "ts: 1" in record
        assert record.endswith("extra")

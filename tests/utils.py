import json
import re
from typing import Any

from aioresponses import aioresponses
from yarl import URL

#: The root URL of the API to use for all tests
URL_TEST = "http://localhost/1/"


def url_for(path: str) -> str:
    """Get the absolute test URL for the given relative ``path``"""
    return URL_TEST + path


def url_pattern(path: str) -> re.Pattern:
    """
    Get a pattern matching the test URL for the given relative ``path`` with any query.
    The ``path`` is a regular expression, only the test URL is escaped.
    """
    return re.compile(re.escape(URL_TEST) + path + r"(\?.*)?$")


def rate_limit_headers(limit: int = 30, remaining: int = 29, reset_in: int = 10, reset: int = 1700000010) -> dict:
    """Get a complete set of rate limit headers"""
    return {
        "X-RateLimit-Limit": str(limit),
        "X-RateLimit-Remaining": str(remaining),
        "X-RateLimit-Reset-In": str(reset_in),
        "X-RateLimit-Reset": str(reset),
    }


def get_request(requests_mock: aioresponses, method: str = "GET") -> tuple[URL, dict[str, Any]]:
    """Get the URL and call kwargs of the only request sent with the given ``method``"""
    calls = [(url, call) for (m, url), calls in requests_mock.requests.items() if m == method for call in calls]
    assert len(calls) == 1
    url, call = calls[0]
    return url, call.kwargs


def get_request_json(requests_mock: aioresponses, method: str = "POST") -> Any:
    """Get the decoded JSON body of the only request sent with the given ``method``"""
    _, kwargs = get_request(requests_mock, method=method)
    return json.loads(kwargs["data"])

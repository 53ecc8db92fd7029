"""
Classification of completed HTTP exchanges into typed outcomes.
"""
from abc import ABCMeta, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from brainzify.api.exception import APIError, APIResponseError, ResponseDeserializationError
from brainzify.model._base import BrainzifyResponse, BrainzifyResponseModel, RateLimit


class ErrorBody(BrainzifyResponseModel):
    """The structured body the API sends with a rejected request."""
    code: int
    error: str


@dataclass(frozen=True, kw_only=True)
class ResponseOutcome[T: BrainzifyResponse](metaclass=ABCMeta):
    """
    The classified result of one HTTP exchange.

    :param status: The HTTP status code of the response. None when no response was received.
    :param rate_limit: The rate limiting information sent with the response, if any.
    """
    status: int | None = None
    rate_limit: RateLimit | None = None

    @property
    def ok(self) -> bool:
        """Whether this outcome is a successful result"""
        return False

    @abstractmethod
    def unwrap(self) -> T | None:
        """
        Get the result of this outcome.

        :return: The deserialized payload on success, None when the API sent no content.
        :raise APIError: The typed error for any failed outcome.
        """


@dataclass(frozen=True, kw_only=True)
class Success[T: BrainzifyResponse](ResponseOutcome[T]):
    """The API accepted the request and sent a body matching the expected model."""
    payload: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.payload


@dataclass(frozen=True, kw_only=True)
class NoContent(ResponseOutcome):
    """The API accepted the request but has no data to give i.e. a 204 response."""

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> None:
        return


@dataclass(frozen=True, kw_only=True)
class APIFailure(ResponseOutcome):
    """The API rejected the request with a structured ``{code, error}`` body."""
    code: int
    message: str

    @property
    def error(self) -> APIResponseError:
        """The typed exception for this failure"""
        return APIResponseError(code=self.code, error=self.message, rate_limit=self.rate_limit, status=self.status)

    def unwrap(self) -> None:
        raise self.error


@dataclass(frozen=True, kw_only=True)
class TransportFailure(ResponseOutcome):
    """The exchange failed below the level of the API's own contract."""
    error: APIError

    def unwrap(self) -> None:
        raise self.error


def classify[T: BrainzifyResponse](
        status: int, headers: Mapping[str, str], body: bytes, model: type[T]
) -> ResponseOutcome[T]:
    """
    Classify a completed HTTP exchange.

    * 400-599 gives :py:class:`APIFailure` when the body is a valid ``{code, error}`` object
      and a :py:class:`TransportFailure` otherwise.
    * 204 gives :py:class:`NoContent`.
    * Any other status gives :py:class:`Success` when the body deserializes into ``model``
      and a :py:class:`TransportFailure` otherwise.

    Rate limit headers are extracted for every branch and attached to the outcome.
    On success, they are also set on the payload.
    This function never raises.

    :param status: The HTTP status code of the response.
    :param headers: The headers of the response.
    :param body: The raw body of the response.
    :param model: The model to deserialize a successful body into.
    """
    rate_limit = RateLimit.from_headers(headers)

    if 400 <= status <= 599:
        try:
            error = ErrorBody.model_validate_json(body)
        except ValidationError as ex:
            return TransportFailure(
                status=status,
                rate_limit=rate_limit,
                error=ResponseDeserializationError(
                    f"Error response does not match the expected error shape: {ex}", status=status, body=body
                ),
            )
        return APIFailure(status=status, rate_limit=rate_limit, code=error.code, message=error.error)

    if status == 204:
        return NoContent(status=status, rate_limit=rate_limit)

    # ValidationError and UnicodeDecodeError are both ValueErrors
    try:
        payload = model.from_body(body)
    except ValueError as ex:
        return TransportFailure(
            status=status,
            rate_limit=rate_limit,
            error=ResponseDeserializationError(
                f"Response does not match {model.__name__}: {ex}", status=status, body=body
            ),
        )

    payload.rate_limit = rate_limit
    return Success(status=status, rate_limit=rate_limit, payload=payload)

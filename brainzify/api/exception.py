"""
Exceptions relating to API operations.
"""
from typing import Any

from brainzify.exception import BrainzifyError


class APIError(BrainzifyError):
    """
    Exception raised for API errors.

    :param message: Explanation of the error.
    :param status: The HTTP status code of the response related to the error.
    """

    def __init__(self, message: str | None = None, status: int | None = None):
        self.message = message
        self.status = status
        formatted = f"Status code: {status} | {message}" if status else message
        super().__init__(formatted)


class RequestError(APIError):
    """Exception raised for errors relating to requests to an API."""


class APIResponseError(APIError):
    """
    Exception raised when the API explicitly rejects a request with a structured ``{code, error}`` body.

    :param code: The error code given in the response body.
    :param error: The error message given in the response body.
    :param rate_limit: The rate limit information sent alongside the error, if any.
    :param status: The HTTP status code of the response. Defaults to ``code`` when not given.
    """

    def __init__(self, code: int, error: str, rate_limit: Any = None, status: int | None = None):
        self.code = code
        self.error = error
        self.rate_limit = rate_limit
        super().__init__(message=error, status=status if status is not None else code)


class RequestSerializationError(APIError):
    """Exception raised when the data for an outgoing request cannot be encoded."""


class ResponseDeserializationError(APIError):
    """
    Exception raised when the body of a response does not match its expected shape.

    :param message: Explanation of the error.
    :param status: The HTTP status code of the response.
    :param body: The raw body of the response.
    """

    def __init__(self, message: str | None = None, status: int | None = None, body: bytes = b""):
        self.body = body
        super().__init__(message=message, status=status)


class TransportError(APIError):
    """Exception raised for connection, timeout, TLS, or any other failure below the HTTP layer."""


###########################################################################
## Authentication errors
###########################################################################
class AuthenticationError(APIError):
    """Exception raised for errors relating to the authentication state of a client."""


class InvalidTokenError(AuthenticationError):
    """Exception raised when a token fails validation."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message=message)


class NotAuthenticatedError(AuthenticationError):
    """Exception raised when an operation requiring authentication is attempted without it."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message)

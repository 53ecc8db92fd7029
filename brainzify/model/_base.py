import re
from collections.abc import Mapping
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class BrainzifyModel(BaseModel):
    """Generic base class for any Brainzify model."""
    model_config = ConfigDict(
        validate_default=True,
        validate_assignment=True,
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )


class BrainzifyRequest(BrainzifyModel):
    """Base class for the body of a request to the API."""

    def to_json(self) -> str:
        """
        Serialize this request to compact JSON.
        Fields with no value are omitted from the output and aliases are used as keys where given.
        """
        return self.model_dump_json(exclude_none=True, by_alias=True)


class RateLimit(BrainzifyModel):
    """
    Rate limiting information extracted from the ``X-RateLimit-*`` headers of a response.

    Prefer :py:attr:`reset_in` over :py:attr:`reset` as the former is resilient to clients with incorrect clocks.
    """
    model_config = ConfigDict(frozen=True)

    #: Map of field name to the header it is extracted from
    headers_map: ClassVar[dict[str, str]] = {
        "limit": "X-RateLimit-Limit",
        "remaining": "X-RateLimit-Remaining",
        "reset_in": "X-RateLimit-Reset-In",
        "reset": "X-RateLimit-Reset",
    }

    limit: int = Field(
        description="The number of requests allowed in the current time window.",
    )
    remaining: int = Field(
        description="The number of requests remaining in the current time window.",
    )
    reset_in: int = Field(
        description="The number of seconds until the current time window resets.",
    )
    reset: int = Field(
        description="The UNIX epoch timestamp at which the current time window resets.",
    )

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Self | None:
        """
        Extract rate limiting information from the given ``headers``.
        Header names are matched case-insensitively.

        :return: The populated :py:class:`RateLimit` only when all headers are present and valid integers,
            None otherwise.
        """
        headers = {str(key).casefold(): value for key, value in headers.items()}

        values = {}
        for field, header in cls.headers_map.items():
            value = headers.get(header.casefold())
            if not isinstance(value, str) or not re.fullmatch(r"[+-]?[0-9]+", value):
                return
            values[field] = int(value)

        try:
            return cls(**values)
        except ValidationError:
            return


class BrainzifyResponseModel(BrainzifyModel):
    """
    Base class for any object found in the body of a response from the API.
    Fields not declared on the model are ignored so that additions to the API do not break deserialization.
    """
    model_config = ConfigDict(extra="ignore")


class BrainzifyResponse(BrainzifyResponseModel):
    """Base class for the deserialized body of a successful response from the API."""

    rate_limit: RateLimit | None = Field(
        description="The rate limiting information sent alongside this response.",
        default=None,
        exclude=True,
    )

    @classmethod
    def from_body(cls, body: bytes) -> Self:
        """
        Deserialize the raw ``body`` of a response into this model.

        :raise ValidationError: When the body does not match the shape of this model.
        """
        return cls.model_validate_json(body)

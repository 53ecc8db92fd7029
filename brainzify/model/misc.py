"""
Models for the responses of the miscellaneous endpoints.
"""
from typing import Self

from pydantic import Field

from brainzify.model._base import BrainzifyResponse


class StatusGetDumpInfoResponse(BrainzifyResponse):
    """Response to ``GET: /status/get-dump-info``"""
    code: int
    message: str
    id: int = Field(
        description="The ID of the data dump.",
    )
    timestamp: str = Field(
        description="The date the data dump was created in the format ``YYYYMMDD-HHMMSS``.",
    )


class ArtGridResponse(BrainzifyResponse):
    """Response to ``POST: /art/grid/``"""
    image: str = Field(
        description="The generated cover art grid as SVG text.",
    )

    @classmethod
    def from_body(cls, body: bytes) -> Self:
        """Wrap the raw SVG ``body`` of the response. The body is not JSON so is not parsed."""
        return cls(image=body.decode("utf-8"))

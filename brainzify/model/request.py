"""
Models for the bodies of requests sent to the API.
"""
from enum import StrEnum
from typing import Any, Self

from pydantic import Field, model_validator

from brainzify.model._base import BrainzifyModel, BrainzifyRequest


class ListenType(StrEnum):
    """The type of a listen submission."""
    SINGLE = "single"
    PLAYING_NOW = "playing_now"
    IMPORT = "import"


class TrackMetadata(BrainzifyModel):
    """The metadata of a track being submitted as a listen."""
    artist_name: str = Field(
        description="The name of the artist of this track.",
    )
    track_name: str = Field(
        description="The name of this track.",
    )
    release_name: str | None = Field(
        description="The name of the release this track is featured on.",
        default=None,
    )
    additional_info: dict[str, Any] | None = Field(
        description="Any additional information about this track e.g. MBIDs, duration, media player.",
        default=None,
    )


class Listen(BrainzifyModel):
    """A single listen to submit."""
    listened_at: int | None = Field(
        description="The UNIX timestamp of when this track was listened to. "
                    "Must be given for 'single' and 'import' submissions and omitted for 'playing_now'.",
        default=None,
    )
    track_metadata: TrackMetadata = Field(
        description="The metadata of the track that was listened to.",
    )


class SubmitListens(BrainzifyRequest):
    """Body of a request to ``POST: /submit-listens``."""
    listen_type: ListenType = Field(
        description="The type of this submission.",
    )
    payload: list[Listen] = Field(
        description="The listens to submit.",
    )

    @model_validator(mode="after")
    def _check_timestamps(self) -> Self:
        if self.listen_type == ListenType.PLAYING_NOW:
            if any(listen.listened_at is not None for listen in self.payload):
                raise ValueError("A 'playing_now' submission must not carry a listened_at timestamp")
        elif any(listen.listened_at is None for listen in self.payload):
            raise ValueError(f"A {self.listen_type.value!r} submission must carry a listened_at timestamp")

        return self


class DeleteListen(BrainzifyRequest):
    """Body of a request to ``POST: /delete-listen``."""
    listened_at: int = Field(
        description="The UNIX timestamp of the listen to delete.",
    )
    recording_msid: str = Field(
        description="The MessyBrainz ID of the recording of the listen to delete.",
    )


class UpdateLatestImport(BrainzifyRequest):
    """Body of a request to ``POST: /latest-import``."""
    ts: int = Field(
        description="The UNIX timestamp of the latest import.",
    )


class ArtGrid(BrainzifyRequest):
    """Body of a request to ``POST: /art/grid/``."""
    release_mbids: list[str] = Field(
        description="The release MBIDs of the cover art to use in the grid, in grid order.",
    )
    dimension: int = Field(
        description="The number of cells along each side of the grid.",
        default=4,
        ge=2,
        le=5,
    )
    image_size: int = Field(
        description="The size of the generated image in pixels.",
        default=750,
        ge=1,
    )
    background: str = Field(
        description="The background of the grid: 'transparent', 'white' or 'black'.",
        default="transparent",
    )
    skip_missing: bool = Field(
        description="When True, skip releases with no cover art instead of showing a placeholder.",
        default=True,
        alias="skip-missing",
    )
    show_caa: bool = Field(
        description="When True, show the Cover Art Archive logo on missing cover art.",
        default=False,
        alias="show-caa",
    )
    tiles: list[str] | None = Field(
        description="An optional custom layout of the grid where each tile covers a range of cells e.g. '0,1,4,5'.",
        default=None,
    )

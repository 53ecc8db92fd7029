"""
Models for the bodies of requests to and responses from the ListenBrainz API.
"""
from ._base import BrainzifyModel, BrainzifyRequest, BrainzifyResponse, BrainzifyResponseModel, RateLimit
from .request import ListenType, TrackMetadata, Listen, SubmitListens, DeleteListen, UpdateLatestImport, ArtGrid
from .jspf import Playlist, PlaylistInfo, Track

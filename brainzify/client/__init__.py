"""
Typed wrappers for every endpoint of the ListenBrainz API.
"""
from .api import ListenBrainzAPI

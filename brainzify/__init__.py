"""Welcome to Brainzify"""
from pathlib import Path

PROGRAM_NAME = "Brainzify"
PROGRAM_OWNER_NAME = "George Martin Marino"
PROGRAM_OWNER_USER = "geo-martino"
PROGRAM_URL = f"https://github.com/{PROGRAM_OWNER_USER}/{PROGRAM_NAME.lower()}"

MODULE_ROOT: str = Path(__file__).parent.name
PACKAGE_ROOT: Path = Path(__file__).parent.parent

#: The root of the production ListenBrainz API
URL_API = "https://api.listenbrainz.org/1/"

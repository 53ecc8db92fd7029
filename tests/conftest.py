import pytest
from aioresponses import aioresponses
from faker import Faker

from brainzify.client import ListenBrainzAPI
from tests.utils import URL_TEST


@pytest.fixture(scope="session")
def faker() -> Faker:
    """Sets up and yields a basic Faker object for fake data"""
    return Faker()


@pytest.fixture
def requests_mock():
    """Yields an :py:class:`aioresponses` object which intercepts all requests made with aiohttp"""
    with aioresponses() as m:
        yield m


@pytest.fixture
def token(faker: Faker) -> str:
    """Yields a random user token"""
    return faker.uuid4()


@pytest.fixture
def user_name(faker: Faker) -> str:
    """Yields a random user name"""
    return faker.user_name()


@pytest.fixture
async def api() -> ListenBrainzAPI:
    """Yields an open :py:class:`ListenBrainzAPI` pointing to the test URL"""
    async with ListenBrainzAPI(url=URL_TEST) as api:
        yield api

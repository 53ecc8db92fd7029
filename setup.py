from setuptools import setup, find_packages

from brainzify import PROGRAM_NAME, PROGRAM_OWNER_NAME, PROGRAM_URL

setup(
    name=PROGRAM_NAME.casefold(),
    version="0.1",
    description="Typed asynchronous bindings for the ListenBrainz API",
    author=PROGRAM_OWNER_NAME,
    url=PROGRAM_URL,
    packages=find_packages(include=[PROGRAM_NAME.casefold(), f"{PROGRAM_NAME.casefold()}.*"]),
    python_requires=">=3.12",
    install_requires=[
        "aiohttp>=3.9,<3.14",
        "yarl>=1.9",
        "pydantic>=2.11",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "pytest-mock>=3.12",
            "aioresponses>=0.7.6",
            "faker>=22.0",
        ],
    },
    entry_points={
        "console_scripts": [f"{PROGRAM_NAME.casefold()} = {PROGRAM_NAME.casefold()}.__main__:main"],
    },
)

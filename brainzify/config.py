"""
Set up config and provide a framework for initialising the API objects from a given config file.
"""
import json
import logging.config
import os
from pathlib import Path
from typing import Any, Self

import yaml
from aiohttp import ClientTimeout

from brainzify import MODULE_ROOT, PACKAGE_ROOT, URL_API
from brainzify.client import ListenBrainzAPI
from brainzify.exception import ConfigError
from brainzify.log.logger import BrainzifyLogger
from brainzify.session import ListenBrainz

#: The environment variable to read a token from when none is given in the config file
TOKEN_ENV_KEY = "LISTENBRAINZ_TOKEN"


def _load_file(path: Path) -> dict[str, Any]:
    """Load the YAML or JSON file at the given ``path``"""
    ext = path.suffix.casefold()

    allowed = {".yml", ".yaml", ".json"}
    if ext not in allowed:
        raise ConfigError("Unrecognised config file type: {key}. Valid: {value}", key=ext, value=allowed)
    if not path.is_file():
        raise ConfigError("Config file not found: {key}", key=str(path))

    with open(path, "r") as file:
        try:
            if ext in {".yml", ".yaml"}:
                config = yaml.full_load(file)
            else:
                config = json.load(file)
        except (yaml.YAMLError, json.JSONDecodeError) as ex:
            raise ConfigError(f"Could not parse config file: {ex}", key=str(path)) from ex

    return config or {}


class Config:
    """
    Set up config and provide framework for initialising the API objects from a given config file at ``path``.

    The following options are in place for configuration values:

    - `DEFAULT`: When a value is not found, a default value will be used.
    - `OPTIONAL`: This value does not need to be set and ``None`` will be set when this is the case.

    :param path: Path of the config file to use. If relative path given, appends package root path.
    """

    def __init__(self, path: str | Path = "config.yml"):
        self._root_path: Path = PACKAGE_ROOT
        self.path = self._make_path_absolute(path)
        self._file: dict[str, Any] = {}

    def _make_path_absolute(self, path: str | Path) -> Path:
        """Append the root path to any relative path to make it an absolute path. Do nothing if path is absolute."""
        path = Path(path)
        if not path.is_absolute():
            path = self._root_path.joinpath(path)
        return path

    def load(self, key: str | None = None) -> Self:
        """
        Load config from the config file at the given ``key``.

        :param key: The key to pull config from within the file.
            If not given, use the root values in the config file.
        :raise ConfigError: When the file cannot be loaded or the given key cannot be found.
        """
        config = _load_file(self.path)
        if key and key not in config:
            raise ConfigError("Unrecognised config name: {key} | Available: {value}", key=key, value=list(config))

        self._file = config.get(key, config) if key else config
        return self

    def load_log_config(self, path: str | Path = "logging.yml", name: str | None = None, *names: str) -> None:
        """
        Load logging config from the JSON or YAML file at the given ``path`` using logging.config.dictConfig.
        If relative path given, appends package root path.

        :param path: The path to the logger config
        :param name: If the given name is a valid logger name in the config,
            assign this logger's config to the module root logger.
        :param names: When given, also apply the config from ``name`` to loggers with these ``names``.
        """
        log_config = _load_file(self._make_path_absolute(path))

        BrainzifyLogger.compact = log_config.pop("compact", False)

        for formatter in log_config.get("formatters", {}).values():  # ensure ANSI colour codes are recognised
            if "format" in formatter:
                formatter["format"] = formatter["format"].replace(r"\33", "\33")

        if name and name in log_config.get("loggers", {}):
            log_config["loggers"][MODULE_ROOT] = log_config["loggers"][name]
            for n in names:
                log_config["loggers"][n] = log_config["loggers"][name]

        logging.config.dictConfig(log_config)

        if name and name in log_config.get("loggers", {}):
            logging.getLogger(MODULE_ROOT).debug(f"Logging config set to: {name}")

    ###########################################################################
    ## API
    ###########################################################################
    @property
    def _api(self) -> dict[str, Any]:
        return self._file.get("api") or {}

    @property
    def url(self) -> str:
        """`DEFAULT = 'https://api.listenbrainz.org/1/'` | The root URL of the API"""
        return self._api.get("url", URL_API)

    @property
    def token(self) -> str | None:
        """`OPTIONAL` | The user token. Read from the ``LISTENBRAINZ_TOKEN`` environment variable when not given"""
        return self._api.get("token") or os.getenv(TOKEN_ENV_KEY)

    @property
    def timeout(self) -> ClientTimeout | None:
        """`OPTIONAL` | The total timeout in seconds of each request"""
        timeout = self._api.get("timeout")
        if timeout is None:
            return

        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigError("Invalid timeout", key=["api", "timeout"], value=timeout)
        if timeout <= 0:
            raise ConfigError("Timeout must be greater than 0", key=["api", "timeout"], value=timeout)

        return ClientTimeout(total=timeout)

    @property
    def headers(self) -> dict[str, str]:
        """`DEFAULT = {}` | Extra headers to send with every request e.g. ``User-Agent``"""
        headers = self._api.get("headers") or {}
        if not isinstance(headers, dict):
            raise ConfigError("Headers must be a mapping", key=["api", "headers"], value=headers)
        return {str(k): str(v) for k, v in headers.items()}

    def create_api(self, url: str | None = None) -> ListenBrainzAPI:
        """
        Create a new :py:class:`ListenBrainzAPI` from the loaded config.

        :param url: When given, use this root URL instead of the configured one.
        """
        session_kwargs = {}
        if self.headers:
            session_kwargs["headers"] = self.headers
        if (timeout := self.timeout) is not None:
            session_kwargs["timeout"] = timeout

        return ListenBrainzAPI(url=url or self.url, token=self.token, **session_kwargs)

    def create_session(self, url: str | None = None) -> ListenBrainz:
        """Create a new unauthenticated :py:class:`ListenBrainz` client from the loaded config"""
        return ListenBrainz(api=self.create_api(url=url))

    def as_dict(self) -> dict[str, Any]:
        """The loaded config with any token masked"""
        return {
            "url": self.url,
            "token": "*****" if self.token else None,
            "timeout": self._api.get("timeout"),
            "headers": self.headers,
        }

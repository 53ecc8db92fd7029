import inspect

import pytest

from brainzify import exception
from brainzify.exception import BrainzifyError, BrainzifyKeyError, BrainzifyValueError, ConfigError


def test_hierarchy():
    errors = {
        obj for _, obj in inspect.getmembers(exception, inspect.isclass)
        if issubclass(obj, BrainzifyError) and obj is not BrainzifyError
    }
    assert errors == {BrainzifyKeyError, BrainzifyValueError, ConfigError}

    assert issubclass(BrainzifyKeyError, KeyError)
    assert issubclass(BrainzifyValueError, ValueError)
    with pytest.raises(ValueError):
        raise BrainzifyValueError("value")


def test_config_error_substitution():
    ex = ConfigError("Config file not found: {key}", key="config.yml")
    assert str(ex) == "Config file not found: config.yml"
    assert ex.key == "config.yml"
    assert ex.value is None


def test_config_error_suffix():
    ex = ConfigError("Invalid timeout", key=["api", "timeout"], value="many")
    assert str(ex) == "Invalid timeout | key='api->timeout' | value='many'"
    assert ex.key == "api->timeout"
    assert ex.message == "Invalid timeout"

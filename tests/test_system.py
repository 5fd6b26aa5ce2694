import pytest

from sapadt.auth import Credentials
from sapadt.system import ConnectionConfiguration


def _config(url="http://localhost:50000", **kwargs):
    password = "password"
    return ConnectionConfiguration(
        server_url=url,
        client=1,
        language="en",
        credentials=Credentials("DEVELOPER", password),
        **kwargs,
    )


def test_join_relative_path():
    config = _config()
    assert config.join("sap/bc/adt/core/discovery") == (
        "http://localhost:50000/sap/bc/adt/core/discovery"
    )


def test_join_absolute_path_matches_relative():
    config = _config()
    assert config.join("/sap/bc/adt/core/discovery") == config.join(
        "sap/bc/adt/core/discovery"
    )


def test_join_absolute_path_replaces_base_path():
    config = _config("http://localhost:50000/other/")
    assert config.join("/sap/bc/adt/core/discovery").endswith(
        ":50000/sap/bc/adt/core/discovery"
    )


def test_defaults_are_none():
    config = _config()
    assert config.message_server is None
    assert config.sap_router is None


def test_optional_values_kept():
    config = _config(message_server="msg", sap_router="router")
    assert config.message_server == "msg"
    assert config.sap_router == "router"
    assert config.client == 1
    assert config.language == "en"
    assert config.credentials.username == "DEVELOPER"


@pytest.mark.parametrize("url", ["", "localhost", "not a url", "/relative/path"])
def test_invalid_url_rejected(url):
    with pytest.raises(ValueError):
        _config(url)
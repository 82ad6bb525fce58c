import base64
import dataclasses
import logging

import pytest

from core.config import DEFAULT_BASE_URL, GatewayConfig, load_config


def test_load_config_builds_basic_auth_header():
    config = load_config({"GONG_ACCESS_KEY": "key", "GONG_ACCESS_KEY_SECRET": "secret"})

    expected = "Basic " + base64.b64encode(b"key:secret").decode("ascii")
    assert config.has_credentials
    assert config.authorization_header() == expected
    assert config.base_url == DEFAULT_BASE_URL


def test_load_config_falls_back_to_unprefixed_names():
    config = load_config({"ACCESS_KEY": "k", "ACCESS_KEY_SECRET": "s"})

    assert config.access_key == "k"
    assert config.access_key_secret == "s"


def test_prefixed_names_win_over_unprefixed():
    config = load_config({
        "GONG_ACCESS_KEY": "gong",
        "ACCESS_KEY": "plain",
        "GONG_ACCESS_KEY_SECRET": "gong-secret",
    })

    assert config.access_key == "gong"
    assert config.access_key_secret == "gong-secret"


def test_missing_credentials_warn_but_do_not_fail(caplog):
    with caplog.at_level(logging.WARNING, logger="core.config"):
        config = load_config({})

    assert not config.has_credentials
    assert config.authorization_header() is None
    assert "GONG_ACCESS_KEY" in caplog.text


def test_half_configured_credentials_send_no_header(caplog):
    with caplog.at_level(logging.WARNING, logger="core.config"):
        config = load_config({"GONG_ACCESS_KEY": "key"})

    assert config.authorization_header() is None
    assert caplog.records


def test_base_url_and_log_level_overrides():
    config = load_config({"GONG_API_BASE_URL": "https://eu.api.gong.io/", "LOG_LEVEL": "debug"})

    assert config.base_url == "https://eu.api.gong.io"
    assert config.log_level == "DEBUG"


def test_config_is_immutable():
    config = GatewayConfig(access_key="a", access_key_secret="b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.access_key = "other"

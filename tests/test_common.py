import dataclasses

import pytest

from glprovider.common import (
    Config,
    bool_matches,
    int_matches,
    late_initialize,
    optional_string,
)


def test_config_defaults_to_empty_base_url():
    config = Config(token="token")
    assert config.base_url == ""
    assert config.token == "token"


def test_config_is_immutable():
    config = Config(token="token", base_url="https://gitlab.example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.token = "secret"
    assert config.token == "token"
    assert config.base_url == "https://gitlab.example.com"


def test_late_initialize_fills_unset_value():
    assert late_initialize(None, "main") == "main"


def test_late_initialize_keeps_existing_value():
    assert late_initialize("develop", "main") == "develop"


def test_late_initialize_ignores_empty_observed():
    assert late_initialize(None, "") is None
    assert late_initialize(None, None) is None


def test_late_initialize_keeps_existing_even_when_observed_empty():
    assert late_initialize("develop", "") == "develop"


def test_optional_string_empty_is_none():
    assert optional_string("") is None
    assert optional_string(None) is None


def test_optional_string_keeps_content():
    assert optional_string("main") == "main"


@pytest.mark.parametrize("actual", [True, False])
def test_bool_matches_unset_agrees(actual):
    assert bool_matches(None, actual) is True


@pytest.mark.parametrize(
    "expected, actual, result",
    [(True, True, True), (False, False, True), (True, False, False), (False, True, False)],
)
def test_bool_matches_compares(expected, actual, result):
    assert bool_matches(expected, actual) is result


def test_int_matches_unset_agrees():
    assert int_matches(None, 48) is True


def test_int_matches_compares():
    assert int_matches(48, 48) is True
    assert int_matches(48, 0) is False
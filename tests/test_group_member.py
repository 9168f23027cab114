import pytest

from glprovider.groups.member import (
    generate_add_member_options,
    generate_edit_member_options,
    generate_member_observation,
    is_error_member_not_found,
)

BASE = {"group_id": 0, "user_id": 0, "access_level": 10}
WITH_EXPIRY = {**BASE, "expires_at": "2021-05-04"}


def test_member_observation_full():
    identity = {"extern_uid": "ExternUID", "provider": "Provider", "saml_provider_id": 0}
    member = {
        "username": "User Name",
        "name": "Name",
        "state": "State",
        "avatar_url": "Avatar URL",
        "web_url": "Web URL",
        "group_saml_identity": identity,
    }
    got = generate_member_observation(member)
    assert got == member
    assert got["group_saml_identity"] is not identity


def test_member_observation_none():
    assert generate_member_observation(None) == {}


def test_member_observation_without_identity():
    result = generate_member_observation({"username": "u"})
    assert "group_saml_identity" not in result
    assert result == {"username": "u", "name": "", "state": "", "avatar_url": "", "web_url": ""}


@pytest.mark.parametrize(
    "generate, params, want",
    [
        (
            generate_add_member_options,
            WITH_EXPIRY,
            {"user_id": 0, "access_level": 10, "expires_at": "2021-05-04"},
        ),
        (generate_add_member_options, BASE, {"user_id": 0, "access_level": 10}),
        (
            generate_edit_member_options,
            WITH_EXPIRY,
            {"access_level": 10, "expires_at": "2021-05-04"},
        ),
        (generate_edit_member_options, BASE, {"access_level": 10}),
    ],
)
def test_member_options(generate, params, want):
    assert generate(params) == want


@pytest.mark.parametrize(
    "err, expected",
    [
        (Exception("GET: 404 Group Member Not Found"), True),
        (Exception("500 Internal Server Error"), False),
        (None, False),
    ],
)
def test_is_error_member_not_found(err, expected):
    assert is_error_member_not_found(err) is expected
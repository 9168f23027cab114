"""Conversions between group member parameters and the GitLab group members API.

Members as returned by the API, resource parameters and request options are all
plain mappings keyed by the API's snake_case field names. The private helpers
here are shared with the project member conversions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from glprovider.common import _drop_unset

ERR_MEMBER_NOT_FOUND = "404 Group Member Not Found"

_MEMBER_FIELDS = ("username", "name", "state", "avatar_url", "web_url")


def _reports(err: Optional[BaseException], marker: str) -> bool:
    """Tell whether the message of ``err`` contains ``marker``."""
    return err is not None and marker in str(err)


def _observe_member(member: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Copy the named string fields of ``member``, empty where absent."""
    return {field: member.get(field, "") for field in fields}


def _edit_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the access level and optional expiry sent when changing a member."""
    return {
        "access_level": params.get("access_level", 0),
        **_drop_unset({"expires_at": params.get("expires_at")}),
    }


def _add_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the user, access level and optional expiry sent when adding a member."""
    return {"user_id": params.get("user_id", 0), **_edit_options(params)}


def is_error_member_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the group member does not exist."""
    return _reports(err, ERR_MEMBER_NOT_FOUND)


def generate_member_observation(member: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the observed state of a group member from its API representation."""
    if member is None:
        return {}

    observation = _observe_member(member, _MEMBER_FIELDS)
    if (identity := member.get("group_saml_identity")) is not None:
        observation["group_saml_identity"] = dict(identity)
    return observation


def generate_add_member_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for adding a member to a group."""
    return _add_options(params)


def generate_edit_member_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for changing a group member."""
    return _edit_options(params)
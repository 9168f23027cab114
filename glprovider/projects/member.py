"""Conversions between project member parameters and the GitLab project members API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from glprovider.groups.member import (
    _MEMBER_FIELDS,
    _add_options,
    _edit_options,
    _observe_member,
    _reports,
)

ERR_MEMBER_NOT_FOUND = "404 Project Member Not Found"


def is_error_member_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the project member does not exist."""
    return _reports(err, ERR_MEMBER_NOT_FOUND)


def generate_member_observation(member: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the observed state of a project member from its API representation."""
    if member is None:
        return {}

    observation = _observe_member(member, (*_MEMBER_FIELDS, "email"))
    if (created_at := member.get("created_at")) is not None:
        observation["created_at"] = created_at
    return observation


def generate_add_member_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for adding a member to a project."""
    return _add_options(params)


def generate_edit_member_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for changing a project member."""
    return _edit_options(params)
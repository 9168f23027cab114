"""Conversions between group deploy token parameters and the GitLab API.

The private helper here is shared with the project deploy token conversions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from glprovider.common import _drop_unset
from glprovider.groups.group import ERR_GROUP_NOT_FOUND
from glprovider.groups.member import _reports

_TOKEN_FIELDS = ("scopes", "expires_at", "username")


def _deploy_token_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Build deploy token options: the name plus whichever optional fields are set."""
    return {"name": name, **_drop_unset({key: params.get(key) for key in _TOKEN_FIELDS})}


def is_error_group_deploy_token_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the group holding the token does not exist."""
    return _reports(err, ERR_GROUP_NOT_FOUND)


def generate_create_group_deploy_token_options(
    name: str, params: Mapping[str, Any]
) -> dict[str, Any]:
    """Build the options for creating a group deploy token called ``name``."""
    return _deploy_token_options(name, params)
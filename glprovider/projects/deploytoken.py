"""Conversions between project deploy token parameters and the GitLab API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from glprovider.groups.deploytoken import _deploy_token_options
from glprovider.groups.member import _reports
from glprovider.projects.project import ERR_PROJECT_NOT_FOUND


def is_error_project_deploy_token_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the project holding the token does not exist."""
    return _reports(err, ERR_PROJECT_NOT_FOUND)


def generate_create_project_deploy_token_options(
    name: str, params: Mapping[str, Any]
) -> dict[str, Any]:
    """Build the options for creating a project deploy token called ``name``."""
    return _deploy_token_options(name, params)
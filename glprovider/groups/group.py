"""Conversions between group resource parameters and the GitLab groups API.

Groups as returned by the API, resource parameters and request options are all
plain mappings keyed by the API's snake_case field names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from glprovider.common import _drop_unset

ERR_GROUP_NOT_FOUND = "404 Group Not Found"

_GROUP_OPTION_FIELDS = (
    "description",
    "membership_lock",
    "visibility",
    "share_with_group_lock",
    "require_two_factor_authentication",
    "two_factor_grace_period",
    "project_creation_level",
    "auto_devops_enabled",
    "subgroup_creation_level",
    "emails_disabled",
    "mentions_disabled",
    "lfs_enabled",
    "request_access_enabled",
    "parent_id",
    "shared_runners_minutes_limit",
    "extra_shared_runners_minutes_limit",
)

_STATISTICS_FIELDS = (
    "storage_size",
    "repository_size",
    "lfs_objects_size",
    "job_artifacts_size",
)


def is_error_group_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the group does not exist."""
    return err is not None and ERR_GROUP_NOT_FOUND in str(err)


def generate_observation(group: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the observed state of a group from its API representation."""
    if group is None:
        return {}

    observation: dict[str, Any] = {
        "id": group.get("id", 0),
        "avatar_url": group.get("avatar_url", ""),
        "web_url": group.get("web_url", ""),
        "full_name": group.get("full_name", ""),
        "full_path": group.get("full_path", ""),
        "runners_token": group.get("runners_token", ""),
        "ldap_cn": group.get("ldap_cn", ""),
    }

    if (created_at := group.get("created_at")) is not None:
        observation["created_at"] = created_at

    if (marked := group.get("marked_for_deletion_on")) is not None:
        observation["marked_for_deletion_on"] = marked

    if (statistics := group.get("statistics")) is not None:
        observation["statistics"] = {
            field: statistics.get(field, 0) for field in _STATISTICS_FIELDS
        }

    if attributes := group.get("custom_attributes"):
        observation["custom_attributes"] = [
            {"key": attr.get("key", ""), "value": attr.get("value", "")}
            for attr in attributes
        ]

    if shared := group.get("shared_with_groups"):
        observation["shared_with_groups"] = [
            {
                "group_id": item.get("group_id", 0),
                "group_name": item.get("group_name", ""),
                "group_full_path": item.get("group_full_path", ""),
                "group_access_level": item.get("group_access_level", 0),
                "expires_at": item.get("expires_at"),
            }
            for item in shared
        ]

    if links := group.get("ldap_group_links"):
        observation["ldap_group_links"] = [
            {
                "cn": link.get("cn", ""),
                "group_access": link.get("group_access", 0),
                "provider": link.get("provider", ""),
            }
            for link in links
        ]

    return observation


def _group_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    override = params.get("name")
    options: dict[str, Any] = {
        "name": override if override is not None else name,
        "path": params.get("path", ""),
    }
    options.update(_drop_unset({field: params.get(field) for field in _GROUP_OPTION_FIELDS}))
    return options


def generate_create_group_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for creating a group; a ``name`` parameter overrides ``name``."""
    return _group_options(name, params)


def generate_edit_group_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for updating a group; a ``name`` parameter overrides ``name``."""
    return _group_options(name, params)
"""Conversions between project resource parameters and the GitLab projects API.

Projects as returned by the API, resource parameters and request options are
all plain mappings keyed by the API's snake_case field names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from glprovider.common import _drop_unset

ERR_PROJECT_NOT_FOUND = "404 Project Not Found"

_SCALAR_OBSERVATION_FIELDS: tuple[tuple[str, Any], ...] = (
    ("id", 0),
    ("public", False),
    ("ssh_url_to_repo", ""),
    ("http_url_to_repo", ""),
    ("web_url", ""),
    ("readme_url", ""),
    ("name_with_namespace", ""),
    ("path_with_namespace", ""),
    ("issues_enabled", False),
    ("open_issues_count", 0),
    ("merge_requests_enabled", False),
    ("jobs_enabled", False),
    ("wiki_enabled", False),
    ("snippets_enabled", False),
    ("creator_id", 0),
    ("import_status", ""),
    ("import_error", ""),
    ("archived", False),
    ("forks_count", 0),
    ("star_count", 0),
    ("runners_token", ""),
    ("empty_repo", False),
    ("avatar_url", ""),
    ("license_url", ""),
    ("service_desk_address", ""),
)

_CONTAINER_POLICY_FIELDS: tuple[tuple[str, Any], ...] = (
    ("cadence", ""),
    ("keep_n", 0),
    ("older_than", ""),
    ("name_regex_delete", ""),
    ("name_regex_keep", ""),
    ("enabled", False),
)

_LICENSE_FIELDS = ("key", "name", "nickname", "html_url", "source_url")

_STATISTICS_FIELDS = (
    "storage_size",
    "repository_size",
    "lfs_objects_size",
    "job_artifacts_size",
)

_LINK_FIELDS = (
    "self",
    "issues",
    "merge_requests",
    "repo_branches",
    "labels",
    "events",
    "members",
)

_FORK_PARENT_FIELDS: tuple[tuple[str, Any], ...] = (
    ("http_url_to_repo", ""),
    ("id", 0),
    ("name", ""),
    ("name_with_namespace", ""),
    ("path", ""),
    ("path_with_namespace", ""),
    ("web_url", ""),
)

_NAMESPACE_FIELDS: tuple[tuple[str, Any], ...] = (
    ("id", 0),
    ("name", ""),
    ("path", ""),
    ("kind", ""),
    ("full_path", ""),
    ("avatar_url", ""),
    ("web_url", ""),
)

_OWNER_FIELDS: tuple[tuple[str, Any], ...] = (
    ("id", 0),
    ("username", ""),
    ("email", ""),
    ("name", ""),
    ("web_url", ""),
    ("bio", ""),
    ("location", ""),
    ("public_email", ""),
    ("skype", ""),
    ("linkedin", ""),
    ("twitter", ""),
    ("website_url", ""),
    ("organization", ""),
    ("extern_uid", ""),
    ("provider", ""),
    ("theme_id", 0),
    ("color_scheme_id", 0),
    ("is_admin", False),
    ("avatar_url", ""),
    ("can_create_group", False),
    ("can_create_project", False),
    ("projects_limit", 0),
    ("two_factor_enabled", False),
    ("external", False),
    ("private_profile", False),
    ("shared_runners_minutes_limit", 0),
)

_OWNER_TIME_FIELDS = (
    "created_at",
    "last_activity_on",
    "current_sign_in_at",
    "last_sign_in_at",
    "confirmed_at",
)

_COMMON_OPTION_FIELDS = (
    "path",
    "default_branch",
    "description",
    "issues_access_level",
    "repository_access_level",
    "merge_requests_access_level",
    "forking_access_level",
    "builds_access_level",
    "wiki_access_level",
    "snippets_access_level",
    "pages_access_level",
    "operations_access_level",
    "emails_disabled",
    "resolve_outdated_diff_discussions",
    "container_registry_enabled",
    "shared_runners_enabled",
    "visibility",
    "import_url",
    "public_builds",
    "allow_merge_on_skipped_pipeline",
    "only_allow_merge_if_pipeline_succeeds",
    "only_allow_merge_if_all_discussions_are_resolved",
    "merge_method",
    "remove_source_branch_after_merge",
    "lfs_enabled",
    "request_access_enabled",
    "build_git_strategy",
    "build_timeout",
    "auto_cancel_pending_pipelines",
    "build_coverage_regex",
    "ci_config_path",
    "ci_forward_deployment_enabled",
    "auto_devops_enabled",
    "auto_devops_deploy_strategy",
    "approvals_before_merge",
    "external_authorization_classification_label",
    "mirror",
    "mirror_trigger_builds",
    "packages_enabled",
    "service_desk_enabled",
    "autoclose_referenced_issues",
    "suggestion_commit_message",
    "issues_template",
    "merge_requests_template",
)

_CREATE_ONLY_FIELDS = (
    "namespace_id",
    "printing_merge_request_link_enabled",
    "initialize_with_readme",
    "template_name",
    "template_project_id",
    "use_custom_template",
    "group_with_project_templates_id",
)

_EDIT_ONLY_FIELDS = (
    "ci_default_git_depth",
    "mirror_user_id",
    "only_mirror_protected_branches",
    "mirror_overwrites_diverged_branches",
)


def is_error_project_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the project does not exist."""
    return err is not None and ERR_PROJECT_NOT_FOUND in str(err)


def _pick(source: Mapping[str, Any], fields: tuple[tuple[str, Any], ...]) -> dict[str, Any]:
    return {field: source.get(field, default) for field, default in fields}


def _access(source: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "access_level": source.get("access_level", 0),
        "notification_level": source.get("notification_level", 0),
    }


def _owner_observation(owner: Mapping[str, Any]) -> dict[str, Any]:
    observation = _pick(owner, _OWNER_FIELDS)
    # The observed state is taken from the owner's name.
    observation["state"] = owner.get("name", "")
    for field in _OWNER_TIME_FIELDS:
        if (stamp := owner.get(field)) is not None:
            observation[field] = stamp
    if attributes := owner.get("custom_attributes"):
        observation["custom_attributes"] = [
            {"key": attr.get("key", ""), "value": attr.get("value", "")}
            for attr in attributes
        ]
    if identities := owner.get("identities"):
        observation["identities"] = [
            {"provider": ident.get("provider", ""), "extern_uid": ident.get("extern_uid", "")}
            for ident in identities
        ]
    return observation


def generate_observation(project: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the observed state of a project from its API representation."""
    if project is None:
        return {}

    observation = _pick(project, _SCALAR_OBSERVATION_FIELDS)

    if (policy := project.get("container_expiration_policy")) is not None:
        observation["container_expiration_policy"] = {
            **_pick(policy, _CONTAINER_POLICY_FIELDS),
            "next_run_at": policy.get("next_run_at"),
        }

    if (license_ := project.get("license")) is not None:
        observation["license"] = {field: license_.get(field, "") for field in _LICENSE_FIELDS}

    for field in ("created_at", "last_activity_at", "marked_for_deletion_at"):
        if (stamp := project.get(field)) is not None:
            observation[field] = stamp

    if frameworks := project.get("compliance_frameworks"):
        observation["compliance_frameworks"] = list(frameworks)

    if attributes := project.get("custom_attributes"):
        observation["custom_attributes"] = [
            {"key": attr.get("key", ""), "value": attr.get("value", "")}
            for attr in attributes
        ]

    if (statistics := project.get("statistics")) is not None:
        observation["statistics"] = {
            field: statistics.get(field, 0) for field in _STATISTICS_FIELDS
        }

    if (links := project.get("links")) is not None:
        observation["links"] = {field: links.get(field, "") for field in _LINK_FIELDS}

    if shared := project.get("shared_with_groups"):
        observation["shared_with_groups"] = [
            {
                "group_id": item.get("group_id", 0),
                "group_name": item.get("group_name", ""),
                "group_access_level": item.get("group_access_level", 0),
            }
            for item in shared
        ]

    if (fork := project.get("forked_from_project")) is not None:
        observation["forked_from_project"] = _pick(fork, _FORK_PARENT_FIELDS)

    if (permissions := project.get("permissions")) is not None:
        granted: dict[str, Any] = {}
        for field in ("project_access", "group_access"):
            if (access := permissions.get(field)) is not None:
                granted[field] = _access(access)
        observation["permissions"] = granted

    if (namespace := project.get("namespace")) is not None:
        observation["namespace"] = _pick(namespace, _NAMESPACE_FIELDS)

    if (owner := project.get("owner")) is not None:
        observation["owner"] = _owner_observation(owner)

    return observation


def _project_options(
    name: str, params: Mapping[str, Any], extra_fields: tuple[str, ...]
) -> dict[str, Any]:
    override = params.get("name")
    options: dict[str, Any] = {
        "name": override if override is not None else name,
        "tag_list": list(params.get("tag_list") or []),
    }
    fields = _COMMON_OPTION_FIELDS + extra_fields
    options.update(_drop_unset({field: params.get(field) for field in fields}))
    if (policy := params.get("container_expiration_policy_attributes")) is not None:
        options["container_expiration_policy_attributes"] = dict(policy)
    return options


def generate_create_project_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for creating a project; a ``name`` parameter overrides ``name``."""
    return _project_options(name, params, _CREATE_ONLY_FIELDS)


def generate_edit_project_options(name: str, params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for editing a project; a ``name`` parameter overrides ``name``."""
    return _project_options(name, params, _EDIT_ONLY_FIELDS)
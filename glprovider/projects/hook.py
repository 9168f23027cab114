"""Conversions between project hook parameters and the GitLab project hooks API.

Hooks as returned by the API, resource parameters and request options are all
plain mappings keyed by the API's snake_case field names.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from glprovider.common import _drop_unset, bool_matches, late_initialize, optional_string

ERR_HOOK_NOT_FOUND = "404 Not found"

_EVENT_FIELDS = (
    "confidential_note_events",
    "push_events",
    "issues_events",
    "confidential_issues_events",
    "merge_requests_events",
    "tag_push_events",
    "note_events",
    "job_events",
    "pipeline_events",
    "wiki_page_events",
    "enable_ssl_verification",
)

_OPTION_FIELDS = (
    "url",
    "confidential_note_events",
    "push_events",
    "push_events_branch_filter",
    "issues_events",
    "confidential_issues_events",
    "merge_requests_events",
    "tag_push_events",
    "note_events",
    "job_events",
    "pipeline_events",
    "wiki_page_events",
    "enable_ssl_verification",
    "token",
)


def is_error_hook_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the hook does not exist."""
    return err is not None and ERR_HOOK_NOT_FOUND in str(err)


def late_initialize_hook(
    params: MutableMapping[str, Any], hook: Optional[Mapping[str, Any]]
) -> None:
    """Fill the unset fields of ``params`` in place with the values seen in ``hook``."""
    if hook is None:
        return

    for field in _EVENT_FIELDS:
        if params.get(field) is None:
            params[field] = hook.get(field, False)

    branch_filter = late_initialize(
        params.get("push_events_branch_filter"), hook.get("push_events_branch_filter", "")
    )
    if branch_filter is not None:
        params["push_events_branch_filter"] = branch_filter


def generate_hook_observation(hook: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Build the observed state of a hook from its API representation."""
    if hook is None:
        return {}

    observation: dict[str, Any] = {"id": hook.get("id", 0)}
    if (created_at := hook.get("created_at")) is not None:
        observation["created_at"] = created_at
    return observation


def _hook_options(params: Mapping[str, Any]) -> dict[str, Any]:
    return _drop_unset({field: params.get(field) for field in _OPTION_FIELDS})


def generate_create_hook_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for adding a hook to a project."""
    return _hook_options(params)


def generate_edit_hook_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for editing a project hook."""
    return _hook_options(params)


def is_hook_up_to_date(params: Mapping[str, Any], hook: Mapping[str, Any]) -> bool:
    """Tell whether every modifiable field of ``params`` agrees with ``hook``."""
    if params.get("url") != optional_string(hook.get("url", "")):
        return False
    if params.get("push_events_branch_filter") != optional_string(
        hook.get("push_events_branch_filter", "")
    ):
        return False
    return all(
        bool_matches(params.get(field), hook.get(field, False)) for field in _EVENT_FIELDS
    )
"""Conversions between project variable parameters and the GitLab variables API.

Variables as returned by the API, resource parameters and request options are
all plain mappings keyed by the API's snake_case field names.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from glprovider.common import _drop_unset

ERR_VARIABLE_NOT_FOUND = "404 Variable Not Found"

_OPTIONAL_FIELDS: tuple[tuple[str, Any], ...] = (
    ("variable_type", ""),
    ("protected", False),
    ("masked", False),
    ("environment_scope", ""),
)

_COMPARED_FIELDS = ("key", "value") + tuple(field for field, _ in _OPTIONAL_FIELDS)


def is_error_variable_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports that the variable does not exist."""
    return err is not None and ERR_VARIABLE_NOT_FOUND in str(err)


def late_initialize_variable(
    params: MutableMapping[str, Any], variable: Optional[Mapping[str, Any]]
) -> None:
    """Fill the unset fields of ``params`` in place with the values seen in ``variable``."""
    if variable is None:
        return
    for field, default in _OPTIONAL_FIELDS:
        if params.get(field) is None:
            params[field] = variable.get(field, default)


def variable_to_parameters(variable: Mapping[str, Any]) -> dict[str, Any]:
    """Turn a variable as returned by the API into resource parameters."""
    parameters: dict[str, Any] = {
        "key": variable.get("key", ""),
        "value": variable.get("value", ""),
    }
    parameters.update(
        {field: variable.get(field, default) for field, default in _OPTIONAL_FIELDS}
    )
    return parameters


def _optional_options(params: Mapping[str, Any]) -> dict[str, Any]:
    return _drop_unset({field: params.get(field) for field, _ in _OPTIONAL_FIELDS})


def generate_create_variable_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for creating a project variable."""
    options: dict[str, Any] = {
        "key": params.get("key", ""),
        "value": params.get("value", ""),
    }
    options.update(_optional_options(params))
    return options


def generate_update_variable_options(params: Mapping[str, Any]) -> dict[str, Any]:
    """Build the options for updating a project variable."""
    options: dict[str, Any] = {"value": params.get("value", "")}
    options.update(_optional_options(params))
    return options


def is_variable_up_to_date(
    params: Optional[Mapping[str, Any]], variable: Mapping[str, Any]
) -> bool:
    """Tell whether ``params`` agrees with ``variable``.

    The project reference and its selectors are not compared.
    """
    if params is None:
        return True
    observed = variable_to_parameters(variable)
    defaults = {"key": "", "value": ""}
    return all(
        params.get(field, defaults.get(field)) == observed[field]
        for field in _COMPARED_FIELDS
    )
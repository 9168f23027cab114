# glprovider

Pure-Python helpers for keeping GitLab resources in line with a declared
configuration. Given the parameters you want for a group, project, member,
deploy token, webhook or CI/CD variable, the package builds the option
payloads for the GitLab API's create and edit calls. Given what the API
returns, it produces observations, fills in unset parameters from the live
resource, and tells you whether that resource is already up to date.

Everything works on plain mappings keyed by the API's snake_case field names
(`"web_url"`, `"access_level"`, `"push_events"` and so on). A parameter that
is absent or `None` counts as unset and is left out of the options built from
it.

## Installation

```
pip install .
```

To also install what the test suite needs:

```
pip install ".[test]"
```

## Modules

- `glprovider.common`
  - `Config` is a frozen dataclass holding a `token` and a `base_url`
    (empty by default, meaning the public GitLab endpoint).
  - `late_initialize(current, observed)` returns `observed` when `current`
    is `None` and `observed` is neither `None` nor an empty string;
    otherwise it returns `current`.
  - `optional_string(value)` turns an empty string (or `None`) into `None`.
  - `bool_matches` and `int_matches` compare an optional desired value with
    an actual one. An unset desired value always matches.
- `glprovider.groups.group`: `generate_observation`,
  `generate_create_group_options`, `generate_edit_group_options` and
  `is_error_group_not_found`. A `name` parameter overrides the name passed in.
- `glprovider.groups.member`: `generate_member_observation` (including the
  member's `group_saml_identity` when present),
  `generate_add_member_options`, `generate_edit_member_options` and
  `is_error_member_not_found`.
- `glprovider.groups.deploytoken`:
  `generate_create_group_deploy_token_options` and
  `is_error_group_deploy_token_not_found`.
- `glprovider.projects.project`: `generate_observation`,
  `generate_create_project_options`, `generate_edit_project_options` and
  `is_error_project_not_found`. The create and edit options differ in the
  fields each API call accepts; both always carry a `tag_list`.
- `glprovider.projects.member`: the same member helpers as the groups module,
  for projects; the observation also carries `email` and `created_at`.
- `glprovider.projects.deploytoken`:
  `generate_create_project_deploy_token_options` and
  `is_error_project_deploy_token_not_found`.
- `glprovider.projects.hook`: `late_initialize_hook` (fills unset
  parameters in place), `generate_hook_observation`,
  `generate_create_hook_options`, `generate_edit_hook_options`,
  `is_hook_up_to_date` and `is_error_hook_not_found`.
- `glprovider.projects.variable`: `late_initialize_variable` (fills unset
  parameters in place), `variable_to_parameters`,
  `generate_create_variable_options`, `generate_update_variable_options`,
  `is_variable_up_to_date` (always true when the parameters are `None`) and
  `is_error_variable_not_found`.

## Example

```python
from glprovider.common import Config, late_initialize, optional_string
from glprovider.projects.variable import is_variable_up_to_date

config = Config(token="token", base_url="https://gitlab.example.com/api/v4")

late_initialize(None, "main")        # "main"
late_initialize("develop", "main")   # "develop"
optional_string("")                  # None

is_variable_up_to_date(
    {"key": "A", "value": "B"},
    {"key": "A", "value": "changed"},
)                                    # False
```

The `is_error_*_not_found` helpers take an exception, or `None`, and report
whether its message contains the GitLab "404 ... Not Found" text for that
kind of resource, so a caller can treat the resource as absent instead of as
a failure.

## What the package does not do

The package makes no network calls and has no runtime dependencies. It has
no HTTP client and no command-line tool: `Config` only holds the token and
base URL, and sending the options to GitLab and fetching resources is left
to the caller.

## Running the tests

```
pytest
```
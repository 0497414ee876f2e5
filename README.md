# ydbops

Building blocks for planning maintenance on a YDB cluster: checking options,
choosing target nodes, filling defaults from profile files, working with
maintenance tasks and rendering help text.

## Modules

- `ydbops.targeting`: `TargetingOptions` with `validate()` and
  `get_availability_mode()`. It also has the parsers `parse_node_ids`
  (node ids and inclusive ranges such as `4-8`, in the order given),
  `parse_node_fqdns`, `parse_started_flag` (values such as
  `>2024-03-13T17:20:06Z`) and `parse_version_flag`.
- `ydbops.versions`: `StartedTime`, `MajorMinorPatchVersion` and
  `RawVersion`, with `compare_major_minor_patch` and `compare_raw`.
  `RawVersion.satisfies()` checks a node's version string against the filter.
- `ydbops.profile`: `ProfileRegistry` fills registered option attributes from
  the active profile in a YAML file. Problems raise `ProfileError`.
- `ydbops.grpc_options`: `GrpcOptions.validate()` checks the endpoint scheme
  (`grpc` or `grpcs`), port (default 2135), CA file and timeout. It also strips
  the endpoint down to its host name.
- `ydbops.command`: `Description`, `BaseOptions`, `default_profile_location()`
  and `validate_all(*options)`, which validates several option sets and
  reports every failure together.
- `ydbops.models`: dataclasses for nodes, action scopes, lock actions, action
  states, maintenance tasks and results, plus the `ScopeType` and
  `ActionStatus` enums.
- `ydbops.maintenance`: `action_groups_from_params` builds one lock per node
  or host. `index_task_actions`, `get_finished_actions` and
  `select_completed_actions` find the actions of a task that match a host
  list.
- `ydbops.prettyprint`: `task_to_string` and `result_to_string`.
- `ydbops.cli`: a `CommandNode` tree with `generate_usage`,
  `generate_command_tree`, `determine_padding`, `require_subcommand` and
  `format_version`. Output is bold only when stdout is a terminal or
  `FORCE_COLOR` is set. `NO_COLOR` and `TERM=dumb` turn bold off.

## Examples

Parsing host selections:

```python
from ydbops.targeting import parse_node_ids, parse_node_fqdns

parse_node_ids(["1", "2", "4-8", "3"])
# [1, 2, 4, 5, 6, 7, 8, 3]

parse_node_fqdns(["simpleHost", "host-with-dashes", "abc.example.com"])
# ['simpleHost', 'host-with-dashes', 'abc.example.com']
```

Version filters:

```python
from ydbops.targeting import parse_version_flag

spec = parse_version_flag("!=24.1.2-ydb-stable-hotfix-5")
spec.satisfies("24.1.2-ydb-stable-hotfix-4")   # True
str(spec)                                       # '!=24.1.2-ydb-stable-hotfix-5'

str(parse_version_flag("~=24.1.2"))             # '~=24.1.2'
```

Filling defaults from a profile file:

```python
from ydbops.grpc_options import GrpcOptions
from ydbops.profile import ProfileRegistry

grpc = GrpcOptions()
registry = ProfileRegistry()
registry.register("endpoint", grpc, "endpoint", "")
registry.register("ca-file", grpc, "ca_file", "")
registry.fill_defaults_from_active_profile("config.yaml", "")
grpc.validate()
```

A profile file names the current profile and holds string values for each
profile. An attribute is filled only while it still holds its registered
default. A key with no registered attribute is an error.

```yaml
current-profile: prod
profiles:
  prod:
    endpoint: grpcs://ydb.example.com:2135
    ca-file: ~/ydb/ca.crt
```

Choosing which actions of a task to complete:

```python
from ydbops.maintenance import select_completed_actions
from ydbops.prettyprint import task_to_string

print(task_to_string(task))
action_uids = select_completed_actions(task, ["1", "2"])
```

## Errors

- Invalid options raise `ydbops.grpc_options.OptionsError`, a `ValueError`.
- Profile problems raise `ydbops.profile.ProfileError`.
- Failures while matching hosts to maintenance actions raise
  `ydbops.maintenance.MaintenanceError`.
- Missing subcommands raise `ydbops.cli.CliError`.

## What this package does not do

The package does not connect to a cluster. It has no gRPC client, no
authentication and no calls to the maintenance service. It does not restart
nodes. It installs no command-line program: `ydbops.cli` only renders usage
and help text for a `CommandNode` tree. `MajorMinorPatchVersion` holds and
prints a version filter but cannot check it against a node's version string.
Use `compare_major_minor_patch` with numbers you have already parsed.
"""Building and completing maintenance task actions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from ydbops.grpc_options import OptionsError
from ydbops.models import (
    Action,
    ActionGroup,
    ActionScope,
    ActionUid,
    LockAction,
    MaintenanceTask,
    MaintenanceTaskParams,
    ScopeType,
)
from ydbops.targeting import parse_node_fqdns, parse_node_ids

TASK_UUID_PREFIX = "maintenance-"
TASK_DESCRIPTION = "Rolling restart maintenance task"

K = TypeVar("K", bound=Hashable)


class MaintenanceError(Exception):
    """Raised when a maintenance task cannot be handled as asked."""


def _lock_group(scope: ActionScope, params: MaintenanceTaskParams) -> ActionGroup:
    return ActionGroup(actions=[Action(lock_action=LockAction(scope=scope, duration=params.duration))])


def action_groups_from_params(params: MaintenanceTaskParams) -> list[ActionGroup]:
    """Build one single-lock action group per requested node or host."""
    if params.scope_type == ScopeType.NODE:
        return [_lock_group(ActionScope(node_id=node.node_id), params) for node in params.nodes]
    return [_lock_group(ActionScope(host=host), params) for host in params.hosts]


def index_task_actions(task: MaintenanceTask) -> tuple[dict[str, ActionUid], dict[int, ActionUid]]:
    """Map the task's locked hosts and node ids to their action uids."""
    by_host: dict[str, ActionUid] = {}
    by_node: dict[int, ActionUid] = {}
    for group in task.action_group_states:
        state = group.action_states[0]
        lock = state.action.lock_action
        if lock is None:
            raise MaintenanceError(
                f"failed to complete action: unexpected non-lock action type: {state.action!r}. "
                "Contact the developers"
            )
        scope = lock.scope
        if scope.host:
            by_host[scope.host] = state.action_uid
        elif scope.node_id != 0:
            by_node[scope.node_id] = state.action_uid
        else:
            raise MaintenanceError(
                "failed to complete action. An action's scope didn't contain host or nodeID: "
                f"{scope!r}. Contact the developers"
            )
    return by_host, by_node


def get_finished_actions(keys: Iterable[K], key_to_action_uid: Mapping[K, ActionUid]) -> list[ActionUid]:
    """Look up the action uid of every key, in the order given."""
    finished: list[ActionUid] = []
    for key in keys:
        try:
            finished.append(key_to_action_uid[key])
        except KeyError:
            raise MaintenanceError(
                f"failed to complete host {key}, corresponding CMS action not found.\n"
                "This host either was never requested or already completed"
            ) from None
    return finished


def select_completed_actions(task: MaintenanceTask, hosts: list[str]) -> list[ActionUid]:
    """Choose the task's actions that match ``hosts`` (all node ids or all FQDNs)."""
    node_ids: list[int] | None = None
    fqdns: list[str] | None = None
    ids_error: OptionsError | None = None
    try:
        node_ids = parse_node_ids(hosts)
    except OptionsError as exc:
        ids_error = exc
        try:
            fqdns = parse_node_fqdns(hosts)
        except OptionsError as fqdn_error:
            raise MaintenanceError(
                f"failed to parse --hosts argument as node ids ({ids_error}) "
                f"or host fqdns ({fqdn_error})"
            ) from fqdn_error

    by_host, by_node = index_task_actions(task)
    if node_ids is not None:
        return get_finished_actions(node_ids, by_node)
    return get_finished_actions(fqdns or [], by_host)
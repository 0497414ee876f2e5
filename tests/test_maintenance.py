from datetime import timedelta

import pytest

from ydbops.maintenance import (
    MaintenanceError,
    action_groups_from_params,
    get_finished_actions,
    index_task_actions,
    select_completed_actions,
)
from ydbops.models import (
    Action,
    ActionGroupStates,
    ActionScope,
    ActionState,
    ActionUid,
    LockAction,
    MaintenanceTask,
    MaintenanceTaskParams,
    Node,
    ScopeType,
)


def _state(scope, action_id):
    return ActionState(
        action=Action(lock_action=LockAction(scope=scope)),
        action_uid=ActionUid(task_uid="task", action_id=action_id),
    )


def _task():
    return MaintenanceTask(
        task_uid="task",
        action_group_states=[
            ActionGroupStates([_state(ActionScope(node_id=1), "a1")]),
            ActionGroupStates([_state(ActionScope(node_id=2), "a2")]),
            ActionGroupStates([_state(ActionScope(host="host-a"), "a3")]),
        ],
    )


def test_action_groups_from_nodes():
    params = MaintenanceTaskParams(
        task_uid="t",
        availability_mode="AVAILABILITY_MODE_STRONG",
        duration=timedelta(seconds=3600),
        scope_type=ScopeType.NODE,
        nodes=[Node(node_id=5), Node(node_id=3)],
        hosts=["ignored"],
    )
    groups = action_groups_from_params(params)
    assert [g.actions[0].lock_action.scope.node_id for g in groups] == [5, 3]
    assert all(len(g.actions) == 1 for g in groups)
    assert all(g.actions[0].lock_action.duration == timedelta(seconds=3600) for g in groups)
    assert all(g.actions[0].lock_action.scope.host == "" for g in groups)


def test_action_groups_from_hosts():
    params = MaintenanceTaskParams(
        task_uid="t",
        availability_mode="AVAILABILITY_MODE_WEAK",
        duration=timedelta(seconds=10),
        scope_type=ScopeType.HOST,
        nodes=[Node(node_id=5)],
        hosts=["h1", "h2"],
    )
    groups = action_groups_from_params(params)
    assert [g.actions[0].lock_action.scope.host for g in groups] == ["h1", "h2"]
    assert all(g.actions[0].lock_action.scope.node_id == 0 for g in groups)


def test_index_task_actions():
    by_host, by_node = index_task_actions(_task())
    assert by_host == {"host-a": ActionUid(task_uid="task", action_id="a3")}
    assert set(by_node) == {1, 2}
    assert by_node[2].action_id == "a2"


def test_index_rejects_non_lock_action():
    task = MaintenanceTask(
        task_uid="t",
        action_group_states=[
            ActionGroupStates([ActionState(action=Action(), action_uid=ActionUid("t"))])
        ],
    )
    with pytest.raises(MaintenanceError, match="non-lock action"):
        index_task_actions(task)


def test_index_rejects_empty_scope():
    task = MaintenanceTask(
        task_uid="t",
        action_group_states=[ActionGroupStates([_state(ActionScope(), "x")])],
    )
    with pytest.raises(MaintenanceError, match="didn't contain host or nodeID"):
        index_task_actions(task)


def test_get_finished_actions_keeps_order():
    uid_a, uid_b = ActionUid("t", action_id="a"), ActionUid("t", action_id="b")
    assert get_finished_actions([2, 1], {1: uid_a, 2: uid_b}) == [uid_b, uid_a]


def test_get_finished_actions_missing():
    with pytest.raises(MaintenanceError, match="corresponding CMS action not found"):
        get_finished_actions(["nope"], {})


def test_select_by_node_ids():
    result = select_completed_actions(_task(), ["1-2"])
    assert [uid.action_id for uid in result] == ["a1", "a2"]


def test_select_by_fqdn():
    result = select_completed_actions(_task(), ["host-a"])
    assert [uid.action_id for uid in result] == ["a3"]


def test_select_unknown_node_fails():
    with pytest.raises(MaintenanceError, match="failed to complete host 7"):
        select_completed_actions(_task(), ["7"])


def test_select_unparseable_hosts():
    with pytest.raises(MaintenanceError, match="failed to parse --hosts argument"):
        select_completed_actions(_task(), ["bad host!"])
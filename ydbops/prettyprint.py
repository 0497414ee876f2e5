"""Human-readable rendering of maintenance tasks and results."""

from __future__ import annotations

from datetime import datetime, timezone

from ydbops.models import ActionStatus, MaintenanceTask, ManageActionResult

_DATE_TIME = "%Y-%m-%d %H:%M:%S"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _format_time(moment: datetime | None) -> str:
    if moment is None:
        moment = _EPOCH
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(_DATE_TIME)


def task_to_string(task: MaintenanceTask) -> str:
    """Describe a task: its uid, retry time and the state of each lock."""
    parts = [f"Uid: {task.task_uid}\n"]

    if task.retry_after is not None:
        parts.append(f"Retry after: {_format_time(task.retry_after)}\n")

    for group in task.action_group_states:
        state = group.action_states[0]

        lock = state.action.lock_action
        if lock is None:
            parts.append("  Non-lock action ")
        elif lock.scope.node_id != 0:
            parts.append(f"  Lock on node {lock.scope.node_id} ")
        else:
            parts.append(f"  Lock on host {lock.scope.host} ")

        if state.status is ActionStatus.PERFORMED:
            parts.append(f"PERFORMED, until: {_format_time(state.deadline)}")
        else:
            parts.append(f"{state.status}, {state.reason}")
            if state.details:
                parts.append(f" ({state.details})")
        parts.append("\n")

    return "".join(parts)


def result_to_string(result: ManageActionResult) -> str:
    """Describe the outcome of each completed action."""
    return "".join(
        f"  Completed action id: {status.action_uid.action_id}, status: {status.status}"
        for status in result.action_statuses
    )
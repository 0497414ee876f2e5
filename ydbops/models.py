"""Data types exchanged with the cluster maintenance service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, IntEnum


class ScopeType(IntEnum):
    """What a maintenance lock is taken on: a single node or a whole host."""

    NODE = 1
    HOST = 2


class ActionStatus(Enum):
    """State of a single maintenance action."""

    UNSPECIFIED = "ACTION_STATUS_UNSPECIFIED"
    PENDING = "ACTION_STATUS_PENDING"
    PERFORMED = "ACTION_STATUS_PERFORMED"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Node:
    """A cluster node; ``tenant`` is None for storage nodes."""

    node_id: int
    host: str = ""
    port: int = 0
    data_center: str = ""
    tenant: str | None = None
    version: str = ""
    start_time: datetime | None = None


@dataclass(frozen=True)
class ActionScope:
    """Target of a lock: a node id or a host FQDN (the other stays empty)."""

    node_id: int = 0
    host: str = ""


@dataclass(frozen=True)
class LockAction:
    """Take the scope out of the cluster for ``duration``."""

    scope: ActionScope
    duration: timedelta = timedelta(0)


@dataclass(frozen=True)
class Action:
    """A maintenance action; only lock actions are known."""

    lock_action: LockAction | None = None


@dataclass(frozen=True)
class ActionUid:
    """Identifier of an action within a maintenance task."""

    task_uid: str
    group_id: str = ""
    action_id: str = ""


@dataclass
class ActionState:
    """The current state of one action, as reported by the service."""

    action: Action
    action_uid: ActionUid
    status: ActionStatus = ActionStatus.UNSPECIFIED
    reason: str = "ACTION_REASON_UNSPECIFIED"
    details: str = ""
    deadline: datetime | None = None


@dataclass
class ActionGroupStates:
    """States of the actions of one action group."""

    action_states: list[ActionState] = field(default_factory=list)


@dataclass
class ActionGroup:
    """A group of actions requested together."""

    actions: list[Action] = field(default_factory=list)


@dataclass
class MaintenanceTask:
    """A maintenance task and the states of its action groups."""

    task_uid: str
    action_group_states: list[ActionGroupStates] = field(default_factory=list)
    retry_after: datetime | None = None


@dataclass(frozen=True)
class ActionStatusResult:
    """Outcome of managing one action."""

    action_uid: ActionUid
    status: str


@dataclass
class ManageActionResult:
    """Outcome of completing a set of actions."""

    action_statuses: list[ActionStatusResult] = field(default_factory=list)


@dataclass
class MaintenanceTaskParams:
    """What to request when creating a maintenance task."""

    task_uid: str
    availability_mode: str
    duration: timedelta
    scope_type: ScopeType
    nodes: list[Node] = field(default_factory=list)
    hosts: list[str] = field(default_factory=list)
"""Options that select which cluster nodes an operation targets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ydbops.grpc_options import OptionsError
from ydbops.versions import (
    AVAILABILITY_MODES,
    MajorMinorPatchVersion,
    RawVersion,
    StartedTime,
)

DEFAULT_MAX_STATIC_NODE_ID = 50000
_MAX_NODE_ID = 2**32 - 1

_MAJOR_MINOR_PATCH = re.compile(r"(>|<|!=|~=)([0-9]+|\*)\.([0-9]+|\*)\.([0-9]+|\*)")
_RAW = re.compile(r"(==|!=)(.*)")
_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)
_FQDN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?")


def _version_part(text: str) -> int:
    return 0 if text == "*" else int(text)


def parse_version_flag(value: str) -> MajorMinorPatchVersion | RawVersion:
    """Interpret a ``--version`` filter value."""
    match = _MAJOR_MINOR_PATCH.fullmatch(value)
    if match:
        sign, major, minor, patch = match.groups()
        return MajorMinorPatchVersion(
            sign, _version_part(major), _version_part(minor), _version_part(patch)
        )
    match = _RAW.fullmatch(value)
    if match:
        return RawVersion(match.group(1), match.group(2))
    raise OptionsError(
        "failed to interpret the value of `--version` flag. "
        "Read `ydbops restart --help` for more info on what is expected"
    )


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if not match:
        raise ValueError(f"cannot parse {text!r} as RFC 3339 time")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micros = int((fraction or "").ljust(6, "0")[:6])
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz
    )


def parse_started_flag(value: str) -> StartedTime:
    """Interpret a ``--started`` filter value such as ``>2024-03-13T17:20:06Z``."""
    direction = value[:1]
    if direction not in ("<", ">"):
        raise OptionsError("the first character of --started value should be < or >")
    try:
        timestamp = _parse_rfc3339(value[1:])
    except ValueError as exc:
        raise OptionsError(f"failed to parse --started: {exc}") from exc
    return StartedTime(timestamp=timestamp, direction=direction)


def _parse_node_id(text: str, entry: str) -> int:
    if not re.fullmatch(r"[0-9]+", text):
        raise OptionsError(f"failed to parse node id from {entry!r}")
    node_id = int(text)
    if node_id > _MAX_NODE_ID:
        raise OptionsError(f"node id out of range in {entry!r}")
    return node_id


def parse_node_ids(hosts: list[str]) -> list[int]:
    """Parse node ids and inclusive ranges such as ``4-8``, keeping order."""
    ids: list[int] = []
    for entry in hosts:
        start_text, sep, end_text = entry.partition("-")
        start = _parse_node_id(start_text, entry)
        if not sep:
            ids.append(start)
            continue
        end = _parse_node_id(end_text, entry)
        if end < start:
            raise OptionsError(f"invalid node id range {entry!r}: start is after end")
        ids.extend(range(start, end + 1))
    return ids


def parse_node_fqdns(hosts: list[str]) -> list[str]:
    """Check that every entry looks like a host name and return them."""
    for entry in hosts:
        if not _FQDN.fullmatch(entry):
            raise OptionsError(f"invalid host fqdn {entry!r}")
    return list(hosts)


@dataclass
class TargetingOptions:
    """Filters that decide which nodes an operation applies to."""

    availability_mode: str = "strong"
    datacenters: list[str] = field(default_factory=list)
    hosts: list[str] = field(default_factory=list)
    exclude_hosts: list[str] = field(default_factory=list)
    started: str = ""
    version: str = ""
    started_time: StartedTime | None = None
    version_spec: MajorMinorPatchVersion | RawVersion | None = None
    storage: bool = False
    tenant: bool = False
    tenant_list: list[str] = field(default_factory=list)
    kubeconfig_path: str = ""
    k8s_namespace: str = ""
    max_static_node_id: int = DEFAULT_MAX_STATIC_NODE_ID

    def validate(self) -> None:
        """Check the filters and parse the ``started`` and ``version`` values."""
        if self.availability_mode not in AVAILABILITY_MODES:
            raise OptionsError(
                f"specified a non-existing availability mode: {self.availability_mode}"
            )
        if self.kubeconfig_path and not self.k8s_namespace:
            raise OptionsError("specified --kubeconfig, but not --k8s-namespace")
        if self.max_static_node_id < 0:
            raise OptionsError(
                f"specified invalid max-static-node-id: {self.max_static_node_id}. Must be positive"
            )
        if self.tenant_list and not self.tenant:
            raise OptionsError(
                "--tenant-list specified, but --tenant is not explicitly specified."
                "Please specify --tenant as well to clearly indicate your intentions"
            )
        if self.started:
            self.started_time = parse_started_flag(self.started)
        if self.version:
            self.version_spec = parse_version_flag(self.version)

        try:
            parse_node_ids(self.hosts)
        except OptionsError as ids_error:
            try:
                parse_node_fqdns(self.hosts)
            except OptionsError as fqdn_error:
                raise OptionsError(
                    f"failed to parse --hosts argument as node ids ({ids_error}) "
                    f"or host fqdns ({fqdn_error})"
                ) from fqdn_error

    def get_availability_mode(self) -> str:
        """Return the service's name for the chosen availability mode."""
        if self.availability_mode in AVAILABILITY_MODES:
            return f"AVAILABILITY_MODE_{self.availability_mode}".upper()
        return "AVAILABILITY_MODE_UNSPECIFIED"
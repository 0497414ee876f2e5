"""Version and start-time filters applied to cluster nodes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

EQUAL_SIGN = "=="
NOT_EQUAL_SIGN = "!="
LESS_THAN_SIGN = "<"
GREATER_THAN_SIGN = ">"

AVAILABILITY_MODES = ("strong", "weak", "force", "smart")


@dataclass(frozen=True)
class StartedTime:
    """A node start-time filter: ``direction`` is ``'<'`` or ``'>'``."""

    timestamp: datetime
    direction: str


@dataclass(frozen=True)
class MajorMinorPatchVersion:
    """A version filter of the form ``<sign>MAJOR.MINOR.PATCH``."""

    sign: str
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.sign}{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class RawVersion:
    """A version filter compared against the whole version string."""

    sign: str
    raw: str

    def satisfies(self, other_version: str) -> bool:
        """Tell whether ``other_version`` matches this filter."""
        return compare_raw(self.sign, other_version, self.raw)

    def __str__(self) -> str:
        return f"{self.sign}{self.raw}"


def compare_major_minor_patch(
    sign: str,
    node_version: tuple[int, int, int],
    user_version: tuple[int, int, int],
) -> bool:
    """Compare a node's (major, minor, patch) with the user's using ``sign``."""
    node, user = tuple(node_version), tuple(user_version)
    if sign == EQUAL_SIGN:
        return node == user
    if sign == LESS_THAN_SIGN:
        return node < user
    if sign == GREATER_THAN_SIGN:
        return node > user
    if sign == NOT_EQUAL_SIGN:
        return node != user
    return False


def compare_raw(sign: str, node_version: str, user_version: str) -> bool:
    """Compare two version strings for equality or inequality."""
    if sign == EQUAL_SIGN:
        return node_version == user_version
    if sign == NOT_EQUAL_SIGN:
        return node_version != user_version
    return False
"""Command descriptions and the options shared by every command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ydbops.grpc_options import GrpcOptions, OptionsError


class _Validatable(Protocol):
    def validate(self) -> None: ...


def default_profile_location() -> str:
    """Return the default profile file path, or "" when it does not exist."""
    try:
        home = Path.home()
    except RuntimeError:
        return ""
    location = home / "ydb" / "ydbops" / "config" / "config.yaml"
    return str(location) if location.exists() else ""


@dataclass(frozen=True)
class Description:
    """Name and help texts of a command."""

    use: str
    short_description: str
    long_description: str


@dataclass
class BaseOptions:
    """Options accepted by every command."""

    grpc: GrpcOptions = field(default_factory=GrpcOptions)
    verbose: bool = False
    profile_file: str = field(default_factory=default_profile_location)
    active_profile: str = ""

    def validate(self) -> None:
        """Validate the connection options."""
        self.grpc.validate()


def validate_all(*args: _Validatable) -> None:
    """Validate every option set, reporting all failures together."""
    errors: list[ValueError] = []
    for options in args:
        try:
            options.validate()
        except ValueError as exc:
            errors.append(exc)
    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise OptionsError("; ".join(str(err) for err in errors))
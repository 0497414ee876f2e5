"""Filling option defaults from a YAML profile file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

ACTIVE_PROFILE_KEY = "current-profile"
PROFILE_ARRAY_KEY = "profiles"


class ProfileError(Exception):
    """Raised when a profile file cannot be used."""


@dataclass
class _Binding:
    target: Any
    attr: str
    default: str


class ProfileRegistry:
    """Remembers which option attributes a profile key may fill."""

    def __init__(self) -> None:
        self._bindings: dict[str, list[_Binding]] = {}

    def register(self, flag_name: str, target: Any, attr: str, default: str) -> None:
        """Let profile key ``flag_name`` fill ``target.attr`` while it holds ``default``."""
        self._bindings.setdefault(flag_name, []).append(_Binding(target, attr, default))

    def fill_defaults_from_active_profile(self, config_file: str, profile_name: str) -> None:
        """Load the chosen profile and copy its values into untouched options."""
        if not config_file and not profile_name:
            return
        if not config_file:
            raise ProfileError("specified --profile, but unspecified --config-path")

        try:
            with open(config_file, encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise ProfileError(
                f"failed to read the config file on path {config_file}: {exc}"
            ) from exc

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ProfileError(str(exc)) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ProfileError("config file is malformed, expected a mapping at the top level")

        if not profile_name:
            if ACTIVE_PROFILE_KEY not in data:
                raise ProfileError(
                    f"failed to get current profile: field `{ACTIVE_PROFILE_KEY}` absent in config, "
                    "and --profile flag unspecified"
                )
            profile_name = str(data.pop(ACTIVE_PROFILE_KEY))

        if PROFILE_ARRAY_KEY not in data:
            raise ProfileError(
                f"config file is malformed, `{PROFILE_ARRAY_KEY}` field not found"
            )
        profiles = data[PROFILE_ARRAY_KEY]
        if not isinstance(profiles, dict) or profile_name not in profiles:
            raise ProfileError(f"profile `{profile_name}` not found in your profile file")

        profile = profiles[profile_name] or {}
        if not isinstance(profile, dict):
            raise ProfileError(f"profile `{profile_name}` is malformed, expected a mapping")

        for option_name, value in profile.items():
            bindings = self._bindings.get(str(option_name))
            if bindings is None:
                raise ProfileError(
                    f"profile `{profile_name}` contains unsupported field `{option_name}`"
                )
            if not isinstance(value, str):
                raise ProfileError(
                    f"profile `{profile_name}` field `{option_name}` must be a string"
                )
            for binding in bindings:
                if getattr(binding.target, binding.attr) == binding.default:
                    setattr(binding.target, binding.attr, value)
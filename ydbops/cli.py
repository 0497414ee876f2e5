"""Command tree, usage text and help rendering for the command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

_NO_SUBCOMMAND_MESSAGE = (
    "you have not selected a subcommand\nTry '--help' option for more info"
)


class CliError(Exception):
    """Raised when the command line is used incorrectly."""


def _colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _bold(text: str) -> str:
    return f"{_BOLD}{text}{_RESET}" if _colors_enabled() else text


@dataclass(eq=False)
class CommandNode:
    """A command with its help texts and subcommands."""

    name: str
    short: str = ""
    long: str = ""
    hidden: bool = False
    subcommands: list[CommandNode] = field(default_factory=list, repr=False)
    parent: CommandNode | None = field(default=None, repr=False)

    def add(self, *args: CommandNode) -> CommandNode:
        """Attach the given commands as subcommands and return this command."""
        for child in args:
            if child is self:
                raise CliError("command can't be a child of itself")
            child.parent = self
            self.subcommands.append(child)
        return self

    def path(self) -> str:
        """Return the full command path, starting from the root command."""
        names = []
        node: CommandNode | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return " ".join(reversed(names))


def _root(cmd: CommandNode) -> CommandNode:
    while cmd.parent is not None:
        cmd = cmd.parent
    return cmd


def _sorted_subcommands(cmd: CommandNode) -> list[CommandNode]:
    return sorted(cmd.subcommands, key=lambda child: child.name)


def _has_available_subcommands(cmd: CommandNode) -> bool:
    return any(not child.hidden for child in cmd.subcommands)


def determine_padding(
    cur_command: int, sub_command_line_number: int, total_commands: int
) -> str:
    """Return the tree-drawing prefix for one line of a subcommand's block."""
    if cur_command == total_commands - 1:
        return "└─ " if sub_command_line_number == 0 else "   "
    return "├─ " if sub_command_line_number == 0 else "│  "


def generate_usage(cmd: CommandNode) -> str:
    """Return the one-line usage summary of a command."""
    bold_usage = _bold("Usage:")
    if cmd is _root(cmd):
        return f"{bold_usage} ydbops [global options...] <subcommand>"

    chain = [cmd.name]
    current = cmd
    while current.parent is not None and current.parent is not _root(cmd):
        current = current.parent
        chain.insert(0, current.name)

    subcommand = "<subcommand>" if _has_available_subcommands(cmd) else ""
    return (
        f"{bold_usage} ydbops [global options...] {' '.join(chain)} "
        f"[options] {subcommand}"
    )


def generate_command_tree(cmd: CommandNode, padding_size: int) -> list[str]:
    """Draw the command and its visible subcommands as a tree, one line each."""
    gap = " " * max(padding_size - len(cmd.name), 0)
    result = [_bold(cmd.name) + gap + cmd.short]
    if _has_available_subcommands(cmd):
        children = _sorted_subcommands(cmd)
        total = len(children)
        for index, child in enumerate(children):
            if child.hidden:
                continue
            for line_number, line in enumerate(
                generate_command_tree(child, padding_size - 3)
            ):
                result.append(determine_padding(index, line_number, total) + line)
    return result


def require_subcommand(args: Sequence[str]) -> None:
    """Fail unless a subcommand was given."""
    if not args:
        raise CliError(_NO_SUBCOMMAND_MESSAGE)


def format_version(commit: str, version: str, timestamp: str) -> str:
    """Render the build information printed by the version command."""
    return f"Git commit: {commit}\nTag: {version}\nBuild date: {timestamp}\n"
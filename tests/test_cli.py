import pytest

from ydbops.cli import (
    CliError,
    CommandNode,
    determine_padding,
    format_version,
    generate_command_tree,
    generate_usage,
    require_subcommand,
)


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def build_tree():
    root = CommandNode("ydbops", short="root command")
    maintenance = CommandNode("maintenance", short="Request hosts")
    create = CommandNode("create", short="Create a task")
    drop = CommandNode("drop", short="Drop a task")
    maintenance.add(drop, create)
    restart = CommandNode("restart", short="Restart nodes")
    root.add(restart, maintenance)
    return root, maintenance, create, drop, restart


@pytest.mark.parametrize(
    "cur, line, total, expected",
    [
        (2, 0, 3, "└─ "),
        (2, 1, 3, "   "),
        (0, 0, 3, "├─ "),
        (0, 4, 3, "│  "),
    ],
)
def test_determine_padding(cur, line, total, expected):
    assert determine_padding(cur, line, total) == expected


def test_add_sets_parent_and_path():
    root, maintenance, create, _, _ = build_tree()
    assert create.parent is maintenance
    assert maintenance.parent is root
    assert create.path() == "ydbops maintenance create"
    assert root.path() == "ydbops"


def test_add_returns_self_and_rejects_self():
    node = CommandNode("a")
    child = CommandNode("b")
    assert node.add(child) is node
    with pytest.raises(CliError):
        node.add(node)


def test_usage_for_root():
    root, *_ = build_tree()
    assert generate_usage(root) == "Usage: ydbops [global options...] <subcommand>"


def test_usage_for_group_mentions_subcommand():
    _, maintenance, _, _, _ = build_tree()
    assert (
        generate_usage(maintenance)
        == "Usage: ydbops [global options...] maintenance [options] <subcommand>"
    )


def test_usage_for_leaf_has_chain_and_no_subcommand():
    _, _, create, _, _ = build_tree()
    usage = generate_usage(create)
    assert usage.startswith("Usage: ydbops [global options...] maintenance create [options]")
    assert "<subcommand>" not in usage


def test_usage_bold_when_colors_forced(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    root, *_ = build_tree()
    assert generate_usage(root).startswith("\x1b[1mUsage:\x1b[0m ")


def test_command_tree_structure_and_sorting():
    root, *_ = build_tree()
    lines = generate_command_tree(root, 23)
    assert len(lines) == 5
    assert lines[0].startswith("ydbops") and lines[0].endswith("root command")
    assert lines[1].startswith("├─ maintenance") and lines[1].endswith("Request hosts")
    assert lines[2].startswith("│  ├─ create")
    assert lines[3].startswith("│  └─ drop")
    assert lines[4].startswith("└─ restart") and lines[4].endswith("Restart nodes")


def test_command_tree_aligns_descriptions():
    root, *_ = build_tree()
    lines = generate_command_tree(root, 23)
    columns = {line.index(short) for line, short in zip(
        lines, ["root command", "Request hosts", "Create a task", "Drop a task", "Restart nodes"]
    )}
    assert len(columns) == 1


def test_command_tree_skips_hidden():
    root = CommandNode("ydbops")
    root.add(CommandNode("alpha", short="A"), CommandNode("zeta", hidden=True))
    lines = generate_command_tree(root, 10)
    assert len(lines) == 2
    assert lines[1].startswith("├─ alpha")


def test_command_tree_leaf_only():
    leaf = CommandNode("version", short="Print version")
    assert generate_command_tree(leaf, 10) == ["version   Print version"]


def test_require_subcommand_without_args():
    with pytest.raises(CliError) as info:
        require_subcommand([])
    assert str(info.value) == (
        "you have not selected a subcommand\nTry '--help' option for more info"
    )


def test_require_subcommand_with_args():
    assert require_subcommand(["restart"]) is None


def test_format_version():
    assert format_version("abc123", "v1.0.0", "2024-01-01T00:00") == (
        "Git commit: abc123\nTag: v1.0.0\nBuild date: 2024-01-01T00:00\n"
    )
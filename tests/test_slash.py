import pytest

from poise.prefix import CommandNode
from poise.slash import CommandOption, OptionKind, find_matching_command


def _tree():
    leaf = CommandNode(name="leaf")
    group = CommandNode(name="group", subcommands=[leaf])
    child = CommandNode(name="child")
    root = CommandNode(name="root", subcommands=[child, group])
    plain = CommandNode(name="plain", context_menu_name="Plain Menu")
    return root, child, group, leaf, plain


def test_top_level_command_keeps_options():
    root, _, _, _, plain = _tree()
    options = [CommandOption(name="text", kind=OptionKind.STRING, value="hi")]
    result = find_matching_command("plain", options, [root, plain])
    assert result == (plain, options, ())


def test_context_menu_name_matches():
    root, _, _, _, plain = _tree()
    result = find_matching_command("Plain Menu", [], [root, plain])
    assert result is not None
    assert result[0] is plain
    assert result[2] == ()


def test_unknown_name_returns_none():
    root, _, _, _, plain = _tree()
    assert find_matching_command("missing", [], [root, plain]) is None


def test_subcommand_descends_with_parents():
    root, child, _, _, plain = _tree()
    leaf_options = [CommandOption(name="n", kind=OptionKind.INTEGER, value=3)]
    options = [
        CommandOption(name="child", kind=OptionKind.SUB_COMMAND, options=leaf_options)
    ]
    command, found_options, parents = find_matching_command("root", options, [plain, root])
    assert command is child
    assert found_options == leaf_options
    assert parents == (root,)


def test_subcommand_group_nests_two_levels():
    root, _, group, leaf, _ = _tree()
    options = [
        CommandOption(
            name="group",
            kind=OptionKind.SUB_COMMAND_GROUP,
            options=[CommandOption(name="leaf", kind=OptionKind.SUB_COMMAND)],
        )
    ]
    command, found_options, parents = find_matching_command("root", options, [root])
    assert command is leaf
    assert list(found_options) == []
    assert parents == (root, group)


def test_subcommand_option_found_after_other_options():
    root, child, _, _, _ = _tree()
    options = [
        CommandOption(name="x", kind=OptionKind.BOOLEAN, value=True),
        CommandOption(name="child", kind=OptionKind.SUB_COMMAND),
    ]
    result = find_matching_command("root", options, [root])
    assert result is not None
    assert result[0] is child


def test_unknown_subcommand_returns_none():
    root, _, _, _, _ = _tree()
    options = [CommandOption(name="nope", kind=OptionKind.SUB_COMMAND)]
    assert find_matching_command("root", options, [root]) is None


def test_search_continues_to_next_command_with_same_name():
    first = CommandNode(name="dup")
    sub = CommandNode(name="sub")
    second = CommandNode(name="dup", subcommands=[sub])
    options = [CommandOption(name="sub", kind=OptionKind.SUB_COMMAND)]
    command, _, parents = find_matching_command("dup", options, [first, second])
    assert command is sub
    assert parents == (second,)


@pytest.mark.parametrize("kind", list(OptionKind))
def test_only_subcommand_kinds_cause_descent(kind):
    root, child, _, _, _ = _tree()
    options = [CommandOption(name="child", kind=kind)]
    command, found_options, parents = find_matching_command("root", options, [root])
    descends = kind in (OptionKind.SUB_COMMAND, OptionKind.SUB_COMMAND_GROUP)
    assert kind.is_subcommand == descends
    if descends:
        assert command is child
        assert parents == (root,)
    else:
        assert command is root
        assert found_options == options
        assert parents == ()
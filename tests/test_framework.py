from poise.framework import set_qualified_names
from poise.prefix import CommandNode


def _tree():
    grandchild = CommandNode(name="grandchild")
    child1 = CommandNode(name="child1", subcommands=[grandchild])
    child2 = CommandNode(name="child2")
    parent = CommandNode(name="parent", subcommands=[child1, child2])
    other = CommandNode(name="other")
    return [parent, other]


def _walk(commands):
    for command in commands:
        for sub in command.subcommands:
            yield command, sub
        yield from _walk(command.subcommands)


def test_nested_qualified_names():
    commands = _tree()
    set_qualified_names(commands)
    parent = commands[0]
    assert parent.qualified_name == "parent"
    assert parent.subcommands[0].qualified_name == "parent child1"
    assert parent.subcommands[1].qualified_name == "parent child2"
    assert parent.subcommands[0].subcommands[0].qualified_name == "parent child1 grandchild"


def test_top_level_without_subcommands_unchanged():
    commands = _tree()
    set_qualified_names(commands)
    assert commands[1].qualified_name == commands[1].name


def test_top_level_uses_name_not_qualified_name():
    child = CommandNode(name="child")
    top = CommandNode(name="top", subcommands=[child], qualified_name="custom")
    set_qualified_names([top])
    assert top.qualified_name == "custom"
    assert child.qualified_name == "top child"


def test_every_subcommand_extends_parent_name():
    commands = _tree()
    set_qualified_names(commands)
    pairs = list(_walk(commands))
    assert len(pairs) == 3
    for parent, sub in pairs:
        assert sub.qualified_name.startswith(parent.qualified_name + " ")
        assert sub.qualified_name.endswith(" " + sub.name)


def test_idempotent():
    commands = _tree()
    set_qualified_names(commands)
    first = [sub.qualified_name for _, sub in _walk(commands)]
    set_qualified_names(commands)
    second = [sub.qualified_name for _, sub in _walk(commands)]
    assert first == second


def test_stale_names_are_overwritten():
    child = CommandNode(name="child", qualified_name="stale")
    top = CommandNode(name="top", subcommands=[child])
    set_qualified_names([top])
    assert child.qualified_name == "top child"


def test_empty_list():
    commands = []
    set_qualified_names(commands)
    assert commands == []
# poise

Building blocks for chat bot command frameworks. This package holds the parts
that work without a network connection. They parse the arguments of text
commands, find which command a message or interaction invokes, read the values
a user submitted in a modal form, and track command cooldowns.

## Modules

- `poise.arguments` contains the following:
  - `pop_string(args)` pops a whitespace-separated word. Double quotes group
    words and backslashes escape the next character. It returns
    `(remaining, word)`.
  - `pop_bool(args)` accepts `yes/y/true/t/1/enable/on` and
    `no/n/false/f/0/disable/off` in any ASCII case.
  - `pop_attachment(args, attachment_index, attachments)` returns
    `(args, next_index, attachment)`.
  - The errors `ArgumentError`, `TooManyArguments`, `TooFewArguments`,
    `MissingAttachment`, `InvalidChoice` and `InvalidBool`. `ArgumentError`
    carries the failing input in its `argument` attribute.
- `poise.code_block` contains `CodeBlock`, which has `code` and `language`,
  and `pop_code_block(args)`. That function reads an inline `` `code` `` span
  or a fenced block and detects the language after the opening fence. It raises
  `CodeBlockError` when no valid block is found. `str(block)` renders a block
  back as a fenced block.
- `poise.key_value_args` contains `KeyValueArgs.pop_from(args)`. It reads as
  many `key=value` pairs as it can and returns `(remaining, KeyValueArgs)`.
  Look up a value with `.get(key)`. The pairs are also available as `.pairs`.
- `poise.cooldown` contains `CooldownConfig`, `InvocationScope` and
  `CooldownTracker`.
  - `CooldownConfig` holds durations for the global, user, guild, channel and
    member buckets, given as `timedelta` or as seconds.
  - `InvocationScope` holds the user, the channel and an optional guild.
  - `CooldownTracker` has two methods:
    - `start_cooldown(scope)` records an invocation.
    - `remaining_cooldown(scope, cooldown_durations=None)` returns the longest
      remaining cooldown as a `timedelta`, or `None`.
  - The tracker takes an injectable `clock`, which defaults to
    `time.monotonic`.
- `poise.modal` contains `InputText`, `ActionRow` and
  `find_modal_text(rows, custom_id)`. The function takes the submitted value of
  a text input and empties it. It returns `None` if the value is blank or the
  input is missing.
- `poise.prefix` contains `CommandNode`, `CommandMatch`, `PrefixOptions`,
  `strip_prefix(content, options, bot_id)` and
  `find_command(commands, remaining_message, case_insensitive)`.
  - `strip_prefix` tries the prefixes in this order:
    1. a dynamic prefix
    2. the static prefix
    3. the additional prefixes, as literals or compiled patterns
    4. a stripped dynamic prefix
    5. a mention of the bot (`<@id>` or `<@!id>`)
  - `find_command` follows subcommands and aliases.
- `poise.slash` contains `OptionKind`, `CommandOption` and
  `find_matching_command(interaction_name, interaction_options, commands)`.
  The function returns `(command, leaf_options, parent_commands)` or `None`.
- `poise.framework` contains `set_qualified_names(commands)`, which fills in
  the `qualified_name` of every subcommand in a tree.

## Examples

```python
from poise.arguments import pop_string

rest, word = pop_string('"hello world" again')
# word == "hello world", rest == " again"
```

```python
from poise.code_block import pop_code_block

rest, block = pop_code_block("```python\nprint(1)\n```")
# block.language == "python", block.code == "print(1)"
```

```python
from poise.key_value_args import KeyValueArgs

rest, kv = KeyValueArgs.pop_from('name="Jane Doe" age=30')
kv.get("name")  # "Jane Doe"
```

```python
from poise.prefix import CommandNode, PrefixOptions, find_command, strip_prefix

commands = [CommandNode("ping"), CommandNode("admin", subcommands=[CommandNode("ban")])]
prefix, rest = strip_prefix("~admin ban someone", PrefixOptions(prefix="~"), bot_id=1234)
match = find_command(commands, rest, case_insensitive=False)
# match.command.name == "ban", match.args == "someone"
# match.parent_commands == (commands[1],)
```

```python
from datetime import timedelta
from poise.cooldown import CooldownConfig, CooldownTracker, InvocationScope

tracker = CooldownTracker(CooldownConfig(user=timedelta(seconds=5)))
scope = InvocationScope(user_id=1, channel_id=2, guild_id=3)
tracker.start_cooldown(scope)
tracker.remaining_cooldown(scope)  # about timedelta(seconds=5)
```

## What this package does not do

The package does not connect to a chat service, receive events or run
commands. It has no bot client, event loop, permission checks or reply
sending. It cannot show a modal and wait for the user to submit it. These
functions operate on data you pass in and return results for your own
dispatch code to act on.

## Running the tests

```
pip install .[test]
pytest
```
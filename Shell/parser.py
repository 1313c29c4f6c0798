import os
import re
from collections import namedtuple
from Shell.config import MAX_COMMANDS
from Shell.alias import expand_alias

Command = namedtuple("Command", ["name", "args"])

_VARIABLE = re.compile(r"\$[$?]")


def strip_comments(line):
    """Return everything before the first '#', untouched."""
    return line.split("#", 1)[0]


def expand_variables(line, state):
    """
    Replace $$ with the shell's pid and $? with the last exit status.
    Any other '$' is left as is.
    """
    def repl(m):
        if m.group(0) == "$$":
            return str(os.getpid())
        return str(state.last_status)

    return _VARIABLE.sub(repl, line)


def tokenize(line):
    """Split on whitespace. Quotes are ordinary characters."""
    return line.split()


def split_fragments(line, separators):
    """
    Split on every single occurrence of any character in `separators`.
    `&&` is two separators with an empty fragment between them.
    """
    pattern = "[" + re.escape(separators) + "]"
    fragments = [f for f in re.split(pattern, line) if f]
    return fragments[:MAX_COMMANDS]


def parse_command(fragment, aliases=None):
    """
    Parse one fragment into Command(name, args).
    Returns None if the fragment has no tokens.
    """
    tokens = tokenize(fragment)
    if aliases is not None:
        tokens = expand_alias(aliases, tokens)
    if not tokens:
        return None
    return Command(tokens[0], tokens[1:])

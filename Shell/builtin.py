import os
import sys

from Shell.config import FAREWELL
from Shell.alias import parse_alias_argument


def builtin_exit():
    print(FAREWELL)
    sys.exit(0)


def builtin_env(state):
    for line in state.environment():
        print(line)
    return 0


def builtin_setenv(args, state):
    """Create or overwrite an environment variable"""
    if len(args) < 2:
        print("setenv: usage: setenv NAME VALUE", file=sys.stderr)
        return -1
    name, value = args[0], args[1]
    if "=" in name:
        print("setenv: Invalid argument", file=sys.stderr)
        return -1
    try:
        state.setenv(name, value)
    except (OSError, ValueError) as e:
        print(f"setenv: {e}", file=sys.stderr)
        return -1
    return 0


def builtin_unsetenv(args, state):
    """Remove an environment variable"""
    if not args:
        print("unsetenv: usage: unsetenv NAME", file=sys.stderr)
        return -1
    if "=" in args[0]:
        print("unsetenv: Invalid argument", file=sys.stderr)
        return -1
    try:
        state.unsetenv(args[0])
    except (OSError, ValueError) as e:
        print(f"unsetenv: {e}", file=sys.stderr)
        return -1
    return 0


def builtin_cd(args, state):
    """Change directory"""
    path = args[0] if args else state.getenv("HOME")
    if path is None:
        print("chdir: HOME not set", file=sys.stderr)
        return -1
    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"chdir: {e.strerror}", file=sys.stderr)
        return -1
    except ValueError as e:
        # embedded null byte
        print(f"chdir: {e}", file=sys.stderr)
        return -1


def builtin_alias(args, state):
    """Create or list aliases"""
    listing = parse_alias_argument(state.aliases, " ".join(args))
    if listing is not None:
        for line in listing:
            print(line)
    return 0


def execute_builtin(command, state):
    """
    Run `command` in the shell process if it is a built-in.
    Returns (executed: bool, exit_code: int)
    """
    cmd, args = command.name, command.args

    if cmd == "exit":
        builtin_exit()
    elif cmd == "env":
        return True, builtin_env(state)
    elif cmd == "setenv":
        return True, builtin_setenv(args, state)
    elif cmd == "unsetenv":
        return True, builtin_unsetenv(args, state)
    elif cmd == "cd":
        return True, builtin_cd(args, state)
    elif cmd == "alias":
        return True, builtin_alias(args, state)

    return False, 0

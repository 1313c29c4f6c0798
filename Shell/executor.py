import sys
import subprocess

from Shell.config import EXIT_FAILURE
from Shell.builtin import execute_builtin
from Shell.parser import expand_variables, parse_command, split_fragments, strip_comments
from Shell.resolver import find_command_path


class ForkError(OSError):
    """The child process could not be created at all."""


def status_to_exitcode(returncode):
    """Popen reports a signal death as -signo; shells use 128 + signo."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def launch_process(command, path, state):
    """
    Run `path` with argv [name, *args] and wait for that child only.
    Returns its exit code.
    """
    argv = [command.name] + list(command.args)

    # Our buffered output must reach the terminal before the child's
    sys.stdout.flush()
    try:
        p = subprocess.Popen(argv, executable=path, env=state.snapshot())
    except OSError as e:
        # Exec failures come back from the child with the executable name
        # attached; anything else happened before the child existed.
        if e.filename is None:
            raise ForkError(e.errno, e.strerror) from e
        print(f"execve: {e.strerror}", file=sys.stderr)
        return EXIT_FAILURE
    except ValueError as e:
        print(f"execve: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return status_to_exitcode(p.wait())


def dispatch(command, state):
    """Built-in in process, otherwise resolve through PATH and launch"""
    executed, exit_code = execute_builtin(command, state)
    if executed:
        return exit_code

    path = find_command_path(command.name, state.environ)
    if path is None:
        print(f"{command.name}: command not found", file=sys.stderr)
        return EXIT_FAILURE

    return launch_process(command, path, state)


def execute_command(line, state):
    """
    Plain single-command path: no comment stripping, no expansion.
    A failed fork only fails this command.
    """
    command = parse_command(line, state.aliases)
    if command is None:
        return state.last_status

    try:
        exit_code = dispatch(command, state)
    except ForkError as e:
        print(f"fork: {e.strerror}", file=sys.stderr)
        exit_code = EXIT_FAILURE
    return state.record(exit_code)


def execute_commands(line, state):
    """Run every ';' separated command, whatever their exit codes"""
    exit_code = state.last_status
    for fragment in split_fragments(line, ";"):
        exit_code = execute_command(fragment, state)
    return exit_code


def execute_logical_commands(line, state):
    """
    Split on '&' and '|' (single characters, so '&&' is two separators)
    and stop after the first command that exits nonzero, whichever
    separator followed it.

    A failed fork here terminates the shell.
    """
    line = expand_variables(strip_comments(line), state)

    exit_code = state.last_status
    for fragment in split_fragments(line, "&|"):
        command = parse_command(fragment, state.aliases)
        if command is None:
            continue
        try:
            exit_code = state.record(dispatch(command, state))
        except ForkError as e:
            print(f"fork: {e.strerror}", file=sys.stderr)
            sys.exit(EXIT_FAILURE)
        if exit_code != 0:
            break
    return exit_code


def run_line(line, state):
    """Pick the executor for one line typed at the prompt"""
    stripped = strip_comments(line)
    if "&" in stripped or "|" in stripped:
        return execute_logical_commands(line, state)
    return execute_commands(expand_variables(stripped, state), state)

import sys

from Shell.config import EXIT_FAILURE
from Shell.executor import execute_command


def execute_file_commands(filename, state):
    """
    Run each line of `filename` as a single command.
    A failing command does not stop the file; a missing file stops the shell.
    """
    try:
        # undecodable bytes are passed through to argv unchanged
        f = open(filename, "r", errors="surrogateescape")
    except OSError as e:
        print(f"fopen: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    exit_code = state.last_status
    with f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
            exit_code = execute_command(line, state)
    return exit_code

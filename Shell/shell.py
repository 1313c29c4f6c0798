import sys

from Shell.config import PROMPT
from Shell.executor import run_line
from Shell.script import execute_file_commands
from Shell.state import ShellState


def main_loop(state=None):
    """
    Read and run lines until end-of-input.
    Returns the shell's exit code (0).
    """
    if state is None:
        state = ShellState()

    # A line that is not valid in the locale's encoding is still a command
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="surrogateescape")

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        run_line(line, state)

    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    state = ShellState()
    if argv:
        execute_file_commands(argv[0], state)
        sys.exit(0)

    sys.exit(main_loop(state))

import os

PATH_DELIMITER = ":"


def find_command_path(command, environ):
    """
    Look `command` up in PATH, in order.
    Returns the first <dir>/<command> that exists, or None.

    Only existence is checked. Whether the file can actually be executed
    is found out when it is launched.
    """
    if "/" in command:
        return command if os.path.exists(command) else None

    path = environ.get("PATH")
    if path is None:
        return None

    for d in path.split(PATH_DELIMITER):
        if not d:
            continue
        cand = f"{d}/{command}"
        if os.path.exists(cand):
            return cand
    return None

import os
from Shell.alias import AliasTable


class ShellState:
    """
    Everything the shell remembers between commands:
    alias table, environment and the last exit status.

    `environ` is any mutable mapping. It defaults to os.environ so that
    setenv/unsetenv affect the real process environment; tests pass a dict.
    """

    def __init__(self, environ=None, aliases=None):
        self.environ = os.environ if environ is None else environ
        self.aliases = aliases if aliases is not None else AliasTable()
        self.last_status = 0

    def getenv(self, name, default=None):
        return self.environ.get(name, default)

    def setenv(self, name, value):
        self.environ[name] = value

    def unsetenv(self, name):
        self.environ.pop(name, None)

    def environment(self):
        """Return NAME=VALUE lines in mapping order"""
        return [f"{k}={v}" for k, v in self.environ.items()]

    def snapshot(self):
        """Private copy of the environment handed to a child process"""
        return dict(self.environ)

    def record(self, status):
        self.last_status = status
        return status

import os
import stat

import pytest

from Shell.state import ShellState


@pytest.fixture
def state(tmp_path):
    environ = {
        "PATH": os.environ.get("PATH", "/usr/bin:/bin"),
        "HOME": str(tmp_path),
    }
    return ShellState(environ=environ)


@pytest.fixture
def make_script(tmp_path):
    """Write an executable /bin/sh script and return its path"""
    def _make(name, body, directory=None, mode=0o755):
        directory = directory or tmp_path
        path = directory / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        path.chmod(mode)
        return path
    return _make

"""Shared fixtures."""
import tempfile

import pytest

import loggingex

# Keep log files out of the user's data directory during the test run.
loggingex.set_log_directory(tempfile.mkdtemp(prefix="dpkg-status-viewer-"))

SCENARIO = """Package: alpha
Description: short alpha
 long alpha text
Depends: beta (>= 1.0), gamma

Package: beta
Description: short beta
"""


@pytest.fixture()
def write_status(tmp_path):
    """Write control file text and return its path."""

    def _write(text: str, name: str = "status") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture()
def scenario_path(write_status):
    return write_status(SCENARIO)

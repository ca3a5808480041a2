#!python3
"""Path utilities for application data directories and control sources."""

import os
import platform
from pathlib import Path

APP_DIR_NAME = "DpkgStatusViewer"

REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str) -> bool:
    """Tell whether a control source is an http(s) URL.

    Parameters
    ----------
    source : str
        A filesystem path or URL.

    Returns
    -------
    bool
        True for http and https URLs.
    """
    return source.lower().startswith(REMOTE_SCHEMES)


def get_data_dir() -> Path:
    """データディレクトリを取得 / Get data directory.

    プラットフォームごとに適切な場所を返します。
    Returns appropriate location for each platform:
    - Windows: %LOCALAPPDATA%\\DpkgStatusViewer
    - macOS: ~/Library/Application Support/DpkgStatusViewer
    - Linux: ~/.local/share/DpkgStatusViewer (XDG Base Directory)

    Returns
    -------
    Path
        データディレクトリ / Data directory path
    """
    if platform.system() == "Windows":
        return Path(os.getenv("LOCALAPPDATA",
                              os.path.expanduser("~"))) / APP_DIR_NAME

    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    # Linux and other Unix-like systems
    return Path(os.getenv("XDG_DATA_HOME",
                          Path.home() / ".local" / "share")) / APP_DIR_NAME

from __future__ import annotations

"""
FileSystem helpers.

Path resolution for the persisted configuration and the compiler working
directory. Resolution never touches the disk; only ``safe_mkdir`` creates
anything, and only when a caller asks for it.
"""

import os
from typing import Optional, Tuple

APP_DIR_NAME = "glslbatch"
UNIX_APP_DIR_NAME = ".glslbatch"


def get_user_data_dir() -> str:
    """
    Locate the per-user application data directory.

    ``%LOCALAPPDATA%/glslbatch`` (or ``%APPDATA%``) on Windows,
    ``~/.glslbatch`` elsewhere. The directory may not exist yet.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))
    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """Expand ``~`` and environment variables; empty input means ``fallback``."""
    raw = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Create ``path`` and its parents if needed.

    Returns:
        Tuple[bool, Optional[str]]: (created or already present, OS error text).
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        return False, str(e)
    return True, None

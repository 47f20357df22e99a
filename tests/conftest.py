from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared shader directory trees used across unit and e2e tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "root_path": str(tmp_path),
        "extensions": [".vert", ".frag"],
        "exclude_patterns": [],
        "case_sensitive": False,
        "sort_files": False,
        "compiler": "glslc",
        "extra_args": [],
        "output_dir": "",
    }


@pytest.fixture
def shader_tree(tmp_path: Path) -> Path:
    """
    Create the reference shader layout.

    Structure:
    /shaders
      a.vert
      readme.txt
      /sub
        b.frag
    """
    shaders = tmp_path / "shaders"
    (shaders / "sub").mkdir(parents=True)
    (shaders / "a.vert").write_text("#version 450\nvoid main() {}\n", encoding="utf-8")
    (shaders / "sub" / "b.frag").write_text("#version 450\nvoid main() {}\n", encoding="utf-8")
    (shaders / "readme.txt").write_text("not a shader", encoding="utf-8")
    return tmp_path

from __future__ import annotations

"""
Shader Discovery Service.

Walks a root directory recursively and accumulates the absolute paths of
shader source files in traversal order.
"""

import logging
import os
import re
from typing import Iterator, List, Optional

from glslbatch.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_patterns,
    default_extensions,
    has_shader_extension,
    matches_any,
)
from glslbatch.domain.shader_models import ShaderFileList

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_shader_files(
        root_path: str,
        extensions: List[str],
        exclude_rx: List[re.Pattern],
        case_sensitive: bool = False,
) -> Iterator[str]:
    """
    Traverse the filesystem and yield shader sources in visit order.

    The walk is top-down: files of a directory come before the contents of
    its subdirectories. Names inside one directory are visited in sorted
    order. Directories matching an exclusion pattern are pruned.

    An unreadable or missing root yields nothing.

    Args:
        root_path: Directory to start from.
        extensions: Accepted shader extensions.
        exclude_rx: Compiled exclusion patterns applied to base names.
        case_sensitive: Compare extensions literally.

    Yields:
        str: Absolute path of each matching file.
    """
    root_abs = os.path.abspath(root_path)

    for root, dirs, files in os.walk(root_abs, onerror=_log_walk_error):
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))

        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue
            if not has_shader_extension(file_name, extensions, case_sensitive):
                continue
            yield os.path.join(root, file_name)


def collect_shader_files(
        root_path: str,
        extensions: Optional[List[str]] = None,
        exclude_patterns: Optional[List[str]] = None,
        case_sensitive: bool = False,
        sort_files: bool = False,
) -> ShaderFileList:
    """
    Build the ordered list of shader sources below ``root_path``.

    Args:
        root_path: Directory to traverse.
        extensions: Accepted extensions. Defaults to ``.vert`` and ``.frag``.
        exclude_patterns: Raw regexes pruning directories and files.
        case_sensitive: Compare extensions literally.
        sort_files: Sort the final list by full path.

    Returns:
        ShaderFileList: Matching absolute paths.
    """
    root_abs = os.path.abspath(root_path)
    exts = extensions if extensions is not None else default_extensions()
    patterns = exclude_patterns if exclude_patterns is not None else default_exclude_patterns()

    found = ShaderFileList(
        root_path=root_abs,
        paths=tuple(yield_shader_files(root_abs, exts, compile_patterns(patterns), case_sensitive)),
    )
    logger.debug(f"Discovered {len(found)} shader file(s) under {root_abs}")

    if sort_files:
        return found.sorted()
    return found


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _log_walk_error(err: OSError) -> None:
    logger.debug(f"Skipping unreadable path '{err.filename}': {err.strerror}")

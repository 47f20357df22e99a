from __future__ import annotations

"""
Shader File Selection Rules.

Implements the extension predicate that decides which files are shader
sources, with an explicit case policy, plus regex-based exclusion used to
prune directories and files during discovery.
"""

import logging
import os
import re
from typing import Iterable, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_extensions() -> List[str]:
    """
    Get the default list of shader source extensions.

    Returns:
        List[str]: Vertex and fragment shader extensions.
    """
    return [".vert", ".frag"]


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion patterns.

    Nothing is excluded by default: every directory below the root is
    descended into.

    Returns:
        List[str]: Empty list of regex patterns.
    """
    return []

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are logged and discarded.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a string matches at least one compiled regex pattern.

    Args:
        name: File or directory name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# FILE CLASSIFICATION LOGIC
# -----------------------------------------------------------------------------

def has_shader_extension(
        file_name: str,
        extensions: Iterable[str],
        case_sensitive: bool = False,
) -> bool:
    """
    Decide whether a file name carries one of the shader extensions.

    With ``case_sensitive`` off (the default), ``shader.VERT`` and
    ``shader.Frag`` are accepted. With it on, the extension must equal
    the configured literal exactly. A file named just ``.vert`` counts
    as a vertex shader.

    Args:
        file_name: Base name of the file.
        extensions: Accepted extensions, each including the leading dot.
        case_sensitive: Compare extensions literally.

    Returns:
        bool: True if the file is a shader source.
    """
    _, ext = os.path.splitext(file_name)
    if not ext and file_name.startswith("."):
        # splitext treats ".vert" as a stem; a "*.vert" glob still matches it
        ext = file_name
    if not ext:
        return False

    if case_sensitive:
        return ext in extensions
    return ext.lower() in {e.lower() for e in extensions}

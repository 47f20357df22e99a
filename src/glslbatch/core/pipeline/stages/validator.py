from __future__ import annotations

"""
Configuration Validation Service.

Normalizes a configuration dictionary coming from the CLI or a JSON file
into the eight typed keys the pipeline reads. Bad values never abort a
run: they fall back to the default and are reported as warnings.
"""

import logging
from typing import Any, Dict, List, Tuple

from glslbatch.core.pipeline.components.filters import default_extensions
from glslbatch.domain.config import get_default_config

logger = logging.getLogger(__name__)

_TEXT_KEYS = ("root_path", "compiler", "output_dir")
_FLAG_KEYS = ("case_sensitive", "sort_files")
_LIST_KEYS = ("extensions", "exclude_patterns", "extra_args")

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data, expected to be a dict.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    defaults = get_default_config()
    if not isinstance(config, dict):
        msg = f"Configuration must be a mapping, got {type(config).__name__}. Using defaults."
        logger.warning(msg)
        return defaults, [msg]

    warnings: List[str] = []
    clean: Dict[str, Any] = {**defaults, **config}

    for key in _TEXT_KEYS:
        clean[key] = _text(key, clean[key], defaults[key], warnings)
    for key in _FLAG_KEYS:
        clean[key] = _flag(key, clean[key], defaults[key], warnings)
    for key in _LIST_KEYS:
        clean[key] = _names(key, clean[key], defaults[key], warnings)

    clean["extensions"] = _dotted(clean["extensions"], warnings)
    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _text(key: str, value: Any, default: str, warnings: List[str]) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        warnings.append(f"'{key}' must be a string; keeping '{default}'.")
        return default
    return value.strip() or default


def _flag(key: str, value: Any, default: bool, warnings: List[str]) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    word = str(value).strip().lower()
    if word in _TRUE_WORDS or word in _FALSE_WORDS:
        return word in _TRUE_WORDS
    warnings.append(f"'{key}' is not a boolean ({value!r}); keeping {default}.")
    return default


def _names(key: str, value: Any, default: List[str], warnings: List[str]) -> List[str]:
    """Accept a list of strings or a comma-separated string."""
    if value is None:
        return list(default)
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        warnings.append(f"'{key}' must be a list of strings; using the default.")
        return list(default)

    items: List[str] = []
    for v in value:
        if not isinstance(v, str):
            warnings.append(f"Dropped non-string entry {v!r} from '{key}'.")
        elif v.strip():
            items.append(v.strip())
    return items


def _dotted(extensions: List[str], warnings: List[str]) -> List[str]:
    out: List[str] = []
    for ext in extensions:
        if not ext.startswith("."):
            warnings.append(f"Extension '{ext}' has no leading dot; using '.{ext}'.")
            ext = "." + ext
        out.append(ext)
    return out or default_extensions()

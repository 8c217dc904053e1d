from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (CLI overrides, the persisted session)
into typed parameters for the navigation pipeline. Missing keys are filled
with defaults; invalid values are coerced with a warning or, in strict mode,
rejected.
"""

import logging
from typing import Any, Dict, List, Tuple

from mdnav.domain.config import DEFAULT_DOC_EXTENSION, get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "output_file"]
_BOOL_FIELDS = ["prune_hidden", "sort_entries", "print_tree"]
_INT_FIELDS = ["json_indent"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of coercing them.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a malformed extension or negative indent.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _INT_FIELDS:
        merged[field] = _as_int(merged.get(field), defaults[field], field, warnings, strict)

    merged["extension"] = _normalize_extension(merged.get("extension"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce numbers (0/1) and human-friendly keywords into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept non-negative integers, or numeric strings outside strict mode."""
    if value is None:
        return fallback

    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            msg = f"Invalid field '{field}': must not be negative."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Using fallback.")
            return fallback
        return value

    if not strict and isinstance(value, str) and value.strip().isdigit():
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value.strip())

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extension(value: Any, warnings: List[str], strict: bool) -> str:
    """Ensure the document extension is a single dot-prefixed suffix."""
    ext = _as_str(value, DEFAULT_DOC_EXTENSION, "extension", warnings, strict)

    if not ext.startswith("."):
        if strict:
            raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
        warnings.append(f"Extension '{ext}' corrected to '.{ext}'.")
        ext = "." + ext

    if ext == "." or "." in ext[1:] or "/" in ext or "\\" in ext:
        msg = f"Invalid extension '{ext}': expected a single suffix such as '.md'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{DEFAULT_DOC_EXTENSION}'.")
        return DEFAULT_DOC_EXTENSION

    return ext

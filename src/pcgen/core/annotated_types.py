#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for pcgen's
    Pydantic models such as package names, free-form text, versions and
    verbatim path strings.
"""

import os
from typing import Any, Annotated
from pydantic import BeforeValidator

from pcgen.core.constants import PACKAGE_NAME_ALLOWED_RE
from pcgen.core.utils import is_semver


# --- Normalizers --- #

def _normalize_package_name(v: Any) -> str:
    """
    Normalize a package/library identifier:
    - coerce to str
    - strip surrounding whitespace
    - validate via fullmatch against PACKAGE_NAME_ALLOWED_RE
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid name: must be a non-empty string")
    if not PACKAGE_NAME_ALLOWED_RE.fullmatch(text):
        raise ValueError(
            f"Invalid name: {text!r}. Allowed pattern: {PACKAGE_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


def _normalize_freeform_text(v: Any) -> str:
    """
    Coerce free-form text (descriptions, pkg-config versions) to str.
    None becomes ""; everything else is kept verbatim, whitespace included.
    """
    return "" if v is None else str(v)


def _normalize_semver(v: Any) -> str:
    """Trim and validate a semantic version ``x.y.z[-pre][+build]``."""
    text = "" if v is None else str(v).strip()
    if not is_semver(text):
        raise ValueError(f"Invalid library version: {v!r}")
    return text


def _coerce_path_text(v: Any) -> str:
    """
    Keep a path exactly as supplied: str or os.PathLike, no normalization.
    Empty strings, ``./`` prefixes and trailing separators survive.
    """
    if isinstance(v, (str, os.PathLike)):
        return os.fspath(v)
    raise ValueError(f"Invalid path: expected str or path-like, got {type(v).__name__}")


# --- Reusable Annotated types --- #

PackageName = Annotated[str, BeforeValidator(_normalize_package_name)]
FreeFormText = Annotated[str, BeforeValidator(_normalize_freeform_text)]
SemVer = Annotated[str, BeforeValidator(_normalize_semver)]
PathText = Annotated[str, BeforeValidator(_coerce_path_text)]

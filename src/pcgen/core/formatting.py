#!/usr/bin/env python3
"""
Formatting helpers for pcgen.

Turns a C-API config `ValidationError` into one line per failing field, in
the ``section.field: message`` form the CLI prints.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from pydantic import ValidationError


def format_validation_errors(exc: Exception) -> List[str]:
    """
    Return one-line messages for `exc`.

    Example:
        library.version: Value error, Invalid library version: '0.1'

    Anything other than a pydantic `ValidationError` yields the first line of
    its message (or its type name when the message is empty).
    """
    if isinstance(exc, ValidationError):
        return [f"{_dotted(err['loc'])}: {err['msg']}" for err in exc.errors()]
    lines = str(exc).splitlines()
    return [lines[0] if lines else type(exc).__name__]


def _dotted(loc: Sequence[Any]) -> str:
    # C-API configs nest sections only, so locations are plain field names
    return ".".join(str(seg) for seg in loc) or "<root>"

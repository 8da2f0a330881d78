#!/usr/bin/env python3
"""
Purpose:
    Install-path records consumed by `PkgConfig.from_install_paths`: the
    resolved prefix/include/lib directories and the flags telling which of
    them were explicitly requested.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from pcgen.core.annotated_types import PathText
from pcgen.core.constants import DEFAULT_INCLUDE_SUBDIR, DEFAULT_LIB_SUBDIR

PathLike = Union[str, Path]


class InstallPaths(BaseModel):
    """
    Resolved installation directories, stored exactly as given.
    Nothing here touches or normalizes the filesystem paths.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    prefix: PathText = Field(..., description="Installation prefix.")
    includedir: PathText = Field(..., description="Header installation directory.")
    libdir: PathText = Field(..., description="Library installation directory.")

    @classmethod
    def from_prefix(
        cls,
        prefix: PathLike,
        includedir: Optional[PathLike] = None,
        libdir: Optional[PathLike] = None,
    ) -> "InstallPaths":
        """
        Derive install paths from a prefix.

        `includedir` defaults to ``<prefix>/include`` and `libdir` to ``<prefix>/lib``.
        Relative values are joined onto the prefix; absolute values are kept.
        The prefix itself is stored as given.
        """
        root = os.fspath(prefix)
        return cls(
            prefix=root,
            includedir=_join(root, includedir if includedir is not None else DEFAULT_INCLUDE_SUBDIR),
            libdir=_join(root, libdir if libdir is not None else DEFAULT_LIB_SUBDIR),
        )


@dataclass(frozen=True)
class InstallOverrides:
    """Presence flags for explicitly requested include/lib directories."""
    includedir: bool = False
    libdir: bool = False

    @classmethod
    def from_args(cls, args: Any) -> "InstallOverrides":
        """Build from an argparse namespace: a flag is set when its option was given."""
        return cls(
            includedir=getattr(args, "includedir", None) is not None,
            libdir=getattr(args, "libdir", None) is not None,
        )


# --- helpers --- #

def _join(root: str, path: PathLike) -> str:
    # os.path.join leaves both parts as written; an absolute `path` replaces `root`
    return os.path.join(root, os.fspath(path))

#!/usr/bin/env python3
"""
Purpose:
    The pkg-config metadata document. Holds the fields of a `.pc` file,
    computes defaults from a C-API config and install paths, offers a fluent
    mutation API and renders the final text.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from pcgen.core.annotated_types import PathText
from pcgen.core.capi.config import CApiConfig
from pcgen.core.constants import (
    DEFAULT_PREFIX,
    EXEC_PREFIX_PLACEHOLDER,
    INCLUDEDIR_PLACEHOLDER,
    LIBDIR_PLACEHOLDER,
    PC_FILE_SUFFIX,
)
from pcgen.core.install.paths import InstallOverrides, InstallPaths
from pcgen.core.render.engine import render_pc_text, write_pc_file

logger = logging.getLogger(__name__)


class PkgConfig(BaseModel):
    """
    A `.pc` file in memory.

    Build one with `from_capi_config` (hard-coded layout) or
    `from_install_paths` (layout of a concrete install), adjust it with the
    chained mutators, then call `render()`:

        >>> pc = PkgConfig.from_capi_config("foo", CApiConfig.for_library("foo", "0.1.0"))
        >>> text = pc.add_lib("-lbar").add_cflag("-DFOO").render()
        >>> "Cflags: -I${includedir}/foo -DFOO" in text
        True

    Mutators act on the list their name refers to: `set_cflags`/`add_cflag`
    change `cflags`, `set_libs_private`/`add_lib_private` change `libs_private`.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    # Kept verbatim (str or path-like in, exact text out) so pkg-config sees what was given
    prefix: PathText = Field(default=DEFAULT_PREFIX)
    exec_prefix: PathText = Field(default=EXEC_PREFIX_PLACEHOLDER)
    includedir: PathText = Field(default=INCLUDEDIR_PLACEHOLDER)
    libdir: PathText = Field(default=LIBDIR_PLACEHOLDER)

    name: str
    description: str
    version: str

    requires: List[str] = Field(default_factory=list)
    requires_private: List[str] = Field(default_factory=list)

    libs: List[str] = Field(default_factory=list)
    libs_private: List[str] = Field(default_factory=list)

    cflags: List[str] = Field(default_factory=list)

    conflicts: List[str] = Field(default_factory=list)

    # --- Construction --- #

    @classmethod
    def from_capi_config(cls, name: str, capi_config: CApiConfig) -> "PkgConfig":
        """
        Build a document with the default layout:

            prefix=/usr/local
            exec_prefix=${prefix}
            includedir=${prefix}/include
            libdir=${exec_prefix}/lib

            Libs: -L${libdir} -l<library name>
            Cflags: -I${includedir}/<name>   (or -I${includedir} without a header subdirectory)

        `name` only selects the header subdirectory; the package identity comes
        from `capi_config.pkg_config`.
        """
        if capi_config.header.subdirectory:
            cflag = f"-I${{includedir}}/{name}"
        else:
            cflag = "-I${includedir}"

        pc = cls(
            name=capi_config.pkg_config.name,
            description=capi_config.pkg_config.description,
            version=capi_config.pkg_config.version,
            libs=[f"-L${{libdir}} -l{capi_config.library.name}"],
            cflags=[cflag],
        )
        logger.debug("New pkg-config document %r (library %r)", pc.name, capi_config.library.name)
        return pc

    @classmethod
    def from_install_paths(
        cls,
        name: str,
        install_paths: InstallPaths,
        overrides: InstallOverrides,
        capi_config: CApiConfig,
    ) -> "PkgConfig":
        """
        Build a document for a concrete install layout.

        `prefix` always comes from `install_paths`; `includedir` and `libdir`
        only when `overrides` says they were explicitly requested. Otherwise the
        placeholder forms are kept so pkg-config derives them from the prefix.
        `exec_prefix` is never overridden: a custom exec prefix is unsupported.
        """
        pc = cls.from_capi_config(name, capi_config)

        pc.prefix = install_paths.prefix
        if overrides.includedir:
            pc.includedir = install_paths.includedir
        if overrides.libdir:
            pc.libdir = install_paths.libdir

        logger.debug(
            "Install layout for %r: prefix=%s includedir=%s libdir=%s",
            pc.name, pc.prefix, pc.includedir, pc.libdir,
        )
        return pc

    # --- Mutators (chainable) --- #

    def set_description(self, description: str) -> "PkgConfig":
        self.description = description
        return self

    def set_libs(self, lib: str) -> "PkgConfig":
        """Replace all link flags with a single entry."""
        self.libs = [lib]
        return self

    def add_lib(self, lib: str) -> "PkgConfig":
        self.libs.append(lib)
        return self

    def set_libs_private(self, lib: str) -> "PkgConfig":
        """Replace all private link flags with a single entry."""
        self.libs_private = [lib]
        return self

    def add_lib_private(self, lib: str) -> "PkgConfig":
        self.libs_private.append(lib)
        return self

    def set_cflags(self, flag: str) -> "PkgConfig":
        """Replace all compiler flags with a single entry."""
        self.cflags = [flag]
        return self

    def add_cflag(self, flag: str) -> "PkgConfig":
        self.cflags.append(flag)
        return self

    def add_requires(self, package: str) -> "PkgConfig":
        self.requires.append(package)
        return self

    def add_requires_private(self, package: str) -> "PkgConfig":
        self.requires_private.append(package)
        return self

    def add_conflict(self, package: str) -> "PkgConfig":
        self.conflicts.append(package)
        return self

    # --- Output --- #

    @property
    def filename(self) -> str:
        """File name pkg-config looks up for this package (``<name>.pc``)."""
        return f"{self.name}{PC_FILE_SUFFIX}"

    def render(self) -> str:
        """Render the `.pc` text. Pure: repeated calls give identical output."""
        return render_pc_text(self.model_dump())

    def write(self, output_dir: Union[str, Path]) -> Path:
        """
        Write `render()` to ``<output_dir>/<name>.pc``.

        Raises:
            OSError: on I/O failure.
        """
        return write_pc_file(self.render(), Path(output_dir) / self.filename)

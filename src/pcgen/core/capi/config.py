#!/usr/bin/env python3
"""
Purpose:
    Pydantic records describing a library's C-compatible interface: header
    layout, pkg-config identity and the built library itself. These feed
    `PkgConfig` construction.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from pcgen.core.annotated_types import FreeFormText, PackageName, SemVer
from pcgen.core.constants import DEFAULT_TEXT_ENCODING, SUPPORTED_CONFIG_EXT


class HeaderCApiConfig(BaseModel):
    """Public header layout. `subdirectory` installs headers under ``includedir/<name>``."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: PackageName = Field(..., description="Header (and include subdirectory) name.")
    subdirectory: bool = Field(default=True, description="Install headers in a subdirectory.")
    generation: bool = Field(default=True, description="Whether the header is generated.")


class PkgConfigCApiConfig(BaseModel):
    """Identity fields copied verbatim into the .pc file."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: PackageName = Field(..., description="pkg-config package name.")
    description: FreeFormText = Field(default="", description="One-line package description.")
    version: FreeFormText = Field(..., description="Version reported by pkg-config --modversion.")


class LibraryCApiConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: PackageName = Field(..., description="Library name as passed to the linker (-l<name>).")
    version: SemVer = Field(..., description="Library semantic version.")


class CApiConfig(BaseModel):
    """
    Complete C-API descriptor.

    Example
    -------
    >>> cfg = CApiConfig.for_library("foo", "0.1.0")
    >>> cfg.pkg_config.version
    '0.1.0'
    >>> cfg.header.subdirectory
    True
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    header: HeaderCApiConfig
    pkg_config: PkgConfigCApiConfig
    library: LibraryCApiConfig

    # --- Constructors --- #

    @classmethod
    def for_library(cls, name: str, version: str, description: str = "") -> "CApiConfig":
        """Conventional config where header, pkg-config package and library share one name."""
        return cls(
            header=HeaderCApiConfig(name=name),
            pkg_config=PkgConfigCApiConfig(name=name, description=description, version=version),
            library=LibraryCApiConfig(name=name, version=version),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CApiConfig":
        """
        Load a C-API config from a YAML (.yml/.yaml) or JSON (.json) file.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the extension is not supported
            ValidationError: if the loaded payload fails model validation
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        if p.suffix.lower() not in SUPPORTED_CONFIG_EXT:
            raise ValueError(
                f"Invalid config file extension for {p.name!r}; expected one of "
                f"{', '.join(sorted(SUPPORTED_CONFIG_EXT))}"
            )
        # JSON is a subset of YAML, one loader covers both
        data = yaml.safe_load(p.read_text(encoding=DEFAULT_TEXT_ENCODING)) or {}
        return cls.model_validate(data)

#!/usr/bin/env python3
"""
Core constants used across pcgen.

- Install layout: default prefix and the pkg-config placeholder paths.
- File handling: supported config extensions, output suffix and text encoding.
- Regular expressions: compiled patterns used by validators and normalizers.
"""

import re
from typing import Final

# --- pkg-config layout --- #

# Default installation prefix when none is supplied
DEFAULT_PREFIX: Final[str] = "/usr/local"

# Placeholder paths, expanded by pkg-config itself when the .pc file is read
EXEC_PREFIX_PLACEHOLDER: Final[str] = "${prefix}"
INCLUDEDIR_PLACEHOLDER: Final[str] = "${prefix}/include"
LIBDIR_PLACEHOLDER: Final[str] = "${exec_prefix}/lib"

# Relative install dirs joined onto a concrete prefix
DEFAULT_INCLUDE_SUBDIR: Final[str] = "include"
DEFAULT_LIB_SUBDIR: Final[str] = "lib"

# Suffix of generated metadata files
PC_FILE_SUFFIX: Final[str] = ".pc"


# --- File handling --- #

# Supported C-API config file extensions (JSON is read as YAML)
SUPPORTED_CONFIG_EXT: Final[frozenset[str]] = frozenset({".yml", ".yaml", ".json"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Matches semantic versions: x.y.z with optional pre-release and build metadata
SEMVER_RE: re.Pattern[str] = re.compile(
    r"^\d+\.\d+\.\d+"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)

# Package and library names: no whitespace, no path separators
PACKAGE_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z0-9._+-]+$")

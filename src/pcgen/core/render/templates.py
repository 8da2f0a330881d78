#!/usr/bin/env python3
"""
Jinja2 template of the pkg-config `.pc` format.

Section order is fixed: variables, blank line, identity fields, Libs, Cflags,
then the optional lines (emitted only when their list is non-empty).
"""

import textwrap
from typing import Final

PC_TEMPLATE_NAME: Final[str] = "pkgconfig.pc.j2"

PC_FILE_TEMPLATE: Final[str] = textwrap.dedent("""\
    prefix={{ prefix }}
    exec_prefix={{ exec_prefix }}
    libdir={{ libdir }}
    includedir={{ includedir }}

    Name: {{ name }}
    Description: {{ description }}
    Version: {{ version }}
    Libs: {{ libs | join(" ") }}
    Cflags: {{ cflags | join(" ") }}
    {% if libs_private %}
    Libs.private: {{ libs_private | join(" ") }}
    {% endif %}
    {% if requires %}
    Requires: {{ requires | join(", ") }}
    {% endif %}
    {% if requires_private %}
    Requires.private: {{ requires_private | join(", ") }}
    {% endif %}
    {% if conflicts %}
    Conflicts: {{ conflicts | join(", ") }}
    {% endif %}
""")

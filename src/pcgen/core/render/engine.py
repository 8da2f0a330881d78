#!/usr/bin/env python3

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined

from pcgen.core.constants import DEFAULT_TEXT_ENCODING
from pcgen.core.render.templates import PC_FILE_TEMPLATE, PC_TEMPLATE_NAME

logger = logging.getLogger(__name__)

# --- Module state --- #

_ENGINE: Optional["RenderEngine"] = None


def _build_env() -> Environment:
    # .pc files are plain text: no autoescaping, placeholders like ${prefix} pass through
    env = Environment(
        loader=DictLoader({PC_TEMPLATE_NAME: PC_FILE_TEMPLATE}),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return env


class RenderEngine:
    """
    Stateless engine object holding a Jinja Environment.
    Prefer using render_pc_text() for a one-shot convenience wrapper.
    """

    def __init__(self):
        self.env = _build_env()

    def render(self, context: Dict[str, Any]) -> str:
        template = self.env.get_template(PC_TEMPLATE_NAME)
        return template.render(**context)


def get_engine() -> RenderEngine:
    """Return the shared `RenderEngine`, building it on first use."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = RenderEngine()
    return _ENGINE


def render_pc_text(context: Dict[str, Any]) -> str:
    """
    Render the `.pc` template with `context`.

    The context must provide the path variables (`prefix`, `exec_prefix`,
    `libdir`, `includedir`), the identity fields (`name`, `description`,
    `version`) and the flag/dependency lists (`libs`, `cflags`, `libs_private`,
    `requires`, `requires_private`, `conflicts`).

    Raises:
      - jinja2.UndefinedError if a key is missing from the context.
    """
    return get_engine().render(context)


def write_pc_file(text: str, output_path: Path) -> Path:
    """
    Write rendered `.pc` text to `output_path`, creating parent directories.

    Raises:
      - OSError for I/O failures.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding=DEFAULT_TEXT_ENCODING)
    logger.info("Wrote %s", output_path)
    return output_path

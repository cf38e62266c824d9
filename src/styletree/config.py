"""Settings for the styletree command line.

Defaults live on the dataclass; ``STYLETREE_*`` environment variables
override them and CLI flags override both.
"""

from __future__ import annotations

import contextlib
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StyletreeConfig:
    indent: int = 2  # pretty-print indentation step
    encoding: str = "utf-8"
    log_level: str = "WARNING"


def load_config(environ: Mapping[str, str] | None = None) -> StyletreeConfig:
    """Return the default config with environment overrides applied."""
    env = os.environ if environ is None else environ
    config = StyletreeConfig()

    indent = env.get("STYLETREE_INDENT")
    if indent is not None:
        with contextlib.suppress(ValueError):
            config = replace(config, indent=int(indent))

    encoding = env.get("STYLETREE_ENCODING")
    if encoding:
        config = replace(config, encoding=encoding)

    log_level = env.get("STYLETREE_LOG_LEVEL")
    if log_level and log_level.upper() in LOG_LEVELS:
        config = replace(config, log_level=log_level.upper())

    return config

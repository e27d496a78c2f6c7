#!/usr/bin/env python3
"""
Config file discovery and loading.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger("yaf.config")

CONFIG_NAME = "yaf.conf"
BUILTIN_CONFIG_PATH = Path(__file__).with_name(CONFIG_NAME)


def default_config_path() -> str:
    """Return $XDG_CONFIG_HOME/yaf.conf, or ~/.config/yaf.conf."""
    config_dir = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(config_dir, CONFIG_NAME)


def builtin_config() -> str:
    """Return the template shipped with the package."""
    return BUILTIN_CONFIG_PATH.read_text(encoding="utf-8")


def load_template(path: Optional[str] = None) -> str:
    """
    Read a template file, falling back to the builtin template.

    Args:
        path: Config file path; the default path is used when None

    Returns:
        Template text
    """
    if path is None:
        path = default_config_path()

    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        logger.warning("Using builtin config.")
        return builtin_config()


def split_lines(text: str) -> List[str]:
    """
    Split template text on newlines.

    A '\\r' is dropped only when it precedes a '\\n'; a final line without a
    newline keeps its trailing '\\r'.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines

#!/usr/bin/env python3
"""
Main entry point for yaf.
"""

import os
import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

from .config import builtin_config, default_config_path, load_template, split_lines
from .errors import TemplateError
from .ui.renderer import TemplateRenderer
from .ui.resolver import PlaceholderResolver
from .ui.styles import RESET

logger = logging.getLogger("yaf")


def setup_logging():
    """Configure logging; the YAF_LOG environment variable overrides the level."""
    level_name = os.environ.get("YAF_LOG", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog="yaf", description="Yet Another Fetch")
    parser.add_argument("config_path", nargs="?", default=None,
                        help="Config path, defaults to ~/.config/yaf.conf, "
                             "uses builtin config if the file does not exist")
    parser.add_argument("-d", "--dump-config", action="store_true", help="Dump builtin config to stdout")
    parser.add_argument("-v", "--version", action="store_true", help="Show version information")
    parser.add_argument("-s", "--strict", action="store_true",
                        help="Fail instead of printing N/A when a fact is unavailable")
    return parser.parse_args(argv)


def read_ref(git_dir: Path, ref: str) -> str:
    """Resolve a ref from its loose file, falling back to packed-refs."""
    try:
        return (git_dir / ref).read_text().strip()
    except OSError:
        pass

    for line in (git_dir / "packed-refs").read_text().splitlines():
        parts = line.split()
        if len(parts) == 2 and parts[1] == ref:
            return parts[0]
    raise KeyError(ref)


def get_commit_hash(git_dir: Optional[Path] = None) -> str:
    """Return the short commit hash of the checkout yaf runs from, or 'unknown'."""
    if git_dir is None:
        git_dir = Path(__file__).resolve().parent.parent / ".git"
    try:
        head = (git_dir / "HEAD").read_text().strip()
        if head.startswith("ref:"):
            commit = read_ref(git_dir, head.split()[-1])
        else:
            commit = head
    except (OSError, IndexError, KeyError):
        return "unknown"
    return commit[:7] or "unknown"


def show_version():
    """Show version information."""
    from . import __version__
    print(f"yaf {__version__} ({get_commit_hash()})")


def reset_term_styles():
    """Reset terminal styling."""
    sys.stdout.write(RESET)
    sys.stdout.flush()


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.dump_config:
        sys.stdout.write(builtin_config())
        return 0

    if args.version:
        show_version()
        return 0

    setup_logging()

    config_path = args.config_path or default_config_path()
    lines = split_lines(load_template(config_path))

    renderer = TemplateRenderer(PlaceholderResolver(strict_facts=args.strict))
    try:
        output = renderer.render(lines)
    except TemplateError as e:
        reset_term_styles()
        logger.error(str(e))
        return 1

    sys.stdout.write(output)
    reset_term_styles()
    return 0


if __name__ == "__main__":
    sys.exit(main())

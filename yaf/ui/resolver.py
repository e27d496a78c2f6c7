#!/usr/bin/env python3
"""
Placeholder resolver: turns the body of a {...} placeholder into text.

The first character of the body selects the source:

    $NAME     environment variable
    @name     built-in fact or style (see styles.py)
    #command  standard output of a shell command

Nothing is cached; every placeholder re-queries its source.
"""

import os
import enum
import logging
import subprocess
from typing import Dict, Mapping, Optional, Tuple

from ..errors import CommandExecution, IoFailure, MissingEnvVar, UnknownVariable
from ..modules import get_fact_registry, FactModule, NOT_AVAILABLE
from . import styles

logger = logging.getLogger("yaf.resolver")

SHELL = "/bin/sh"


class PlaceholderKind(enum.Enum):
    ENV = "$"
    BUILTIN = "@"
    SHELL = "#"
    UNKNOWN = ""


def classify(body: str) -> Tuple[PlaceholderKind, str]:
    """Split a placeholder body into its kind and the text after the sigil."""
    if body:
        for kind in (PlaceholderKind.ENV, PlaceholderKind.BUILTIN, PlaceholderKind.SHELL):
            if body[0] == kind.value:
                return kind, body[1:]
    return PlaceholderKind.UNKNOWN, body


def run_shell(command: str) -> str:
    """
    Run a command through the shell and return its trimmed standard output.

    Args:
        command: Command line passed to /bin/sh -c

    Returns:
        Standard output with trailing whitespace removed

    Raises:
        CommandExecution: If the command wrote anything to standard error
        IoFailure: If the shell could not be started or the command contains a NUL
    """
    try:
        result = subprocess.run(
            [SHELL, "-c", command],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False
        )
    except (OSError, ValueError) as e:
        raise IoFailure(f"failed to run {command!r}: {e}") from e

    stdout = result.stdout.decode("utf-8", errors="replace").rstrip()
    stderr = result.stderr.decode("utf-8", errors="replace").rstrip()

    if stderr:
        raise CommandExecution(stderr)
    return stdout


class PlaceholderResolver:
    """Resolves placeholder bodies against facts, styles, the environment and the shell."""

    def __init__(self, facts: Optional[Dict[str, FactModule]] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 strict_facts: bool = False):
        self.facts = facts if facts is not None else get_fact_registry()
        self.environ = environ if environ is not None else os.environ
        self.strict_facts = strict_facts
        self._handlers = {
            PlaceholderKind.ENV: self.resolve_env,
            PlaceholderKind.BUILTIN: self.resolve_builtin,
            PlaceholderKind.SHELL: run_shell,
        }

    def resolve(self, body: str) -> str:
        """Resolve one placeholder body, raising a RenderError on failure."""
        kind, name = classify(body)
        handler = self._handlers.get(kind)
        if handler is None:
            raise UnknownVariable(body)
        return handler(name)

    def resolve_env(self, name: str) -> str:
        value = self.environ.get(name)
        if value is None:
            raise MissingEnvVar(name)
        return value

    def resolve_builtin(self, name: str) -> str:
        module = self.facts.get(name)
        if module is not None:
            return self.resolve_fact(module)

        style = styles.lookup(name)
        if style is None:
            raise UnknownVariable(name)
        return style

    def resolve_fact(self, module: FactModule) -> str:
        result = module.run()
        if result.ok:
            return result.value

        if self.strict_facts:
            raise IoFailure(result.error)
        logger.warning(f"Fact unavailable, using {NOT_AVAILABLE}: {result.error}")
        return NOT_AVAILABLE

#!/usr/bin/env python3
"""
Template renderer for yaf.

Templates are rendered one line at a time. Text between '{' and '}' is a
placeholder and is replaced by the resolver's output. Inside a placeholder a
backslash escapes '{', '}' and '\\'; before any other character it is kept as
is. Outside placeholders a backslash is plain text.
"""

import logging
from typing import Iterable, List, Optional

from ..errors import RenderError, TemplateError, UnclosedBrace, UnexpectedBrace
from .resolver import PlaceholderResolver

logger = logging.getLogger("yaf.renderer")

ESCAPABLE = frozenset("{}\\")


class LineRenderer:
    """Character state machine for a single template line."""

    def __init__(self, resolver: PlaceholderResolver):
        self.resolver = resolver

    def render_line(self, line: str) -> str:
        """
        Render one line of template text.

        Args:
            line: Template line without its newline

        Returns:
            The rendered line followed by exactly one newline

        Raises:
            UnexpectedBrace: On a stray '}' or a '{' inside a placeholder
            UnclosedBrace: If the line ends inside a placeholder
            RenderError: Any error raised while resolving a placeholder
        """
        output: List[str] = []
        buffer: List[str] = []
        inside_braces = False
        escape_next = False

        for char in line:
            if escape_next:
                if char not in ESCAPABLE:
                    buffer.append("\\")
                buffer.append(char)
                escape_next = False
                continue

            if char == "\\":
                if inside_braces:
                    escape_next = True
                else:
                    output.append(char)
            elif char == "{":
                if inside_braces:
                    raise UnexpectedBrace()
                inside_braces = True
                buffer = []
            elif char == "}":
                if not inside_braces:
                    raise UnexpectedBrace()
                inside_braces = False
                output.append(self.resolver.resolve("".join(buffer)))
            elif inside_braces:
                buffer.append(char)
            else:
                output.append(char)

        if inside_braces:
            raise UnclosedBrace()

        output.append("\n")
        return "".join(output)


class TemplateRenderer:
    """Renders a whole template, stopping at the first failing line."""

    def __init__(self, resolver: Optional[PlaceholderResolver] = None):
        self.line_renderer = LineRenderer(resolver or PlaceholderResolver())

    def render(self, lines: Iterable[str]) -> str:
        """
        Render every line of a template.

        Raises:
            TemplateError: Carrying the 1-based line number and the cause
        """
        rendered = []
        for index, line in enumerate(lines):
            try:
                rendered.append(self.line_renderer.render_line(line))
            except RenderError as e:
                logger.debug(f"Render stopped at line {index + 1}: {e}")
                raise TemplateError(index + 1, e) from e
        return "".join(rendered)

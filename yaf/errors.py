#!/usr/bin/env python3
"""
Exceptions raised while rendering a template.
"""


class RenderError(Exception):
    """Base class for all template rendering errors."""

    message = "Render error."

    def __str__(self) -> str:
        return self.message


class UnexpectedBrace(RenderError):
    """A stray '}' or a '{' inside an open placeholder."""

    message = "Unexpected curly brace found."


class UnclosedBrace(RenderError):
    """End of line reached while a placeholder is still open."""

    message = "Unclosed curly brace."


class UnknownVariable(RenderError):
    """Placeholder body does not name anything known."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown variable: {self.name}"


class UnknownColor(RenderError):
    """color<N> suffix is not an integer between 0 and 255."""

    def __init__(self, value: str):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Unknown color: {self.value}"


class MissingEnvVar(RenderError):
    """Environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Missing environment variable: {self.name}"


class CommandExecution(RenderError):
    """Shell command wrote to standard error."""

    def __init__(self, stderr: str):
        super().__init__(stderr)
        self.stderr = stderr

    def __str__(self) -> str:
        return f"Failed to execute command: {self.stderr}"


class IoFailure(RenderError):
    """Spawning a command or reading a source failed."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"I/O failure: {self.detail}"


class TemplateError(Exception):
    """A template line failed to render."""

    def __init__(self, line_number: int, error: RenderError):
        super().__init__(line_number, error)
        self.line_number = line_number
        self.error = error

    def __str__(self) -> str:
        return f"Error in line {self.line_number}: {self.error}"

"""Placeholder classification and resolution."""

import os

import pytest

from yaf.errors import CommandExecution, IoFailure, MissingEnvVar, TemplateError, UnknownVariable
from yaf.modules.base import NOT_AVAILABLE
from yaf.ui import resolver as resolver_module
from yaf.ui.renderer import TemplateRenderer
from yaf.ui.resolver import PlaceholderKind, PlaceholderResolver, classify, run_shell
from yaf.ui.styles import STYLES


@pytest.mark.parametrize(
    "body, expected",
    [
        ("$HOME", (PlaceholderKind.ENV, "HOME")),
        ("@kernel", (PlaceholderKind.BUILTIN, "kernel")),
        ("#uname -r", (PlaceholderKind.SHELL, "uname -r")),
        ("kernel", (PlaceholderKind.UNKNOWN, "kernel")),
        ("", (PlaceholderKind.UNKNOWN, "")),
        ("$", (PlaceholderKind.ENV, "")),
    ],
)
def test_classify(body, expected) -> None:
    assert classify(body) == expected


def test_env_value_is_verbatim(resolver, monkeypatch) -> None:
    monkeypatch.setenv("YAF_PADDED", "  spaced out \n")
    assert resolver.resolve("$YAF_PADDED") == "  spaced out \n"


def test_empty_env_value_is_valid(resolver, monkeypatch) -> None:
    monkeypatch.setenv("YAF_EMPTY", "")
    assert resolver.resolve("$YAF_EMPTY") == ""


def test_injected_environment() -> None:
    resolver = PlaceholderResolver(facts={}, environ={"ONLY": "1"})
    assert resolver.resolve("$ONLY") == "1"
    with pytest.raises(MissingEnvVar):
        resolver.resolve("$PATH")


def test_builtin_fact(resolver) -> None:
    assert resolver.resolve("@distro") == "Arch Linux"


def test_builtin_names_are_case_sensitive(resolver) -> None:
    with pytest.raises(UnknownVariable) as excinfo:
        resolver.resolve("@Kernel")
    assert excinfo.value.name == "Kernel"


def test_builtin_style(resolver) -> None:
    assert resolver.resolve("@bold") == STYLES["bold"]


def test_builtin_color(resolver) -> None:
    assert resolver.resolve("@color 42") == "\x1b[38;5;42m"


def test_unknown_sigil(resolver) -> None:
    with pytest.raises(UnknownVariable) as excinfo:
        resolver.resolve("echo hi")
    assert excinfo.value.name == "echo hi"


def test_failed_fact_degrades_to_sentinel(resolver, caplog) -> None:
    with caplog.at_level("WARNING", logger="yaf.resolver"):
        assert resolver.resolve("@pkgs") == NOT_AVAILABLE
    assert "pkgs" in caplog.text


def test_failed_fact_is_fatal_when_strict(facts) -> None:
    resolver = PlaceholderResolver(facts=facts, strict_facts=True)
    with pytest.raises(IoFailure) as excinfo:
        resolver.resolve("@pkgs")
    assert "pkgs" in str(excinfo.value)


def test_shell_stdout() -> None:
    assert run_shell("printf 'a\\nb\\n\\n'") == "a\nb"


def test_shell_keeps_leading_whitespace() -> None:
    assert run_shell("printf '  x  '") == "  x"


def test_shell_stderr_is_fatal() -> None:
    with pytest.raises(CommandExecution) as excinfo:
        run_shell("echo out; echo oops >&2")
    assert excinfo.value.stderr == "oops"
    assert str(excinfo.value) == "Failed to execute command: oops"


def test_shell_nonzero_exit_without_stderr_is_not_an_error() -> None:
    assert run_shell("echo partial; exit 3") == "partial"


def test_shell_invalid_utf8_is_replaced() -> None:
    assert run_shell("printf 'a\\377b'") == "a\ufffdb"


def test_shell_spawn_failure(monkeypatch) -> None:
    monkeypatch.setattr(resolver_module, "SHELL", "/nonexistent/sh")
    with pytest.raises(IoFailure):
        run_shell("true")


def test_shell_command_with_nul_is_io_failure() -> None:
    with pytest.raises(IoFailure):
        run_shell("echo a\x00b")


def test_nul_in_template_is_reported_as_template_error() -> None:
    renderer = TemplateRenderer(PlaceholderResolver(facts={}))
    with pytest.raises(TemplateError) as excinfo:
        renderer.render(["{#echo a\x00b}"])
    assert isinstance(excinfo.value.error, IoFailure)


@pytest.fixture
def piped_stdin():
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"data for yaf itself\n")
    os.close(write_fd)
    saved = os.dup(0)
    os.dup2(read_fd, 0)
    os.close(read_fd)
    try:
        yield
    finally:
        os.dup2(saved, 0)
        os.close(saved)


def test_shell_does_not_read_parent_stdin(piped_stdin) -> None:
    assert run_shell("cat") == ""
    assert run_shell("read line; echo \"[$line]\"") == "[]"

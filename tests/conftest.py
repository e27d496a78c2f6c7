from typing import Dict

import pytest

from yaf.modules.base import FactModule
from yaf.ui.renderer import LineRenderer
from yaf.ui.resolver import PlaceholderResolver


class StaticFact(FactModule):
    """Fact module returning a fixed value, or failing when value is None."""

    def __init__(self, name: str, value=None):
        super().__init__(name, name.title())
        self.value = value
        self.calls = 0

    def collect(self) -> str:
        self.calls += 1
        if self.value is None:
            raise OSError("not available here")
        return self.value


@pytest.fixture
def facts() -> Dict[str, FactModule]:
    return {
        "username": StaticFact("username", "alice"),
        "hostname": StaticFact("hostname", "box"),
        "distro": StaticFact("distro", "Arch Linux"),
        "kernel": StaticFact("kernel", "6.1.0"),
        "uptime": StaticFact("uptime", "2 days, 3 hours"),
        "pkgs": StaticFact("pkgs", None),
        "shell": StaticFact("shell", "zsh"),
    }


@pytest.fixture
def resolver(facts) -> PlaceholderResolver:
    return PlaceholderResolver(facts=facts)


@pytest.fixture
def renderer(resolver) -> LineRenderer:
    return LineRenderer(resolver)

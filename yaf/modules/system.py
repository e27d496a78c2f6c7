#!/usr/bin/env python3
"""
System related fact modules.
"""

import os
import pwd
import getpass
import socket

from .base import FactModule

OS_RELEASE_PATH = "/etc/os-release"
PROC_VERSION_PATH = "/proc/version"
PROC_UPTIME_PATH = "/proc/uptime"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def format_uptime(seconds: float) -> str:
    """
    Format an uptime as a sentence fragment.

    Nonzero days, hours and minutes are joined with ", ", e.g. "2 days, 3 hours".
    An uptime shorter than a minute gives "0 minutes".
    """
    total = int(seconds)
    days = total // 86400
    hours = (total % 86400) // 3600
    minutes = (total % 3600) // 60

    parts = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "minute"))

    if not parts:
        return "0 minutes"
    return ", ".join(parts)


def parse_os_release(content: str) -> str:
    """Return PRETTY_NAME (or NAME) from os-release content."""
    fields = {}
    for line in content.splitlines():
        if "=" in line and not line.lstrip().startswith("#"):
            key, value = line.split("=", 1)
            fields[key.strip()] = value.strip().strip('"').strip("'")

    for key in ("PRETTY_NAME", "NAME"):
        if fields.get(key):
            return fields[key]
    raise ValueError("no PRETTY_NAME or NAME in os-release")


class UsernameModule(FactModule):
    """Login name of the current user."""

    def __init__(self):
        super().__init__("username", "Username")

    def collect(self) -> str:
        try:
            return pwd.getpwuid(os.geteuid()).pw_name
        except KeyError:
            return getpass.getuser()


class HostnameModule(FactModule):
    """Network name of the machine."""

    def __init__(self):
        super().__init__("hostname", "Hostname")

    def collect(self) -> str:
        hostname = socket.gethostname()
        if not hostname:
            raise ValueError("empty hostname")
        return hostname


class DistroModule(FactModule):
    """Operating system name from os-release."""

    def __init__(self, path: str = OS_RELEASE_PATH):
        super().__init__("distro", "Distribution")
        self.path = path

    def collect(self) -> str:
        return parse_os_release(self.read_file(self.path))


class KernelModule(FactModule):
    """Kernel release, the third field of /proc/version."""

    def __init__(self, path: str = PROC_VERSION_PATH):
        super().__init__("kernel", "Kernel")
        self.path = path

    def collect(self) -> str:
        parts = self.read_file(self.path).split()
        if len(parts) < 3:
            raise ValueError(f"unexpected format in {self.path}")
        return parts[2]


class UptimeModule(FactModule):
    """Time since boot."""

    def __init__(self, path: str = PROC_UPTIME_PATH):
        super().__init__("uptime", "Uptime")
        self.path = path

    def collect(self) -> str:
        fields = self.read_file(self.path).split()
        if not fields:
            raise ValueError(f"{self.path} is empty")
        return format_uptime(float(fields[0]))


class ShellModule(FactModule):
    """Name of the user's login shell."""

    def __init__(self):
        super().__init__("shell", "Shell")

    def collect(self) -> str:
        shell = os.environ.get("SHELL") or pwd.getpwuid(os.geteuid()).pw_shell
        if not shell:
            raise ValueError("no login shell configured")
        return os.path.basename(shell.rstrip("/"))

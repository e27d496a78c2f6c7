#!/usr/bin/env python3
"""
Module initialization - imports all fact modules and provides a function to get all module instances.
"""

from typing import Dict

from .base import FactModule, FactResult, NOT_AVAILABLE
from .system import (
    UsernameModule, HostnameModule, DistroModule, KernelModule, UptimeModule, ShellModule
)
from .packages import PackageCountModule


def get_all_modules():
    """Return a list of all module instances."""
    return [
        UsernameModule(),
        HostnameModule(),
        DistroModule(),
        KernelModule(),
        UptimeModule(),
        PackageCountModule(),
        ShellModule(),
    ]


def get_fact_registry() -> Dict[str, FactModule]:
    """Return the fact modules keyed by their placeholder name."""
    return {module.name: module for module in get_all_modules()}

#!/usr/bin/env python3
"""
UI module initialization for yaf.
"""

from .resolver import PlaceholderResolver, PlaceholderKind, classify
from .renderer import LineRenderer, TemplateRenderer

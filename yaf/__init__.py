#!/usr/bin/env python3
"""
Yet Another Fetch

A system information tool that renders a text template, replacing placeholders
with system facts, environment variables, shell command output and ANSI styles.
"""

__version__ = "0.1.0"

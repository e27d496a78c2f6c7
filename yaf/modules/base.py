#!/usr/bin/env python3
"""
Base module for all fact modules.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("yaf.modules")

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class FactResult:
    """Outcome of a fact query: either a value or an error message."""

    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: str) -> "FactResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "FactResult":
        return cls(error=error)


class FactModule:
    """Base class for all fact modules."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    def collect(self) -> str:
        """Gather the fact. Subclasses raise OSError or ValueError on failure."""
        raise NotImplementedError("Subclasses must implement this method")

    def run(self) -> FactResult:
        """Run the query and contain any failure in the result."""
        try:
            value = self.collect()
        except (OSError, ValueError, KeyError, OverflowError) as e:
            logger.debug(f"Fact {self.name} failed: {e}")
            return FactResult.failure(f"{self.name}: {e}")
        return FactResult.success(value)

    @staticmethod
    def read_file(file_path: str) -> str:
        """
        Read a text file.

        Args:
            file_path: Path to the file

        Returns:
            File content as string
        """
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

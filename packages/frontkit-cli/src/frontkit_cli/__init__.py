"""frontkit-cli: Command-line interface for frontkit."""

from __future__ import annotations

__version__ = "0.1.0"

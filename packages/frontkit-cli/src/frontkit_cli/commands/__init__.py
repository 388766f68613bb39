"""frontkit CLI commands.

Each command is loaded lazily by frontkit_cli.main.LazyGroup.
"""

from __future__ import annotations

"""CLI module for focalcrop.

Provides the command-line interface for locating focal points and
writing smart crops.
"""

from __future__ import annotations

from focalcrop.cli.main import app

__all__ = ["app"]

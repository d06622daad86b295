"""
semverkit/version.py
====================
Single source of truth for semverkit version information.

Import this module for programmatic version access:
    from semverkit.version import __version__, VERSION_INFO
"""

from __future__ import annotations

from semverkit.core.types import SemverFields

VERSION_INFO = SemverFields(major="0", minor="1", patch="0")

__version__: str = str(VERSION_INFO)

# Minimum Python version required
PYTHON_REQUIRES = ">=3.9"

PACKAGE_NAME = "semverkit"
PACKAGE_DESCRIPTION = "Parse, format and bump semantic version strings"
LICENSE = "BSD-3-Clause"

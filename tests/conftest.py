"""
tests/conftest.py
==================
Shared pytest fixtures for all semverkit tests.
"""

import pytest
from semverkit.core.config import SemverConfig
from semverkit.core.semver import Semver, new_semver
from semverkit.core.types import SemverFields


# ─── VALUES ───────────────────────────────────────────────────────


@pytest.fixture
def empty_semver():
    return Semver()


@pytest.fixture
def release_semver():
    return new_semver(1, 4, 2)


@pytest.fixture
def prerelease_semver():
    sv = Semver()
    assert sv.parse("2.0.0-next")
    return sv


@pytest.fixture
def release_fields():
    return SemverFields("1", "4", "2")


# ─── CONFIG ───────────────────────────────────────────────────────


@pytest.fixture
def conventional_config():
    return SemverConfig.for_profile("conventional")


@pytest.fixture
def strict_config():
    return SemverConfig.for_profile("strict")

"""
semverkit/core/config.py
========================
Behavioral switches for semverkit, in one place.

The defaults reproduce the long-standing behavior of the library:
only the major segment is checked for a leading letter, and increments
never reset lower components.
"""
from __future__ import annotations
from dataclasses import dataclass

from semverkit.core.exceptions import ConfigError


@dataclass
class SemverConfig:
    # minor/patch get the same leading-letter check as major
    validate_all_segments: bool = False
    # inc_major zeroes minor+patch, inc_minor zeroes patch
    cascade_resets:        bool = False
    # validators accept "v1.2.3" style majors
    allow_v_prefix:        bool = True

    PROFILES = ("reference", "conventional", "strict")

    @classmethod
    def for_profile(cls, profile: str) -> "SemverConfig":
        """Pre-tuned configs.

        reference:    defaults, historical behavior
        conventional: increments reset lower components (usual SemVer bump)
        strict:       conventional + every numeric segment checked, no ``v``
        """
        cfg = cls()
        if profile == "reference":
            pass
        elif profile == "conventional":
            cfg.cascade_resets = True
        elif profile == "strict":
            cfg.cascade_resets        = True
            cfg.validate_all_segments = True
            cfg.allow_v_prefix        = False
        else:
            raise ConfigError(
                f"Unknown config profile '{profile}'. Available: {list(cls.PROFILES)}",
                context={"profile": profile},
            )
        return cfg


# Singleton default config
DEFAULT_CONFIG = SemverConfig()

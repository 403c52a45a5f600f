"""Configuration management for dotstore.

Provides the Config dataclass and load_config() to read settings from keyword
arguments, environment variables, and defaults.

    DOTSTORE_PLATFORM  platform backend to use (default: sys.platform)
    DOTSTORE_POLICY    "strict" or "lenient" handling of missing base directories (default: strict)
    DOTSTORE_LOG       truthy to emit loguru output from dotstore (default: off)

Precedence: keyword argument > env var > default
"""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

_TRUTHY = {"1", "true", "yes", "on"}


class Policy(StrEnum):
    """How an entry point treats a base directory the platform cannot resolve."""

    STRICT = "strict"  # unavailable kinds get no entry point; a missing base is a defect
    LENIENT = "lenient"  # every kind gets an entry point; a missing base returns None


@dataclass(frozen=True)
class Config:
    platform: str
    policy: Policy = Policy.STRICT
    log: bool = False


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
    policy: str | None = None,
    log: bool | None = None,
) -> Config:
    """Load configuration from keyword arguments, environment, or defaults.

    Args:
        environ: Environment mapping (defaults to os.environ)
        platform: Backend platform, a sys.platform value or family name (overrides DOTSTORE_PLATFORM)
        policy: "strict" or "lenient", case-insensitive (overrides DOTSTORE_POLICY)
        log: Whether dotstore emits loguru output (overrides DOTSTORE_LOG)

    Returns:
        Config instance

    Raises:
        ValueError: If the policy is not one of the Policy values
    """
    if environ is None:
        environ = os.environ

    if platform is None:
        platform = environ.get("DOTSTORE_PLATFORM", "").strip() or sys.platform

    if policy is None:
        policy = environ.get("DOTSTORE_POLICY", "").strip() or Policy.STRICT
    try:
        resolved_policy = Policy(policy.lower())
    except ValueError:
        raise ValueError(f"Unknown policy {policy!r}, expected one of: {', '.join(Policy)}") from None

    if log is None:
        log = environ.get("DOTSTORE_LOG", "").strip().lower() in _TRUTHY

    return Config(platform=platform, policy=resolved_policy, log=log)


CONFIG: Config | None = None


def get_config() -> Config:
    """Returns the global CONFIG instance, loading it from the environment on first use."""
    global CONFIG
    if CONFIG is None:
        CONFIG = load_config()
    return CONFIG

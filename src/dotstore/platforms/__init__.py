"""Per-platform base directory backends.

Every backend module (linux, macos, windows) defines:

    NAME       platform family name, used in diagnostics
    RESOLVERS  dict mapping EVERY StoreKind to a parameterless query returning Path | None
    AVAILABLE  frozenset of the kinds that have a location on this platform

Kinds without a location map to `undefined`. Tables are checked with check_total()
when the backend module is imported, so adding a StoreKind breaks every backend
that does not account for it.
"""

from collections.abc import Callable, Mapping
from pathlib import Path

from ..kinds import StoreKind

Resolver = Callable[[], Path | None]


def undefined() -> Path | None:
    """Resolver for kinds that have no location on the platform."""
    return None


def check_total(name: str, resolvers: Mapping[StoreKind, Resolver]) -> frozenset[StoreKind]:
    """Verify that `resolvers` covers every StoreKind and return the available ones."""
    missing = set(StoreKind) - set(resolvers)
    assert not missing, f"{name}: no resolver for {', '.join(sorted(missing))}"
    return frozenset(kind for kind, resolver in resolvers.items() if resolver is not undefined)

"""Public store entry points.

entry_points() builds one `<kind>_store(relative)` function per StoreKind for a
platform backend. Each one resolves the base directory and hands it to the factory.

Under Policy.STRICT only the kinds the backend declares AVAILABLE get a function, and
a base directory that still fails to resolve is a defect (UnresolvedLocation).
Under Policy.LENIENT every kind gets a function and a missing base returns None.

custom_store() skips resolution and anchors the store at a caller-supplied root.
"""

from collections.abc import Callable
from pathlib import Path
from types import ModuleType

from loguru import logger

from .config import Policy
from .factory import StrPath, materialize
from .kinds import StoreKind
from .resolver import resolve


class UnresolvedLocation(AssertionError):
    """Raised when a kind the platform guarantees has no base directory in this environment."""

    def __init__(self, kind: StoreKind, platform: str) -> None:
        self.kind = kind
        self.platform = platform
        super().__init__(f"{platform}: {kind} directory is available on this platform but did not resolve")


def _strict(kind: StoreKind, backend: ModuleType) -> Callable[[StrPath], Path]:
    def store(relative: StrPath) -> Path:
        base = resolve(kind, backend)
        if base is None:
            logger.critical(f"{backend.NAME}: No {kind} directory in this environment")
            raise UnresolvedLocation(kind, backend.NAME)
        return materialize(base, relative)

    store.__doc__ = f"""Create a dot directory in the {kind} directory and return its path.

    Raises:
        OSError: If the directory cannot be created
        UnresolvedLocation: If the platform's {kind} directory cannot be located
    """
    return store


def _lenient(kind: StoreKind, backend: ModuleType) -> Callable[[StrPath], Path | None]:
    def store(relative: StrPath) -> Path | None:
        base = resolve(kind, backend)
        if base is None:
            logger.debug(f"{backend.NAME}: No {kind} directory, skipping store {relative}")
            return None
        return materialize(base, relative)

    store.__doc__ = f"""Create a dot directory in the {kind} directory and return its path, or None without one.

    Raises:
        OSError: If the directory cannot be created
    """
    return store


def entry_points(backend: ModuleType, policy: Policy = Policy.STRICT) -> dict[str, Callable]:
    """Build the `<kind>_store` functions offered on `backend`, keyed by name."""
    if policy is Policy.STRICT:
        kinds, build = [k for k in StoreKind if k in backend.AVAILABLE], _strict
    else:
        kinds, build = list(StoreKind), _lenient
    functions = {}
    for kind in kinds:
        function = build(kind, backend)
        function.__name__ = function.__qualname__ = kind.entry_point
        function.__module__ = __package__
        functions[kind.entry_point] = function
    return functions


def custom_store(root: StrPath, relative: StrPath) -> Path:
    """Create a dot directory under an arbitrary `root` and return its path.

    custom_store("/home/user/workspace/middle-earth", "eregion") creates and returns
    /home/user/workspace/middle-earth/.eregion

    Raises:
        OSError: If the directory cannot be created
    """
    return materialize(root, relative)

"""Base directory resolution.

load_backend() picks the platform backend module once, the way a build target would.
resolve() asks that backend for a StoreKind's base directory and reports a location
the environment does not define as None instead of raising.
"""

from importlib import import_module
from pathlib import Path
from types import ModuleType

from loguru import logger

from .config import get_config
from .kinds import StoreKind

_FAMILIES = {
    "linux": "linux",
    "macos": "macos",
    "darwin": "macos",
    "windows": "windows",
    "win32": "windows",
}


def load_backend(platform: str) -> ModuleType:
    """Return the backend module for a sys.platform value or family name.

    Anything not recognized (linux, freebsd13, cygwin, ...) uses the XDG backend.
    """
    family = _FAMILIES.get(platform.lower(), "linux")
    return import_module(f".platforms.{family}", __package__)


def resolve(kind: StoreKind, backend: ModuleType | None = None) -> Path | None:
    """Base directory for `kind` on `backend`, or None if there is none.

    Never creates anything. Platform queries that fail (no home directory, unset
    known-folder variable) and relative results are reported as None.
    """
    if backend is None:
        backend = load_backend(get_config().platform)
    try:
        path = backend.RESOLVERS[kind]()
    except (RuntimeError, ValueError, OSError) as e:
        logger.debug(f"{backend.NAME}: Cannot resolve {kind} directory: {e}")
        return None
    if path is None:
        return None
    path = Path(path)
    if not path.is_absolute():
        logger.debug(f"{backend.NAME}: Ignoring relative {kind} directory {path}")
        return None
    return path

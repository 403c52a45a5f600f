"""Create dot directories in well-known system places.

Usage::

    import dotstore

    dotstore.home_store("barracuda")  # ~/.barracuda
    dotstore.config_store("editor")  # ~/.config/.editor on Linux
    dotstore.custom_store("/srv/project", "settings/user/local")  # /srv/project/.settings/user/local

One `<kind>_store()` function exists for each StoreKind that has a location on the
current platform (see dotstore.platforms), so `from dotstore import runtime_store`
fails outright on macOS and Windows. Set DOTSTORE_POLICY=lenient to get every
function everywhere, returning None where there is no location.

Logging goes through loguru and is disabled by default; call
`logger.enable("dotstore")` or set DOTSTORE_LOG=1 to see it.
"""

from loguru import logger

from .config import Policy, get_config
from .factory import materialize, store_path
from .kinds import StoreKind
from .resolver import load_backend, resolve
from .stores import UnresolvedLocation, custom_store, entry_points

CONFIG = get_config()
if CONFIG.log:
    logger.enable(__name__)
else:
    logger.disable(__name__)

BACKEND = load_backend(CONFIG.platform)
"""Platform backend module selected at import time."""

_ENTRY_POINTS = entry_points(BACKEND, CONFIG.policy)


def __getattr__(name: str):
    try:
        return _ENTRY_POINTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None


def __dir__() -> list[str]:
    return sorted([*globals(), *_ENTRY_POINTS])


__all__ = [
    "BACKEND",
    "Policy",
    "StoreKind",
    "UnresolvedLocation",
    "custom_store",
    "materialize",
    "resolve",
    "store_path",
    *_ENTRY_POINTS,
]

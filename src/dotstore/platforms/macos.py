"""Standard user domain directories for macOS.

Locations are fixed folders under the home directory. XDG variables are ignored
here even when set, since Apple's domains do not follow them.

There is no executable, runtime, state or template location on macOS, so those
kinds are undefined and get no entry point under the strict policy.
"""

from pathlib import Path

from ..kinds import StoreKind
from . import check_total, undefined

NAME = "macos"


def home_dir(name: str) -> Path:
    """A standard folder directly in the user's home (~/Music, ~/Movies, ...)."""
    return Path.home() / name


def library_dir(name: str) -> Path:
    """A folder in the user's ~/Library domain."""
    return Path.home() / "Library" / name


RESOLVERS = {
    StoreKind.HOME: Path.home,
    StoreKind.CONFIG: lambda: library_dir("Application Support"),
    StoreKind.CONFIG_LOCAL: lambda: library_dir("Application Support"),
    StoreKind.EXECUTABLE: undefined,
    StoreKind.AUDIO: lambda: home_dir("Music"),
    StoreKind.CACHE: lambda: library_dir("Caches"),
    StoreKind.DATA: lambda: library_dir("Application Support"),
    StoreKind.DATA_LOCAL: lambda: library_dir("Application Support"),
    StoreKind.DESKTOP: lambda: home_dir("Desktop"),
    StoreKind.DOWNLOAD: lambda: home_dir("Downloads"),
    StoreKind.DOCUMENT: lambda: home_dir("Documents"),
    StoreKind.FONT: lambda: library_dir("Fonts"),
    StoreKind.PICTURE: lambda: home_dir("Pictures"),
    StoreKind.PREFERENCE: lambda: library_dir("Preferences"),
    StoreKind.PUBLIC: lambda: home_dir("Public"),
    StoreKind.RUNTIME: undefined,
    StoreKind.STATE: undefined,
    StoreKind.TEMPLATE: undefined,
    StoreKind.VIDEO: lambda: home_dir("Movies"),
}

AVAILABLE = check_total(NAME, RESOLVERS)

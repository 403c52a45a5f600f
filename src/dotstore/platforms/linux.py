"""XDG base directories for Linux and the BSDs.

Most locations come straight from platformdirs. The ones it does not know about
(executable, font, public, template) follow the same XDG rules: an environment
override or an entry in user-dirs.dirs, then the conventional default under $HOME.
"""

import os
from configparser import ConfigParser, Error
from pathlib import Path

from platformdirs.unix import Unix

from ..kinds import StoreKind
from . import check_total

NAME = "linux"

DIRS = Unix()


def _user_dirs_entry(key: str) -> Path | None:
    """Read `key` (e.g. XDG_PUBLICSHARE_DIR) from $XDG_CONFIG_HOME/user-dirs.dirs."""
    path = DIRS.user_config_path / "user-dirs.dirs"
    if not path.is_file():
        return None
    parser = ConfigParser(interpolation=None)
    try:
        parser.read_string(f"[top]\n{path.read_text()}")
    except Error:
        return None
    if key not in parser["top"]:
        return None
    value = parser["top"][key].strip('"')
    return Path(value.replace("$HOME", str(Path.home())))


def _user_dir(key: str, fallback: str) -> Path:
    """Resolve an xdg-user-dirs location: user-dirs.dirs, then environment, then ~/fallback."""
    path = _user_dirs_entry(key)
    if path is None:
        value = os.environ.get(key, "").strip()
        path = Path(value) if value else Path.home() / fallback
    return path


def executable_dir() -> Path:
    value = os.environ.get("XDG_BIN_HOME", "").strip()
    return Path(value) if value else Path.home() / ".local" / "bin"


def font_dir() -> Path:
    return DIRS.user_data_path / "fonts"


def public_dir() -> Path:
    return _user_dir("XDG_PUBLICSHARE_DIR", "Public")


def template_dir() -> Path:
    return _user_dir("XDG_TEMPLATES_DIR", "Templates")


RESOLVERS = {
    StoreKind.HOME: Path.home,
    StoreKind.CONFIG: lambda: DIRS.user_config_path,
    StoreKind.CONFIG_LOCAL: lambda: DIRS.user_config_path,
    StoreKind.EXECUTABLE: executable_dir,
    StoreKind.AUDIO: lambda: DIRS.user_music_path,
    StoreKind.CACHE: lambda: DIRS.user_cache_path,
    StoreKind.DATA: lambda: DIRS.user_data_path,
    StoreKind.DATA_LOCAL: lambda: DIRS.user_data_path,
    StoreKind.DESKTOP: lambda: DIRS.user_desktop_path,
    StoreKind.DOWNLOAD: lambda: DIRS.user_downloads_path,
    StoreKind.DOCUMENT: lambda: DIRS.user_documents_path,
    StoreKind.FONT: font_dir,
    StoreKind.PICTURE: lambda: DIRS.user_pictures_path,
    StoreKind.PREFERENCE: lambda: DIRS.user_config_path,
    StoreKind.PUBLIC: public_dir,
    StoreKind.RUNTIME: lambda: DIRS.user_runtime_path,
    StoreKind.STATE: lambda: DIRS.user_state_path,
    StoreKind.TEMPLATE: template_dir,
    StoreKind.VIDEO: lambda: DIRS.user_videos_path,
}

AVAILABLE = check_total(NAME, RESOLVERS)

"""Known folders for Windows.

Roaming and local AppData are told apart with two platformdirs instances. Windows
has no executable, runtime, state or per-user font folder.
"""

import os
from pathlib import Path

from platformdirs.windows import Windows

from ..kinds import StoreKind
from . import check_total, undefined

NAME = "windows"

ROAMING = Windows(roaming=True)
LOCAL = Windows(roaming=False)


def public_dir() -> Path | None:
    # FOLDERID_Public, normally C:\Users\Public
    value = os.environ.get("PUBLIC", "").strip()
    return Path(value) if value else None


def template_dir() -> Path:
    return ROAMING.user_data_path / "Microsoft" / "Windows" / "Templates"


RESOLVERS = {
    StoreKind.HOME: Path.home,
    StoreKind.CONFIG: lambda: ROAMING.user_config_path,
    StoreKind.CONFIG_LOCAL: lambda: LOCAL.user_config_path,
    StoreKind.EXECUTABLE: undefined,
    StoreKind.AUDIO: lambda: ROAMING.user_music_path,
    StoreKind.CACHE: lambda: LOCAL.user_cache_path,
    StoreKind.DATA: lambda: ROAMING.user_data_path,
    StoreKind.DATA_LOCAL: lambda: LOCAL.user_data_path,
    StoreKind.DESKTOP: lambda: ROAMING.user_desktop_path,
    StoreKind.DOWNLOAD: lambda: ROAMING.user_downloads_path,
    StoreKind.DOCUMENT: lambda: ROAMING.user_documents_path,
    StoreKind.FONT: undefined,
    StoreKind.PICTURE: lambda: ROAMING.user_pictures_path,
    StoreKind.PREFERENCE: lambda: ROAMING.user_config_path,
    StoreKind.PUBLIC: public_dir,
    StoreKind.RUNTIME: undefined,
    StoreKind.STATE: undefined,
    StoreKind.TEMPLATE: template_dir,
    StoreKind.VIDEO: lambda: ROAMING.user_videos_path,
}

AVAILABLE = check_total(NAME, RESOLVERS)

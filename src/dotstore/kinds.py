"""Store kinds: the closed set of well-known directories a dot store can live in.

Each member's value is the stem of its public entry point, so StoreKind.CONFIG_LOCAL
is reached through `local_config_store()`. Which members are usable depends on the
platform backend (see dotstore.platforms).
"""

from enum import StrEnum


class StoreKind(StrEnum):
    """Well-known base directory a store is anchored to."""

    HOME = "home"
    CONFIG = "config"
    CONFIG_LOCAL = "local_config"
    EXECUTABLE = "executable"
    AUDIO = "audio"
    CACHE = "cache"
    DATA = "data"
    DATA_LOCAL = "local_data"
    DESKTOP = "desktop"
    DOWNLOAD = "download"
    DOCUMENT = "document"
    FONT = "font"
    PICTURE = "picture"
    PREFERENCE = "preference"
    PUBLIC = "public"
    RUNTIME = "runtime"
    STATE = "state"
    TEMPLATE = "template"
    VIDEO = "video"

    @property
    def entry_point(self) -> str:
        """Name of the public function that creates a store of this kind."""
        return f"{self.value}_store"

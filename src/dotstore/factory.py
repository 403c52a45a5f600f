"""Dot directory construction.

A store path is a base directory joined with the caller's relative fragment, where
only the FIRST segment of the fragment is hidden with a leading dot:

    base=/home/user          relative="barracuda"            -> /home/user/.barracuda
    base=/home/user/project  relative="settings/user/local"  -> /home/user/project/.settings/user/local

The fragment is normalized by pathlib first: "./foo", "foo/" and "foo//" all become
".foo", and a leading ".." segment is kept, becoming "...".

materialize() creates the path and any missing ancestors. A directory already at
the path is left untouched. Filesystem errors propagate as OSError.
"""

import os
from pathlib import Path, PurePath

from loguru import logger

StrPath = str | os.PathLike[str]


def dot_relative(relative: StrPath) -> PurePath:
    """Prefix a literal "." to the first segment of `relative`, keeping the rest as nested directories."""
    fragment = PurePath(relative)
    if fragment.is_absolute() or fragment.anchor:
        raise ValueError(f"Store path must be relative, got {str(relative)!r}")
    if not fragment.parts:
        raise ValueError("Store path must not be empty")
    first, *rest = fragment.parts
    return PurePath(f".{first}", *rest)


def store_path(base: StrPath, relative: StrPath) -> Path:
    """Absolute path of the dot directory for `relative` under `base`. Touches nothing."""
    return Path(base).absolute() / dot_relative(relative)


def materialize(base: StrPath, relative: StrPath) -> Path:
    """Create the dot directory for `relative` under `base` (with missing ancestors) and return it.

    Idempotent: an existing directory is success. A file or other non-directory at the
    target or on the way to it raises (FileExistsError, NotADirectoryError), as do
    permission and disk errors.
    """
    path = store_path(base, relative)
    if path.is_dir():
        logger.debug(f"Store already present: {path}")
        return path
    path.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created store: {path}")
    return path

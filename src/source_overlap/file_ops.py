"""
File operations for Source Overlap.

Directory walking with skip rules and strict file reading.
"""

import os
from collections.abc import Collection, Generator
from pathlib import Path
from typing import Optional, Union

from .exceptions import FileAccessError
from .logging_config import get_logger
from .scanning.languages import SKIP_DIRS, SOURCE_EXTENSIONS, extension_of

logger = get_logger(__name__)


def should_skip_dir(name: str, skip_dirs: Collection[str] = SKIP_DIRS) -> bool:
    """True for hidden directories and build/dependency/bytecode caches."""
    return name.startswith(".") or name in skip_dirs


def is_source_file(
    path: Union[Path, str], extensions: Collection[str] = SOURCE_EXTENSIONS
) -> bool:
    """True when the file extension (no leading dot) is in ``extensions``."""
    return extension_of(path) in extensions


def walk_source_files(
    root_dir: Union[Path, str],
    extensions: Collection[str] = SOURCE_EXTENSIONS,
    skip_dirs: Collection[str] = SKIP_DIRS,
) -> Generator[Path, None, None]:
    """
    Yield regular files under ``root_dir`` whose extension is allowed.

    Directories are pruned with ``should_skip_dir`` before descending. Files
    are yielded in sorted order within each directory, and symlinked
    directories are not followed. A missing root yields nothing.

    Args:
        root_dir: Directory to walk
        extensions: Allowed extensions without the leading dot
        skip_dirs: Directory names never descended into

    Yields:
        Paths of matching files
    """
    root = Path(root_dir)
    if not root.is_dir():
        logger.debug(f"Not a directory, nothing to walk: {root}")
        return

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not should_skip_dir(d, skip_dirs))
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_source_file(path, extensions) and path.is_file():
                yield path


def read_source(filepath: Union[Path, str], encoding: str = "utf-8") -> str:
    """
    Read a file as text.

    Args:
        filepath: File to read
        encoding: Text encoding; undecodable bytes are an error

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read or decoded
    """
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def relative_posix(path: Path, root: Path, default: Optional[str] = None) -> str:
    """``path`` relative to ``root`` with forward slashes."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return default if default is not None else path.as_posix()

"""Asset directory copying."""

from __future__ import annotations

import logging
from pathlib import Path
from shutil import copy2, copytree
from typing import Iterable

logger = logging.getLogger(__name__)


def copy_directory(src: Path, dst: Path) -> None:
    """Copy a directory and all of its contents into ``dst``.

    Existing files under ``dst`` are overwritten; nothing is removed.

    Args:
        src: Directory to copy
        dst: Destination directory, created when missing
    """
    copytree(src, dst, dirs_exist_ok=True)


def sync_asset_dirs(source_root: Path, dest_root: Path, dirs: Iterable[str]) -> list[Path]:
    """Copy each named entry of ``source_root`` into ``dest_root``.

    Directories are copied recursively, plain files as single files.

    Args:
        source_root: Directory holding the asset subdirectories
        dest_root: Directory receiving them, created when missing
        dirs: Entry names to copy

    Returns:
        Destination paths of the entries that were copied
    """
    dest_root.mkdir(exist_ok=True)

    copied: list[Path] = []
    for name in dirs:
        src = source_root / name
        if not src.exists():
            logger.debug(f"Skipping missing asset directory: {src}")
            continue

        dst = dest_root / name
        if src.is_dir():
            copy_directory(src, dst)
        else:
            copy2(src, dst)
        logger.info(f"Assets at {dst} updated successfully")
        copied.append(dst)

    return copied

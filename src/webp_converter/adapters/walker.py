"""Recursive directory enumeration."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from webp_converter.errors import DirectoryAccessError

logger = logging.getLogger(__name__)


def _skip_unreadable(exc: OSError) -> None:
    logger.warning("skipping unreadable directory %s: %s", exc.filename, exc)


class DirectoryWalker:
    """Walk a directory tree, optionally following symbolic links."""

    def walk(self, root: Path, follow_symlinks: bool = False) -> Iterator[Path]:
        """Return a lazy iterator over every file below ``root``.

        Parameters
        ----------
        root : Path
            Directory to enumerate.
        follow_symlinks : bool, default=False
            Whether to descend into symlinked directories.

        Raises
        ------
        DirectoryAccessError
            If ``root`` cannot be opened. Raised eagerly, before iteration.
        """
        try:
            with os.scandir(root):
                pass
        except OSError as exc:
            raise DirectoryAccessError(f"Failed to open directory: {root}") from exc
        return self._iter_files(root, follow_symlinks)

    def _iter_files(self, root: Path, follow_symlinks: bool) -> Iterator[Path]:
        visited: set[tuple[int, int]] = set()
        for dirpath, dirnames, filenames in os.walk(
            root, followlinks=follow_symlinks, onerror=_skip_unreadable
        ):
            if follow_symlinks:
                try:
                    info = os.stat(dirpath)
                except OSError as exc:
                    _skip_unreadable(exc)
                    dirnames[:] = []
                    continue
                key = (info.st_dev, info.st_ino)
                if key in visited:
                    # symlink cycle
                    dirnames[:] = []
                    continue
                visited.add(key)
            dirnames.sort()
            for name in sorted(filenames):
                yield Path(dirpath) / name

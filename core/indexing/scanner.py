# Path: core/indexing/scanner.py
# Purpose: Walk a root folder and classify entries as images or directories.
# Layer: core/indexing.
# Details: Depth-first, name-sorted traversal so repeated runs enumerate in the same order.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from core.errors import MissingDirectory
from core.models.domain import NodeType

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".gif", ".jpeg", ".jpg", ".png", ".webp")


def is_image(path: Path | str) -> bool:
    """Return True when the final path segment carries a supported image extension."""

    name = Path(path).name
    if not name:
        return False
    return name.lower().endswith(SUPPORTED_EXTENSIONS)


class ImageScanner:
    """Scan a root directory for image files and subdirectories."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def iter_entries(self) -> Iterator[Tuple[Path, NodeType | None]]:
        """
        Yield ``(path, node_type)`` pairs, the root directory first.

        Plain files report ``NodeType.IMAGE`` only when they pass ``is_image``;
        every other non-directory entry reports ``None``.
        """

        if not self.root.is_dir():
            raise MissingDirectory(self.root)
        yield self.root, NodeType.DIRECTORY
        yield from self._walk(self.root)

    def scan_images(self) -> List[Path]:
        """Return every supported image under the root in enumeration order."""

        return [path for path, node_type in self.iter_entries() if node_type is NodeType.IMAGE]

    def scan_directories(self) -> List[Path]:
        """Return every directory under the root, root included."""

        return [path for path, node_type in self.iter_entries() if node_type is NodeType.DIRECTORY]

    def _walk(self, directory: Path) -> Iterable[Tuple[Path, NodeType | None]]:
        # One iterator per open directory; a subdirectory is fully walked before its next sibling.
        stack: List[Iterator[os.DirEntry]] = [iter(self._sorted_entries(directory))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                logger.debug("skipping unreadable entry %s: %s", path, exc)
                continue
            if is_dir:
                yield path, NodeType.DIRECTORY
                stack.append(iter(self._sorted_entries(path)))
            elif is_image(path):
                yield path, NodeType.IMAGE
            else:
                yield path, None

    @staticmethod
    def _sorted_entries(directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            return []

from __future__ import annotations

import logging
import threading

from ._disk import Disk
from ._node import DirNode, tree_from_description
from ._typing import NodeDescription

logger = logging.getLogger(__name__)


class DiskRegistry:
    """Named disks, each rebuilt from the image it was registered with.

    The registry only manages lifecycle; all file operations go through
    the :class:`Disk` returned by :meth:`open`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._images: dict[str, DirNode] = {}
        self._disks: dict[str, Disk] = {}

    def register(self, name: str, tree: DirNode | NodeDescription | None = None) -> Disk:
        image = tree if isinstance(tree, DirNode) else tree_from_description(tree)
        with self._lock:
            if name in self._images:
                raise ValueError(f"Disk already registered: {name!r}")
            self._images[name] = image
            disk = self._disks[name] = Disk(image)
        logger.debug("registered disk %r", name)
        return disk

    def unregister(self, name: str) -> None:
        with self._lock:
            self._require(name)
            del self._images[name]
            disk = self._disks.pop(name)
        disk.close()
        logger.debug("unregistered disk %r", name)

    def open(self, name: str) -> Disk:
        with self._lock:
            self._require(name)
            disk = self._disks[name]
        return disk.open()

    def reset(self, name: str) -> Disk:
        """Replace the named disk with a fresh, closed one built from its image."""
        with self._lock:
            self._require(name)
            old = self._disks[name]
            disk = self._disks[name] = Disk(self._images[name])
        old.close()
        logger.debug("reset disk %r", name)
        return disk

    def names(self) -> list[str]:
        with self._lock:
            return list(self._images)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._images

    def _require(self, name: str) -> None:
        if name not in self._images:
            raise KeyError(f"No such disk: {name!r}")

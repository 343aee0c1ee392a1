"""Async wrapper around Disk.

Every call is delegated to :func:`asyncio.to_thread`, matching the shape
of real async file-system APIs.  The operations themselves never block.
"""

from __future__ import annotations

import asyncio

from ._disk import Disk
from ._node import DirNode
from ._typing import NodeDescription


class AsyncDisk:
    """Thin async facade over :class:`Disk`."""

    def __init__(self, tree: DirNode | NodeDescription | Disk | None = None) -> None:
        self._sync = tree if isinstance(tree, Disk) else Disk(tree)

    @property
    def state(self) -> str:
        return self._sync.state

    async def open(self) -> AsyncDisk:
        await asyncio.to_thread(self._sync.open)
        return self

    async def close(self) -> None:
        await asyncio.to_thread(self._sync.close)

    async def __aenter__(self) -> AsyncDisk:
        return await self.open()

    async def __aexit__(self, *args) -> None:  # type: ignore[no-untyped-def]
        await self.close()

    def snapshot(self) -> DirNode:
        return self._sync.snapshot()

    async def create_file(self, path: str, contents: str, *, overwrite: bool = True) -> None:
        await asyncio.to_thread(self._sync.create_file, path, contents, overwrite=overwrite)

    async def read_file(self, path: str) -> str:
        return await asyncio.to_thread(self._sync.read_file, path)

    async def create_dir(
        self, path: str, *, ignore_if_exists: bool = False, parents: bool = True
    ) -> None:
        await asyncio.to_thread(
            self._sync.create_dir, path, ignore_if_exists=ignore_if_exists, parents=parents
        )

    async def read_dir(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._sync.read_dir, path)

    async def read_dir_recursive(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._sync.read_dir_recursive, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.exists, path)

    async def is_dir(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_dir, path)

    async def is_file(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.is_file, path)

    async def export_tree(self) -> NodeDescription:
        return await asyncio.to_thread(self._sync.export_tree)

    async def reset(self, tree: DirNode | NodeDescription | None = None) -> None:
        await asyncio.to_thread(self._sync.reset, tree)

    async def remove(self, path: str, *, force: bool = False) -> None:
        await asyncio.to_thread(self._sync.remove, path, force=force)

    async def remove_file(self, path: str, *, force: bool = False) -> None:
        await asyncio.to_thread(self._sync.remove_file, path, force=force)

    async def remove_dir(self, path: str, *, force: bool = False) -> None:
        await asyncio.to_thread(self._sync.remove_dir, path, force=force)

    async def move(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.move, src, dest, overwrite=overwrite)

    async def move_file(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.move_file, src, dest, overwrite=overwrite)

    async def move_dir(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.move_dir, src, dest, overwrite=overwrite)

    async def copy(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.copy, src, dest, overwrite=overwrite)

    async def copy_file(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.copy_file, src, dest, overwrite=overwrite)

    async def copy_dir(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        await asyncio.to_thread(self._sync.copy_dir, src, dest, overwrite=overwrite)

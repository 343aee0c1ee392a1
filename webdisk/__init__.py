from typing import TYPE_CHECKING

from ._disk import Disk
from ._exceptions import (
    DiskAlreadyExistsError,
    DiskError,
    DiskFileConflictError,
    DiskInvalidPathError,
    DiskIsADirectoryError,
    DiskNotADirectoryError,
    DiskNotAFileError,
    DiskPathNotFoundError,
    DiskSelfMoveError,
)
from ._node import DirNode, FileNode, Node, tree_from_description
from ._registry import DiskRegistry
from ._typing import NodeDescription

if TYPE_CHECKING:
    from ._async import AsyncDisk


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncDisk":
        from ._async import AsyncDisk

        globals()["AsyncDisk"] = AsyncDisk
        return AsyncDisk
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Disk",
    "DiskRegistry",
    "AsyncDisk",
    "DirNode",
    "FileNode",
    "Node",
    "NodeDescription",
    "tree_from_description",
    "DiskError",
    "DiskInvalidPathError",
    "DiskPathNotFoundError",
    "DiskNotADirectoryError",
    "DiskNotAFileError",
    "DiskIsADirectoryError",
    "DiskAlreadyExistsError",
    "DiskFileConflictError",
    "DiskSelfMoveError",
]
__version__ = "0.1.0"

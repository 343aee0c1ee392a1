from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ._exceptions import (
    DiskAlreadyExistsError,
    DiskFileConflictError,
    DiskInvalidPathError,
    DiskNotADirectoryError,
    DiskNotAFileError,
    DiskPathNotFoundError,
    DiskSelfMoveError,
)
from ._node import (
    DirNode,
    FileNode,
    Node,
    node_to_description,
    renamed,
    tree_from_description,
)
from ._path import (
    is_within,
    join_path,
    leaf_name,
    normalize_path,
    parent_path,
    segments,
    split_path,
    to_path,
)
from ._tree import (
    add_child,
    iter_paths,
    remove_child,
    resolve,
    resolve_dir,
    resolve_file,
    with_replaced_node,
)
from ._typing import NodeDescription

logger = logging.getLogger(__name__)

CLOSED = "CLOSED"
OPEN = "OPEN"


class Disk:
    """An in-memory disk holding one immutable tree.

    Every mutating call computes a new tree from the current one and swaps
    it in with a single assignment while holding ``_lock``.  Readers never
    lock: they see whichever complete tree was current when they started.
    A failing call raises before the swap, leaving the tree untouched.
    """

    def __init__(self, tree: DirNode | NodeDescription | None = None) -> None:
        self._lock = threading.RLock()
        self._state: str = CLOSED
        self._tree: DirNode = self._coerce_tree(tree)

    @staticmethod
    def _coerce_tree(tree: DirNode | NodeDescription | None) -> DirNode:
        if isinstance(tree, DirNode):
            return tree
        if tree is None or isinstance(tree, dict):
            return tree_from_description(tree)
        raise TypeError(
            f"Expected a DirNode or a tree description, got {type(tree).__name__}."
        )

    # -- lifecycle --

    @property
    def state(self) -> str:
        return self._state

    def open(self) -> Disk:
        self._state = OPEN
        return self

    def close(self) -> None:
        self._state = CLOSED

    def __enter__(self) -> Disk:
        return self.open()

    def __exit__(self, *args) -> None:  # type: ignore[no-untyped-def]
        self.close()

    def reset(self, tree: DirNode | NodeDescription | None = None) -> None:
        new_tree = self._coerce_tree(tree)
        with self._lock:
            self._tree = new_tree
        logger.debug("disk reset")

    # -- diagnostics --

    def snapshot(self) -> DirNode:
        """Return the current root. Nodes are immutable, so this is a snapshot."""
        return self._tree

    def export_tree(self) -> NodeDescription:
        return node_to_description(self._tree)

    def _commit(self, action: str, build: Callable[[DirNode], DirNode]) -> None:
        with self._lock:
            new_tree = build(self._tree)
            self._tree = new_tree
        logger.debug("%s", action)

    # -- files --

    def create_file(self, path: str, contents: str, *, overwrite: bool = True) -> None:
        if not isinstance(contents, str):
            raise TypeError(
                f"File contents must be str, got {type(contents).__name__}."
            )
        name = leaf_name(path)
        parent = parent_path(path)

        def build(tree: DirNode) -> DirNode:
            directory = resolve_dir(tree, parent)
            existing = directory.child(name)
            if isinstance(existing, DirNode):
                raise DiskNotAFileError(path)
            if existing is not None and not overwrite:
                raise DiskAlreadyExistsError(path)
            return with_replaced_node(tree, parent, add_child(FileNode(name, contents)))

        self._commit(f"create_file {path}", build)

    def read_file(self, path: str) -> str:
        if normalize_path(path) == "/":
            raise DiskNotAFileError(path)
        leaf_name(path)
        return resolve_file(self._tree, path).contents

    # -- directories --

    def create_dir(
        self,
        path: str,
        *,
        ignore_if_exists: bool = False,
        parents: bool = True,
    ) -> None:
        parts = segments(path)

        def build(tree: DirNode) -> DirNode:
            existing = resolve(tree, to_path(parts))
            if isinstance(existing, FileNode):
                raise DiskFileConflictError(path)
            if existing is not None:
                if ignore_if_exists:
                    return tree
                raise DiskAlreadyExistsError(path)
            if not parents:
                resolve_dir(tree, parent_path(path))
            # Walk down from the root, adding each missing directory.
            for depth in range(1, len(parts) + 1):
                current = to_path(parts[:depth])
                node = resolve(tree, current)
                if node is None:
                    tree = with_replaced_node(
                        tree, to_path(parts[: depth - 1]), add_child(DirNode(parts[depth - 1]))
                    )
                elif not isinstance(node, DirNode):
                    raise DiskNotADirectoryError(current)
            return tree

        self._commit(f"create_dir {path}", build)

    def read_dir(self, path: str) -> list[str]:
        directory = resolve_dir(self._tree, path)
        base = normalize_path(path)
        return [join_path(base, child.name) for child in directory.children]

    def read_dir_recursive(self, path: str) -> list[str]:
        directory = resolve_dir(self._tree, path)
        return list(iter_paths(directory, normalize_path(path)))

    # -- queries --

    def exists(self, path: str) -> bool:
        try:
            return resolve(self._tree, path) is not None
        except (DiskInvalidPathError, DiskNotADirectoryError):
            return False

    def is_dir(self, path: str) -> bool:
        try:
            return isinstance(resolve(self._tree, path), DirNode)
        except (DiskInvalidPathError, DiskNotADirectoryError):
            return False

    def is_file(self, path: str) -> bool:
        try:
            return isinstance(resolve(self._tree, path), FileNode)
        except (DiskInvalidPathError, DiskNotADirectoryError):
            return False

    # -- removal --

    def remove(self, path: str, *, force: bool = False) -> None:
        self._remove(path, force, None)

    def remove_file(self, path: str, *, force: bool = False) -> None:
        self._remove(path, force, FileNode)

    def remove_dir(self, path: str, *, force: bool = False) -> None:
        self._remove(path, force, DirNode)

    def _remove(self, path: str, force: bool, kind: type | None) -> None:
        parent = parent_path(path)
        name = leaf_name(path, directory=kind is not FileNode)

        def build(tree: DirNode) -> DirNode:
            node = resolve(tree, path)
            if node is None:
                if force:
                    return tree
                raise DiskPathNotFoundError(path)
            _check_kind(node, kind, path)
            return with_replaced_node(tree, parent, remove_child(name))

        self._commit(f"remove {path}", build)

    # -- move / copy --

    def move(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, None, detach=True)

    def move_file(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, FileNode, detach=True)

    def move_dir(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, DirNode, detach=True)

    def copy(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, None, detach=False)

    def copy_file(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, FileNode, detach=False)

    def copy_dir(self, src: str, dest: str, *, overwrite: bool = False) -> None:
        self._transfer(src, dest, overwrite, DirNode, detach=False)

    def _transfer(
        self,
        src: str,
        dest: str,
        overwrite: bool,
        kind: type | None,
        detach: bool,
    ) -> None:
        action = "move" if detach else "copy"
        nsrc = normalize_path(src)
        dest_parts, dest_must_be_dir = split_path(dest)
        ndest = to_path(dest_parts)
        if nsrc == "/":
            raise DiskInvalidPathError(src, f"cannot {action} the root directory")
        if is_within(ndest, nsrc):
            raise DiskSelfMoveError(src, dest, action)

        def build(tree: DirNode) -> DirNode:
            source = resolve(tree, src)
            if source is None:
                raise DiskPathNotFoundError(src)
            _check_kind(source, kind, src)

            target = resolve(tree, dest)
            if isinstance(target, DirNode):
                target_dir, target_name = ndest, source.name
            elif target is None and dest_must_be_dir:
                raise DiskPathNotFoundError(dest)
            else:
                target_dir, target_name = parent_path(ndest), leaf_name(ndest)
                resolve_dir(tree, target_dir)
            target_path = join_path(target_dir, target_name)

            occupant = resolve(tree, target_path)
            if occupant is not None:
                if target_path == nsrc:
                    raise DiskSelfMoveError(src, dest, action)
                if not overwrite:
                    raise DiskAlreadyExistsError(target_path)

            if detach:
                tree = with_replaced_node(tree, parent_path(nsrc), remove_child(source.name))
            return with_replaced_node(tree, target_dir, add_child(renamed(source, target_name)))

        self._commit(f"{action} {src} -> {dest}", build)


def _check_kind(node: Node, kind: type | None, path: str) -> None:
    if kind is FileNode and not isinstance(node, FileNode):
        raise DiskNotAFileError(path)
    if kind is DirNode and not isinstance(node, DirNode):
        raise DiskNotADirectoryError(path)

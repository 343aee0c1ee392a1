"""Path resolution and copy-on-write rebuilding over immutable trees.

Everything here is a free function of ``(tree, path)``; nothing holds
state.  A mutation rebuilds only the directories on the path from the
root to the changed directory, and every other subtree is shared with
the previous version.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from ._exceptions import (
    DiskNotADirectoryError,
    DiskNotAFileError,
    DiskPathNotFoundError,
)
from ._node import DirNode, FileNode, Node
from ._path import join_path, split_path, to_path

Transform = Callable[[DirNode], tuple[Node, ...]]

# ---------------------------------------------------------------------------
#  Navigator
# ---------------------------------------------------------------------------


def resolve(tree: DirNode, path: str) -> Node | None:
    """Return the node at *path*, or ``None`` if some segment is missing.

    Walking through a file raises :class:`DiskNotADirectoryError` naming
    the offending prefix, as does a trailing ``/`` that lands on a file.
    """
    parts, must_be_dir = split_path(path)
    current: Node = tree
    for depth, part in enumerate(parts):
        if not isinstance(current, DirNode):
            raise DiskNotADirectoryError(to_path(parts[:depth]))
        child = current.child(part)
        if child is None:
            return None
        current = child
    if must_be_dir and not isinstance(current, DirNode):
        raise DiskNotADirectoryError(path)
    return current


def resolve_dir(tree: DirNode, path: str) -> DirNode:
    node = resolve(tree, path)
    if node is None:
        raise DiskPathNotFoundError(path)
    if not isinstance(node, DirNode):
        raise DiskNotADirectoryError(path)
    return node


def resolve_file(tree: DirNode, path: str) -> FileNode:
    node = resolve(tree, path)
    if node is None:
        raise DiskPathNotFoundError(path)
    if not isinstance(node, FileNode):
        raise DiskNotAFileError(path)
    return node


def iter_paths(directory: DirNode, path: str) -> Iterator[str]:
    """Yield the paths of every descendant of *directory*, pre-order."""
    for child in directory.children:
        child_path = join_path(path, child.name)
        yield child_path
        if isinstance(child, DirNode):
            yield from iter_paths(child, child_path)


# ---------------------------------------------------------------------------
#  Mutator
# ---------------------------------------------------------------------------


def with_replaced_node(tree: DirNode, dir_path: str, transform: Transform) -> DirNode:
    """Return a new tree where the directory at *dir_path* gets new children.

    ``transform`` receives that directory and returns its replacement
    children.  Ancestors are rebuilt; siblings are reused as-is.
    """
    parts, _ = split_path(dir_path)
    return _rebuild(tree, parts, 0, transform)


def _rebuild(node: DirNode, parts: list[str], depth: int, transform: Transform) -> DirNode:
    if depth == len(parts):
        return node.with_children(transform(node))
    index = node.index(parts[depth])
    if index < 0:
        raise DiskPathNotFoundError(to_path(parts[: depth + 1]))
    child = node.children[index]
    if not isinstance(child, DirNode):
        raise DiskNotADirectoryError(to_path(parts[: depth + 1]))
    children = list(node.children)
    children[index] = _rebuild(child, parts, depth + 1, transform)
    return node.with_children(tuple(children))


def add_child(node: Node) -> Transform:
    """Transform that inserts *node*, replacing a same-named child in place."""
    def transform(directory: DirNode) -> tuple[Node, ...]:
        index = directory.index(node.name)
        if index < 0:
            return directory.children + (node,)
        children = list(directory.children)
        children[index] = node
        return tuple(children)
    return transform


def remove_child(name: str) -> Transform:
    def transform(directory: DirNode) -> tuple[Node, ...]:
        return tuple(c for c in directory.children if c.name != name)
    return transform

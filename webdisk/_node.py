from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from ._typing import NodeDescription

# ---------------------------------------------------------------------------
#  Node Model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileNode:
    name: str
    contents: str = ""

    kind: ClassVar[str] = "file"


@dataclass(frozen=True, slots=True)
class DirNode:
    name: str
    children: tuple[Node, ...] = ()

    kind: ClassVar[str] = "dir"

    def child(self, name: str) -> Node | None:
        for node in self.children:
            if node.name == name:
                return node
        return None

    def index(self, name: str) -> int:
        for i, node in enumerate(self.children):
            if node.name == name:
                return i
        return -1

    def with_children(self, children: tuple[Node, ...]) -> DirNode:
        return DirNode(self.name, tuple(children))


Node = FileNode | DirNode

ROOT_NAME = "/"


def is_dir(node: Node | None) -> bool:
    return isinstance(node, DirNode)


def is_file(node: Node | None) -> bool:
    return isinstance(node, FileNode)


def renamed(node: Node, name: str) -> Node:
    if node.name == name:
        return node
    return replace(node, name=name)


# ---------------------------------------------------------------------------
#  Nested descriptions
# ---------------------------------------------------------------------------


def _check_name(name: object) -> str:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Invalid node name: {name!r}.")
    if "/" in name:
        raise ValueError(f"Node name must not contain '/': {name!r}.")
    if name in (".", ".."):
        raise ValueError(f"Reserved node name: {name!r}.")
    return name


def _build(description: NodeDescription, name: str) -> Node:
    contents = description["contents"]
    if isinstance(contents, str):
        return FileNode(name, contents)
    if not isinstance(contents, (list, tuple)):
        raise TypeError(
            f"Contents of {name!r} must be a str or a list, "
            f"got {type(contents).__name__}."
        )
    seen: set[str] = set()
    children: list[Node] = []
    for child in contents:
        child_name = _check_name(child.get("name"))
        if child_name in seen:
            raise ValueError(f"Duplicate name {child_name!r} in directory {name!r}.")
        seen.add(child_name)
        children.append(_build(child, child_name))
    return DirNode(name, tuple(children))


def tree_from_description(description: NodeDescription | None) -> DirNode:
    """Build a root directory from a nested ``{name, contents}`` description.

    The root's own name is ignored.  An empty tree is returned for ``None``.
    """
    if description is None:
        return DirNode(ROOT_NAME)
    root = _build(description, ROOT_NAME)
    if not isinstance(root, DirNode):
        raise TypeError("The root description must be a directory.")
    return root


def node_to_description(node: Node) -> NodeDescription:
    if isinstance(node, FileNode):
        return NodeDescription(name=node.name, contents=node.contents)
    return NodeDescription(
        name=node.name,
        contents=[node_to_description(child) for child in node.children],
    )

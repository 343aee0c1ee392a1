from __future__ import annotations

from typing import TypedDict


class NodeDescription(TypedDict):
    """Nested tree description: string contents for a file, a list for a directory."""
    name: str
    contents: str | list[NodeDescription]

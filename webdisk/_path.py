from ._exceptions import DiskInvalidPathError


def split_path(path: str) -> tuple[list[str], bool]:
    """Split an absolute path into its segments.

    Returns ``(segments, must_be_dir)``, where ``must_be_dir`` records a
    trailing ``/``.  Repeated slashes collapse, ``.`` is dropped and ``..``
    pops a segment.  Relative paths and traversal above the root raise
    :class:`DiskInvalidPathError`.
    """
    if not isinstance(path, str):
        raise DiskInvalidPathError(path, "expected a string")
    if not path.startswith("/"):
        raise DiskInvalidPathError(path, "must be absolute")

    must_be_dir = len(path) > 1 and path.endswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if not parts:
                raise DiskInvalidPathError(path, "traverses above the root")
            parts.pop()
        else:
            parts.append(part)
    return parts, must_be_dir


def segments(path: str) -> list[str]:
    return split_path(path)[0]


def to_path(parts: list[str]) -> str:
    return "/" + "/".join(parts)


def normalize_path(path: str) -> str:
    return to_path(segments(path))


def join_path(parent: str, name: str) -> str:
    return parent.rstrip("/") + "/" + name


def parent_path(path: str) -> str:
    parts = segments(path)
    if not parts:
        raise DiskInvalidPathError(path, "the root has no parent")
    return to_path(parts[:-1])


def leaf_name(path: str, directory: bool = False) -> str:
    """Return the last segment of *path*.

    A trailing ``/`` marks a directory, so it is rejected unless
    *directory* is true.
    """
    parts, must_be_dir = split_path(path)
    if not parts:
        raise DiskInvalidPathError(path, "the root has no name")
    if must_be_dir and not directory:
        raise DiskInvalidPathError(path, "a file path cannot end in '/'")
    return parts[-1]


def is_within(path: str, ancestor: str) -> bool:
    """True if *path* equals *ancestor* or lies below it, segment by segment."""
    parts = segments(path)
    prefix = segments(ancestor)
    return parts[: len(prefix)] == prefix

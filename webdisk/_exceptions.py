class DiskError(OSError):
    """Base class for all disk errors. Subclass of OSError."""
    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class DiskInvalidPathError(DiskError, ValueError):
    """Raised for a malformed path, or a directory path given to a file operation."""
    def __init__(self, path: object, reason: str | None = None) -> None:
        message = f"Invalid path {path}."
        if reason:
            message = f"Invalid path {path}: {reason}."
        super().__init__(message, path if isinstance(path, str) else None)


class DiskPathNotFoundError(DiskError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"The path {path} does not exist.", path)


class DiskNotADirectoryError(DiskError, NotADirectoryError):
    def __init__(self, path: str) -> None:
        super().__init__(f"The path {path} is not a directory.", path)


class DiskNotAFileError(DiskError, IsADirectoryError):
    """Raised when a file operation resolves to a directory."""
    def __init__(self, path: str) -> None:
        super().__init__(f"The path {path} is a directory.", path)


DiskIsADirectoryError = DiskNotAFileError


class DiskAlreadyExistsError(DiskError, FileExistsError):
    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"The path {path} already exists.", path)


class DiskFileConflictError(DiskAlreadyExistsError):
    """Raised when a directory is requested where a file already exists."""
    def __init__(self, path: str) -> None:
        super().__init__(path, f"The path {path} is already a file.")


class DiskSelfMoveError(DiskError, ValueError):
    """Raised when the destination is the source or lies inside it."""
    def __init__(self, src: str, dest: str, action: str = "move") -> None:
        self.dest = dest
        super().__init__(f"Cannot {action} path {src} into itself.", src)

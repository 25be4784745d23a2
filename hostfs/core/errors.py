"""Base exception classes for hostfs

These never leave the public API: the filesystem boundary converts them
into failed Outcomes.
"""

from typing import Any, Dict, Optional

from .outcome import ErrorKind, Outcome


class HostfsError(Exception):
    """Base exception for all hostfs errors"""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def outcome(self) -> Outcome:
        return Outcome.failure(self.message, kind=self.kind)


class FilesystemError(HostfsError):
    """Raised when an OS-level filesystem call fails"""

    kind = ErrorKind.OS

    def __init__(
        self,
        message: str,
        path: str = "",
        kind: Optional[ErrorKind] = None
    ):
        super().__init__(message, {"path": path})
        self.path = path
        if kind is not None:
            self.kind = kind


class ShortReadError(FilesystemError):
    """Raised when fewer bytes were read than the file length"""

    kind = ErrorKind.PARTIAL_IO

    def __init__(self, path: str, expected: int, actual: int):
        super().__init__("Could not read file", path)
        self.details.update({"expected": expected, "actual": actual})


class ShortWriteError(FilesystemError):
    """Raised when a write did not accept the full content"""

    kind = ErrorKind.PARTIAL_IO

    def __init__(self, path: str, expected: int, actual: int):
        super().__init__("Failed to write contents", path)
        self.details.update({"expected": expected, "actual": actual})


class CredentialParseError(HostfsError):
    """Raised when a tomcat-users document cannot be parsed"""

    kind = ErrorKind.STRUCTURAL


class MissingNodeError(CredentialParseError):
    """Raised when an expected XML node or attribute is absent"""

    def __init__(self, node: str):
        self.node = node
        super().__init__(f"No such node ({node})", {"node": node})

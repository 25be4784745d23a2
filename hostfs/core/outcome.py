"""Status envelope returned by every hostfs operation"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

OK_MESSAGE = "OK"


class ErrorKind(str, Enum):
    """Failure taxonomy carried on a failed Outcome"""
    INPUT = "input"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    PARTIAL_IO = "partial_io"
    STRUCTURAL = "structural"
    OS = "os"


class PathPresence(Enum):
    """Tri-state result of an existence check.

    The value is the message token exposed on the Outcome.
    """
    EMPTY_PATH = "-1"
    NOT_FOUND = "0"
    EXISTS = "1"

    @property
    def token(self) -> str:
        return self.value


@dataclass(frozen=True)
class Outcome:
    """Result of a single call: a numeric code plus a message.

    code 0 means success. Callers should branch on ``ok()`` and only read
    ``message`` for diagnostics, except for existence checks where the
    message is a "-1"/"0"/"1" token.
    """
    code: int
    message: str
    kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, message: str = OK_MESSAGE) -> "Outcome":
        return cls(code=0, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        kind: Optional[ErrorKind] = None,
        code: int = 1
    ) -> "Outcome":
        if code == 0:
            raise ValueError("failure code must be non-zero")
        return cls(code=code, message=message, kind=kind)

    @classmethod
    def from_presence(cls, presence: PathPresence) -> "Outcome":
        """Map the tri-state existence result onto its message token"""
        if presence is PathPresence.EXISTS:
            return cls.success(presence.token)
        kind = ErrorKind.INPUT if presence is PathPresence.EMPTY_PATH else ErrorKind.NOT_FOUND
        return cls.failure(presence.token, kind=kind)

    def ok(self) -> bool:
        return self.code == 0

    def __bool__(self) -> bool:
        return self.ok()

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

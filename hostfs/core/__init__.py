"""Core types shared by the hostfs components"""
from .outcome import OK_MESSAGE, ErrorKind, Outcome, PathPresence
from .errors import (
    HostfsError,
    FilesystemError,
    ShortReadError,
    ShortWriteError,
    CredentialParseError,
    MissingNodeError
)

__all__ = [
    'OK_MESSAGE',
    'ErrorKind',
    'Outcome',
    'PathPresence',
    'HostfsError',
    'FilesystemError',
    'ShortReadError',
    'ShortWriteError',
    'CredentialParseError',
    'MissingNodeError'
]

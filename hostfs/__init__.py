"""Status-coded filesystem primitives and tomcat-users credential parsing."""
from hostfs.core.outcome import ErrorKind, Outcome, PathPresence
from hostfs.core.credentials import Credential
from hostfs.api import (
    path_exists,
    is_readable,
    is_writable,
    is_directory,
    get_directory,
    write_text_file,
    read_file,
    read_bytes,
    list_files_in_directory,
    parse_credentials,
    parse_credentials_from_file
)

__version__ = "0.1.0"

__all__ = [
    'ErrorKind',
    'Outcome',
    'PathPresence',
    'Credential',
    'path_exists',
    'is_readable',
    'is_writable',
    'is_directory',
    'get_directory',
    'write_text_file',
    'read_file',
    'read_bytes',
    'list_files_in_directory',
    'parse_credentials',
    'parse_credentials_from_file'
]

"""Module-level operations bound to default component instances.

Every function returns an Outcome, or an ``(Outcome, value)`` pair for
operations that produce output. None of them raise.
"""
from hostfs.core.credentials import CredentialExtractor
from hostfs.infrastructure.filesystem import (
    DirectoryLister,
    FileReader,
    FileWriter,
    PathChecker,
)

_path_checker = PathChecker()
_file_reader = FileReader(_path_checker)
_file_writer = FileWriter()
_directory_lister = DirectoryLister(_path_checker)
_credential_extractor = CredentialExtractor(_file_reader)

path_exists = _path_checker.path_exists
is_readable = _path_checker.is_readable
is_writable = _path_checker.is_writable
is_directory = _path_checker.is_directory
get_directory = _path_checker.get_directory

write_text_file = _file_writer.write_text_file
read_file = _file_reader.read_file
read_bytes = _file_reader.read_bytes

list_files_in_directory = _directory_lister.list_files_in_directory

parse_credentials = _credential_extractor.parse_credentials
parse_credentials_from_file = _credential_extractor.parse_credentials_from_file

__all__ = [
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

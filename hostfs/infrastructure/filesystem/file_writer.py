"""File writing operations module."""
import os
from typing import Optional

from hostfs.core.config import Settings, settings as default_settings
from hostfs.core.errors import FilesystemError, ShortWriteError
from hostfs.core.outcome import ErrorKind, Outcome
from hostfs.infrastructure.logging import get_logger

from .boundary import outcome_boundary
from .path_checker import PathLike

logger = get_logger(__name__)

APPEND_FLAGS = os.O_CREAT | os.O_APPEND | os.O_WRONLY


class FileWriter:
    """Handles file writing operations only."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    @outcome_boundary()
    def write_text_file(
        self,
        path: PathLike,
        content: str,
        permissions: Optional[int] = None,
        force_permissions: bool = True
    ) -> Outcome:
        """
        Append text to a file, creating it with the given mode

        Args:
            path: File to create or append to
            content: Text to write, encoded with the configured codec
            permissions: POSIX mode; defaults to ``settings.default_file_mode``
            force_permissions: Accepted but inert, the mode is always
                re-applied after opening

        Returns:
            "OK" on success, otherwise a failure naming the step that failed
        """
        path = os.fspath(path)
        if permissions is None:
            permissions = self.settings.default_file_mode
        data = content.encode(self.settings.text_encoding, self.settings.text_errors)

        try:
            fd = os.open(path, APPEND_FLAGS, permissions)
        except OSError as e:
            logger.debug("file_create_failed", path=path, reason=str(e))
            raise FilesystemError("Could not create file", path, kind=_kind_for(e))

        try:
            # The file may have existed before with a looser mode
            try:
                os.chmod(path, permissions)
            except OSError as e:
                logger.debug("file_chmod_failed", path=path, mode=oct(permissions), reason=str(e))
                raise FilesystemError("Failed to change permissions", path, kind=_kind_for(e))

            written = os.write(fd, data)
            if written != len(data):
                raise ShortWriteError(path, len(data), written)
        finally:
            os.close(fd)

        logger.debug("file_written", path=path, size=len(data), mode=oct(permissions))
        return Outcome.success()


def _kind_for(error: OSError) -> ErrorKind:
    if isinstance(error, PermissionError):
        return ErrorKind.PERMISSION
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    return ErrorKind.OS

"""File reading operations module."""
import io
import os
from typing import Optional, Tuple

from hostfs.core.config import Settings, settings as default_settings
from hostfs.core.errors import FilesystemError, ShortReadError
from hostfs.core.outcome import Outcome
from hostfs.infrastructure.logging import get_logger

from .boundary import outcome_boundary
from .path_checker import PathChecker, PathLike

logger = get_logger(__name__)


class FileReader:
    """Handles file reading operations only."""

    def __init__(
        self,
        path_checker: Optional[PathChecker] = None,
        settings: Optional[Settings] = None
    ):
        self.path_checker = path_checker or PathChecker()
        self.settings = settings or default_settings

    @outcome_boundary(output=str)
    def read_file(self, path: PathLike) -> Tuple[Outcome, str]:
        """Read an entire file as text decoded with the configured codec"""
        outcome, data = self.read_bytes(path)
        if not outcome.ok():
            return outcome, ""
        return outcome, data.decode(self.settings.text_encoding, self.settings.text_errors)

    @outcome_boundary(output=bytes)
    def read_bytes(self, path: PathLike) -> Tuple[Outcome, bytes]:
        """
        Read an entire file

        Args:
            path: File to read

        Returns:
            (Outcome, content). A missing or empty path propagates the
            existence check's Outcome unchanged.
        """
        path = os.fspath(path)
        exists = self.path_checker.path_exists(path)
        if not exists.ok():
            return exists, b""

        try:
            handle = open(path, "rb")
        except OSError as e:
            logger.debug("file_open_failed", path=path, reason=str(e))
            raise FilesystemError("Could not open file for reading", path)

        with handle:
            length = handle.seek(0, io.SEEK_END)
            handle.seek(0, io.SEEK_SET)

            buffer = bytearray(length)
            try:
                try:
                    read = handle.readinto(buffer)
                except OSError as e:
                    # e.g. EISDIR on a directory
                    logger.debug("file_read_failed", path=path, reason=str(e))
                    raise ShortReadError(path, length, 0)
                if read is None or read != length:
                    raise ShortReadError(path, length, read or 0)
                content = bytes(buffer)
            finally:
                del buffer

        return Outcome.success(), content

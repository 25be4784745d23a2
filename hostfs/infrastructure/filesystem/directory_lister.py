"""Directory listing module."""
import os
from typing import List, Optional, Tuple

from hostfs.core.outcome import ErrorKind, Outcome
from hostfs.infrastructure.logging import get_logger

from .boundary import outcome_boundary
from .path_checker import PathChecker, PathLike

logger = get_logger(__name__)


class DirectoryLister:
    """Handles non-recursive directory enumeration only."""

    def __init__(self, path_checker: Optional[PathChecker] = None):
        self.path_checker = path_checker or PathChecker()

    @outcome_boundary(output=list)
    def list_files_in_directory(self, path: PathLike) -> Tuple[Outcome, List[str]]:
        """
        List the direct children of a directory

        Returns:
            (Outcome, full paths of every entry) in the order the OS yields
            them. Nothing is returned if iteration fails part way.
        """
        path = os.fspath(path)
        if not self.path_checker.path_exists(path).ok():
            return Outcome.failure("Directory not found", kind=ErrorKind.NOT_FOUND), []

        if not self.path_checker.is_directory(path).ok():
            return Outcome.failure("Supplied path is not a directory"), []

        results: List[str] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    results.append(entry.path)
        except OSError as e:
            logger.debug("directory_iteration_failed", path=path, reason=str(e))
            return Outcome.failure(str(e), kind=ErrorKind.OS), []

        return Outcome.success(), results

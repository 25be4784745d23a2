"""Path existence and permission checks"""
import os
from typing import Tuple, Union

from hostfs.core.outcome import ErrorKind, Outcome, PathPresence

from .boundary import outcome_boundary

PathLike = Union[str, os.PathLike]


class PathChecker:
    """Answers existence, permission and directory questions about a path"""

    def _presence(self, path: PathLike) -> PathPresence:
        path = os.fspath(path)
        if not path:
            return PathPresence.EMPTY_PATH
        if not os.path.exists(path):
            return PathPresence.NOT_FOUND
        return PathPresence.EXISTS

    @outcome_boundary()
    def path_exists(self, path: PathLike) -> Outcome:
        """
        Tri-state existence check

        Returns:
            Failure "-1" for an empty path, failure "0" when absent,
            success "1" when present
        """
        return Outcome.from_presence(self._presence(path))

    @outcome_boundary()
    def is_readable(self, path: PathLike) -> Outcome:
        return self._check_access(path, os.R_OK, "Path is not readable.")

    @outcome_boundary()
    def is_writable(self, path: PathLike) -> Outcome:
        return self._check_access(path, os.W_OK, "Path is not writable.")

    @outcome_boundary()
    def is_directory(self, path: PathLike) -> Outcome:
        if os.path.isdir(os.fspath(path)):
            return Outcome.success()
        return Outcome.failure("Path is not a directory")

    @outcome_boundary(output=str)
    def get_directory(self, path: PathLike) -> Tuple[Outcome, str]:
        """
        Resolve the directory a path lives in

        Returns:
            (success, parent of path) when path is not a directory;
            (failure, path unchanged) when it is. The path is returned on
            failure too, and callers rely on that.
        """
        path = os.fspath(path)
        if not self.is_directory(path).ok():
            return Outcome.success(), os.path.dirname(path)
        return Outcome.failure("Path is a directory"), path

    def _check_access(self, path: PathLike, mode: int, denied: str) -> Outcome:
        exists = self.path_exists(path)
        if not exists.ok():
            return exists

        if os.access(os.fspath(path), mode):
            return Outcome.success()
        return Outcome.failure(denied, kind=ErrorKind.PERMISSION)

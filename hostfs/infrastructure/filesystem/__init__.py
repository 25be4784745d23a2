"""Filesystem infrastructure module."""
from .boundary import outcome_boundary, to_outcome
from .path_checker import PathChecker
from .file_reader import FileReader
from .file_writer import FileWriter
from .directory_lister import DirectoryLister

__all__ = [
    'outcome_boundary',
    'to_outcome',
    'PathChecker',
    'FileReader',
    'FileWriter',
    'DirectoryLister'
]

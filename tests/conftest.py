"""Pytest configuration and fixtures"""

from pathlib import Path

import pytest

from hostfs.core.config import Settings
from hostfs.core.credentials import CredentialExtractor
from hostfs.infrastructure.filesystem import (
    DirectoryLister,
    FileReader,
    FileWriter,
    PathChecker,
)

TOMCAT_USERS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<tomcat-users>
  <user username="alice" password="secret1"/>
  <user username="bob"   password="secret2"/>
</tomcat-users>
"""


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def path_checker() -> PathChecker:
    return PathChecker()


@pytest.fixture
def file_reader(path_checker: PathChecker, test_settings: Settings) -> FileReader:
    return FileReader(path_checker, test_settings)


@pytest.fixture
def file_writer(test_settings: Settings) -> FileWriter:
    return FileWriter(test_settings)


@pytest.fixture
def directory_lister(path_checker: PathChecker) -> DirectoryLister:
    return DirectoryLister(path_checker)


@pytest.fixture
def credential_extractor(file_reader: FileReader) -> CredentialExtractor:
    return CredentialExtractor(file_reader)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small existing text file"""
    path = tmp_path / "sample.txt"
    path.write_text("hello\n")
    return path


@pytest.fixture
def tomcat_users_file(tmp_path: Path, tomcat_users_xml: str) -> Path:
    """A tomcat-users.xml with two users"""
    path = tmp_path / "tomcat-users.xml"
    path.write_text(tomcat_users_xml)
    return path


@pytest.fixture
def tomcat_users_xml() -> str:
    return TOMCAT_USERS_XML

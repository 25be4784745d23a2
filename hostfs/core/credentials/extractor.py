"""Credential extraction from tomcat-users XML"""
from typing import Optional, Tuple, Union
from xml.etree import ElementTree

from hostfs.core.errors import CredentialParseError, MissingNodeError
from hostfs.core.outcome import Outcome
from hostfs.infrastructure.filesystem import FileReader, outcome_boundary
from hostfs.infrastructure.filesystem.path_checker import PathLike
from hostfs.infrastructure.logging import get_logger

from .credential_types import (
    PASSWORD_ATTR,
    TOMCAT_USERS_NODE,
    USER_NODE,
    USERNAME_ATTR,
    Credential,
    CredentialList,
)

logger = get_logger(__name__)


class CredentialExtractor:
    """Reads username/password pairs out of a tomcat-users document"""

    def __init__(self, file_reader: Optional[FileReader] = None):
        self.file_reader = file_reader or FileReader()

    @outcome_boundary(output=list)
    def parse_credentials(self, xml_content: Union[str, bytes]) -> Tuple[Outcome, CredentialList]:
        """
        Parse tomcat-users XML content

        Args:
            xml_content: Whole XML document. Bytes are decoded as the
                document's own XML declaration says.

        Returns:
            (Outcome, credentials in document order). Any parse error or
            missing attribute fails the whole call with no credentials.
        """
        return Outcome.success(), self._extract(self._parse(xml_content))

    @outcome_boundary(output=list)
    def parse_credentials_from_file(self, path: PathLike) -> Tuple[Outcome, CredentialList]:
        outcome, content = self.file_reader.read_bytes(path)
        if not outcome.ok():
            return outcome, []
        return self.parse_credentials(content)

    def _parse(self, xml_content: Union[str, bytes]) -> ElementTree.Element:
        try:
            return ElementTree.fromstring(xml_content)
        except ElementTree.ParseError as e:
            raise CredentialParseError(str(e), {"position": e.position})
        except UnicodeError as e:
            raise CredentialParseError(str(e))

    def _extract(self, root: ElementTree.Element) -> CredentialList:
        if _local_name(root.tag) != TOMCAT_USERS_NODE:
            raise MissingNodeError(TOMCAT_USERS_NODE)

        credentials: CredentialList = []
        for index, element in enumerate(root):
            if _local_name(element.tag) != USER_NODE:
                continue
            credentials.append(Credential(
                username=_attribute(element, USERNAME_ATTR, index),
                password=_attribute(element, PASSWORD_ATTR, index),
            ))

        logger.debug("credentials_parsed", count=len(credentials))
        return credentials


def _local_name(tag: str) -> str:
    # "{namespace}name" -> "name"
    return tag.rpartition("}")[2]


def _attribute(element: ElementTree.Element, name: str, index: int) -> str:
    value = element.get(name)
    if value is None:
        logger.debug("credential_attribute_missing", attribute=name, element_index=index)
        raise MissingNodeError(f"<xmlattr>.{name}")
    return value

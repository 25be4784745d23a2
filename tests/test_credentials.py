"""Tests for tomcat-users credential extraction"""

import pytest

from hostfs.core.credentials import Credential
from hostfs.core.outcome import ErrorKind


class TestParseCredentials:
    """Test parsing credentials from XML content"""

    def test_two_users_in_document_order(self, credential_extractor, tomcat_users_xml):
        """Test two users in document order"""
        outcome, credentials = credential_extractor.parse_credentials(tomcat_users_xml)
        assert outcome.ok()
        assert outcome.message == "OK"
        assert credentials == [("alice", "secret1"), ("bob", "secret2")]
        assert all(isinstance(c, Credential) for c in credentials)

    def test_credential_fields(self, credential_extractor, tomcat_users_xml):
        """Test credential fields"""
        _, credentials = credential_extractor.parse_credentials(tomcat_users_xml)
        assert credentials[0].username == "alice"
        assert credentials[0].password == "secret1"

    def test_duplicates_are_kept(self, credential_extractor):
        """Test duplicates are kept"""
        xml = """<tomcat-users>
            <user username="alice" password="x"/>
            <user username="alice" password="x"/>
        </tomcat-users>"""
        _, credentials = credential_extractor.parse_credentials(xml)
        assert credentials == [("alice", "x"), ("alice", "x")]

    def test_other_elements_are_ignored(self, credential_extractor):
        """Test other elements are ignored"""
        xml = """<tomcat-users>
            <role rolename="manager-gui"/>
            <user username="admin" password="pw" roles="manager-gui"/>
            <group name="ops"/>
        </tomcat-users>"""
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert outcome.ok()
        assert credentials == [("admin", "pw")]

    def test_no_users(self, credential_extractor):
        """Test a document without user elements yields an empty list"""
        outcome, credentials = credential_extractor.parse_credentials("<tomcat-users/>")
        assert outcome.ok()
        assert credentials == []

    def test_empty_attribute_values_are_kept(self, credential_extractor):
        """Test empty attribute values are kept"""
        xml = '<tomcat-users><user username="" password=""/></tomcat-users>'
        _, credentials = credential_extractor.parse_credentials(xml)
        assert credentials == [("", "")]

    @pytest.mark.parametrize("xml", [
        "<tomcat-users><user username='a' password='b'>",
        "<tomcat-users",
        "",
        "not xml at all",
    ])
    def test_malformed_xml(self, credential_extractor, xml):
        """Test malformed XML is a structural failure"""
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert not outcome.ok()
        assert outcome.kind == ErrorKind.STRUCTURAL
        assert outcome.message
        assert credentials == []

    def test_missing_password_fails_whole_call(self, credential_extractor):
        """Test missing password fails whole call"""
        xml = """<tomcat-users>
            <user username="alice" password="secret1"/>
            <user username="bob"/>
        </tomcat-users>"""
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert not outcome.ok()
        assert outcome.message == "No such node (<xmlattr>.password)"
        assert credentials == []

    def test_missing_username_fails_whole_call(self, credential_extractor):
        """Test missing username fails whole call"""
        xml = '<tomcat-users><user password="secret1"/></tomcat-users>'
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert not outcome.ok()
        assert outcome.message == "No such node (<xmlattr>.username)"
        assert credentials == []

    def test_wrong_root_element(self, credential_extractor):
        """Test wrong root element"""
        xml = '<server><user username="a" password="b"/></server>'
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert not outcome.ok()
        assert outcome.message == "No such node (tomcat-users)"
        assert credentials == []

    def test_non_string_input_does_not_raise(self, credential_extractor):
        """Test non string input does not raise"""
        outcome, credentials = credential_extractor.parse_credentials(None)
        assert not outcome.ok()
        assert credentials == []

    def test_namespaced_tomcat_users(self, credential_extractor):
        """Test the stock Tomcat header with its default namespace"""
        xml = """<?xml version="1.0" encoding="UTF-8"?>
<tomcat-users xmlns="http://tomcat.apache.org/xml"
              xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
              xsi:schemaLocation="http://tomcat.apache.org/xml tomcat-users.xsd"
              version="1.0">
  <role rolename="manager-gui"/>
  <user username="alice" password="secret1" roles="manager-gui"/>
</tomcat-users>
"""
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert outcome.ok()
        assert credentials == [("alice", "secret1")]

    def test_bytes_follow_xml_declaration(self, credential_extractor):
        """Test bytes input is decoded using the declared encoding"""
        xml = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<tomcat-users><user username="j\u00fcrgen" password="p"/></tomcat-users>'
        ).encode("latin-1")
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert outcome.ok()
        assert credentials == [("j\u00fcrgen", "p")]

    def test_unencodable_text_is_structural(self, credential_extractor):
        """Test codec errors are reported as structural failures"""
        xml = '<tomcat-users><user username="\udcff" password="p"/></tomcat-users>'
        outcome, credentials = credential_extractor.parse_credentials(xml)
        assert not outcome.ok()
        assert outcome.kind == ErrorKind.STRUCTURAL
        assert credentials == []

    def test_password_masked_in_repr(self):
        """Test password masked in repr"""
        assert "secret" not in repr(Credential("alice", "secret"))


class TestParseCredentialsFromFile:
    """Test parsing credentials from a file on disk"""

    def test_reads_and_parses(self, credential_extractor, tomcat_users_file):
        """Test reads and parses"""
        outcome, credentials = credential_extractor.parse_credentials_from_file(
            str(tomcat_users_file)
        )
        assert outcome.ok()
        assert credentials == [("alice", "secret1"), ("bob", "secret2")]

    def test_missing_file_propagates_read_outcome(self, credential_extractor):
        """Test missing file propagates read outcome"""
        outcome, credentials = credential_extractor.parse_credentials_from_file(
            "/definitely/missing/tomcat-users.xml"
        )
        assert not outcome.ok()
        assert outcome.message == "0"
        assert credentials == []

    def test_empty_path(self, credential_extractor):
        """Test empty path"""
        outcome, _ = credential_extractor.parse_credentials_from_file("")
        assert outcome.message == "-1"

    def test_latin1_file(self, credential_extractor, tmp_path):
        """Test a file declared as ISO-8859-1 with non-ASCII names"""
        path = tmp_path / "tomcat-users.xml"
        path.write_bytes(
            '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
            '<tomcat-users>\n'
            '  <user username="j\u00fcrgen" password="p\u00e4ss"/>\n'
            '</tomcat-users>\n'.encode("latin-1")
        )
        outcome, credentials = credential_extractor.parse_credentials_from_file(str(path))
        assert outcome.ok()
        assert credentials == [("j\u00fcrgen", "p\u00e4ss")]

    def test_malformed_file(self, credential_extractor, tmp_path):
        """Test malformed file"""
        path = tmp_path / "tomcat-users.xml"
        path.write_text("<tomcat-users><user")
        outcome, credentials = credential_extractor.parse_credentials_from_file(str(path))
        assert not outcome.ok()
        assert outcome.kind == ErrorKind.STRUCTURAL
        assert credentials == []

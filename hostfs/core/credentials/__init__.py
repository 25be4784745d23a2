"""Tomcat credential extraction core module"""
from .credential_types import Credential, CredentialList
from .extractor import CredentialExtractor

__all__ = [
    'Credential',
    'CredentialList',
    'CredentialExtractor'
]

"""Credential type definitions"""
from typing import List, NamedTuple

TOMCAT_USERS_NODE = "tomcat-users"
USER_NODE = "user"
USERNAME_ATTR = "username"
PASSWORD_ATTR = "password"


class Credential(NamedTuple):
    """A username/password pair taken from one <user> element"""
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


CredentialList = List[Credential]

"""Native realm users (security API)."""

from typing import Any
from urllib.parse import quote

from .http import ElasticHTTP
from .results import Result

MAX_USERNAME_BYTES = 1024


def is_valid_username(name: str) -> bool:
    """Check a username against the store's rules.

    Usernames are 1 to 1024 bytes of printable ASCII (spaces included) with
    no leading or trailing space.
    """
    if not name:
        return False
    if len(name.encode("utf-8")) > MAX_USERNAME_BYTES:
        return False
    if name[0] == " " or name[-1] == " ":
        return False
    return all(0x20 <= ord(char) <= 0x7E for char in name)


class Users:
    """Create, fetch and delete users in the native realm."""

    def __init__(self, http: ElasticHTTP):
        self.http = http

    def _path(self, name: str) -> str:
        if not is_valid_username(name):
            raise ValueError(f"Invalid username: {name!r}")
        return f"_security/user/{quote(name, safe='')}"

    def put(self, name: str, password: str, roles: list[str], **extra: Any) -> Result:
        """Create or update a user.

        Args:
            name: Username
            password: Password (at least 6 characters on the store side)
            roles: Role names
            **extra: Other user fields (full_name, email, metadata, enabled)

        Raises:
            ValueError: If the username is invalid (no request is sent)
        """
        body = {"password": password, "roles": roles, **extra}
        return self.http.put(self._path(name), body=body)

    def get(self, name: str) -> Result:
        return self.http.get(self._path(name))

    def delete(self, name: str) -> Result:
        return self.http.delete(self._path(name))

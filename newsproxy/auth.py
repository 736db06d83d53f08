"""
newsproxy.auth
~~~~~~~~~~~~~~
Who is asking.  Identities are supplied via the environment variable
NEWS_USERS="Norman:guest,Bartek:user" and are fixed for the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class AuthError(Exception):
    pass


class Role(str, Enum):
    # declared in order of increasing privilege
    GUEST = "guest"
    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @classmethod
    def parse(cls, text: str) -> "Role":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise AuthError(f"Unknown role: {text!r}") from None


@dataclass(frozen=True, slots=True)
class Identity:
    name: str
    role: Role


def parse_identities(raw: str) -> List[Identity]:
    """Parse 'alice:admin,bob:guest' into identities, keeping input order."""
    identities: List[Identity] = []
    for pair in filter(None, (p.strip() for p in raw.split(","))):
        if ":" not in pair:
            raise AuthError(f"Expected NAME:role, got {pair!r}")
        name, role = pair.split(":", 1)
        if not name.strip():
            raise AuthError(f"Missing name in {pair!r}")
        identities.append(Identity(name=name.strip(), role=Role.parse(role)))
    return identities

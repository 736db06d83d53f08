from __future__ import annotations

import pytest

from newsproxy.auth import AuthError, Identity, Role, parse_identities


def test_parse_identities_keeps_order_and_skips_blanks() -> None:
    got = parse_identities(" Norman:guest, ,Dawid:ADMIN,")
    assert got == [Identity("Norman", Role.GUEST), Identity("Dawid", Role.ADMIN)]


def test_parse_identities_rejects_unknown_role() -> None:
    with pytest.raises(AuthError):
        parse_identities("Bob:superuser")


def test_parse_identities_rejects_missing_separator() -> None:
    with pytest.raises(AuthError):
        parse_identities("Bob")


def test_identity_is_immutable() -> None:
    ident = Identity("Inga", Role.MODERATOR)
    with pytest.raises(AttributeError):
        ident.role = Role.ADMIN  # type: ignore[misc]

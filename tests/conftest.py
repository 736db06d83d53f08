"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import pytest

from newsproxy.auth import Identity, Role
from newsproxy.core import NewsServiceProxy
from newsproxy.store import NewsStore, Response


class CountingStore(NewsStore):
    """NewsStore that counts how often each operation reaches it."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: dict[str, int] = {"add": 0, "read": 0, "edit": 0, "delete": 0}

    def add_message(self, title: str, content: str) -> Response:
        self.calls["add"] += 1
        return super().add_message(title, content)

    def read_message(self, message_id: int) -> Response:
        self.calls["read"] += 1
        return super().read_message(message_id)

    def edit_message(self, message_id: int, new_content: str) -> Response:
        self.calls["edit"] += 1
        return super().edit_message(message_id, new_content)

    def delete_message(self, message_id: int) -> Response:
        self.calls["delete"] += 1
        return super().delete_message(message_id)


@pytest.fixture()
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture()
def proxy_for(store: CountingStore):
    """Build a proxy over the shared store for the given role."""

    def _make(role: Role, name: str | None = None) -> NewsServiceProxy:
        return NewsServiceProxy(Identity(name or role.value.title(), role), store)

    return _make


@pytest.fixture(scope="function")
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Ensure tests run with a clean environment (no leftover vars)."""
    for var in ["NEWS_LOG_PATH", "NEWS_LOG_CONSOLE", "NEWS_USERS"]:
        monkeypatch.delenv(var, raising=False)
    yield

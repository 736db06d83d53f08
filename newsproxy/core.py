"""
newsproxy.core
~~~~~~~~~~~~~~
Permission-checking, read-through caching proxy in front of a NewsStore.

Each proxy owns its own cache.  Mutations made through a *different*
proxy sharing the same store are not seen here until this proxy itself
updates or deletes that id, so a cached read may be stale until then.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from .acls import ACLChecker, Operation
from .auth import Identity
from .logger import ProxyLogger
from .store import Response


class NewsService(Protocol):
    def add_message(self, title: str, content: str) -> Response: ...

    def read_message(self, message_id: int) -> Response: ...

    def edit_message(self, message_id: int, new_content: str) -> Response: ...

    def delete_message(self, message_id: int) -> Response: ...


class NewsServiceProxy:
    def __init__(
        self,
        identity: Identity,
        service: NewsService,
        *,
        acl: Optional[ACLChecker] = None,
        logger: Optional[ProxyLogger] = None,
    ) -> None:
        self.identity = identity
        self.service = service  # shared, not owned
        self.acl = acl or ACLChecker()
        self.logger = logger
        self._cache: Dict[int, Response] = {}

    def add_message(self, title: str, content: str) -> Response:
        if not self._authorize(Operation.CREATE):
            return self.acl.denial(Operation.CREATE)
        # a fresh id cannot be cached yet, nothing to invalidate
        return self.service.add_message(title, content)

    def read_message(self, message_id: int) -> Response:
        cached = self._cache.get(message_id)
        if cached is not None:
            self._trace("cache_hit", message_id)
            return cached

        self._trace("cache_miss", message_id)
        result = self.service.read_message(message_id)
        # "not found" is cached too; ids are never reused
        self._cache[message_id] = result
        return result

    def edit_message(self, message_id: int, new_content: str) -> Response:
        if not self._authorize(Operation.UPDATE):
            return self.acl.denial(Operation.UPDATE)
        self._invalidate(message_id)
        return self.service.edit_message(message_id, new_content)

    def delete_message(self, message_id: int) -> Response:
        if not self._authorize(Operation.DELETE):
            return self.acl.denial(Operation.DELETE)
        self._invalidate(message_id)
        return self.service.delete_message(message_id)

    # ------------------------------------------------------------------ #
    # cache
    # ------------------------------------------------------------------ #

    def is_cached(self, message_id: int) -> bool:
        return message_id in self._cache

    def clear_cache(self) -> None:
        """Drop every cached read held by this proxy."""
        entries = len(self._cache)
        self._cache.clear()
        if self.logger:
            self.logger.clear(self.identity.name, entries)

    def _invalidate(self, message_id: int) -> None:
        if self._cache.pop(message_id, None) is not None:
            self._trace("invalidate", message_id)

    # ------------------------------------------------------------------ #
    # private
    # ------------------------------------------------------------------ #

    def _authorize(self, operation: Operation) -> bool:
        if self.acl.permit(self.identity, operation):
            return True
        if self.logger:
            self.logger.deny(self.identity.name, self.identity.role.value, operation.value)
        return False

    def _trace(self, event: str, message_id: int) -> None:
        if self.logger:
            getattr(self.logger, event)(self.identity.name, message_id)

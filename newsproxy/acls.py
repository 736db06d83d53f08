"""
newsproxy.acls
~~~~~~~~~~~~~~
Tiny rule-engine for per-role allow/deny.
Rules are a lookup table keyed by operation; pass a different table to
ACLChecker if you need finer rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from .auth import Identity, Role
from .store import Response


class Operation(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


PERMISSIONS: Mapping[Operation, frozenset[Role]] = {
    Operation.CREATE: frozenset({Role.USER, Role.MODERATOR, Role.ADMIN}),
    Operation.READ: frozenset(Role),
    Operation.UPDATE: frozenset({Role.MODERATOR, Role.ADMIN}),
    Operation.DELETE: frozenset({Role.ADMIN}),
}

DENIAL_MESSAGES: Mapping[Operation, str] = {
    Operation.CREATE: "You do not have permissions to add messages",
    Operation.UPDATE: "You do not have permissions to edit messages",
    Operation.DELETE: "You do not have permissions to delete messages",
}


class ACLChecker:
    """Decide whether an identity may run an operation.

    Only CREATE, UPDATE and DELETE are gated by NewsServiceProxy.  Reads are
    open to every role, so the READ row documents the matrix and is never
    consulted by the proxy.
    """

    def __init__(self, rules: Mapping[Operation, frozenset[Role]] | None = None):
        self.rules = PERMISSIONS if rules is None else rules

    def permit(self, identity: Identity, operation: Operation) -> bool:
        """Return True if *identity* may perform *operation*."""
        return identity.role in self.rules.get(operation, frozenset())

    def denial(self, operation: Operation) -> Response:
        return Response.error(DENIAL_MESSAGES[operation])

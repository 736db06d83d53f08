"""
newsproxy.store
~~~~~~~~~~~~~~~
In-memory message board.  Identifiers start at 1 and are never reused,
even after a delete.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

NOT_FOUND = "Message not found."


class Status(str, Enum):
    SUCCESS = "Success"
    ERROR = "Error"


@dataclass(frozen=True, slots=True)
class Response:
    status: Status
    message: str

    @classmethod
    def success(cls, message: str) -> "Response":
        return cls(Status.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> "Response":
        return cls(Status.ERROR, message)

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS

    def __str__(self) -> str:
        return f"{self.status.value}: {self.message}"


@dataclass(slots=True)
class Message:
    id: int
    title: str
    content: str


class NewsStore:
    def __init__(self) -> None:
        self._messages: Dict[int, Message] = {}
        self._next_id = 1

    # ------------------------------------------------------------------ #
    # public
    # ------------------------------------------------------------------ #

    def add_message(self, title: str, content: str) -> Response:
        message = Message(self._next_id, title, content)
        self._next_id += 1
        self._messages[message.id] = message
        return Response.success("Message added successfully.")

    def read_message(self, message_id: int) -> Response:
        message = self._messages.get(message_id)
        if message is None:
            return Response.error(NOT_FOUND)
        return Response.success(f"{message.title}: {message.content}")

    def edit_message(self, message_id: int, new_content: str) -> Response:
        message = self._messages.get(message_id)
        if message is None:
            return Response.error(NOT_FOUND)
        message.content = new_content
        return Response.success("Message edited successfully.")

    def delete_message(self, message_id: int) -> Response:
        if self._messages.pop(message_id, None) is None:
            return Response.error(NOT_FOUND)
        return Response.success("Message deleted successfully.")

    # ------------------------------------------------------------------ #
    # introspection
    # ------------------------------------------------------------------ #

    def get(self, message_id: int) -> Optional[Message]:
        return self._messages.get(message_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

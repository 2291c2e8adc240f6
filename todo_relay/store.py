"""In-memory state of the todo app.

A `TodoStore` owns every user and todo. It is created once per process by
the Django app (see `todo_relay.apps`) and handed to resolvers through the
request context. Nothing here is persisted.

Mutations are not synchronized unless the store is built with
`serialize_mutations=True` (the `SERIALIZE_MUTATIONS` setting): the store is
meant for a single client, and concurrent writers can interleave.
"""

from __future__ import annotations

import contextlib
import dataclasses
import logging
import threading
import uuid
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from todo_relay.exceptions import TodoNotFound
from todo_relay.settings import todo_relay_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


def _new_local_id() -> str:
    return uuid.uuid4().hex


def node_type_of(obj: Any) -> Optional[str]:
    """Return the node type tag of a store entity, or None for anything else."""
    return getattr(type(obj), "NODE_TYPE", None)


@dataclasses.dataclass(eq=False)
class TodoRecord:
    NODE_TYPE: ClassVar[str] = "Todo"

    text: str
    complete: bool = False
    id: str = dataclasses.field(default_factory=_new_local_id)


@dataclasses.dataclass(eq=False)
class UserRecord:
    NODE_TYPE: ClassVar[str] = "User"

    user_id: str
    todos: list[TodoRecord] = dataclasses.field(default_factory=list)
    id: str = dataclasses.field(default_factory=_new_local_id)

    @property
    def total_count(self) -> int:
        return len(self.todos)

    @property
    def completed_count(self) -> int:
        return sum(1 for todo in self.todos if todo.complete)

    def find_todo(self, local_id: str) -> Optional[TodoRecord]:
        return next((todo for todo in self.todos if todo.id == local_id), None)

    def get_todo(self, local_id: str) -> TodoRecord:
        todo = self.find_todo(local_id)
        if todo is None:
            raise TodoNotFound(local_id)
        return todo


class TodoStore:
    def __init__(self, *, serialize_mutations: bool = False):
        self._users: dict[str, UserRecord] = {}
        self._lock: Optional[threading.RLock] = (
            threading.RLock() if serialize_mutations else None
        )

    @classmethod
    def seeded(
        cls,
        *,
        user_id: Optional[str] = None,
        todos: Optional[Iterable[tuple[str, bool]]] = None,
        serialize_mutations: Optional[bool] = None,
    ) -> TodoStore:
        """Create a store holding the default user and its starting todos.

        Arguments left as None are taken from the `TODO_RELAY` settings.
        """
        settings = todo_relay_settings()
        if serialize_mutations is None:
            serialize_mutations = settings["SERIALIZE_MUTATIONS"]

        store = cls(serialize_mutations=serialize_mutations)
        user = store.add_user(
            user_id if user_id is not None else settings["DEFAULT_USER_ID"],
        )
        for text, complete in todos if todos is not None else settings["SEED_TODOS"]:
            user.todos.append(TodoRecord(text=text, complete=complete))

        return store

    @contextlib.contextmanager
    def mutation(self) -> Iterator[None]:
        if self._lock is None:
            yield
            return

        with self._lock:
            yield

    @property
    def users(self) -> list[UserRecord]:
        return list(self._users.values())

    @property
    def default_user(self) -> Optional[UserRecord]:
        return next(iter(self._users.values()), None)

    def add_user(self, user_id: str) -> UserRecord:
        user = UserRecord(user_id=user_id)
        with self.mutation():
            self._users[user.id] = user
        return user

    def get_user(self, local_id: str) -> Optional[UserRecord]:
        return self._users.get(local_id)

    def get_user_by_user_id(self, user_id: str) -> Optional[UserRecord]:
        return next((u for u in self._users.values() if u.user_id == user_id), None)

    def get_todo(self, local_id: str) -> Optional[TodoRecord]:
        for user in self._users.values():
            todo = user.find_todo(local_id)
            if todo is not None:
                return todo
        return None

    def add_todo(self, user: UserRecord, text: str) -> tuple[TodoRecord, int]:
        """Append a new incomplete todo, returning it and its position."""
        todo = TodoRecord(text=text)
        with self.mutation():
            user.todos.append(todo)
            offset = len(user.todos) - 1
        logger.info("Added todo %s for user %s", todo.id, user.user_id)
        return todo, offset

    def change_todo_status(
        self,
        user: UserRecord,
        todo_id: str,
        complete: bool,
    ) -> TodoRecord:
        with self.mutation():
            todo = user.get_todo(todo_id)
            todo.complete = complete
        logger.info("Marked todo %s as complete=%s", todo.id, complete)
        return todo

    def mark_all_todos(self, user: UserRecord, complete: bool) -> list[TodoRecord]:
        """Set `complete` on every todo of `user`, returning the ones that changed."""
        with self.mutation():
            changed = [todo for todo in user.todos if todo.complete != complete]
            for todo in changed:
                todo.complete = complete
        logger.info(
            "Marked %d todo(s) of user %s as complete=%s",
            len(changed),
            user.user_id,
            complete,
        )
        return changed

    def remove_completed_todos(self, user: UserRecord) -> list[TodoRecord]:
        with self.mutation():
            removed = [todo for todo in user.todos if todo.complete]
            user.todos[:] = [todo for todo in user.todos if not todo.complete]
        logger.info(
            "Removed %d completed todo(s) of user %s",
            len(removed),
            user.user_id,
        )
        return removed

    def remove_todo(self, user: UserRecord, todo_id: str) -> TodoRecord:
        with self.mutation():
            todo = user.get_todo(todo_id)
            user.todos.remove(todo)
        logger.info("Removed todo %s of user %s", todo.id, user.user_id)
        return todo

    def rename_todo(self, todo_id: str, text: str) -> TodoRecord:
        with self.mutation():
            todo = self.get_todo(todo_id)
            if todo is None:
                raise TodoNotFound(todo_id)
            todo.text = text
        logger.info("Renamed todo %s", todo.id)
        return todo

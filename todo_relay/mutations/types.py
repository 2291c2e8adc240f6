from typing import Optional

import strawberry
from strawberry import relay

from todo_relay.exceptions import TodoRelayError
from todo_relay.relay import to_global_id
from todo_relay.store import TodoRecord
from todo_relay.types import Todo, User

__all__ = [
    "AddTodoPayload",
    "ChangeTodoStatusPayload",
    "MarkAllTodosPayload",
    "RemoveCompletedTodosPayload",
    "RemoveTodoPayload",
    "RenameTodoPayload",
]

CLIENT_MUTATION_ID_DESCRIPTION = "The `clientMutationId` sent in the input, if any."


def _raise_failure(failure: Optional[TodoRelayError]) -> None:
    # Raised from the field resolver so that only that field nulls out
    if failure is not None:
        raise failure


@strawberry.type
class AddTodoPayload:
    todo_edge: relay.Edge[Todo]
    user: User
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )


@strawberry.type
class ChangeTodoStatusPayload:
    user: User
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )
    todo_record: strawberry.Private[Optional[TodoRecord]] = None
    failure: strawberry.Private[Optional[TodoRelayError]] = None

    @strawberry.field
    def todo(self) -> Optional[Todo]:
        _raise_failure(self.failure)
        return self.todo_record  # type: ignore


@strawberry.type
class MarkAllTodosPayload:
    changed_todos: list[Todo]
    user: User
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )


@strawberry.type
class RemoveCompletedTodosPayload:
    deleted_todo_ids: Optional[list[str]]
    user: User
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )


@strawberry.type
class RemoveTodoPayload:
    user: User
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )
    removed: strawberry.Private[Optional[TodoRecord]] = None
    failure: strawberry.Private[Optional[TodoRelayError]] = None

    @strawberry.field
    def deleted_todo_id(self) -> Optional[strawberry.ID]:
        _raise_failure(self.failure)
        if self.removed is None:
            return None
        return strawberry.ID(to_global_id(TodoRecord.NODE_TYPE, self.removed.id))


@strawberry.type
class RenameTodoPayload:
    client_mutation_id: Optional[str] = strawberry.field(
        default=None,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )
    todo_record: strawberry.Private[Optional[TodoRecord]] = None
    failure: strawberry.Private[Optional[TodoRelayError]] = None

    @strawberry.field
    def todo(self) -> Optional[Todo]:
        _raise_failure(self.failure)
        return self.todo_record  # type: ignore

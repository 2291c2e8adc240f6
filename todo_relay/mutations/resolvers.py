from typing import Annotated, Optional

import strawberry
from strawberry import Info, relay

from todo_relay.context import get_node_registry, get_store
from todo_relay.exceptions import TodoNotFound
from todo_relay.relay import from_global_id, to_cursor, to_global_id
from todo_relay.store import TodoRecord, UserRecord

from .mutations import input_mutation
from .types import (
    AddTodoPayload,
    ChangeTodoStatusPayload,
    MarkAllTodosPayload,
    RemoveCompletedTodosPayload,
    RemoveTodoPayload,
    RenameTodoPayload,
)

TodoID = Annotated[strawberry.ID, strawberry.argument(name="id")]


def _get_user(info: Info, user_id: strawberry.ID) -> UserRecord:
    return get_node_registry(info).resolve(
        user_id,
        get_store(info),
        expected_type=UserRecord.NODE_TYPE,
    )


def _todo_local_id(todo_id: strawberry.ID) -> str:
    return from_global_id(todo_id, expected_type=TodoRecord.NODE_TYPE)[1]


@strawberry.type
class Mutation:
    @input_mutation(description="Add a new, incomplete todo at the end of the list.")
    def add_todo(
        self,
        info: Info,
        text: str,
        user_id: strawberry.ID,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[AddTodoPayload]:
        user = _get_user(info, user_id)
        todo, offset = get_store(info).add_todo(user, text)
        return AddTodoPayload(
            todo_edge=relay.Edge(cursor=to_cursor(offset), node=todo),
            user=user,
            client_mutation_id=client_mutation_id,
        )

    @input_mutation(description="Mark a single todo as complete or incomplete.")
    def change_todo_status(
        self,
        info: Info,
        complete: bool,
        todo_id: TodoID,
        user_id: strawberry.ID,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[ChangeTodoStatusPayload]:
        user = _get_user(info, user_id)
        payload = ChangeTodoStatusPayload(
            user=user,
            client_mutation_id=client_mutation_id,
        )
        try:
            payload.todo_record = get_store(info).change_todo_status(
                user,
                _todo_local_id(todo_id),
                complete,
            )
        except TodoNotFound as e:
            payload.failure = e
        return payload

    @input_mutation(description="Mark every todo of the user as complete or incomplete.")
    def mark_all_todos(
        self,
        info: Info,
        complete: bool,
        user_id: strawberry.ID,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[MarkAllTodosPayload]:
        user = _get_user(info, user_id)
        changed = get_store(info).mark_all_todos(user, complete)
        return MarkAllTodosPayload(
            changed_todos=changed,
            user=user,
            client_mutation_id=client_mutation_id,
        )

    @input_mutation(description="Remove every completed todo of the user.")
    def remove_completed_todos(
        self,
        info: Info,
        user_id: strawberry.ID,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[RemoveCompletedTodosPayload]:
        user = _get_user(info, user_id)
        removed = get_store(info).remove_completed_todos(user)
        return RemoveCompletedTodosPayload(
            deleted_todo_ids=[
                to_global_id(TodoRecord.NODE_TYPE, todo.id) for todo in removed
            ],
            user=user,
            client_mutation_id=client_mutation_id,
        )

    @input_mutation(description="Remove a single todo.")
    def remove_todo(
        self,
        info: Info,
        todo_id: TodoID,
        user_id: strawberry.ID,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[RemoveTodoPayload]:
        user = _get_user(info, user_id)
        payload = RemoveTodoPayload(user=user, client_mutation_id=client_mutation_id)
        try:
            payload.removed = get_store(info).remove_todo(user, _todo_local_id(todo_id))
        except TodoNotFound as e:
            payload.failure = e
        return payload

    @input_mutation(description="Change the text of a todo.")
    def rename_todo(
        self,
        info: Info,
        todo_id: TodoID,
        text: str,
        client_mutation_id: Optional[str] = None,
    ) -> Optional[RenameTodoPayload]:
        payload = RenameTodoPayload(client_mutation_id=client_mutation_id)
        try:
            payload.todo_record = get_store(info).rename_todo(
                _todo_local_id(todo_id),
                text,
            )
        except TodoNotFound as e:
            payload.failure = e
        return payload

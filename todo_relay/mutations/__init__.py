from .mutations import input_mutation
from .resolvers import Mutation
from .types import (
    AddTodoPayload,
    ChangeTodoStatusPayload,
    MarkAllTodosPayload,
    RemoveCompletedTodosPayload,
    RemoveTodoPayload,
    RenameTodoPayload,
)

__all__ = [
    "AddTodoPayload",
    "ChangeTodoStatusPayload",
    "MarkAllTodosPayload",
    "Mutation",
    "RemoveCompletedTodosPayload",
    "RemoveTodoPayload",
    "RenameTodoPayload",
    "input_mutation",
]

import inspect
from collections.abc import Callable, Sequence
from typing import Any, Optional, TypeVar, overload

import strawberry
from strawberry.extensions.field_extension import FieldExtension
from strawberry.field_extensions import InputMutationExtension
from strawberry.permission import BasePermission
from strawberry.types.field import StrawberryField

from todo_relay.exceptions import MissingClientMutationIdError

_T = TypeVar("_T")

CLIENT_MUTATION_ID_ARG = "client_mutation_id"


def _check_client_mutation_id(resolver: Callable[..., Any]) -> None:
    func = resolver
    while isinstance(func, (staticmethod, classmethod)):
        func = func.__func__

    if CLIENT_MUTATION_ID_ARG not in inspect.signature(func).parameters:
        raise MissingClientMutationIdError(func)


@overload
def input_mutation(
    resolver: Callable[..., _T],
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    permission_classes: Optional[list[type[BasePermission]]] = None,
    deprecation_reason: Optional[str] = None,
    directives: Optional[Sequence[object]] = (),
    extensions: Optional[list[FieldExtension]] = None,
) -> StrawberryField: ...


@overload
def input_mutation(
    resolver: None = None,
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    permission_classes: Optional[list[type[BasePermission]]] = None,
    deprecation_reason: Optional[str] = None,
    directives: Optional[Sequence[object]] = (),
    extensions: Optional[list[FieldExtension]] = None,
) -> Callable[[Callable[..., _T]], StrawberryField]: ...


def input_mutation(
    resolver=None,
    *,
    name=None,
    description=None,
    permission_classes=None,
    deprecation_reason=None,
    directives=(),
    extensions=None,
):
    """Declare a Relay classic mutation.

    The resolver arguments become the fields of a single `input` argument,
    named after the mutation (`addTodo` takes an `AddTodoInput!`). The
    resolver must accept `client_mutation_id` and set it on the payload it
    returns, so clients can match responses with the requests they sent.
    """
    extensions = [*(extensions or []), InputMutationExtension()]

    def wrapper(func):
        _check_client_mutation_id(func)
        return strawberry.mutation(
            func,
            name=name,
            description=description,
            permission_classes=permission_classes or [],
            deprecation_reason=deprecation_reason,
            directives=directives,
            extensions=extensions,
        )

    if resolver is not None:
        return wrapper(resolver)

    return wrapper

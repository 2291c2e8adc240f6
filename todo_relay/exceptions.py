from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from strawberry.exceptions.exception import StrawberryException
from strawberry.exceptions.utils.source_finder import SourceFinder

if TYPE_CHECKING:
    from collections.abc import Callable

    from strawberry.exceptions.exception_source import ExceptionSource


class TodoRelayError(Exception):
    """Base class for errors raised while resolving a GraphQL request.

    The `code` ends up in the `extensions` of the GraphQL error, so clients
    can tell the failures apart without parsing messages.
    """

    code: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class DecodeError(TodoRelayError, ValueError):
    code = "DECODE_ERROR"


class InvalidCursor(DecodeError):
    code = "INVALID_CURSOR"


class InvalidArgument(TodoRelayError, ValueError):
    code = "INVALID_ARGUMENT"


class NodeTypeMismatch(InvalidArgument):
    code = "NODE_TYPE_MISMATCH"

    def __init__(self, global_id: str, type_name: str, expected_type: str):
        self.global_id = global_id
        self.type_name = type_name
        self.expected_type = expected_type
        super().__init__(
            f'Expected an ID of type "{expected_type}", got one of type "{type_name}"',
        )


class UnknownNodeType(TodoRelayError, LookupError):
    code = "UNKNOWN_NODE_TYPE"

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f'Unknown node type "{type_name}"')


class NodeNotFound(TodoRelayError, LookupError):
    code = "NODE_NOT_FOUND"

    def __init__(self, type_name: str, local_id: str, message: str | None = None):
        self.type_name = type_name
        self.local_id = local_id
        super().__init__(message or f'{type_name} "{local_id}" not found')


class TodoNotFound(NodeNotFound):
    code = "TODO_NOT_FOUND"

    def __init__(self, local_id: str):
        super().__init__("Todo", local_id, f'Todo "{local_id}" not found')


class MissingClientMutationIdError(StrawberryException):
    def __init__(self, resolver: Callable[..., Any]):
        self.function = resolver
        name = getattr(resolver, "__name__", repr(resolver))

        self.message = (
            f'Mutation "{name}" is missing the "client_mutation_id" argument'
        )
        self.rich_message = (
            "[bold red]Missing argument [underline]client_mutation_id[/] "
            f"for mutation `[underline]{name}[/]`"
        )
        self.suggestion = (
            "To fix this error, add `client_mutation_id: Optional[str] = None` "
            "to the resolver and echo it back in the payload"
        )
        self.annotation_message = "mutation missing client_mutation_id"

        super().__init__(self.message)

    @cached_property
    def exception_source(self) -> ExceptionSource | None:  # pragma: no cover
        source_finder = SourceFinder()

        return source_finder.find_function_from_object(self.function)  # type: ignore

from .exceptions import (
    DecodeError,
    InvalidArgument,
    InvalidCursor,
    NodeNotFound,
    NodeTypeMismatch,
    TodoNotFound,
    TodoRelayError,
    UnknownNodeType,
)
from .relay import (
    ListConnection,
    NodeRegistry,
    build_connection,
    from_cursor,
    from_global_id,
    to_cursor,
    to_global_id,
)
from .store import TodoRecord, TodoStore, UserRecord

__all__ = [
    "DecodeError",
    "InvalidArgument",
    "InvalidCursor",
    "ListConnection",
    "NodeNotFound",
    "NodeRegistry",
    "NodeTypeMismatch",
    "TodoNotFound",
    "TodoRecord",
    "TodoRelayError",
    "TodoStore",
    "UnknownNodeType",
    "UserRecord",
    "build_connection",
    "from_cursor",
    "from_global_id",
    "to_cursor",
    "to_global_id",
]

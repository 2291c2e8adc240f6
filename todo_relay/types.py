from typing import Annotated, Any, Optional

import strawberry
from strawberry import Info

from todo_relay.relay import ListConnection, NodeRegistry, to_global_id
from todo_relay.store import TodoRecord, TodoStore, UserRecord, node_type_of

__all__ = [
    "Node",
    "Todo",
    "User",
    "node_registry",
]


@strawberry.interface(description="An object with a globally unique ID.")
class Node:
    @strawberry.field(description="The ID of the object.")
    def id(self, root: Any) -> strawberry.ID:
        return strawberry.ID(to_global_id(node_type_of(root), root.id))


@strawberry.type
class Todo(Node):
    text: str
    complete: bool

    @classmethod
    def is_type_of(cls, obj: Any, info: Info) -> bool:
        return node_type_of(obj) == TodoRecord.NODE_TYPE


@strawberry.type
class User(Node):
    user_id: str

    @classmethod
    def is_type_of(cls, obj: Any, info: Info) -> bool:
        return node_type_of(obj) == UserRecord.NODE_TYPE

    @strawberry.field(description="The todos of this user, in insertion order.")
    def todos(
        self,
        root: UserRecord,
        info: Info,
        status: Annotated[
            Optional[str],
            strawberry.argument(description="Accepted but not applied as a filter."),
        ] = "any",
        first: Optional[int] = None,
        after: Optional[str] = None,
        last: Optional[int] = None,
        before: Optional[str] = None,
    ) -> ListConnection[Todo]:
        return ListConnection.resolve_connection(
            root.todos,
            info=info,
            first=first,
            after=after,
            last=last,
            before=before,
        )

    @strawberry.field
    def total_count(self, root: UserRecord) -> int:
        return root.total_count

    @strawberry.field
    def completed_count(self, root: UserRecord) -> int:
        return root.completed_count


node_registry = NodeRegistry()


@node_registry.register(UserRecord.NODE_TYPE)
def fetch_user(store: TodoStore, local_id: str) -> Optional[UserRecord]:
    return store.get_user(local_id)


@node_registry.register(TodoRecord.NODE_TYPE)
def fetch_todo(store: TodoStore, local_id: str) -> Optional[TodoRecord]:
    return store.get_todo(local_id)

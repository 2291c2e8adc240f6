import logging
import pathlib
from typing import Optional, Union

import strawberry
from strawberry import Info

from todo_relay.context import get_node_registry, get_store
from todo_relay.mutations import Mutation
from todo_relay.types import Node, Todo, User

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="Fetches an object given its ID.")
    def node(
        self,
        info: Info,
        id: strawberry.ID,  # noqa: A002
    ) -> Optional[Node]:
        return get_node_registry(info).resolve(id, get_store(info))

    @strawberry.field(
        description="Fetch a user by its `userId`, or the default user when omitted.",
    )
    def user(
        self,
        info: Info,
        id: Optional[str] = None,  # noqa: A002
    ) -> Optional[User]:
        store = get_store(info)
        if id is None:
            return store.default_user  # type: ignore
        return store.get_user_by_user_id(id)  # type: ignore


schema = strawberry.Schema(query=Query, mutation=Mutation, types=[User, Todo])


def export_schema(path: Union[str, pathlib.Path]) -> pathlib.Path:
    """Write the schema SDL to `path`, creating parent directories as needed."""
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{schema.as_str()}\n", encoding="utf-8")
    logger.info("Wrote GraphQL schema to %s", path)
    return path

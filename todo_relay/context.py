from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Optional

from todo_relay.types import node_registry as default_node_registry

if TYPE_CHECKING:
    from django.http import HttpRequest
    from strawberry import Info

    from todo_relay.relay.registry import NodeRegistry
    from todo_relay.store import TodoStore


@dataclasses.dataclass
class TodoContext:
    """Context handed to every resolver of a request.

    The store is passed explicitly instead of being read from a global, so
    each test (or each view) decides which store a request operates on.
    """

    store: TodoStore
    node_registry: NodeRegistry = default_node_registry
    request: Optional[HttpRequest] = None
    response: Optional[Any] = None


def get_store(info: Info) -> TodoStore:
    return info.context.store


def get_node_registry(info: Info) -> NodeRegistry:
    return info.context.node_registry

import logging
from collections.abc import Callable, Iterator
from typing import Any, Optional, overload

from todo_relay.exceptions import NodeNotFound, UnknownNodeType

from .global_id import from_global_id

__all__ = [
    "NodeFetcher",
    "NodeRegistry",
]

logger = logging.getLogger(__name__)

NodeFetcher = Callable[[Any, str], Optional[Any]]


class NodeRegistry:
    """Map node type names to the functions that fetch them by local id.

    A fetcher receives the store the request is bound to and the local id
    decoded from a global id, and returns the entity or `None`.
    """

    def __init__(self) -> None:
        self._fetchers: dict[str, NodeFetcher] = {}

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._fetchers

    def __iter__(self) -> Iterator[str]:
        return iter(self._fetchers)

    @overload
    def register(self, type_name: str, fetch: NodeFetcher) -> NodeFetcher: ...

    @overload
    def register(
        self,
        type_name: str,
        fetch: None = None,
    ) -> Callable[[NodeFetcher], NodeFetcher]: ...

    def register(self, type_name, fetch=None):
        """Register the fetcher for `type_name`.

        Can be called directly or used as a decorator::

            @registry.register("Todo")
            def fetch_todo(store, local_id): ...
        """

        def wrapper(func: NodeFetcher) -> NodeFetcher:
            if type_name in self._fetchers:
                raise ValueError(f'Node type "{type_name}" is already registered')
            self._fetchers[type_name] = func
            return func

        if fetch is not None:
            return wrapper(fetch)

        return wrapper

    def resolve(
        self,
        global_id: str,
        store: Any,
        *,
        expected_type: Optional[str] = None,
    ) -> Any:
        """Fetch the entity identified by `global_id` from `store`.

        Raises:
        ------
            DecodeError:
                If `global_id` is malformed.
            NodeTypeMismatch:
                If `expected_type` is given and the id is of another type.
            UnknownNodeType:
                If no fetcher is registered for the decoded type.
            NodeNotFound:
                If the fetcher found nothing.

        """
        type_name, local_id = from_global_id(global_id, expected_type=expected_type)

        try:
            fetch = self._fetchers[type_name]
        except KeyError:
            raise UnknownNodeType(type_name) from None

        node = fetch(store, local_id)
        if node is None:
            logger.debug("%s %r not found", type_name, local_id)
            raise NodeNotFound(type_name, local_id)

        return node

import dataclasses
from collections.abc import Iterable, Sequence
from typing import Any, Generic, Optional, TypeVar

import strawberry
from strawberry import Info, relay
from typing_extensions import Self

from todo_relay.exceptions import InvalidArgument

from .global_id import from_cursor, to_cursor

__all__ = [
    "ConnectionSlice",
    "ListConnection",
    "build_connection",
]

_T = TypeVar("_T")


@dataclasses.dataclass(frozen=True)
class ConnectionSlice(Generic[_T]):
    """The window of a sequence selected by Relay pagination arguments."""

    edges: list[tuple[str, _T]]
    has_previous_page: bool
    has_next_page: bool
    total_count: int

    @property
    def start_cursor(self) -> Optional[str]:
        return self.edges[0][0] if self.edges else None

    @property
    def end_cursor(self) -> Optional[str]:
        return self.edges[-1][0] if self.edges else None


def _check_count(name: str, value: Optional[int]) -> None:
    if value is not None and value < 0:
        raise InvalidArgument(f"Argument '{name}' must be a non-negative integer.")


def build_connection(
    items: Sequence[_T],
    *,
    first: Optional[int] = None,
    after: Optional[str] = None,
    last: Optional[int] = None,
    before: Optional[str] = None,
) -> ConnectionSlice[_T]:
    """Slice `items` following the Relay cursor connections algorithm.

    Cursors are offsets into `items`, so they are only stable for as long as
    the sequence is not reordered or shrunk in front of them. Cursors pointing
    past the end are clamped instead of rejected.

    Args:
    ----
        items:
            The full, already filtered and ordered, sequence.
        first:
            Keep at most this many items from the start of the window.
        after:
            Only keep items after the one this cursor points at.
        last:
            Keep at most this many items from the end of the window,
            applied after `first`.
        before:
            Only keep items before the one this cursor points at.

    """
    _check_count("first", first)
    _check_count("last", last)

    total_count = len(items)
    start, end = 0, total_count

    if after is not None:
        start = min(from_cursor(after) + 1, total_count)
    if before is not None:
        end = min(from_cursor(before), total_count)
    end = max(start, end)

    if first is not None:
        end = min(end, start + first)
    if last is not None:
        start = max(start, end - last)

    return ConnectionSlice(
        edges=[(to_cursor(i), items[i]) for i in range(start, end)],
        has_previous_page=start > 0,
        has_next_page=end < total_count,
        total_count=total_count,
    )


@strawberry.type(name="Connection", description="A connection to a list of items.")
class ListConnection(relay.Connection[relay.NodeType]):
    total_count: int = strawberry.field(
        description="Total quantity of existing nodes.",
    )

    @classmethod
    def resolve_connection(
        cls,
        nodes: Iterable[relay.NodeType],
        *,
        info: Optional[Info] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        first: Optional[int] = None,
        last: Optional[int] = None,
        **kwargs: Any,
    ) -> Self:
        items = nodes if isinstance(nodes, Sequence) else list(nodes)
        result = build_connection(
            items,
            first=first,
            after=after,
            last=last,
            before=before,
        )

        return cls(
            edges=[
                relay.Edge(
                    cursor=cursor,
                    node=cls.resolve_node(node, info=info, **kwargs),
                )
                for cursor, node in result.edges
            ],
            page_info=relay.PageInfo(
                start_cursor=result.start_cursor,
                end_cursor=result.end_cursor,
                has_previous_page=result.has_previous_page,
                has_next_page=result.has_next_page,
            ),
            total_count=result.total_count,
        )

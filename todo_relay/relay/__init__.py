from .connection import ConnectionSlice, ListConnection, build_connection
from .global_id import from_cursor, from_global_id, to_cursor, to_global_id
from .registry import NodeFetcher, NodeRegistry

__all__ = [
    "ConnectionSlice",
    "ListConnection",
    "NodeFetcher",
    "NodeRegistry",
    "build_connection",
    "from_cursor",
    "from_global_id",
    "to_cursor",
    "to_global_id",
]

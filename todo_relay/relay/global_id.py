import base64
import binascii
import re
from typing import Optional

from todo_relay.exceptions import DecodeError, InvalidArgument, InvalidCursor, NodeTypeMismatch

__all__ = [
    "ENCODING_VERSION",
    "from_cursor",
    "from_global_id",
    "to_cursor",
    "to_global_id",
]

ENCODING_VERSION = "1"

GLOBAL_ID_NAMESPACE = "gid"
CURSOR_NAMESPACE = "cursor"

_TYPE_NAME_RE = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")
_OFFSET_RE = re.compile(r"0|[1-9][0-9]{0,17}")


def _encode(namespace: str, payload: str) -> str:
    text = f"{namespace}:{ENCODING_VERSION}:{payload}"
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")


def _decode(value: str, namespace: str, what: str) -> str:
    """Return the payload of `value`, checking its namespace and version.

    Only canonical output of `_encode` is accepted, so there is exactly one
    valid spelling of every id.
    """
    try:
        raw = base64.b64decode(value.encode("ascii"), altchars=b"-_", validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f'"{value}" is not a valid {what}') from e

    if base64.urlsafe_b64encode(raw).decode("ascii") != value:
        raise DecodeError(f'"{value}" is not a valid {what}')

    parts = text.split(":", 2)
    if len(parts) != 3 or parts[0] != namespace:
        raise DecodeError(f'"{value}" is not a valid {what}')

    _, version, payload = parts
    if version != ENCODING_VERSION:
        raise DecodeError(f'Unsupported {what} encoding version "{version}"')

    return payload


def to_global_id(type_name: str, local_id: str) -> str:
    """Encode a `(type_name, local_id)` pair into an opaque global id.

    Type names are GraphQL names and can never contain a colon, which keeps
    the split on decoding unambiguous whatever the local id contains.
    """
    if not _TYPE_NAME_RE.fullmatch(type_name):
        raise InvalidArgument(f'"{type_name}" is not a valid node type name')
    local_id = str(local_id)
    if not local_id:
        raise InvalidArgument("A node local id cannot be empty")

    return _encode(GLOBAL_ID_NAMESPACE, f"{type_name}:{local_id}")


def from_global_id(
    global_id: str,
    *,
    expected_type: Optional[str] = None,
) -> tuple[str, str]:
    """Decode a global id back into its `(type_name, local_id)` pair.

    Raises:
    ------
        DecodeError:
            If the id was not produced by `to_global_id`.
        NodeTypeMismatch:
            If `expected_type` is given and the id belongs to another type.

    """
    payload = _decode(global_id, GLOBAL_ID_NAMESPACE, "global id")

    type_name, sep, local_id = payload.partition(":")
    if not sep or not local_id or not _TYPE_NAME_RE.fullmatch(type_name):
        raise DecodeError(f'"{global_id}" is not a valid global id')

    if expected_type is not None and type_name != expected_type:
        raise NodeTypeMismatch(global_id, type_name, expected_type)

    return type_name, local_id


def to_cursor(offset: int) -> str:
    if offset < 0:
        raise InvalidArgument("A cursor offset cannot be negative")
    return _encode(CURSOR_NAMESPACE, str(offset))


def from_cursor(cursor: str) -> int:
    try:
        payload = _decode(cursor, CURSOR_NAMESPACE, "cursor")
    except DecodeError as e:
        raise InvalidCursor(e.message) from e

    if not _OFFSET_RE.fullmatch(payload):
        raise InvalidCursor(f'"{cursor}" is not a valid cursor')

    return int(payload)

import base64

import pytest

from todo_relay.exceptions import (
    DecodeError,
    InvalidArgument,
    InvalidCursor,
    NodeTypeMismatch,
)
from todo_relay.relay import from_cursor, from_global_id, to_cursor, to_global_id


def _b64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode()).decode()


@pytest.mark.parametrize(
    ("type_name", "local_id"),
    [
        ("User", "1"),
        ("Todo", "8f14e45fceea167a5a36dedd4bea2543"),
        ("Todo", "with:colons:inside"),
        ("_Private", "ünïcödé"),
        ("Node2", " spaced out "),
    ],
)
def test_global_id_round_trip(type_name: str, local_id: str):
    global_id = to_global_id(type_name, local_id)
    assert from_global_id(global_id) == (type_name, local_id)


def test_global_id_is_deterministic():
    assert to_global_id("User", "1") == to_global_id("User", "1")


def test_global_id_never_aliases_types():
    user_id = to_global_id("User", "1")
    todo_id = to_global_id("Todo", "1")

    assert user_id != todo_id
    assert from_global_id(user_id) == ("User", "1")
    assert from_global_id(todo_id) == ("Todo", "1")


def test_global_id_accepts_non_string_local_ids():
    assert from_global_id(to_global_id("Todo", 42)) == ("Todo", "42")  # type: ignore


@pytest.mark.parametrize("type_name", ["", "1User", "Us:er", "Todo Item"])
def test_to_global_id_rejects_invalid_type_names(type_name: str):
    with pytest.raises(InvalidArgument):
        to_global_id(type_name, "1")


def test_to_global_id_rejects_empty_local_id():
    with pytest.raises(InvalidArgument):
        to_global_id("User", "")


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not base64!",
        "%%%%",
        _b64("User:1"),
        _b64("gid:1:User"),
        _b64("gid:1:User:"),
        _b64("gid:1::1"),
        _b64("gid:1:9Lives:1"),
        _b64("cursor:1:0"),
        base64.urlsafe_b64encode(b"\xff\xfe").decode(),
    ],
)
def test_from_global_id_rejects_malformed_ids(value: str):
    with pytest.raises(DecodeError):
        from_global_id(value)


def test_from_global_id_rejects_unknown_versions():
    with pytest.raises(DecodeError, match="version"):
        from_global_id(_b64("gid:2:User:1"))


def test_from_global_id_rejects_non_canonical_padding():
    global_id = to_global_id("User", "12")
    assert global_id.endswith("=")

    with pytest.raises(DecodeError):
        from_global_id(global_id.rstrip("="))


def test_from_global_id_expected_type():
    global_id = to_global_id("User", "1")
    assert from_global_id(global_id, expected_type="User") == ("User", "1")

    with pytest.raises(NodeTypeMismatch) as exc_info:
        from_global_id(global_id, expected_type="Todo")

    assert isinstance(exc_info.value, InvalidArgument)
    assert exc_info.value.type_name == "User"
    assert exc_info.value.expected_type == "Todo"


@pytest.mark.parametrize("offset", [0, 1, 9, 1024])
def test_cursor_round_trip(offset: int):
    assert from_cursor(to_cursor(offset)) == offset


def test_to_cursor_rejects_negative_offsets():
    with pytest.raises(InvalidArgument):
        to_cursor(-1)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "nope",
        _b64("cursor:1:-1"),
        _b64("cursor:1:01"),
        _b64("cursor:1:one"),
        _b64("cursor:2:1"),
        _b64("arrayconnection:1"),
    ],
)
def test_from_cursor_rejects_malformed_cursors(value: str):
    with pytest.raises(InvalidCursor):
        from_cursor(value)


@pytest.mark.parametrize("digits", [19, 5000])
def test_from_cursor_rejects_oversized_offsets(digits: int):
    with pytest.raises(InvalidCursor):
        from_cursor(_b64("cursor:1:" + "9" * digits))


def test_from_cursor_accepts_largest_offset():
    assert from_cursor(_b64("cursor:1:" + "9" * 18)) == 10**18 - 1


def test_cursors_and_global_ids_do_not_mix():
    with pytest.raises(InvalidCursor):
        from_cursor(to_global_id("Todo", "1"))

    with pytest.raises(DecodeError):
        from_global_id(to_cursor(1))

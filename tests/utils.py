from typing import Any, Optional

from strawberry.types import ExecutionResult

from todo_relay.context import TodoContext
from todo_relay.schema import schema
from todo_relay.store import TodoStore

USER_FIELDS = """
    id
    userId
    totalCount
    completedCount
"""


def execute(
    store: TodoStore,
    query: str,
    variables: Optional[dict[str, Any]] = None,
) -> ExecutionResult:
    return schema.execute_sync(
        query,
        variable_values=variables,
        context_value=TodoContext(store=store),
    )


def error_codes(result: ExecutionResult) -> list[Optional[str]]:
    assert result.errors
    return [(e.extensions or {}).get("code") for e in result.errors]

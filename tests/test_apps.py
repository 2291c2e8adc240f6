from django.apps import apps
from django.test import override_settings

from todo_relay.apps import TodoRelayConfig, get_default_store
from todo_relay.store import TodoStore


def test_app_name() -> None:
    assert TodoRelayConfig.name == "todo_relay"


def test_verbose_name() -> None:
    assert TodoRelayConfig.verbose_name == "Todo relay"


def test_default_store_is_seeded(app_store: TodoStore) -> None:
    store = get_default_store()

    assert store is app_store
    assert store.default_user is not None
    assert store.default_user.user_id == "me"


def test_reset_store_replaces_the_store(app_store: TodoStore) -> None:
    app_store.default_user.todos.clear()

    new_store = apps.get_app_config("todo_relay").reset_store()

    assert new_store is not app_store
    assert get_default_store() is new_store
    assert new_store.default_user.total_count == 2


def test_ready_without_schema_path_does_not_export(mocker) -> None:
    export = mocker.patch("todo_relay.schema.export_schema")

    apps.get_app_config("todo_relay").ready()

    export.assert_not_called()


def test_ready_exports_schema(mocker, tmp_path) -> None:
    export = mocker.patch("todo_relay.schema.export_schema")
    path = str(tmp_path / "schema.graphql")

    with override_settings(TODO_RELAY={"SCHEMA_OUTPUT_PATH": path}):
        apps.get_app_config("todo_relay").ready()

    export.assert_called_once_with(path)

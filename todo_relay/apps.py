from django.apps import AppConfig, apps

from todo_relay.settings import todo_relay_settings
from todo_relay.store import TodoStore


class TodoRelayConfig(AppConfig):
    name = "todo_relay"
    verbose_name = "Todo relay"

    store: TodoStore

    def ready(self):
        self.reset_store()

        path = todo_relay_settings()["SCHEMA_OUTPUT_PATH"]
        if path:
            from todo_relay.schema import export_schema  # avoid circular import

            export_schema(path)

    def reset_store(self) -> TodoStore:
        """Replace the process store with a freshly seeded one."""
        self.store = TodoStore.seeded()
        return self.store


def get_default_store() -> TodoStore:
    """Return the store owned by the installed `todo_relay` app."""
    return apps.get_app_config("todo_relay").store

"""Code for interacting with Django settings."""

from typing import Optional, cast

from django.conf import settings
from typing_extensions import TypedDict


class TodoRelaySettings(TypedDict):
    """Dictionary defining the shape `settings.TODO_RELAY` should have.

    All settings are optional and have defaults as described in their docstrings and
    defined in `DEFAULT_TODO_RELAY_SETTINGS`.
    """

    #: The `userId` of the user created when a store is seeded.
    DEFAULT_USER_ID: str

    #: Todos given to the seeded user, as `(text, complete)` pairs.
    SEED_TODOS: list[tuple[str, bool]]

    #: If True, every store mutation runs behind a single process-wide lock.
    #: Off by default: the demo store is not meant for concurrent clients.
    SERIALIZE_MUTATIONS: bool

    #: If set, the schema SDL is written to this path when the app is ready.
    SCHEMA_OUTPUT_PATH: Optional[str]

    #: Methods advertised by the `Allow` header of preflight responses.
    CORS_ALLOW_METHODS: list[str]

    #: Headers advertised by `Access-Control-Allow-Headers` on preflight responses.
    CORS_ALLOW_HEADERS: list[str]

    #: Default port for the `runserver` management command.
    SERVER_PORT: int


DEFAULT_TODO_RELAY_SETTINGS = TodoRelaySettings(
    DEFAULT_USER_ID="me",
    SEED_TODOS=[("Taste JavaScript", True), ("Buy a Unicorn", False)],
    SERIALIZE_MUTATIONS=False,
    SCHEMA_OUTPUT_PATH=None,
    CORS_ALLOW_METHODS=["GET", "PUT", "POST", "DELETE", "OPTIONS"],
    CORS_ALLOW_HEADERS=["Authorization", "Content-Type", "Accept", "Transfer-Encoding"],
    SERVER_PORT=3004,
)


def todo_relay_settings() -> TodoRelaySettings:
    """Get todo relay settings.

    Return the dictionary from `settings.TODO_RELAY`, with defaults
    for missing keys.

    Preferred to direct access for the type hints and defaults.
    """
    defaults = DEFAULT_TODO_RELAY_SETTINGS
    return cast(
        "TodoRelaySettings",
        {**defaults, **getattr(settings, "TODO_RELAY", {})},
    )

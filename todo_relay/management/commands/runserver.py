from django.core.management.commands.runserver import Command as RunserverCommand

from todo_relay.settings import todo_relay_settings


class Command(RunserverCommand):
    help = "Starts the todo GraphQL development server."

    @property
    def default_port(self) -> str:  # type: ignore[override]
        return str(todo_relay_settings()["SERVER_PORT"])

from django.core.management.base import BaseCommand

from todo_relay.settings import todo_relay_settings

DEFAULT_SCHEMA_PATH = "data/schema.graphql"


class Command(BaseCommand):
    help = "Writes the todo GraphQL schema, in SDL, to a file."

    def add_arguments(self, parser):
        parser.add_argument(
            "--path",
            dest="path",
            default=None,
            help=(
                "Where to write the schema. Defaults to the SCHEMA_OUTPUT_PATH "
                f"setting, or {DEFAULT_SCHEMA_PATH}."
            ),
        )

    def handle(self, *args, **options):
        from todo_relay.schema import export_schema

        path = (
            options["path"]
            or todo_relay_settings()["SCHEMA_OUTPUT_PATH"]
            or DEFAULT_SCHEMA_PATH
        )
        written = export_schema(path)
        self.stdout.write(f"* Wrote schema to {written}\n")

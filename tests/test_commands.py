import io

from django.core.management import call_command
from django.test import override_settings

from todo_relay.management.commands.runserver import Command as RunserverCommand
from todo_relay.schema import schema


def test_export_todo_schema(tmp_path):
    path = tmp_path / "data" / "schema.graphql"
    stdout = io.StringIO()

    call_command("export_todo_schema", path=str(path), stdout=stdout)

    assert path.read_text(encoding="utf-8") == f"{schema.as_str()}\n"
    assert f"* Wrote schema to {path}" in stdout.getvalue()


def test_export_todo_schema_uses_setting(tmp_path):
    path = tmp_path / "schema.graphql"

    with override_settings(TODO_RELAY={"SCHEMA_OUTPUT_PATH": str(path)}):
        call_command("export_todo_schema", stdout=io.StringIO())

    assert "type Query {" in path.read_text(encoding="utf-8")


def test_runserver_default_port():
    assert RunserverCommand().default_port == "3004"


def test_runserver_default_port_from_settings():
    with override_settings(TODO_RELAY={"SERVER_PORT": 8080}):
        assert RunserverCommand().default_port == "8080"

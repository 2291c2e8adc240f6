import pytest
from django.apps import apps

from todo_relay.relay import to_global_id
from todo_relay.store import TodoStore, UserRecord
from todo_relay.test import TestClient


@pytest.fixture(autouse=True)
def app_store() -> TodoStore:
    """Give every test a freshly seeded store behind the Django view."""
    return apps.get_app_config("todo_relay").reset_store()


@pytest.fixture
def store() -> TodoStore:
    return TodoStore.seeded()


@pytest.fixture
def user(store: TodoStore) -> UserRecord:
    user = store.default_user
    assert user is not None
    return user


@pytest.fixture
def user_gid(user: UserRecord) -> str:
    return to_global_id("User", user.id)


@pytest.fixture
def gql_client() -> TestClient:
    return TestClient("/graphql")

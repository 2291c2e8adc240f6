"""URL configuration for the todo GraphQL server."""

from django.conf import settings
from django.urls import path

from todo_relay.schema import schema
from todo_relay.views import GraphQLView

graphql_view = GraphQLView.as_view(
    schema=schema,
    graphql_ide="graphiql" if settings.DEBUG else None,
)

urlpatterns = [
    path("graphql", graphql_view),
    path("graphql/", graphql_view),
]

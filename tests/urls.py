from django.urls import path

from todo_relay.schema import schema
from todo_relay.views import GraphQLView

urlpatterns = [
    path("graphql", GraphQLView.as_view(schema=schema)),
    path("graphql/", GraphQLView.as_view(schema=schema)),
]

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from strawberry.django.views import GraphQLView as BaseGraphQLView
from typing_extensions import override

from todo_relay.apps import get_default_store
from todo_relay.context import TodoContext

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse

    from todo_relay.relay.registry import NodeRegistry
    from todo_relay.store import TodoStore

logger = logging.getLogger(__name__)


class GraphQLView(BaseGraphQLView):
    """GraphQL endpoint bound to a todo store.

    Without an explicit `store`, requests run against the store owned by the
    `todo_relay` app::

        path("graphql", GraphQLView.as_view(schema=schema))
    """

    store: Optional[TodoStore] = None
    node_registry: Optional[NodeRegistry] = None

    @override
    def get_context(self, request: HttpRequest, response: HttpResponse) -> TodoContext:
        store = self.store if self.store is not None else get_default_store()
        context = TodoContext(store=store, request=request, response=response)
        if self.node_registry is not None:
            context.node_registry = self.node_registry

        logger.debug("Executing GraphQL %s request", request.method)
        return context

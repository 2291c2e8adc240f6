"""WSGI config for the todo GraphQL server."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "todo_relay.server.settings")

application = get_wsgi_application()

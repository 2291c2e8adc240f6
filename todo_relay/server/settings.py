"""Django settings for the todo GraphQL server."""

import os

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("TODO_RELAY_SECRET_KEY", "django-insecure-todo-relay-demo")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get("TODO_RELAY_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["*"]


# Application definition

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "todo_relay",
]

MIDDLEWARE = [
    "todo_relay.middlewares.cors.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "todo_relay.server.urls"

WSGI_APPLICATION = "todo_relay.server.wsgi.application"

# The todo store lives in memory, there is no database
DATABASES = {}

APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = "UTC"

TODO_RELAY = {
    "SCHEMA_OUTPUT_PATH": os.environ.get("TODO_RELAY_SCHEMA_OUTPUT_PATH") or None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "django.server": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "todo_relay": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "strawberry.execution": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}

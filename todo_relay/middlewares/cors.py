from collections.abc import Callable

from django.http.request import HttpRequest
from django.http.response import HttpResponse, HttpResponseBase

from todo_relay.settings import todo_relay_settings


class CorsMiddleware:
    """Allow any origin to call the API.

    `OPTIONS` requests to any path are answered here with the preflight
    headers and never reach a view. Every other response gets
    `Access-Control-Allow-Origin: *`.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponseBase]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponseBase:
        if request.method == "OPTIONS":
            response = self.preflight_response(request)
        else:
            response = self.get_response(request)

        response["Access-Control-Allow-Origin"] = "*"
        return response

    def preflight_response(self, request: HttpRequest) -> HttpResponse:
        settings = todo_relay_settings()

        response = HttpResponse(status=200)
        response["Allow"] = ", ".join(settings["CORS_ALLOW_METHODS"])
        response["Access-Control-Allow-Headers"] = ", ".join(
            settings["CORS_ALLOW_HEADERS"],
        )
        return response

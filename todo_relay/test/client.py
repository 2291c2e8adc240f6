import warnings
from typing import Any, Optional

from django.http.response import HttpResponseBase
from django.test.client import Client
from strawberry.test import BaseGraphQLTestClient
from strawberry.test.client import Response
from typing_extensions import override


class TestClient(BaseGraphQLTestClient):
    """GraphQL client that goes through the Django view at `path`."""

    __test__ = False

    def __init__(self, path: str = "/graphql", client: Optional[Client] = None):
        self.path = path
        super().__init__(client or Client())

    @property
    def client(self) -> Client:
        return self._client

    def request(
        self,
        body: dict[str, object],
        headers: Optional[dict[str, object]] = None,
        files: Optional[dict[str, object]] = None,
    ) -> HttpResponseBase:
        return self.client.post(
            self.path,
            data=body,
            content_type="application/json",
            headers=headers,
        )

    @override
    def query(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, object]] = None,
        asserts_errors: Optional[bool] = None,
        files: Optional[dict[str, object]] = None,
        assert_no_errors: Optional[bool] = True,
    ) -> Response:
        body = self._build_body(query, variables)
        data = self._decode(self.request(body, headers), type="json")

        response = Response(
            errors=data.get("errors"),
            data=data.get("data"),
            extensions=data.get("extensions"),
        )

        if asserts_errors is not None:
            warnings.warn(
                "The `asserts_errors` argument has been renamed to `assert_no_errors`",
                DeprecationWarning,
                stacklevel=2,
            )

        assert_no_errors = (
            assert_no_errors if asserts_errors is None else asserts_errors
        )
        if assert_no_errors:
            assert response.errors is None, response.errors

        return response

    def mutate(
        self,
        mutation: str,
        input: dict[str, Any],  # noqa: A002
        **kwargs: Any,
    ) -> Response:
        """Run a Relay mutation taking its arguments as `$input`."""
        return self.query(mutation, {"input": input}, **kwargs)

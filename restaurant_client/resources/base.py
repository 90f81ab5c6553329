"""
Resource Catalog Base Classes

Each backend resource family is declared as a table of Endpoint entries:

    class TableResource(Resource):
        name = "table"

        get = Endpoint("GET", "/table/tables/{id}")
        update = Endpoint("PUT", "/table/tables/{id}", body=DATA)
        change_status = Endpoint("PATCH", "/table/tables/{id}/status", body=("status",))

Accessing an endpoint on a resource instance yields an async callable whose
signature is derived from the table entry:

    await client.table.change_status(7, "occupied")
    # PATCH /table/tables/7/status  {"status": "occupied"}

Arguments bind to path placeholders first, then body fields (or the whole
``data`` body), then the optional ``params`` query mapping. Every call
produces exactly one ApiClient.request().

Author: Khalil Bannouri
Version: 1.0.0
"""

import inspect
import string
from typing import Any, Optional, Tuple, Union
from urllib.parse import quote

from restaurant_client.schemas import RequestOptions


# Body shape: the whole body is passed as a single ``data`` argument
DATA = "data"

_KEYWORD_ONLY = ("headers", "extensions")


class Endpoint:
    """
    Declarative mapping from a logical operation to one HTTP call.

    Attributes:
        method: HTTP verb
        path: Path template, placeholders in ``{name}`` form
        body: None, DATA, or a tuple of field names sent as a JSON object
        optional: Body fields that may be omitted (left out when None)
        query: Whether the operation accepts a ``params`` query mapping
    """

    def __init__(
        self,
        method: str,
        path: str,
        body: Union[None, str, Tuple[str, ...]] = None,
        optional: Tuple[str, ...] = (),
        query: bool = False,
        summary: Optional[str] = None,
    ):
        self.method = method.upper()
        self.path = path
        self.body = body
        self.optional = tuple(optional)
        self.query = query
        self.summary = summary
        self.name = None

        self.path_args = tuple(
            field for _, field, _, _ in string.Formatter().parse(path) if field
        )
        self.signature = self._build_signature()

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return self.bind_to(instance)

    # ==========================================================================
    # SIGNATURE
    # ==========================================================================

    @property
    def body_fields(self) -> Tuple[str, ...]:
        if self.body is None:
            return ()
        if self.body == DATA:
            return (DATA,)
        return tuple(self.body)

    def _build_signature(self) -> inspect.Signature:
        positional = inspect.Parameter.POSITIONAL_OR_KEYWORD
        params = [inspect.Parameter(name, positional) for name in self.path_args]

        for name in self.body_fields:
            if name in self.optional:
                params.append(inspect.Parameter(name, positional, default=None))
            else:
                params.append(inspect.Parameter(name, positional))

        if self.query:
            params.append(inspect.Parameter("params", positional, default=None))

        for name in _KEYWORD_ONLY:
            params.append(
                inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY, default=None)
            )

        return inspect.Signature(params)

    # ==========================================================================
    # BINDING
    # ==========================================================================

    def prepare(self, *args: Any, **kwargs: Any) -> Tuple[str, RequestOptions]:
        """
        Map call arguments to a path and request descriptor.

        Raises:
            TypeError: Arguments do not match the endpoint signature
        """
        try:
            bound = self.signature.bind(*args, **kwargs)
        except TypeError as e:
            raise TypeError(f"{self.name or self.path}(): {e}") from None
        bound.apply_defaults()
        values = bound.arguments

        path = self.path.format(
            **{name: quote(str(values[name]), safe="") for name in self.path_args}
        )

        if self.body == DATA:
            body = values[DATA]
        elif self.body:
            body = {
                name: values[name]
                for name in self.body_fields
                if not (name in self.optional and values[name] is None)
            }
        else:
            body = None

        return path, RequestOptions(
            method=self.method,
            body=body,
            params=values.get("params") if self.query else None,
            headers=values["headers"] or {},
            extensions=values["extensions"] or {},
        )

    def bind_to(self, resource: "Resource"):
        endpoint = self

        async def call(*args, **kwargs):
            path, options = endpoint.prepare(*args, **kwargs)
            return await resource.client.request(path, options)

        call.__name__ = self.name or "endpoint"
        call.__qualname__ = f"{type(resource).__name__}.{call.__name__}"
        call.__doc__ = self.summary or f"{self.method} {self.path}"
        call.__signature__ = self.signature
        return call

    def __repr__(self) -> str:
        return f"Endpoint({self.method} {self.path})"


class Resource:
    """
    A named group of backend operations.

    Subclasses declare Endpoint class attributes and may add hand-written
    methods for operations that are not a plain request (uploads, redirects).
    """

    name = ""

    def __init__(self, client):
        self.client = client

    @classmethod
    def endpoints(cls) -> dict:
        """Declared endpoints, keyed by operation name, in declaration order."""
        found = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Endpoint):
                    found[attr] = value
        return found

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

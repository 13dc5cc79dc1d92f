"""RPC procedure routing.

Every procedure is ``POST /rpc/<router>/<procedure>``. ``RPCRoute`` derives a
dot-separated route key from the request path and runs the handler under the
deadline configured for that key.
"""

from typing import Any, Callable, Coroutine

from dishka.integrations.fastapi import DishkaRoute
from fastapi import Request, Response

from dealort.interface.error import RPCError
from dealort.util.deadline import RequestTimeoutError, with_timeout

RPC_PREFIX = "/rpc"

Handler = Callable[[Request], Coroutine[Any, Any, Response]]


def route_key_from_path(path: str, prefix: str = "") -> str:
    """Turn a request path into a route key.

    ``/rpc/products/list`` with prefix ``/rpc`` becomes ``products.list``.
    """
    if prefix and path.startswith(prefix):
        path = path[len(prefix) :]
    return ".".join(segment for segment in path.split("/") if segment)


async def run_in_own_scope(handler: Handler, request: Request) -> Response:
    """Run ``handler`` inside a request container it owns.

    The container (and the database session in it) is finalized when the
    handler finishes, not when the response is sent. A handler abandoned by
    its deadline therefore keeps its dependencies until it completes.
    """
    container = request.app.state.dishka_container
    async with container({Request: request}) as request_container:
        request.state.dishka_container = request_container
        return await handler(request)


class RPCRoute(DishkaRoute):
    """Dishka-aware route that enforces the per-procedure deadline."""

    def get_route_handler(self) -> Handler:
        handler = super().get_route_handler()

        async def timed_handler(request: Request) -> Response:
            route_key = route_key_from_path(request.url.path, RPC_PREFIX)
            try:
                return await with_timeout(
                    lambda: run_in_own_scope(handler, request), route_key
                )
            except RequestTimeoutError as e:
                raise RPCError("TIMEOUT", e.message, status=504) from e

        return timed_handler

"""Validate-then-dispatch glue between Flask and the route table."""

from collections.abc import Callable

from flask import Flask, Request, Response, current_app, request
from flask.typing import ResponseReturnValue

from flatwiki.routing.routes import ROUTES, Handler, Operation, lookup
from flatwiki.routing.title import match_path
from flatwiki.settings import Configuration

BoundHandler = Callable[[Request], ResponseReturnValue]


def not_found() -> Response:
    return Response("404 page not found\n", status=404, mimetype="text/plain")


def make_handler(config: Configuration, handler: Handler) -> BoundHandler:
    """Wrap handler so it only ever runs with a title that passed validation."""

    def _handle(req: Request) -> ResponseReturnValue:
        match = match_path(req.path, config.valid_path)
        if match is None:
            current_app.logger.debug("Invalid path: %r", req.path)
            return not_found()
        return handler(config, req, match.title)

    return _handle


def register_routes(app: Flask, config: Configuration) -> dict[Operation, BoundHandler]:
    """Install a catch-all rule that dispatches by longest route prefix."""
    bound = {op: make_handler(config, fn) for op, fn in ROUTES.items()}

    def dispatch(rest: str = "") -> ResponseReturnValue:
        return bound[lookup(request.path)](request)

    for rule in ("/", "/<path:rest>"):
        app.add_url_rule(
            rule, endpoint="dispatch", view_func=dispatch, methods=["GET", "POST"]
        )
    return bound

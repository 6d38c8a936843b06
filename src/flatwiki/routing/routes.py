"""The static route table: one handler per supported operation."""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType

from flask import Request
from flask.typing import ResponseReturnValue

from flatwiki.server import handlers
from flatwiki.settings import Configuration

Handler = Callable[[Configuration, Request, str], ResponseReturnValue]


class Operation(str, Enum):
    front = "front"
    view = "view"
    edit = "edit"
    save = "save"
    styles = "styles"

    @property
    def prefix(self) -> str:
        if self is Operation.front:
            return "/"
        return f"/{self.value}/"


ROUTES: Mapping[Operation, Handler] = MappingProxyType(
    {
        Operation.front: handlers.front,
        Operation.view: handlers.view,
        Operation.edit: handlers.edit,
        Operation.save: handlers.save,
        Operation.styles: handlers.styles,
    }
)


def lookup(path: str) -> Operation:
    """Return the operation whose prefix is the longest match for path."""
    matches = [op for op in ROUTES if path.startswith(op.prefix)]
    if not matches:
        return Operation.front
    return max(matches, key=lambda op: len(op.prefix))


def describe_routes() -> list[str]:
    return [f"{op.prefix} -> {op.value}" for op in ROUTES]

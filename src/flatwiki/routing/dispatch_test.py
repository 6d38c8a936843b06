from pathlib import Path

import pytest

from flatwiki.routing.dispatch import make_handler
from flatwiki.server.app import create_app
from flatwiki.settings import Configuration, Settings


@pytest.fixture
def config(tmp_path: Path) -> Configuration:
    return Configuration.from_settings(Settings(pages_path=tmp_path / "data"))


def _recording_handler(calls: list):
    def handler(config, request, title):
        calls.append(title)
        return "ok"

    return handler


@pytest.mark.parametrize(
    "path,title",
    [("/view/Alpha", "Alpha"), ("/styles/wiki.css", "wiki.css"), ("/", "")],
)
def test_valid_path_invokes_handler_with_title(config, path, title):
    calls: list = []
    bound = make_handler(config, _recording_handler(calls))
    app = create_app(config)
    with app.test_request_context(path) as ctx:
        assert bound(ctx.request) == "ok"
    assert calls == [title]


@pytest.mark.parametrize(
    "path",
    ["/view/", "/edit/../../etc/passwd", "/save/a/b", "/nope/Alpha", "/view/a b"],
)
def test_invalid_path_is_not_found_and_skips_handler(config, path):
    calls: list = []
    bound = make_handler(config, _recording_handler(calls))
    app = create_app(config)
    with app.test_request_context(path) as ctx:
        response = bound(ctx.request)
    assert response.status_code == 404
    assert calls == []

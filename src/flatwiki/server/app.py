from __future__ import annotations

from flask import Flask

from flatwiki.routing.dispatch import register_routes
from flatwiki.routing.routes import describe_routes
from flatwiki.settings import Configuration, Settings


def create_app(config: Configuration) -> Flask:
    settings = config.settings
    app = Flask(
        __name__,
        template_folder=str(settings.templates_path.resolve()),
        static_folder=None,
    )
    app.url_map.merge_slashes = False
    app.logger.setLevel(settings.log_level)
    app.extensions["flatwiki"] = config
    register_routes(app, config)
    return app


def main(settings: Settings) -> None:
    config = Configuration.from_settings(settings)
    app = create_app(config)
    for line in describe_routes():
        print(f"  {line}")
    print(f"{len(config.store.titles())} pages in {config.store.pages_path}")
    print(f"Listening on {settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=False, threaded=True)

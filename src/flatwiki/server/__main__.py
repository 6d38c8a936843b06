"""Run the wiki server.

Usage:
    python -m flatwiki.server --pages-dir data --port 8080
    python -m flatwiki.server --config wiki.yaml
"""

import argparse
from pathlib import Path

from flatwiki.server import app
from flatwiki.settings import Settings, load_settings


def parse_settings(argv: list[str] | None = None) -> Settings:
    parser = argparse.ArgumentParser(description="Flat-file wiki server")
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--pages-dir", type=Path, help="Directory of page files")
    parser.add_argument("--templates-dir", type=Path, help="view.html and edit.html")
    parser.add_argument("--styles", type=Path, help="Stylesheet served under /styles/")
    args = parser.parse_args(argv)

    overrides = {
        "host": args.host,
        "port": args.port,
        "pages_path": args.pages_dir,
        "templates_path": args.templates_dir,
        "styles_path": args.styles,
    }
    if args.config is not None:
        return load_settings(args.config, **overrides)
    given = {k: v for k, v in overrides.items() if v is not None}
    return Settings.model_validate(given)


def main() -> None:
    app.main(parse_settings())


if __name__ == "__main__":
    main()

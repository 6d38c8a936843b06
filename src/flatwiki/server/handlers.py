"""Operation handlers. Each receives an already validated title."""

from flask import Request, Response, current_app, redirect, render_template
from flask.typing import ResponseReturnValue
from jinja2 import TemplateError

from flatwiki.data_models.page import Page
from flatwiki.settings import Configuration


def _error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def render_page(config: Configuration, name: str, page: Page) -> ResponseReturnValue:
    """Render template ``<name>.html`` with the page and active settings."""
    try:
        return render_template(f"{name}.html", page=page, settings=config.settings)
    except TemplateError as exc:
        current_app.logger.error(
            "Rendering %s for %s failed: %s", name, page.title, exc
        )
        return _error(str(exc), 500)


def front(config: Configuration, request: Request, title: str) -> ResponseReturnValue:
    # title is always empty here; the front page is fixed
    front_page = config.settings.front_page
    current_app.logger.info("Home redirecting to %s", front_page)
    return redirect(f"/view/{front_page}", code=302)


def view(config: Configuration, request: Request, title: str) -> ResponseReturnValue:
    current_app.logger.info("Viewing %s", title)
    page = config.store.load(title)
    if not page.exists:
        return redirect(f"/edit/{title}", code=302)
    return render_page(config, "view", page)


def edit(config: Configuration, request: Request, title: str) -> ResponseReturnValue:
    current_app.logger.info("Editing %s", title)
    page = config.store.load(title)
    return render_page(config, "edit", page)


def save(config: Configuration, request: Request, title: str) -> ResponseReturnValue:
    """Overwrite the page file with the submitted body and redirect to its view."""
    current_app.logger.info("Saving %s", title)
    body = request.form.get("body", request.args.get("body", ""))
    page = Page(title=title, body=body.encode("utf-8"))
    try:
        config.store.save(page)
    except OSError as exc:
        current_app.logger.error("Saving %s failed: %s", title, exc)
        return _error(str(exc), 500)
    return redirect(f"/view/{title}", code=302)


def styles(config: Configuration, request: Request, title: str) -> ResponseReturnValue:
    """Serve the configured stylesheet whatever name was requested."""
    current_app.logger.info("CSS: %s", title)
    try:
        css = config.settings.styles_path.read_bytes()
    except OSError as exc:
        current_app.logger.warning("Stylesheet unavailable: %s", exc)
        return _error(str(exc), 404)
    return Response(css, mimetype="text/css")
